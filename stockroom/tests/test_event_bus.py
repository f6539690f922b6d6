import unittest
from stockroom.events.Event_Bus import EventBus, PRODUCT_ADDED


class TestEventBus(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.received = []

    def _listener(self, event_name, payload):
        self.received.append((event_name, payload))

    def test_publish_to_subscriber(self):
        self.bus.subscribe(PRODUCT_ADDED, self._listener)
        self.bus.publish(PRODUCT_ADDED, {"x": 1})
        self.assertEqual(self.received, [(PRODUCT_ADDED, {"x": 1})])

    def test_subscribe_is_idempotent(self):
        self.bus.subscribe(PRODUCT_ADDED, self._listener)
        self.bus.subscribe(PRODUCT_ADDED, self._listener)
        self.bus.publish(PRODUCT_ADDED, None)
        self.assertEqual(len(self.received), 1)

    def test_unsubscribe(self):
        self.bus.subscribe(PRODUCT_ADDED, self._listener)
        self.bus.unsubscribe(PRODUCT_ADDED, self._listener)
        self.bus.unsubscribe("never.subscribed", self._listener)
        self.bus.publish(PRODUCT_ADDED, None)
        self.assertEqual(self.received, [])

    def test_failing_subscriber_does_not_stop_others(self):
        def broken(event_name, payload):
            raise RuntimeError("boom")
        self.bus.subscribe(PRODUCT_ADDED, broken)
        self.bus.subscribe(PRODUCT_ADDED, self._listener)
        with self.assertLogs("stockroom.events.Event_Bus", level="ERROR"):
            self.bus.publish(PRODUCT_ADDED, "payload")
        self.assertEqual(self.received, [(PRODUCT_ADDED, "payload")])
