from datetime import date
import unittest
from stockroom.domain.Inventory import Inventory
from stockroom.domain.Product import Product
from stockroom.domain.errors import DuplicateProductError, InventoryFullError
from stockroom.events.Event_Bus import EventBus, PRODUCT_ADDED, PRODUCT_EXPIRED

NOW = date(2025, 6, 15)


class TestInventory(unittest.TestCase):

    def setUp(self):
        self.events = []
        self.bus = EventBus()
        self.bus.subscribe(PRODUCT_ADDED, lambda name, payload: self.events.append((name, payload["product"].name)))
        self.bus.subscribe(PRODUCT_EXPIRED, lambda name, payload: self.events.append((name, payload["product"].name)))
        self.inventory = Inventory().set_event_bus(self.bus)

    def test_add_product(self):
        rice = Product(1, "Rice", 50.0, 10, "01-01-2099")
        self.inventory.add_product(rice)
        self.assertEqual(len(self.inventory), 1)
        self.assertIs(self.inventory.find_by_id(1), rice)
        self.assertEqual(self.events, [(PRODUCT_ADDED, "Rice")])

    def test_duplicate_id_rejected(self):
        self.inventory.add_product(Product(1, "Rice", 50.0, 10, "01-01-2099"))
        with self.assertRaises(DuplicateProductError):
            self.inventory.add_product(Product(1, "Flour", 40.0, 5, "01-01-2099"))
        self.assertEqual(len(self.inventory), 1)

    def test_duplicate_name_case_insensitive(self):
        self.inventory.add_product(Product(1, "Rice", 50.0, 10, "01-01-2099"))
        with self.assertRaises(DuplicateProductError):
            self.inventory.add_product(Product(2, "rICE", 40.0, 5, "01-01-2099"))
        self.assertEqual(len(self.inventory), 1)
        self.assertTrue(self.inventory.is_duplicate("RICE", 99))
        self.assertTrue(self.inventory.is_duplicate("Beans", 1))
        self.assertFalse(self.inventory.is_duplicate("Beans", 2))

    def test_full_rejected(self):
        inventory = Inventory(capacity=2)
        inventory.add_product(Product(1, "Rice", 50.0, 10, "01-01-2099"))
        inventory.add_product(Product(2, "Milk", 30.0, 10, "01-01-2099"))
        self.assertTrue(inventory.is_full())
        with self.assertRaises(InventoryFullError):
            inventory.add_product(Product(3, "Bread", 25.0, 10, "01-01-2099"))
        self.assertEqual(len(inventory), 2)

    def test_default_capacity_is_one_hundred(self):
        for i in range(100):
            self.inventory.add_product(Product(i, f"Item {i}", 1.0, 1, "01-01-2099"))
        with self.assertRaises(InventoryFullError):
            self.inventory.add_product(Product(100, "Item 100", 1.0, 1, "01-01-2099"))
        self.assertEqual(len(self.inventory), 100)

    def test_find_by_id_missing(self):
        self.assertIsNone(self.inventory.find_by_id(42))

    def test_remove_expired_preserves_order(self):
        names = ["A", "B", "C", "D", "E"]
        expiries = ["01-01-2099", "01-01-2020", "15-06-2025", "14-06-2025", "01-01-2099"]
        for i, (name, exp) in enumerate(zip(names, expiries), start=1):
            self.inventory.add_product(Product(i, name, 1.0, 1, exp))
        self.events.clear()

        removed = self.inventory.remove_expired(NOW)

        self.assertEqual(removed, 2)
        self.assertEqual([p.name for p in self.inventory.list_all()], ["A", "C", "E"])
        self.assertEqual(self.events, [(PRODUCT_EXPIRED, "B"), (PRODUCT_EXPIRED, "D")])
        self.assertEqual(self.inventory.remove_expired(NOW), 0)

    def test_expired_product_then_not_found(self):
        self.inventory.add_product(Product(7, "Cheese", 80.0, 2, "01-06-2025"))
        self.assertTrue(self.inventory.find_by_id(7).is_expired(NOW))
        self.inventory.remove_expired(NOW)
        self.assertIsNone(self.inventory.find_by_id(7))

    def test_slot_freed_by_purge_can_be_reused(self):
        inventory = Inventory(capacity=1)
        inventory.add_product(Product(1, "Old", 1.0, 1, "01-01-2020"))
        inventory.remove_expired(NOW)
        inventory.add_product(Product(1, "Old", 1.0, 1, "01-01-2099"))
        self.assertEqual(len(inventory), 1)

    def test_list_all_is_restartable(self):
        self.inventory.add_product(Product(1, "Rice", 50.0, 10, "01-01-2099"))
        self.inventory.add_product(Product(2, "Milk", 30.0, 10, "01-01-2099"))
        first = [p.product_id for p in self.inventory.list_all()]
        second = [p.product_id for p in self.inventory]
        self.assertEqual(first, [1, 2])
        self.assertEqual(first, second)

    def test_list_all_empty(self):
        self.assertEqual(list(self.inventory.list_all()), [])

    def test_get_items_returns_copy(self):
        self.inventory.add_product(Product(1, "Rice", 50.0, 10, "01-01-2099"))
        items = self.inventory.get_items()
        items.clear()
        self.assertEqual(len(self.inventory), 1)
