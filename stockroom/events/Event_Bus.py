"""Simple Event Bus / Observer implementation for inventory and sale activity.

Event names:
  inventory.product_added   -> payload {"product": Product}
  inventory.product_expired -> payload {"product": Product, "now": date}
  billing.line_added        -> payload {"line": SaleLine, "total": float}
  billing.line_rejected     -> payload {"product_id": int, "quantity": int, "error": InventoryError}
  billing.sale_completed    -> payload {"bill": Bill}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
from collections import defaultdict
from typing import Callable, Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PRODUCT_ADDED = "inventory.product_added"
PRODUCT_EXPIRED = "inventory.product_expired"
SALE_LINE_ADDED = "billing.line_added"
SALE_LINE_REJECTED = "billing.line_rejected"
SALE_COMPLETED = "billing.sale_completed"

ALL_EVENTS = (PRODUCT_ADDED, PRODUCT_EXPIRED, SALE_LINE_ADDED, SALE_LINE_REJECTED, SALE_COMPLETED)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS',
	'PRODUCT_ADDED', 'PRODUCT_EXPIRED', 'SALE_LINE_ADDED', 'SALE_LINE_REJECTED', 'SALE_COMPLETED'
]
