"""Inventory aggregate: ordered, capacity-bounded collection of Product entries."""
import logging
from datetime import date, datetime
from threading import RLock
from typing import Iterator, List, Optional, Union

from stockroom.domain.Product import Product
from stockroom.domain.errors import DuplicateProductError, InventoryFullError
from stockroom.events.Event_Bus import GLOBAL_EVENT_BUS, PRODUCT_ADDED, PRODUCT_EXPIRED
from stockroom.utilities.constants import MAX_PRODUCTS

logger = logging.getLogger(__name__)


class Inventory:
    def __init__(self, capacity: int = MAX_PRODUCTS):
        if capacity < 0:
            raise ValueError(f"Capacity cannot be negative: {capacity}")
        self.capacity = capacity
        self._products: List[Product] = []
        self._event_bus = GLOBAL_EVENT_BUS
        # Guards every mutation; re-entrant so a sale session can sweep while holding it
        self.lock = RLock()

    # --- Observer helpers -------------------------------------------------
    @property
    def event_bus(self):
        return self._event_bus

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    # --- Catalog operations -------------------------------------------------
    def is_full(self) -> bool:
        return len(self._products) >= self.capacity

    def add_product(self, product: Product):
        '''
        Appends a product to the catalog.
        Raises InventoryFullError at capacity and DuplicateProductError when the
        id or the case-insensitive name is already taken.
        '''
        with self.lock:
            if self.is_full():
                raise InventoryFullError(self.capacity)
            if self.is_duplicate(product.name, product.product_id):
                raise DuplicateProductError(product.product_id, product.name)
            self._products.append(product)
        logger.info(f"Product added: {product.product_id} ({product.name})")
        self._event_bus.publish(PRODUCT_ADDED, {"product": product})
        return product

    def find_by_id(self, product_id: int) -> Optional[Product]:
        for product in self._products:
            if product.product_id == product_id:
                return product
        return None

    def is_duplicate(self, name: str, product_id: int) -> bool:
        '''True if a live entry shares the id or the name (case-insensitive).'''
        folded = name.casefold()
        return any(
            product.product_id == product_id or product.name.casefold() == folded
            for product in self._products
        )

    def remove_expired(self, now: Optional[Union[date, datetime]] = None) -> int:
        '''
        Drops every product that is expired relative to `now`, keeping the
        relative order of the survivors. Returns how many were removed.
        '''
        with self.lock:
            expired, survivors = [], []
            for product in self._products:
                (expired if product.is_expired(now) else survivors).append(product)
            self._products = survivors
        for product in expired:
            logger.info(f"Removing expired product: {product.name}")
            self._event_bus.publish(PRODUCT_EXPIRED, {"product": product, "now": now})
        return len(expired)

    def list_all(self) -> Iterator[Product]:
        '''Yields every live product in catalog order (snapshot taken when iteration starts).'''
        yield from list(self._products)

    def get_items(self) -> List[Product]:
        '''
        Returns a copy of the product list.
        '''
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return self.list_all()
