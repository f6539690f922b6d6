"""Billing: sale sessions that sell stock out of an Inventory and accumulate a total."""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from stockroom.domain.Inventory import Inventory
from stockroom.domain.errors import (
    InsufficientStockError,
    InventoryError,
    MalformedInputError,
    ProductExpiredError,
    ProductNotFoundError,
)
from stockroom.events.Event_Bus import SALE_COMPLETED, SALE_LINE_ADDED, SALE_LINE_REJECTED
from stockroom.utilities.constants import FINISH_SALE

logger = logging.getLogger(__name__)

Now = Optional[Union[date, datetime]]


@dataclass
class SaleLine:
    product_id: int
    name: str
    quantity: int
    unit_price: float

    @property
    def amount(self) -> float:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "amount": self.amount,
        }


@dataclass
class RejectedLine:
    product_id: int
    quantity: int
    error: InventoryError

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "quantity": self.quantity,
            "code": self.error.code,
            "message": self.error.detail,
        }


@dataclass
class Bill:
    total: float = 0.0
    lines: List[SaleLine] = field(default_factory=list)
    rejected: List[RejectedLine] = field(default_factory=list)
    expired_removed: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "lines": [line.to_dict() for line in self.lines],
            "rejected": [line.to_dict() for line in self.rejected],
            "expired_removed": self.expired_removed,
        }


class SaleSession:
    """One run of the transaction loop against an inventory.

    Each `add_item` call either sells the requested quantity (decrementing
    stock and growing the running total) or raises and leaves both untouched.
    `finish` closes the session and, when configured, sweeps expired stock.
    """

    def __init__(self, inventory: Inventory, sweep_expired: bool = True):
        self.inventory = inventory
        self.sweep_expired = sweep_expired
        self.bill = Bill()
        self.finished = False

    @property
    def total(self) -> float:
        return self.bill.total

    def add_item(self, product_id: int, quantity: int, now: Now = None) -> SaleLine:
        if self.finished:
            raise RuntimeError("Sale session already finished")
        try:
            line = self._sell(product_id, quantity, now)
        except InventoryError as e:
            self.reject(product_id, quantity, e)
            raise
        self.bill.lines.append(line)
        self.bill.total += line.amount
        logger.info(f"Added {line.name} x{line.quantity} to bill")
        self.inventory.event_bus.publish(SALE_LINE_ADDED, {"line": line, "total": self.bill.total})
        return line

    def reject(self, product_id: int, quantity: int, error: InventoryError) -> RejectedLine:
        '''Records a failed line on the bill. A quantity of 0 means none was requested yet.'''
        rejected = RejectedLine(product_id, quantity, error)
        self.bill.rejected.append(rejected)
        logger.warning(f"Sale line rejected for product {product_id}: {error.detail}")
        self.inventory.event_bus.publish(SALE_LINE_REJECTED, {
            "product_id": product_id,
            "quantity": quantity,
            "error": error,
        })
        return rejected

    def check_item(self, product_id: int, now: Now = None):
        '''Returns the sellable product or raises ProductNotFoundError / ProductExpiredError.'''
        product = self.inventory.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if product.is_expired(now):
            raise ProductExpiredError(product.product_id, product.name)
        return product

    def _sell(self, product_id: int, quantity: int, now: Now) -> SaleLine:
        if quantity < 1:
            raise MalformedInputError(f"Quantity must be at least 1, got {quantity}", quantity)
        with self.inventory.lock:
            product = self.check_item(product_id, now)
            if quantity > product.quantity:
                raise InsufficientStockError(product.product_id, quantity, product.quantity)
            product.quantity = product.quantity - quantity
            return SaleLine(product.product_id, product.name, quantity, product.price)

    def finish(self, now: Now = None) -> Bill:
        if self.finished:
            return self.bill
        self.finished = True
        if self.sweep_expired:
            self.bill.expired_removed = self.inventory.remove_expired(now)
        logger.info(f"Sale completed: {len(self.bill.lines)} line(s), total {self.bill.total}")
        self.inventory.event_bus.publish(SALE_COMPLETED, {"bill": self.bill})
        return self.bill


class Billing:
    def __init__(self, inventory: Inventory, sweep_expired: bool = True):
        self.inventory = inventory
        self.sweep_expired = sweep_expired

    def start_session(self) -> SaleSession:
        return SaleSession(self.inventory, sweep_expired=self.sweep_expired)

    def process_order(self, requests: Iterable[Tuple[int, int]], now: Now = None) -> Bill:
        '''
        Runs a whole sale session over (product_id, quantity) pairs.
        Stops at the FINISH_SALE id or at the end of the requests; failed lines
        are recorded on the bill and the session continues.
        '''
        session = self.start_session()
        for product_id, quantity in requests:
            if product_id == FINISH_SALE:
                break
            try:
                session.add_item(product_id, quantity, now)
            except InventoryError:
                continue
        return session.finish(now)
