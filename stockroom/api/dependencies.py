"""FastAPI dependencies providing the shared Inventory and a Billing bound to it."""
import logging
from threading import Lock
from typing import Optional

from fastapi import Depends

from stockroom.domain.Billing import Billing
from stockroom.domain.Inventory import Inventory
from stockroom.infra.Inventory_Repository import load_inventory
from stockroom.utilities.config import INVENTORY_CAPACITY, INVENTORY_FILE, SWEEP_EXPIRED_AFTER_SALE

logger = logging.getLogger(__name__)

_lock = Lock()
_inventory: Optional[Inventory] = None


def get_inventory() -> Inventory:
    """Load the inventory file once per process and hand out the same aggregate."""
    global _inventory
    with _lock:
        if _inventory is None:
            _inventory = load_inventory(INVENTORY_FILE, Inventory(capacity=INVENTORY_CAPACITY))
            logger.info(f"Inventory ready with {len(_inventory)} product(s)")
        return _inventory


def get_billing(inventory: Inventory = Depends(get_inventory)) -> Billing:
    return Billing(inventory, sweep_expired=SWEEP_EXPIRED_AFTER_SALE)
