"""Inventory repository helpers (bulk load from the comma-separated inventory file)."""

import logging
from pathlib import Path
from typing import Optional, Union

from stockroom.domain.Inventory import Inventory
from stockroom.domain.Product import Product
from stockroom.domain.errors import InventoryError, MalformedInputError
from stockroom.utilities.constants import RECORD_FIELDS

logger = logging.getLogger(__name__)


def parse_record(line: str) -> Product:
    """Build a Product from one `id,name,price,quantity,dd-mm-yyyy` line."""
    fields = [f.strip() for f in line.strip().split(',')]
    if len(fields) != len(RECORD_FIELDS):
        raise MalformedInputError(
            f"Expected {len(RECORD_FIELDS)} fields ({','.join(RECORD_FIELDS)}), got {len(fields)}", line
        )
    raw_id, name, raw_price, raw_quantity, expiry = fields
    if not name:
        raise MalformedInputError("Product name cannot be empty", line)
    try:
        product_id = int(raw_id)
        price = float(raw_price)
        quantity = int(raw_quantity)
    except ValueError:
        raise MalformedInputError(f"Non-numeric id, price or quantity: {line.strip()}", line) from None
    try:
        return Product(product_id, name, price, quantity, expiry)
    except InventoryError:
        raise
    except ValueError as e:
        raise MalformedInputError(str(e), line) from None


def load_inventory(path: Optional[Union[str, Path]] = None, inventory: Optional[Inventory] = None) -> Inventory:
    """Load products from the inventory file into an Inventory (graceful error handling).

    A missing or unreadable file leaves the inventory empty; bad records are
    logged and skipped so the rest of the file still loads.
    """
    if path is None:
        from stockroom.utilities.config import INVENTORY_FILE
        path = INVENTORY_FILE
    if inventory is None:
        from stockroom.utilities.config import INVENTORY_CAPACITY
        inventory = Inventory(capacity=INVENTORY_CAPACITY)
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading inventory file {path}: {e}")
        return inventory

    loaded = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            inventory.add_product(parse_record(line))
            loaded += 1
        except InventoryError as e:
            logger.warning(f"Skipping {path.name}:{lineno}: {e.detail}")
    logger.info(f"Loaded {loaded} product(s) from {path}")
    return inventory
