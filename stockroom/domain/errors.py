"""Inventory error taxonomy.

Every error is recoverable: domain code raises, and the driver that called it
(console, loader, sale session, HTTP layer) reports it and carries on.
"""
from typing import Any, Dict, Optional


class InventoryError(Exception):
    """Base class for all inventory and billing errors."""

    code = "inventory_error"

    def __init__(self, detail: str = "Inventory operation failed", context: Optional[Dict[str, Any]] = None):
        self.detail = detail
        self.context = context or {}
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.detail,
                "context": self.context,
            }
        }


class InvalidDateError(InventoryError, ValueError):
    code = "invalid_date"

    def __init__(self, text: str):
        super().__init__(f"Invalid date format: '{text}'. Expected dd-mm-yyyy.", {"value": text})
        self.text = text


class InventoryFullError(InventoryError):
    code = "inventory_full"

    def __init__(self, capacity: int):
        super().__init__("Inventory is full.", {"capacity": capacity})
        self.capacity = capacity


class DuplicateProductError(InventoryError):
    code = "duplicate_product"

    def __init__(self, product_id: int, name: str):
        super().__init__(
            "Product with the same ID or name already exists.",
            {"product_id": product_id, "name": name},
        )
        self.product_id = product_id
        self.name = name


class ProductNotFoundError(InventoryError, LookupError):
    code = "product_not_found"

    def __init__(self, product_id: int):
        super().__init__("Product not found.", {"product_id": product_id})
        self.product_id = product_id


class ProductExpiredError(InventoryError):
    code = "product_expired"

    def __init__(self, product_id: int, name: str):
        super().__init__(
            "Product is expired and cannot be sold.",
            {"product_id": product_id, "name": name},
        )
        self.product_id = product_id
        self.name = name


class InsufficientStockError(InventoryError):
    code = "insufficient_stock"

    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(
            f"Insufficient stock. Available quantity: {available}",
            {"product_id": product_id, "requested": requested, "available": available},
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class MalformedInputError(InventoryError, ValueError):
    code = "malformed_input"

    def __init__(self, detail: str, value: Any = None):
        super().__init__(detail, {"value": value} if value is not None else None)
        self.value = value
