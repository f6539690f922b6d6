"""Stock analysis helpers.

Read-only reports over a list of products: what is about to expire, what is
running low, and what the stock on hand is worth.
"""
from __future__ import annotations
from datetime import date as _date, datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from stockroom.domain.Product import Product
from stockroom.utilities.constants import DATE_FORMAT, DAYS_BEFORE_EXPIRY, LOW_STOCK_THRESHOLD

__all__ = ["compute_expiring_soon", "compute_low_stock", "compute_stock_value", "compute_stock_snapshots"]


def _today(now: Optional[Union[_date, datetime]]) -> _date:
    if now is None:
        return _date.today()
    return now.date() if isinstance(now, datetime) else now


def compute_expiring_soon(products: Iterable[Product], now=None, *, window: int | None = None) -> List[Dict[str, Any]]:
    """Return products expiring in <= window days (including already expired)."""
    expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
    today = _today(now)
    result: List[Dict[str, Any]] = []
    for product in products:
        days_left = (product.expiry_date - today).days
        if days_left <= expiring_window:
            result.append({
                'id': product.product_id,
                'name': product.name,
                'quantity': product.quantity,
                'exp': product.expiry_date.strftime(DATE_FORMAT),
                'days_left': days_left,
                'expired': product.is_expired(today),
            })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result


def compute_low_stock(products: Iterable[Product], *, threshold: int | None = None) -> List[Dict[str, Any]]:
    """Return products whose quantity is at or below the threshold."""
    th = threshold if threshold is not None else LOW_STOCK_THRESHOLD
    low: List[Dict[str, Any]] = []
    for product in products:
        if product.quantity <= th:
            low.append({
                'id': product.product_id,
                'name': product.name,
                'quantity': product.quantity,
                'threshold': th,
            })
    low.sort(key=lambda x: (x['quantity'], x['name']))
    return low


def compute_stock_value(products: Iterable[Product]) -> float:
    return sum(product.price * product.quantity for product in products)


def compute_stock_snapshots(products: Iterable[Product], now=None, *, window: int | None = None,
                            threshold: int | None = None):
    items = list(products)
    exp = compute_expiring_soon(items, now, window=window)
    low = compute_low_stock(items, threshold=threshold)
    return exp, low, compute_stock_value(items)
