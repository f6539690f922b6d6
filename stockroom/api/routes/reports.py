from typing import Optional

from fastapi import APIRouter, Depends, Query

from stockroom.api.dependencies import get_inventory
from stockroom.api.routes.products import reference_date
from stockroom.domain.Inventory import Inventory
from stockroom.events.web_observers import get_events
from stockroom.logic.stock.analysis import compute_stock_snapshots
from stockroom.utilities.config import DAYS_BEFORE_EXPIRY, LOW_STOCK_THRESHOLD

router = APIRouter(prefix="/api")


@router.get("/inventory/alerts")
def inventory_alerts(
    as_of: Optional[str] = Query(default=None, description="Reference date (dd-mm-yyyy), defaults to today"),
    inventory: Inventory = Depends(get_inventory),
):
    expiring, low, value = compute_stock_snapshots(
        inventory.list_all(), reference_date(as_of),
        window=DAYS_BEFORE_EXPIRY, threshold=LOW_STOCK_THRESHOLD,
    )
    return {
        "expiring_soon": expiring,
        "low_stock": low,
        "stock_value": value,
        "count": len(inventory),
    }


@router.get("/events")
def activity_feed(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent inventory and sale events.

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_events(since)
