"""Web-facing observers for inventory and sale events.

This module subscribes to the GLOBAL_EVENT_BUS for every inventory/billing
event and keeps a bounded in-memory buffer of recent events that the HTTP
layer exposes as an activity feed.

Each event gets an auto-increment integer id (cursor) so clients can request
only newer events (since=<last_id_seen>). The buffer is guarded by a Lock and
capped at MAX_EVENTS.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone
import logging

from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False


def _summarize(payload: Any) -> Dict[str, Any]:
    evt: Dict[str, Any] = {}
    if not isinstance(payload, dict):
        return evt
    product = payload.get('product')
    if product is not None:
        evt['product_id'] = product.product_id
        evt['name'] = product.name
        evt['quantity'] = product.quantity
    line = payload.get('line')
    if line is not None:
        evt.update(line.to_dict())
    if 'total' in payload:
        evt['total'] = payload['total']
    error = payload.get('error')
    if error is not None:
        evt['product_id'] = payload.get('product_id')
        evt['quantity'] = payload.get('quantity')
        evt['code'] = error.code
        evt['message'] = error.detail
    bill = payload.get('bill')
    if bill is not None:
        evt['total'] = bill.total
        evt['lines'] = len(bill.lines)
        evt['expired_removed'] = bill.expired_removed
    return evt


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        evt.update(_summarize(payload))
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for event_name in ALL_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(event_name, _record)
    _started = True
    logger.info("Activity feed observers started")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
