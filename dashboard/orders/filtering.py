"""Client-side search and chronological sort over the fetched order list."""
from __future__ import annotations

from typing import List, Optional

from dashboard.config import get_config
from dashboard.data.models import Order, OrdersViewState, SortDirection
from dashboard.orders.projector import parse_timestamp_text


def created_sort_key(order: Order, fmt: Optional[str] = None) -> float:
    """Epoch seconds of the order's creation time; unparseable values sort as the epoch.

    Uses the epoch captured at projection when present, otherwise parses
    ``order.created_at`` (naive strings are read as local time).
    """
    if order.created_epoch is not None:
        return order.created_epoch
    moment = parse_timestamp_text(order.created_at, fmt)
    return 0.0 if moment is None else moment.timestamp()


def matches_search(order: Order, search: str) -> bool:
    """Case-insensitive substring match on id, customer, email and venue name."""
    needle = search.lower()
    fields = [order.id, order.customer_name, order.customer_email]
    if order.store_id or order.restaurant_id:
        fields.append(order.venue_name)
    return any(needle in (field or "").lower() for field in fields)


def filter_orders(
    orders: List[Order], search: str = "", sort_direction: SortDirection = "desc"
) -> List[Order]:
    """Matching orders sorted by creation time.

    Returns a new list on every call; ``orders`` is never mutated. Orders with
    equal timestamps keep their relative order in both directions.
    """
    fmt = get_config().timestamp_format
    matched = [order for order in orders if matches_search(order, search)]
    return sorted(
        matched,
        key=lambda order: created_sort_key(order, fmt),
        reverse=(sort_direction == "desc"),
    )


def apply_view_state(orders: List[Order], state: OrdersViewState) -> List[Order]:
    return filter_orders(orders, state.search, state.sort_direction)
