from .orders import Order, OrderItem
from .venues import (
    NameLookup,
    VenueNames,
    STORE_FALLBACK,
    RESTAURANT_FALLBACK,
    NO_VENUE,
)
from .view_state import OrdersViewState, SortDirection
from .receipts import Receipt, ReceiptLine
from .list_response import OrdersLoadResult

__all__ = [
    # Order display models
    "Order",
    "OrderItem",
    # Venue name resolution
    "NameLookup",
    "VenueNames",
    "STORE_FALLBACK",
    "RESTAURANT_FALLBACK",
    "NO_VENUE",
    # Screen state
    "OrdersViewState",
    "SortDirection",
    # Receipt
    "Receipt",
    "ReceiptLine",
    # Load result
    "OrdersLoadResult",
]
