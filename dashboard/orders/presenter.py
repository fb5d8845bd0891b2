"""Derived figures and display helpers for the order list and detail view."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from dashboard.config import get_config
from dashboard.data.models import Order, OrdersViewState

NOT_APPLIED = "Not Applied"

# (background, text) colors per status label
STATUS_STYLES: Dict[str, Tuple[str, str]] = {
    "Delivered": ("#dcfce7", "#15803d"),
    "Completed": ("#dcfce7", "#15803d"),
    "Pending": ("#fef9c3", "#a16207"),
    "Available for Pickup": ("#f3e8ff", "#7e22ce"),
    "On Transit": ("#e0e7ff", "#4338ca"),
    "Cancelled": ("#fee2e2", "#b91c1c"),
    "Processing": ("#dbeafe", "#1d4ed8"),
}


def status_style(status: str) -> Tuple[str, str]:
    """Badge colors for a status; unknown labels get the Pending style."""
    return STATUS_STYLES.get(status, STATUS_STYLES["Pending"])


def format_amount(amount: float, symbol: Optional[str] = None) -> str:
    if symbol is None:
        symbol = get_config().currency_symbol
    return f"{symbol}{amount:.2f}"


def compute_subtotal(order: Order) -> float:
    """Sum of price x quantity over all items (0 for an order without items)."""
    return sum((item.line_total for item in order.items), 0.0)


def discount_applies(order: Order) -> bool:
    return order.discount_applied and order.discount_amount > 0


class OrderDetail(BaseModel):
    """Figures shown in the order detail view."""
    order: Order = Field(description="Selected order")
    subtotal: float = Field(description="Computed item subtotal")
    discount: Optional[float] = Field(default=None, description="Discount, None when not applied")
    total: float = Field(description="Authoritative order total")

    @property
    def discount_label(self) -> str:
        return NOT_APPLIED if self.discount is None else format_amount(self.discount)


def build_order_detail(order: Order) -> OrderDetail:
    # total_amount is shown as-is; it is not reconciled with the subtotal.
    return OrderDetail(
        order=order,
        subtotal=compute_subtotal(order),
        discount=order.discount_amount if discount_applies(order) else None,
        total=order.total_amount,
    )


def selected_order(orders: List[Order], state: OrdersViewState) -> Optional[Order]:
    """The order currently open in the detail view, if it is still in the list."""
    if not state.detail_open or state.selected_order_id is None:
        return None
    return next((order for order in orders if order.id == state.selected_order_id), None)


def pagination_caption(count: int) -> str:
    first = 1 if count else 0
    return f"Showing {first} to {count} of {count} orders"
