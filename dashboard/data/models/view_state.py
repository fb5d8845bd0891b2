from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SortDirection = Literal["desc", "asc"]


class OrdersViewState(BaseModel):
    """State of the orders screen.

    Instances are immutable; every transition returns a new state so the
    value can be stored as a plain dict in the Streamlit session.
    """
    model_config = ConfigDict(frozen=True)

    search: str = Field(default="", description="Current search text")
    sort_direction: SortDirection = Field(default="desc", description="Created-at sort direction")
    selected_order_id: Optional[str] = Field(default=None, description="Order shown in the detail view")
    detail_open: bool = Field(default=False, description="Whether the detail view is visible")

    def set_search(self, text: str) -> "OrdersViewState":
        return self.model_copy(update={"search": text})

    def toggle_sort(self) -> "OrdersViewState":
        flipped = "asc" if self.sort_direction == "desc" else "desc"
        return self.model_copy(update={"sort_direction": flipped})

    def select_order(self, order_id: str) -> "OrdersViewState":
        # Replaces any current selection.
        return self.model_copy(update={"selected_order_id": order_id, "detail_open": True})

    def close_detail(self) -> "OrdersViewState":
        return self.model_copy(update={"selected_order_id": None, "detail_open": False})
