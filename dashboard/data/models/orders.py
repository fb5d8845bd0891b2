from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderItem(BaseModel):
    """Display model for one embedded order line."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Item display name")
    quantity: Optional[int] = Field(default=None, description="Units ordered, None when the document omits it")
    price: Optional[float] = Field(default=None, description="Unit price, None when the document omits it")
    image_url: Optional[str] = Field(default=None, description="Item image URL")

    @property
    def units(self) -> int:
        """Quantity used for arithmetic and display (missing counts as 1)."""
        return 1 if self.quantity is None else self.quantity

    @property
    def unit_price(self) -> float:
        return 0.0 if self.price is None else self.price

    @property
    def line_total(self) -> float:
        return self.unit_price * self.units


class Order(BaseModel):
    """Display model for an order document after projection."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Document identifier")
    customer_name: str = Field(default="", description="Customer display name")
    customer_email: str = Field(default="", description="Customer email")
    store_id: Optional[str] = Field(default=None, description="Referenced store document id")
    restaurant_id: Optional[str] = Field(default=None, description="Referenced restaurant document id")
    total_amount: float = Field(default=0.0, description="Authoritative grand total")
    discount_amount: float = Field(default=0.0, description="Discount, meaningful only when discount_applied")
    discount_applied: bool = Field(default=False, description="Whether a discount was applied")
    status: str = Field(default="Pending", description="Free-form status label")
    created_at: str = Field(default="", description="Creation time as a display string")
    created_epoch: Optional[float] = Field(default=None, description="Creation time as epoch seconds, None when unparseable")
    modified_at: str = Field(default="", description="Last modification time as a display string")
    modified_by: str = Field(default="", description="Actor who last modified the order")
    items: List[OrderItem] = Field(default_factory=list, description="Embedded order lines")
    venue_name: str = Field(default="-", description="Resolved store/restaurant name")
