from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .orders import Order

STORE_FALLBACK = "Store"
RESTAURANT_FALLBACK = "Restaurant"
NO_VENUE = "-"


class NameLookup(BaseModel):
    """Outcome of one point lookup: a name, or None when the venue was not found."""
    ref_id: str = Field(description="Store or restaurant document id")
    name: Optional[str] = Field(default=None, description="Declared name, None when not found")

    @property
    def found(self) -> bool:
        return self.name is not None

    def name_or(self, fallback: str) -> str:
        return self.name if self.name else fallback


class VenueNames(BaseModel):
    """Id to display-name mappings for the venues referenced by one order batch."""
    store_names: Dict[str, str] = Field(default_factory=dict, description="Store id to name")
    restaurant_names: Dict[str, str] = Field(default_factory=dict, description="Restaurant id to name")

    def display_name(self, order: Order) -> str:
        """Store name if the order has a store, else restaurant name, else a placeholder."""
        if order.store_id:
            return self.store_names.get(order.store_id, STORE_FALLBACK)
        if order.restaurant_id:
            return self.restaurant_names.get(order.restaurant_id, RESTAURANT_FALLBACK)
        return NO_VENUE
