from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .orders import Order
from .venues import VenueNames


class OrdersLoadResult(BaseModel):
    """Outcome of one fetch cycle of the orders screen."""
    orders: List[Order] = Field(default_factory=list, description="Projected orders with venue names attached")
    names: VenueNames = Field(default_factory=VenueNames, description="Resolved venue names for this batch")
    error: Optional[str] = Field(default=None, description="User-visible error, set when the load failed")

    @property
    def ok(self) -> bool:
        return self.error is None
