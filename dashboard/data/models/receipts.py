from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ReceiptLine(BaseModel):
    """One printed receipt line."""
    quantity: int = Field(description="Units printed in front of the name")
    name: str = Field(description="Item or fallback label")
    amount: float = Field(description="Line total (unit price x quantity)")


class Receipt(BaseModel):
    """Printable receipt assembled from one order at print time."""
    brand: str = Field(description="Brand mark shown in the header")
    title: str = Field(description="Fixed document title")
    currency_symbol: str = Field(description="Symbol prefixed to every amount")
    lines: List[ReceiptLine] = Field(description="Itemized lines, never empty")
    subtotal: float = Field(description="Sum of the printed line amounts")
    discount: Optional[float] = Field(default=None, description="Discount shown as a negative line, None when not applied")
    total: float = Field(description="Order total_amount")
    order_id: str = Field(description="Order identifier")
    printed_date: str = Field(description="Print-time date")
    printed_time: str = Field(description="Print-time time")
    served_by: str = Field(description="Actor who last modified the order")
    thank_you: str = Field(description="Fixed thank-you line")
    footer: str = Field(description="Organization footer")
