"""Projection of raw order documents into ``Order`` display models.

This is the only place that touches untyped document fields. Each field is
coerced on its own: a malformed value falls back to its default and never
causes the record (or the batch) to be dropped.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

import pandas as pd

from dashboard.config import get_config
from dashboard.data.interface import RawRecord
from dashboard.data.models import Order, OrderItem
from dashboard.logging import get_logger

DEFAULT_STATUS = "Pending"


def _as_moment(value: Any) -> Optional[datetime]:
    """Timezone-aware datetime for a structured timestamp, None for anything else."""
    if isinstance(value, datetime):
        # naive datetimes are wall-clock local time
        return value if value.tzinfo is not None else value.astimezone()
    # Firestore/protobuf timestamp objects expose a conversion method.
    convert = getattr(value, "to_datetime", None) or getattr(value, "ToDatetime", None)
    if not callable(convert):
        return None
    try:
        moment = convert()
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(moment, datetime):
        return None
    # protobuf Timestamp.ToDatetime() returns naive UTC
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def parse_timestamp_text(text: str, fmt: Optional[str] = None) -> Optional[datetime]:
    """Parse a display or ISO-like string; naive results are read as local time."""
    text = text.strip()
    if not text:
        return None
    try:
        moment = datetime.strptime(text, fmt or get_config().timestamp_format)
    except ValueError:
        parsed = pd.to_datetime(text, errors="coerce")
        if pd.isna(parsed):
            return None
        moment = parsed.to_pydatetime()
    return moment if moment.tzinfo is not None else moment.astimezone()


def timestamp_epoch(value: Any, fmt: Optional[str] = None) -> Optional[float]:
    """Epoch seconds of a structured timestamp or a parseable string."""
    moment = _as_moment(value)
    if moment is None and isinstance(value, str):
        moment = parse_timestamp_text(value, fmt)
    return None if moment is None else moment.timestamp()


def format_timestamp(value: Any, fmt: Optional[str] = None) -> str:
    """Normalize a structured timestamp or a pre-formatted string to a display string."""
    if value is None or value == "":
        return ""
    moment = _as_moment(value)
    if moment is None:
        return value if isinstance(value, str) else str(value)
    return moment.astimezone().strftime(fmt or get_config().timestamp_format)


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _reference(value: Any) -> Optional[str]:
    text = _text(value).strip()
    return text or None


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _amount(value: Any) -> Optional[float]:
    """Non-negative money value; negatives are treated as missing."""
    number = _number(value)
    return number if number is not None and number >= 0 else None


def _quantity(value: Any) -> Optional[int]:
    number = _number(value)
    if number is None or number <= 0 or not number.is_integer():
        return None
    return int(number)


def _flag(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def project_item(raw: Any) -> OrderItem:
    data = raw if isinstance(raw, Mapping) else {}
    return OrderItem(
        name=_text(data.get("name")),
        quantity=_quantity(data.get("quantity")),
        price=_amount(data.get("price")),
        image_url=_reference(data.get("imageUrl")),
    )


def project_order(record: RawRecord) -> Order:
    """Map one raw order document to an ``Order``."""
    data = record if isinstance(record, Mapping) else {}

    # Documents written by the storefront checkout carry "total" instead of "totalAmount".
    raw_total = data.get("totalAmount", data.get("total"))
    raw_items = data.get("items")
    items = [project_item(item) for item in raw_items] if isinstance(raw_items, list) else []

    return Order(
        id=_text(data.get("id")),
        customer_name=_text(data.get("customerName")),
        customer_email=_text(data.get("customerEmail")),
        store_id=_reference(data.get("storeId")),
        restaurant_id=_reference(data.get("restaurantId")),
        total_amount=_amount(raw_total) or 0.0,
        discount_amount=_amount(data.get("discountAmount")) or 0.0,
        discount_applied=_flag(data.get("discountApplied")),
        status=_text(data.get("status")) or DEFAULT_STATUS,
        created_at=format_timestamp(data.get("createdAt")),
        created_epoch=timestamp_epoch(data.get("createdAt")),
        modified_at=format_timestamp(data.get("modifiedAt")),
        modified_by=_text(data.get("modifiedBy")),
        items=items,
    )


def project_orders(records: Iterable[RawRecord]) -> List[Order]:
    """Project a batch of raw documents, preserving cardinality and order."""
    orders = [project_order(record) for record in records]
    get_logger(__name__).debug(f"Projected {len(orders)} orders")
    return orders
