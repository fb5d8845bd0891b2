"""Resolution of store/restaurant references to display names."""
from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List, Optional

from dashboard.config import get_config
from dashboard.data.interface import DocumentStore, DocumentStoreError
from dashboard.data.models import (
    NameLookup,
    Order,
    RESTAURANT_FALLBACK,
    STORE_FALLBACK,
    VenueNames,
)
from dashboard.logging import get_logger


def distinct_ids(values: Iterable[Optional[str]]) -> List[str]:
    """Unique non-empty ids in first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


async def lookup_name(store: DocumentStore, collection: str, ref_id: str) -> NameLookup:
    """Point lookup of one venue. A missing document or a failed read yields an empty lookup."""
    try:
        doc = await store.get_by_id(collection, ref_id)
    except DocumentStoreError as e:
        get_logger(__name__).warning(f"Lookup of {collection}/{ref_id} failed, using fallback name: {e}")
        return NameLookup(ref_id=ref_id)
    if doc is None:
        return NameLookup(ref_id=ref_id)
    name = doc.get("name")
    return NameLookup(ref_id=ref_id, name=name if isinstance(name, str) and name else None)


async def _resolve_batch(
    store: DocumentStore, collection: str, ids: List[str], fallback: str
) -> Dict[str, str]:
    lookups = await asyncio.gather(*(lookup_name(store, collection, ref_id) for ref_id in ids))
    return {lookup.ref_id: lookup.name_or(fallback) for lookup in lookups}


async def resolve_venue_names(store: DocumentStore, orders: List[Order]) -> VenueNames:
    """Resolve every distinct store and restaurant id referenced by ``orders``.

    Each id is looked up once. All lookups of both collections run concurrently
    and the result is returned only after every one of them has completed.
    """
    config = get_config()
    store_ids = distinct_ids(order.store_id for order in orders)
    restaurant_ids = distinct_ids(order.restaurant_id for order in orders)
    get_logger(__name__).debug(
        f"Resolving {len(store_ids)} store ids and {len(restaurant_ids)} restaurant ids"
    )

    store_names, restaurant_names = await asyncio.gather(
        _resolve_batch(store, config.stores_collection, store_ids, STORE_FALLBACK),
        _resolve_batch(store, config.restaurants_collection, restaurant_ids, RESTAURANT_FALLBACK),
    )
    return VenueNames(store_names=store_names, restaurant_names=restaurant_names)


def attach_venue_names(orders: List[Order], names: VenueNames) -> List[Order]:
    """Copies of ``orders`` carrying their resolved venue name."""
    return [order.model_copy(update={"venue_name": names.display_name(order)}) for order in orders]
