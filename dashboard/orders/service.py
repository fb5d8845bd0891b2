"""One fetch cycle of the orders screen: bulk fetch, projection, name resolution."""
from __future__ import annotations

import asyncio
from typing import Callable

from google.auth.exceptions import GoogleAuthError

from dashboard.config import get_config
from dashboard.data.interface import DocumentStore, DocumentStoreError
from dashboard.data.models import OrdersLoadResult
from dashboard.logging import get_logger
from dashboard.orders.names import attach_venue_names, resolve_venue_names
from dashboard.orders.projector import project_orders

LOAD_ERROR = "Failed to fetch orders."

# Raised while building a store: missing Firebase settings, unreadable or invalid
# credential files, unknown backend kinds and missing fixture folders.
STORE_SETUP_ERRORS = (DocumentStoreError, GoogleAuthError, RuntimeError, ValueError, OSError)


async def load_orders(store: DocumentStore) -> OrdersLoadResult:
    """Fetch every order and resolve its venue name.

    A failed bulk fetch yields an empty result carrying LOAD_ERROR; nothing
    fetched before the failure is returned. There is no retry.
    """
    config = get_config()
    logger = get_logger(__name__)
    logger.info(f"Loading orders from {config.orders_collection}")
    try:
        records = await store.list_collection(config.orders_collection)
        orders = project_orders(records)
        names = await resolve_venue_names(store, orders)
    except DocumentStoreError as e:
        logger.error(f"Failed to fetch orders: {e}")
        return OrdersLoadResult(error=LOAD_ERROR)
    logger.info(f"Loaded {len(orders)} orders")
    return OrdersLoadResult(orders=attach_venue_names(orders, names), names=names)


def run_load(store_factory: Callable[[], DocumentStore]) -> OrdersLoadResult:
    """Blocking entry point for the page script.

    The store is built inside the event loop so async clients bind to it. A
    store that cannot be built yields the same error state as a failed fetch.
    """
    async def _load() -> OrdersLoadResult:
        try:
            store = store_factory()
        except STORE_SETUP_ERRORS as e:
            get_logger(__name__).error(f"Could not open the document store: {e}")
            return OrdersLoadResult(error=LOAD_ERROR)
        return await load_orders(store)

    return asyncio.run(_load())
