# dashboard/data/interface.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

# A document's fields plus its "id", exactly as the backing store returns them.
RawRecord = Dict[str, Any]


class DocumentStoreError(RuntimeError):
    """Raised by backends when the underlying store cannot be read."""


# ---- Document store protocol ----

class DocumentStore(Protocol):
    """
    Backend-agnostic read contract for the admin dashboard.

    - Implementations return fresh data on every call (no result caching).
    - Not-found is a normal outcome of get_by_id and is reported as None.
    - Transport or decoding failures are raised as DocumentStoreError.
    """

    async def list_collection(self, name: str) -> List[RawRecord]:
        """Return every document of a collection, unfiltered and unpaged."""
        ...

    async def get_by_id(self, name: str, doc_id: str) -> Optional[RawRecord]:
        """Return one document, or None when it does not exist."""
        ...
