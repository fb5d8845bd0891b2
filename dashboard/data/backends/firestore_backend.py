from __future__ import annotations

from typing import Any, List, Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from ..interface import DocumentStore, DocumentStoreError, RawRecord
from ...logging import get_logger


class FirestoreDocumentStore(DocumentStore):
    """
    Firestore-backed implementation.
    - Wraps an async Firestore client (firebase_admin.firestore_async).
    - Every call is a fresh read; nothing is cached between calls.
    - API and credential failures surface as DocumentStoreError.
    """

    def __init__(self, client: Any) -> None:
        self.client = client
        self.logger = get_logger(__name__)

    async def list_collection(self, name: str) -> List[RawRecord]:
        records: List[RawRecord] = []
        try:
            async for snapshot in self.client.collection(name).stream():
                records.append({"id": snapshot.id, **(snapshot.to_dict() or {})})
        except (GoogleAPIError, GoogleAuthError) as e:
            raise DocumentStoreError(f"Failed to list collection {name}: {e}") from e
        self.logger.debug(f"Fetched {len(records)} documents from {name}")
        return records

    async def get_by_id(self, name: str, doc_id: str) -> Optional[RawRecord]:
        try:
            snapshot = await self.client.collection(name).document(doc_id).get()
        except (GoogleAPIError, GoogleAuthError) as e:
            raise DocumentStoreError(f"Failed to read {name}/{doc_id}: {e}") from e
        if not snapshot.exists:
            return None
        return {"id": snapshot.id, **(snapshot.to_dict() or {})}
