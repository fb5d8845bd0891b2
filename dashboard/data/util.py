from __future__ import annotations

from typing import Literal, Optional

from .interface import DocumentStore
from ..config import get_config


def get_document_store(kind: Optional[Literal["firestore", "json"]] = None) -> DocumentStore:
    config = get_config()
    kind = kind or config.document_backend
    if kind == "json":
        # Reads from configured JSON fixture folder
        from .backends.json_backend import JsonDocumentStore
        return JsonDocumentStore(data_dir=config.data_dir)
    if kind == "firestore":
        from .backends.firestore_backend import FirestoreDocumentStore
        from ..firebase.auth import get_firebase_auth
        return FirestoreDocumentStore(get_firebase_auth().get_firestore_client())
    raise ValueError(f"Unknown document store kind: {kind}")
