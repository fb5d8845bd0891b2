import asyncio
from typing import Dict, List, Optional

import pytest
from dashboard.config import set_config_for_test
from dashboard.data.interface import DocumentStoreError

class FakeDocumentStore:
    """In-memory DocumentStore that records every point lookup."""
    def __init__(self, collections: Dict[str, List[dict]], failing_ids=(), fail_listing=False, delay=0.0):
        self.collections = collections
        self.failing_ids = set(failing_ids)
        self.fail_listing = fail_listing
        self.delay = delay
        self.lookups: List[tuple] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def list_collection(self, name: str) -> List[dict]:
        if self.fail_listing:
            raise DocumentStoreError("listing failed")
        return [dict(doc) for doc in self.collections.get(name, [])]

    async def get_by_id(self, name: str, doc_id: str) -> Optional[dict]:
        self.lookups.append((name, doc_id))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if doc_id in self.failing_ids:
                raise DocumentStoreError(f"cannot read {doc_id}")
            for doc in self.collections.get(name, []):
                if doc["id"] == doc_id:
                    return dict(doc)
            return None
        finally:
            self.in_flight -= 1

@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    for var in ["TIMESTAMP_FORMAT", "CURRENCY_SYMBOL", "DOCUMENT_BACKEND", "DATA_DIR"]:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test(log_level="WARNING", currency_symbol="$")
    yield

@pytest.fixture
def fake_store():
    return FakeDocumentStore
