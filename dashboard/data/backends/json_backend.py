from __future__ import annotations

import copy
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..interface import DocumentStore, DocumentStoreError, RawRecord
from ...config import get_config
from ...logging import get_logger


def _decode_value(value: Any) -> Any:
    """Turn exported timestamps ({"_seconds", "_nanoseconds"}) back into datetimes."""
    if isinstance(value, dict):
        if set(value) == {"_seconds", "_nanoseconds"}:
            seconds = value["_seconds"] + value["_nanoseconds"] / 1_000_000_000
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        return {k: _decode_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_decode_value(v) for v in value]
    return value


class JsonDocumentStore(DocumentStore):
    """
    JSON-backed implementation for local development and tests.
    - Loads every `<collection>.json` file under `data_dir` once at construction.
    - Each file holds a list of documents; every document carries its "id".
    - Every call hands out deep copies, so callers never share state with the store.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        if data_dir is None:
            config = get_config()
            data_dir = config.data_dir

        self.logger = get_logger(__name__)
        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            if repo_root:
                self.data_dir = repo_root / self.data_dir
            else:
                # Fallback to current directory
                self.data_dir = current / self.data_dir

        self._collections = self._load_collections(self.data_dir)

    # ---------- loading helpers ----------

    @staticmethod
    def _load_collections(data_dir: Path) -> Dict[str, Dict[str, RawRecord]]:
        if not data_dir.exists():
            raise FileNotFoundError(
                f"Data directory not found: {data_dir}\n"
                f"Please either:\n"
                f"  1. Generate sample data: python -m dashboard.data.seed_data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

        collections: Dict[str, Dict[str, RawRecord]] = {}
        for path in sorted(data_dir.glob("*.json")):
            try:
                documents = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                raise DocumentStoreError(
                    f"Error reading {path}: {e}\n"
                    f"Please check that the JSON files are valid and readable."
                ) from e
            if not isinstance(documents, list):
                raise DocumentStoreError(f"{path} must contain a list of documents")

            by_id: Dict[str, RawRecord] = {}
            for doc in documents:
                if isinstance(doc, dict) and doc.get("id"):
                    by_id[str(doc["id"])] = _decode_value(doc)
            collections[path.stem] = by_id
        return collections

    # ---------- interface implementation ----------

    async def list_collection(self, name: str) -> List[RawRecord]:
        documents = self._collections.get(name, {})
        self.logger.debug(f"Listing {len(documents)} documents from {name}")
        return [copy.deepcopy(doc) for doc in documents.values()]

    async def get_by_id(self, name: str, doc_id: str) -> Optional[RawRecord]:
        doc = self._collections.get(name, {}).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None
