# Path: vectordb/vector_store/persistence.py
# Purpose: Read and write whole-store JSON snapshots.
# Layer: vectordb/vector_store.
# Details: A single vectordb.json file under the storage path, replaced wholesale on every save.

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from vectordb.config.settings import SNAPSHOT_FILENAME
from vectordb.errors import PersistenceError

logger = logging.getLogger(__name__)

SNAPSHOT_KEYS = ("config", "namespaces", "documents", "vectors")


class JsonSnapshotStore:
    """Persist snapshot dictionaries to ``<storage_path>/vectordb.json``.

    Writes go to a temporary sibling first and are moved into place with
    :func:`os.replace`, so the previous snapshot stays intact when a write fails.
    """

    def __init__(self, storage_path: Path | str) -> None:
        self.storage_path = Path(storage_path)

    @property
    def path(self) -> Path:
        return self.storage_path / SNAPSHOT_FILENAME

    def exists(self) -> bool:
        return self.path.exists()

    def write(self, snapshot: Dict[str, Any]) -> None:
        """Serialize ``snapshot`` and replace the snapshot file."""

        target = self.path
        tmp_path = target.with_name(target.name + ".tmp")
        try:
            self.storage_path.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(snapshot, indent=2), encoding="utf-8")
            os.replace(tmp_path, target)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save vector database to %s: %s", target, exc)
            raise PersistenceError(f"Failed to save vector database to {target}: {exc}") from exc
        logger.debug("Vector database saved to %s", target)

    def read(self) -> Optional[Dict[str, Any]]:
        """Return the parsed snapshot, or ``None`` when no snapshot has been written yet."""

        target = self.path
        if not target.exists():
            logger.debug("No saved vector database found at %s", target)
            return None

        try:
            payload = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Failed to load vector database from %s: %s", target, exc)
            raise PersistenceError(f"Failed to load vector database from {target}: {exc}") from exc

        if not isinstance(payload, dict) or any(key not in payload for key in SNAPSHOT_KEYS):
            raise PersistenceError(f"Snapshot {target} is missing one of the keys {', '.join(SNAPSHOT_KEYS)}")
        logger.debug("Vector database loaded from %s", target)
        return payload
