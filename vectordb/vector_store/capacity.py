# Path: vectordb/vector_store/capacity.py
# Purpose: Bound the number of vectors held by a namespace.
# Layer: vectordb/vector_store.
# Details: FIFO eviction driven by the namespace's insertion-order index.

from __future__ import annotations

import logging
from typing import List

from .namespaces import Namespace

logger = logging.getLogger(__name__)


class CapacityManager:
    """Evict the oldest entries of a namespace once it exceeds ``max_vectors``."""

    def __init__(self, max_vectors: int) -> None:
        if max_vectors <= 0:
            raise ValueError("max_vectors must be positive.")
        self.max_vectors = max_vectors

    def enforce(self, namespace: Namespace) -> List[str]:
        """Remove oldest entries from both maps until the bound holds; return evicted ids.

        Called right after a single insertion, so at most one entry is removed.
        """

        evicted: List[str] = []
        while len(namespace) > self.max_vectors:
            oldest = namespace.oldest_id()
            if oldest is None:
                break
            namespace.remove(oldest)
            evicted.append(oldest)

        if evicted:
            logger.debug("Evicted %d document(s) from namespace %s: %s", len(evicted), namespace.name, evicted)
        return evicted
