# Path: vectordb/vector_store/namespaces.py
# Purpose: Own the per-namespace document and vector maps.
# Layer: vectordb/vector_store.
# Details: Each namespace keeps an explicit insertion-order index used for eviction and scan order.

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from vectordb.models.domain import Document

logger = logging.getLogger(__name__)


class Namespace:
    """Paired document/vector maps for one namespace.

    Both maps always share the same key set; ``_order`` records first-insertion
    order independently of dict ordering.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._documents: Dict[str, Document] = {}
        self._vectors: Dict[str, np.ndarray] = {}
        self._order: "OrderedDict[str, None]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def put(self, document: Document, vector: np.ndarray) -> None:
        """Insert or replace an entry. Replaced ids keep their original position."""

        document_id = document.id
        if document_id is None:
            raise ValueError("Documents must carry an id before they are stored.")
        self._documents[document_id] = document
        self._vectors[document_id] = vector
        if document_id not in self._order:
            self._order[document_id] = None

    def remove(self, document_id: str) -> bool:
        if document_id not in self._documents:
            return False
        del self._documents[document_id]
        del self._vectors[document_id]
        del self._order[document_id]
        return True

    def oldest_id(self) -> Optional[str]:
        return next(iter(self._order), None)

    def ids(self) -> List[str]:
        return list(self._order)

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def get_vector(self, document_id: str) -> Optional[np.ndarray]:
        return self._vectors.get(document_id)

    def iter_entries(self) -> Iterator[Tuple[str, Document, np.ndarray]]:
        """Yield ``(id, document, vector)`` in insertion order."""

        for document_id in self._order:
            yield document_id, self._documents[document_id], self._vectors[document_id]


class NamespaceStore:
    """Registry of namespaces. Namespaces are only created by writes."""

    def __init__(self) -> None:
        self._namespaces: Dict[str, Namespace] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._namespaces

    def ensure_namespace(self, name: str) -> Namespace:
        namespace = self._namespaces.get(name)
        if namespace is None:
            namespace = Namespace(name)
            self._namespaces[name] = namespace
            logger.debug("Created namespace %s", name)
        return namespace

    def get(self, name: str) -> Optional[Namespace]:
        return self._namespaces.get(name)

    def drop(self, name: str) -> bool:
        if self._namespaces.pop(name, None) is None:
            return False
        logger.debug("Deleted namespace %s", name)
        return True

    def names(self) -> List[str]:
        return list(self._namespaces)

    def namespaces(self) -> List[Namespace]:
        return list(self._namespaces.values())

    def clear(self) -> None:
        self._namespaces.clear()
