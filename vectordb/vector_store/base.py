# Path: vectordb/vector_store/base.py
# Purpose: Define the VectorStore interface for namespaced document and embedding storage.
# Layer: vectordb/vector_store.
# Details: Provides abstract methods for mutation, lookup, similarity search and persistence.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from vectordb.models.domain import Document, SearchOptions, SearchResult


class VectorStore(ABC):
    """Abstract base class for vector store backends.

    Lookups report absence with ``None``/``False``/``0``; only
    :meth:`update_document` raises for a missing namespace or document.
    """

    @abstractmethod
    def add_document(
        self, namespace: Optional[str], document: Document, embedding: Optional[Sequence[float]] = None
    ) -> str:
        """Store a document with its vector and return the document id."""

    @abstractmethod
    def add_documents(self, namespace: Optional[str], documents: Iterable[Document]) -> List[str]:
        """Store several documents one after another and return their ids."""

    @abstractmethod
    def get_document(self, namespace: Optional[str], document_id: str) -> Optional[Document]:
        """Return a copy of the stored document, or None when it does not exist."""

    @abstractmethod
    def update_document(
        self, namespace: Optional[str], document: Document, embedding: Optional[Sequence[float]] = None
    ) -> None:
        """Merge new fields into an existing document, replacing its vector when one is given."""

    @abstractmethod
    def delete_document(self, namespace: Optional[str], document_id: str) -> bool:
        """Remove a document and its vector; return False when nothing was removed."""

    @abstractmethod
    def delete_collection(self, namespace: Optional[str]) -> None:
        """Remove an entire namespace. Missing namespaces are ignored."""

    @abstractmethod
    def count(self, namespace: Optional[str]) -> int:
        """Return the number of documents in a namespace (0 when absent)."""

    @abstractmethod
    def list_namespaces(self) -> List[str]:
        """Return the names of all existing namespaces."""

    @abstractmethod
    def search(self, options: SearchOptions) -> List[SearchResult]:
        """Rank the documents of a namespace against ``options.vector``."""

    @abstractmethod
    def search_by_vector(self, options: SearchOptions) -> List[SearchResult]:
        """Search, requiring ``options.vector`` to be present."""

    @abstractmethod
    def search_by_text(self, text: str, options: Optional[SearchOptions] = None) -> List[SearchResult]:
        """Embed ``text`` and search with the resulting vector."""

    @abstractmethod
    def save(self) -> None:
        """Persist the whole store to disk."""

    @abstractmethod
    def load(self) -> None:
        """Replace the in-memory state with the persisted snapshot."""
