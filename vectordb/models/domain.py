# Path: vectordb/models/domain.py
# Purpose: Define domain models shared across the store, query engine and persistence layers.
# Layer: vectordb/models.
# Details: Lightweight dataclasses simplify serialization between callers, snapshots and the CLI.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

MetadataFilter = Callable[[Dict[str, Any]], bool]


@dataclass
class Document:
    """A stored record: free-form content, metadata and an optional embedding."""

    id: Optional[str] = None
    content: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    embedding: Optional[List[float]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "content": self.content,
            "metadata": self.metadata,
        }
        if self.embedding is not None:
            payload["embedding"] = list(self.embedding)
        return payload

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Document":
        embedding = payload.get("embedding")
        if embedding is not None and not isinstance(embedding, (list, tuple)):
            raise ValueError(f"embedding must be a list of numbers, got {type(embedding).__name__}")
        return cls(
            id=payload.get("id"),
            content=payload.get("content"),
            metadata=payload.get("metadata"),
            embedding=[float(value) for value in embedding] if embedding is not None else None,
        )


@dataclass
class SearchOptions:
    """Parameters for a similarity query against one namespace."""

    vector: Optional[Sequence[float]] = None
    namespace: Optional[str] = None
    limit: int = 10
    min_score: float = 0.0
    filter: Optional[MetadataFilter] = None
    include_vectors: bool = False


@dataclass
class SearchResult:
    """Ranked search hit. ``document.embedding`` is only populated when requested."""

    document: Document
    score: float

