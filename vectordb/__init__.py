# Path: vectordb/__init__.py
# Purpose: Package initializer for the embedded vector store.
# Layer: vectordb.
# Details: Re-exports the store facade, settings, domain models and errors most callers need.

from .config import AppSettings, EmbedderSettings, VectorStoreSettings
from .errors import (
    DimensionMismatchError,
    DocumentNotFoundError,
    EmbedderNotConfiguredError,
    NamespaceNotFoundError,
    PersistenceError,
    VectorStoreError,
)
from .models import Document, SearchOptions, SearchResult
from .search import SimilarityMetric
from .vector_store import InMemoryVectorStore, VectorStore, create_vector_store

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "EmbedderSettings",
    "VectorStoreSettings",
    "Document",
    "SearchOptions",
    "SearchResult",
    "SimilarityMetric",
    "VectorStore",
    "InMemoryVectorStore",
    "create_vector_store",
    "VectorStoreError",
    "DimensionMismatchError",
    "NamespaceNotFoundError",
    "DocumentNotFoundError",
    "PersistenceError",
    "EmbedderNotConfiguredError",
]
