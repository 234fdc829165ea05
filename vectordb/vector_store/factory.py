# Path: vectordb/vector_store/factory.py
# Purpose: Wire a vector store and its embedder from application settings.
# Layer: vectordb/vector_store.
# Details: Single construction entry point used by the CLI and embedding applications.

from __future__ import annotations

from typing import Optional

from vectordb.config.settings import AppSettings
from vectordb.embedders.base import Embedder
from vectordb.embedders.factory import create_embedder

from .memory_store import InMemoryVectorStore


def create_vector_store(settings: AppSettings, embedder: Optional[Embedder] = None) -> InMemoryVectorStore:
    """Build an in-memory store, creating the configured embedder when none is supplied."""

    if embedder is None:
        embedder = create_embedder(settings.embedder, dim=settings.vector_store.dimensions)
    return InMemoryVectorStore(
        settings.vector_store,
        embedder=embedder,
        default_namespace=settings.default_namespace,
    )
