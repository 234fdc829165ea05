"""
Shared fixtures for vector store tests.
"""

import pytest

from vectordb.config.settings import VectorStoreSettings
from vectordb.embedders.hash_embedder import HashEmbedder
from vectordb.vector_store.memory_store import InMemoryVectorStore


@pytest.fixture
def settings():
    """Three-dimensional cosine store without persistence."""
    return VectorStoreSettings(dimensions=3)


@pytest.fixture
def store(settings):
    """Store without an embedder: every document must carry its own vector."""
    return InMemoryVectorStore(settings)


@pytest.fixture
def persistent_settings(tmp_path):
    """Settings that write snapshots under a temporary directory."""
    return VectorStoreSettings(dimensions=3, persist_to_disk=True, storage_path=tmp_path / "vectordb")


@pytest.fixture
def embedder():
    return HashEmbedder(dim=3)
