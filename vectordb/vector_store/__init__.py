# Path: vectordb/vector_store/__init__.py
# Purpose: Package initializer for vector store interfaces and implementations.
# Layer: vectordb/vector_store.
# Details: Exposes the base contract, the in-memory store, its building blocks and the factory.

from .base import VectorStore
from .capacity import CapacityManager
from .namespaces import Namespace, NamespaceStore
from .persistence import JsonSnapshotStore
from .memory_store import DEFAULT_NAMESPACE, InMemoryVectorStore
from .factory import create_vector_store

__all__ = [
    "VectorStore",
    "InMemoryVectorStore",
    "CapacityManager",
    "Namespace",
    "NamespaceStore",
    "JsonSnapshotStore",
    "DEFAULT_NAMESPACE",
    "create_vector_store",
]
