# Path: vectordb/embedders/__init__.py
# Purpose: Package initializer for embedder implementations and interfaces.
# Layer: vectordb/embedders.
# Details: Exposes the base interface, reference implementations and the settings-driven factory.

from .base import Embedder
from .hash_embedder import HashEmbedder
from .sentence_transformer_embedder import SentenceTransformerEmbedder
from .factory import create_embedder

__all__ = ["Embedder", "HashEmbedder", "SentenceTransformerEmbedder", "create_embedder"]
