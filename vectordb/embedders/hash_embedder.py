# Path: vectordb/embedders/hash_embedder.py
# Purpose: Provide a deterministic, dependency-free text embedder.
# Layer: vectordb/embedders.
# Details: Hash-expanded vectors for offline runs and tests; identical text always maps to the same vector.

from __future__ import annotations

import hashlib

import numpy as np

from .base import Embedder


class HashEmbedder(Embedder):
    """Embed text by expanding its SHA-256 digest to ``dim`` centered components.

    Equal strings get equal vectors, so exact-match lookups work, but the
    vectors carry no semantic similarity between different texts.
    """

    def __init__(self, dim: int = 384, name: str = "hash") -> None:
        if dim <= 0:
            raise ValueError("Embedding dimension must be positive.")
        self.dim = dim
        self.name = name

    def embed_text(self, text: str) -> np.ndarray:
        """Generate a deterministic unit-length embedding based on hashing."""

        hash_bytes = hashlib.sha256(text.encode("utf-8")).digest()
        expanded = np.frombuffer(hash_bytes * (self.dim // len(hash_bytes) + 1), dtype=np.uint8)
        # Center on zero so unrelated texts are not all strongly correlated.
        vector = expanded[: self.dim].astype(np.float32) - 127.5
        return self._normalize(vector)
