# Path: vectordb/embedders/base.py
# Purpose: Define the Embedder interface that turns text into vectors for the store.
# Layer: vectordb/embedders.
# Details: The store never fabricates vectors; any text embedding goes through an injected Embedder.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

import numpy as np


class Embedder(ABC):
    """Abstract base class for text embedding providers."""

    name: str
    dim: int

    @abstractmethod
    def embed_text(self, text: str) -> np.ndarray:
        """Return an embedding of length ``dim`` for the given text."""

    def embed_texts(self, texts: Iterable[str]) -> List[np.ndarray]:
        """Embed several texts. Providers with native batching override this."""

        return [self.embed_text(text) for text in texts]

    @staticmethod
    def _normalize(vector: np.ndarray) -> np.ndarray:
        """Normalize embedding vectors to unit length to simplify similarity comparisons."""

        norm = np.linalg.norm(vector)
        if norm == 0:
            return vector.astype(np.float32)
        return (vector / norm).astype(np.float32)
