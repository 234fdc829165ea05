# Path: vectordb/embedders/sentence_transformer_embedder.py
# Purpose: Provide a semantic text embedder backed by sentence-transformers.
# Layer: vectordb/embedders.
# Details: The model is loaded lazily on first use; the library is only imported at that point.

from __future__ import annotations

from typing import Any, Iterable, List, Optional

import numpy as np

from .base import Embedder


class SentenceTransformerEmbedder(Embedder):
    """Sentence-transformers embedding provider using a pre-trained model.

    Requires the ``embeddings`` extra (``pip install vectordb[embeddings]``)
    unless an already constructed ``model`` is passed in.
    """

    def __init__(
        self,
        model_name: str = "all-MiniLM-L6-v2",
        device: str = "cpu",
        dim: Optional[int] = None,
        model: Any = None,
    ) -> None:
        self.name = "sentence-transformers"
        self.model_name = model_name
        self.device = device
        self._model = model
        self._dim = dim

    @property
    def model(self) -> Any:
        if self._model is None:
            from sentence_transformers import SentenceTransformer

            self._model = SentenceTransformer(self.model_name, device=self.device)
        return self._model

    @property
    def dim(self) -> int:  # type: ignore[override]
        if self._dim is None:
            self._dim = int(self.model.get_sentence_embedding_dimension())
        return self._dim

    def embed_text(self, text: str) -> np.ndarray:
        """Generate an embedding vector using the sentence-transformers model."""

        embedding = self.model.encode(text, convert_to_numpy=True, normalize_embeddings=True)
        return np.asarray(embedding, dtype=np.float32)

    def embed_texts(self, texts: Iterable[str]) -> List[np.ndarray]:
        """Batch-encode texts in a single model call."""

        batch = list(texts)
        if not batch:
            return []
        embeddings = self.model.encode(batch, convert_to_numpy=True, normalize_embeddings=True)
        return [np.asarray(row, dtype=np.float32) for row in embeddings]
