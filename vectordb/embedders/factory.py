# Path: vectordb/embedders/factory.py
# Purpose: Build the configured embedder implementation from settings.
# Layer: vectordb/embedders.
# Details: Maps EmbedderSettings.name onto the available Embedder classes.

from __future__ import annotations

from vectordb.config.settings import EmbedderSettings

from .base import Embedder
from .hash_embedder import HashEmbedder
from .sentence_transformer_embedder import SentenceTransformerEmbedder


def create_embedder(settings: EmbedderSettings, dim: int) -> Embedder:
    """Instantiate the embedder named in ``settings`` producing ``dim``-length vectors."""

    if settings.name == "hash":
        return HashEmbedder(dim=dim)
    if settings.name == "sentence-transformers":
        return SentenceTransformerEmbedder(model_name=settings.model_name, device=settings.device, dim=dim)
    raise ValueError(f"Unknown embedder: {settings.name}")
