# Path: vectordb/config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: vectordb/config.
# Details: Exposes settings models for store, embedder and application-wide configuration.

from .settings import SNAPSHOT_FILENAME, AppSettings, EmbedderSettings, VectorStoreSettings

__all__ = ["AppSettings", "EmbedderSettings", "VectorStoreSettings", "SNAPSHOT_FILENAME"]
