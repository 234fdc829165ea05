# Path: vectordb/config/settings.py
# Purpose: Provide typed configuration models for the vector store and its collaborators.
# Layer: vectordb/config.
# Details: Centralizes store sizing, similarity metric, persistence paths, embedder and logging settings.

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from vectordb.search.similarity import SimilarityMetric

SNAPSHOT_FILENAME = "vectordb.json"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class VectorStoreSettings(BaseModel):
    """Settings controlling vector dimensionality, capacity, ranking metric and persistence.

    Field aliases are the camelCase keys written into the snapshot file; either
    spelling is accepted on construction.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dimensions: int = Field(gt=0, description="Length every stored and queried vector must have.")
    max_vectors: int = Field(
        default=10000, gt=0, alias="maxVectors", description="Maximum number of vectors kept per namespace."
    )
    similarity_metric: SimilarityMetric = Field(
        default=SimilarityMetric.COSINE, alias="similarityMetric", description="Metric used to rank search results."
    )
    persist_to_disk: bool = Field(
        default=False, alias="persistToDisk", description="Flag enabling snapshot writes after every mutation."
    )
    storage_path: Path = Field(
        default=Path("./.vectordb"), alias="storagePath", description="Directory holding the snapshot file."
    )

    @property
    def snapshot_path(self) -> Path:
        """Location of the JSON snapshot under ``storage_path``."""

        return self.storage_path / SNAPSHOT_FILENAME

    def to_snapshot(self) -> Dict[str, Any]:
        """Return the camelCase JSON-compatible form stored in the snapshot file."""

        return self.model_dump(mode="json", by_alias=True)


class EmbedderSettings(BaseModel):
    """Settings describing which embedder implementation to use and how to load it."""

    name: str = Field(
        default="sentence-transformers",
        description="Identifier of the embedder implementation; \"hash\" selects the offline test embedder.",
    )
    model_name: str = Field(default="all-MiniLM-L6-v2", description="Model variant used by the embedder.")
    device: str = Field(default="cpu", description="Target device for model execution.")


class AppSettings(BaseModel):
    """Top-level settings shared by the store factory and the operator CLI."""

    vector_store: VectorStoreSettings
    embedder: EmbedderSettings = Field(default_factory=EmbedderSettings)
    default_namespace: str = Field(default="default", description="Namespace used when callers omit one.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls, **overrides: Any) -> "AppSettings":
        """Instantiate settings from ``VECTORDB_*`` environment variables.

        Keyword overrides replace individual vector store fields after the
        environment has been read.
        """

        store_fields: Dict[str, Any] = {
            "dimensions": int(os.getenv("VECTORDB_DIMENSIONS", "384")),
            "max_vectors": int(os.getenv("VECTORDB_MAX_VECTORS", "10000")),
            "similarity_metric": os.getenv("VECTORDB_SIMILARITY_METRIC", SimilarityMetric.COSINE.value),
            "persist_to_disk": _env_flag("VECTORDB_PERSIST"),
            "storage_path": Path(os.getenv("VECTORDB_STORAGE_PATH", "./.vectordb")),
        }
        store_fields.update({key: value for key, value in overrides.items() if value is not None})

        embedder = EmbedderSettings(
            name=os.getenv("VECTORDB_EMBEDDER", "sentence-transformers"),
            model_name=os.getenv("VECTORDB_EMBED_MODEL", "all-MiniLM-L6-v2"),
            device=os.getenv("VECTORDB_EMBED_DEVICE", "cpu"),
        )
        return cls(
            vector_store=VectorStoreSettings(**store_fields),
            embedder=embedder,
            default_namespace=os.getenv("VECTORDB_DEFAULT_NAMESPACE", "default"),
            log_level=os.getenv("VECTORDB_LOG_LEVEL", "INFO"),
        )


__all__ = ["AppSettings", "EmbedderSettings", "VectorStoreSettings", "SNAPSHOT_FILENAME"]
