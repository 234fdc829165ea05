# Path: vectordb/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: vectordb/models.
# Details: Exposes dataclasses used across storage, search and persistence layers.

from .domain import Document, MetadataFilter, SearchOptions, SearchResult

__all__ = ["Document", "MetadataFilter", "SearchOptions", "SearchResult"]
