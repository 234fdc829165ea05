# Path: vectordb/errors.py
# Purpose: Define the error hierarchy raised by vector store operations.
# Layer: vectordb.
# Details: Validation errors subclass the matching builtin so callers can catch either form.

from __future__ import annotations


class VectorStoreError(Exception):
    """Base class for every error raised by the vector store."""


class DimensionMismatchError(VectorStoreError, ValueError):
    """A vector length does not match the configured dimensionality."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Vector dimensions mismatch: expected {expected}, got {actual}")


class NamespaceNotFoundError(VectorStoreError, LookupError):
    """Raised by update operations when the target namespace does not exist."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Namespace {namespace} does not exist")


class DocumentNotFoundError(VectorStoreError, LookupError):
    """Raised by update operations when the target document does not exist."""

    def __init__(self, namespace: str, document_id: str | None) -> None:
        self.namespace = namespace
        self.document_id = document_id
        super().__init__(f"Document with ID {document_id} does not exist in namespace {namespace}")


class PersistenceError(VectorStoreError):
    """Saving or loading the on-disk snapshot failed."""


class EmbedderNotConfiguredError(VectorStoreError):
    """A text embedding was required but no embedder was supplied to the store."""


__all__ = [
    "VectorStoreError",
    "DimensionMismatchError",
    "NamespaceNotFoundError",
    "DocumentNotFoundError",
    "PersistenceError",
    "EmbedderNotConfiguredError",
]
