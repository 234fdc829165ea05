# Path: vectordb/vector_store/memory_store.py
# Purpose: Provide the in-memory vector store with namespaces, eviction and optional persistence.
# Layer: vectordb/vector_store.
# Details: Composes the namespace store, capacity manager, query engine and JSON snapshot store.

from __future__ import annotations

import copy
import logging
import threading
import time
import uuid
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

import numpy as np
from pydantic import ValidationError

from vectordb.config.settings import VectorStoreSettings
from vectordb.embedders.base import Embedder
from vectordb.errors import DimensionMismatchError, DocumentNotFoundError, EmbedderNotConfiguredError
from vectordb.errors import NamespaceNotFoundError, PersistenceError
from vectordb.models.domain import Document, SearchOptions, SearchResult
from vectordb.search.engine import QueryEngine, as_vector

from .base import VectorStore
from .capacity import CapacityManager
from .namespaces import Namespace, NamespaceStore
from .persistence import JsonSnapshotStore

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"


class InMemoryVectorStore(VectorStore):
    """Namespaced in-memory store of documents and their embedding vectors.

    Every public operation runs under one store-wide re-entrant lock, so
    readers never observe a half-applied mutation and insert-then-evict is a
    single step from the caller's point of view. Text embedding happens before
    the lock is taken.

    When ``settings.persist_to_disk`` is set, the constructor restores the last
    snapshot (a failure is logged and the store starts empty) and every
    successful mutation rewrites the snapshot.
    """

    def __init__(
        self,
        settings: VectorStoreSettings,
        embedder: Optional[Embedder] = None,
        default_namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.default_namespace = default_namespace
        self._embedder = embedder
        self._lock = threading.RLock()
        self._deferred = 0
        self._namespaces = NamespaceStore()
        self._configure(settings)
        self._namespaces.ensure_namespace(default_namespace)

        if settings.persist_to_disk:
            try:
                self.load()
            except PersistenceError as exc:
                logger.warning("Failed to load vector database: %s", exc)

    def _configure(self, settings: VectorStoreSettings) -> None:
        self._settings = settings
        self._engine = QueryEngine(settings.dimensions, settings.similarity_metric)
        self._capacity = CapacityManager(settings.max_vectors)
        self._snapshots = JsonSnapshotStore(settings.storage_path)

    @property
    def settings(self) -> VectorStoreSettings:
        return self._settings

    @property
    def embedder(self) -> Optional[Embedder]:
        return self._embedder

    # Mutations
    def add_document(
        self, namespace: Optional[str], document: Document, embedding: Optional[Sequence[float]] = None
    ) -> str:
        """
        Store ``document`` in ``namespace`` and return its id.

        The vector comes from ``embedding``, then ``document.embedding``, then
        the injected embedder applied to ``document.content``. Creates the
        namespace on first write and evicts the oldest entry when the namespace
        grows past ``max_vectors``.
        """

        name = self._resolve(namespace)
        raw_vector = embedding if embedding is not None else document.embedding
        if raw_vector is None:
            raw_vector = self._embed_document(document)

        with self._lock:
            vector = as_vector(raw_vector, self._settings.dimensions).copy()
            target = self._namespaces.ensure_namespace(name)

            document_id = document.id or self._generate_id(target)
            stored = Document(
                id=document_id,
                content=document.content,
                metadata=copy.deepcopy(document.metadata),
            )
            target.put(stored, vector)
            self._capacity.enforce(target)
            self._persist()
        return document_id

    def add_documents(self, namespace: Optional[str], documents: Iterable[Document]) -> List[str]:
        """Add documents one by one. Not atomic: earlier insertions stay if a later one fails."""

        return [self.add_document(namespace, document) for document in documents]

    def update_document(
        self, namespace: Optional[str], document: Document, embedding: Optional[Sequence[float]] = None
    ) -> None:
        """
        Merge ``document`` into the stored document with the same id.

        ``None`` fields keep their stored values. A supplied embedding replaces
        the vector; otherwise the existing vector is kept even if the content
        changed. The document keeps its eviction position.
        """

        name = self._resolve(namespace)
        with self._lock:
            target = self._namespaces.get(name)
            if target is None:
                raise NamespaceNotFoundError(name)
            if document.id is None or document.id not in target:
                raise DocumentNotFoundError(name, document.id)

            raw_vector = embedding if embedding is not None else document.embedding
            if raw_vector is not None:
                vector = as_vector(raw_vector, self._settings.dimensions).copy()
            else:
                vector = target.get_vector(document.id)

            existing = target.get_document(document.id)
            merged = Document(
                id=document.id,
                content=document.content if document.content is not None else existing.content,
                metadata=copy.deepcopy(document.metadata) if document.metadata is not None else existing.metadata,
            )
            target.put(merged, vector)
            self._persist()

    def delete_document(self, namespace: Optional[str], document_id: str) -> bool:
        name = self._resolve(namespace)
        with self._lock:
            target = self._namespaces.get(name)
            if target is None or not target.remove(document_id):
                return False
            self._persist()
            return True

    def delete_collection(self, namespace: Optional[str]) -> None:
        with self._lock:
            if self._namespaces.drop(self._resolve(namespace)):
                self._persist()

    # Reads
    def get_document(self, namespace: Optional[str], document_id: str) -> Optional[Document]:
        name = self._resolve(namespace)
        with self._lock:
            target = self._namespaces.get(name)
            if target is None:
                return None
            document = target.get_document(document_id)
            if document is None:
                return None
            return Document(
                id=document.id,
                content=document.content,
                metadata=copy.deepcopy(document.metadata),
                embedding=target.get_vector(document_id).tolist(),
            )

    def count(self, namespace: Optional[str]) -> int:
        with self._lock:
            target = self._namespaces.get(self._resolve(namespace))
            return len(target) if target is not None else 0

    def list_namespaces(self) -> List[str]:
        with self._lock:
            return self._namespaces.names()

    def search(self, options: SearchOptions) -> List[SearchResult]:
        with self._lock:
            target = self._namespaces.get(self._resolve(options.namespace))
            return self._engine.search(target, options)

    def search_by_vector(self, options: SearchOptions) -> List[SearchResult]:
        if options.vector is None:
            raise ValueError("Vector is required for search_by_vector")
        return self.search(options)

    def search_by_text(self, text: str, options: Optional[SearchOptions] = None) -> List[SearchResult]:
        """Embed ``text`` with the injected embedder and search with the resulting vector."""

        if self._embedder is None:
            raise EmbedderNotConfiguredError("search_by_text requires an embedder")
        vector = self._embedder.embed_text(text)
        return self.search_by_vector(replace(options or SearchOptions(), vector=vector))

    # Persistence
    @contextmanager
    def deferred_persistence(self) -> Iterator[None]:
        """Suspend per-mutation snapshot writes inside the block and save once on exit.

        The final save also runs when the block raises, since mutations that
        completed before the error stay committed. A save failure on that path
        is logged and the original error propagates.
        """

        with self._lock:
            self._deferred += 1
        try:
            yield
        except BaseException:
            self._end_deferred(interrupted=True)
            raise
        self._end_deferred()

    def _end_deferred(self, interrupted: bool = False) -> None:
        with self._lock:
            self._deferred -= 1
            if self._deferred:
                return
            try:
                self.save()
            except PersistenceError as exc:
                if not interrupted:
                    raise
                logger.error("Failed to save vector database after an interrupted batch: %s", exc)

    def save(self) -> None:
        """Write the whole store to ``<storage_path>/vectordb.json``. No-op unless persistence is enabled."""

        with self._lock:
            if not self._settings.persist_to_disk:
                return
            self._snapshots.write(self._snapshot())

    def load(self) -> None:
        """
        Replace configuration and all namespaces with the persisted snapshot.

        No-op unless persistence is enabled; a missing snapshot leaves the store
        unchanged. The snapshot is fully validated before anything is replaced.
        """

        with self._lock:
            if not self._settings.persist_to_disk:
                return
            payload = self._snapshots.read()
            if payload is None:
                return
            settings, namespaces = self._restore(payload)
            self._namespaces = namespaces
            self._configure(settings)
            logger.debug("Restored %d namespace(s) from %s", len(namespaces.names()), self._snapshots.path)

    def _snapshot(self) -> Dict[str, Any]:
        documents: Dict[str, Dict[str, Any]] = {}
        vectors: Dict[str, Dict[str, List[float]]] = {}
        for namespace in self._namespaces.namespaces():
            documents[namespace.name] = {}
            vectors[namespace.name] = {}
            for document_id, document, vector in namespace.iter_entries():
                documents[namespace.name][document_id] = document.to_dict()
                vectors[namespace.name][document_id] = vector.tolist()
        return {
            "config": self._settings.to_snapshot(),
            "namespaces": self._namespaces.names(),
            "documents": documents,
            "vectors": vectors,
        }

    @staticmethod
    def _restore(payload: Dict[str, Any]) -> tuple[VectorStoreSettings, NamespaceStore]:
        try:
            settings = VectorStoreSettings.model_validate(payload["config"])
        except ValidationError as exc:
            raise PersistenceError(f"Invalid configuration in snapshot: {exc}") from exc

        store = NamespaceStore()
        try:
            for name in payload["namespaces"]:
                documents = payload["documents"].get(name)
                vectors = payload["vectors"].get(name)
                if documents is None or vectors is None or set(documents) != set(vectors):
                    raise PersistenceError(f"Snapshot namespace {name} has mismatched documents and vectors")

                namespace = store.ensure_namespace(name)
                for document_id, raw_document in documents.items():
                    document = replace(Document.from_dict(raw_document), id=document_id, embedding=None)
                    namespace.put(document, as_vector(vectors[document_id], settings.dimensions))
        except DimensionMismatchError as exc:
            raise PersistenceError(f"Snapshot vector has wrong dimensions: {exc}") from exc
        except (AttributeError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Malformed snapshot: {exc}") from exc
        return settings, store

    # Helpers
    def _resolve(self, namespace: Optional[str]) -> str:
        return namespace or self.default_namespace

    def _persist(self) -> None:
        if self._settings.persist_to_disk and not self._deferred:
            self.save()

    def _embed_document(self, document: Document) -> np.ndarray:
        if self._embedder is None:
            raise EmbedderNotConfiguredError(
                "Document has no embedding and no embedder was configured to generate one"
            )
        if not document.content:
            raise ValueError("Document content is required to generate an embedding")
        return self._embedder.embed_text(document.content)

    @staticmethod
    def _generate_id(namespace: Namespace) -> str:
        while True:
            document_id = f"doc_{int(time.time() * 1000)}_{uuid.uuid4().hex[:7]}"
            if document_id not in namespace:
                return document_id
