# Path: vectordb/search/engine.py
# Purpose: Rank the documents of a namespace against a query vector.
# Layer: vectordb/search.
# Details: Linear scan in insertion order, metadata filtering, score threshold and top-k truncation.

from __future__ import annotations

import copy
from dataclasses import replace
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from vectordb.errors import DimensionMismatchError
from vectordb.models.domain import SearchOptions, SearchResult
from .similarity import SimilarityMetric, score_vectors

if TYPE_CHECKING:
    from vectordb.vector_store.namespaces import Namespace


def as_vector(values: Sequence[float] | np.ndarray, dimensions: int) -> np.ndarray:
    """Convert ``values`` into a 1-D float64 array of exactly ``dimensions`` finite entries."""

    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1 or vector.shape[0] != dimensions:
        raise DimensionMismatchError(dimensions, int(vector.shape[-1]) if vector.ndim else 0)
    if not np.isfinite(vector).all():
        raise ValueError("Vector components must be finite numbers")
    return vector


class QueryEngine:
    """Exhaustive similarity search over one namespace.

    No index is built; every stored vector is scored on each query.
    """

    def __init__(self, dimensions: int, metric: SimilarityMetric | str = SimilarityMetric.COSINE) -> None:
        self.dimensions = dimensions
        self.metric = SimilarityMetric(metric)

    def search(self, namespace: Optional[Namespace], options: SearchOptions) -> List[SearchResult]:
        """
        Return results sorted by descending score, at most ``options.limit`` long.

        Ties keep insertion order. A missing namespace yields an empty list.
        """

        if options.vector is None:
            raise ValueError("Vector is required for search")
        if options.limit < 0:
            raise ValueError("limit must not be negative")

        query = as_vector(options.vector, self.dimensions)
        if namespace is None or len(namespace) == 0:
            return []

        entries = list(namespace.iter_entries())
        matrix = np.vstack([vector for _, _, vector in entries])
        scores = score_vectors(query, matrix, self.metric)

        results: List[SearchResult] = []
        for (_, document, vector), score in zip(entries, scores):
            score = float(score)
            if not score >= options.min_score:
                continue
            if options.filter is not None and not options.filter(document.metadata or {}):
                continue

            hit = replace(
                document,
                metadata=copy.deepcopy(document.metadata),
                embedding=vector.tolist() if options.include_vectors else None,
            )
            results.append(SearchResult(document=hit, score=score))

        results.sort(key=lambda result: result.score, reverse=True)
        return results[: options.limit]
