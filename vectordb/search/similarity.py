# Path: vectordb/search/similarity.py
# Purpose: Provide similarity metrics used to rank stored vectors against a query.
# Layer: vectordb/search.
# Details: Pairwise functions plus a vectorised scorer over a matrix of stored vectors.

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

import numpy as np

from vectordb.errors import DimensionMismatchError

VectorLike = Union[np.ndarray, Sequence[float]]


class SimilarityMetric(str, Enum):
    """Supported similarity metrics. Values match the persisted configuration."""

    COSINE = "cosine"
    EUCLIDEAN = "euclidean"
    DOT = "dot"


def _pair(a: VectorLike, b: VectorLike) -> tuple[np.ndarray, np.ndarray]:
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.shape != right.shape:
        raise DimensionMismatchError(left.size, right.size)
    return left, right


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """Cosine of the angle between ``a`` and ``b``; 0.0 when either vector has zero norm."""

    left, right = _pair(a, b)
    norm = float(np.linalg.norm(left)) * float(np.linalg.norm(right))
    if norm == 0:
        return 0.0
    return float(np.dot(left, right)) / norm


def euclidean_similarity(a: VectorLike, b: VectorLike) -> float:
    """Map euclidean distance into (0, 1] with ``1 / (1 + distance)``."""

    left, right = _pair(a, b)
    return 1.0 / (1.0 + float(np.linalg.norm(left - right)))


def dot_product(a: VectorLike, b: VectorLike) -> float:
    """Raw inner product. Unbounded; its range depends on the vector magnitudes."""

    left, right = _pair(a, b)
    return float(np.dot(left, right))


def dot_similarity(a: VectorLike, b: VectorLike) -> float:
    """Inner product rescaled with ``(dot + n) / (2n)``.

    The rescaling only lands in [0, 1] when every component lies in [-1, 1]
    (unit-ish embeddings). For arbitrary magnitudes use :func:`dot_product`.
    """

    left, right = _pair(a, b)
    n = left.size
    if n == 0:
        return 0.0
    return (float(np.dot(left, right)) + n) / (2 * n)


_PAIRWISE = {
    SimilarityMetric.COSINE: cosine_similarity,
    SimilarityMetric.EUCLIDEAN: euclidean_similarity,
    SimilarityMetric.DOT: dot_similarity,
}


def similarity(a: VectorLike, b: VectorLike, metric: SimilarityMetric | str = SimilarityMetric.COSINE) -> float:
    """Score two equal-length vectors with the requested metric."""

    return _PAIRWISE[SimilarityMetric(metric)](a, b)


def score_vectors(query: np.ndarray, matrix: np.ndarray, metric: SimilarityMetric | str) -> np.ndarray:
    """Score ``query`` against every row of ``matrix`` in one pass.

    Produces the same values as :func:`similarity` applied row by row.
    """

    metric = SimilarityMetric(metric)
    if matrix.size == 0:
        return np.empty(0, dtype=np.float64)
    if matrix.shape[1] != query.shape[0]:
        raise DimensionMismatchError(query.shape[0], matrix.shape[1])

    if metric is SimilarityMetric.EUCLIDEAN:
        distances = np.linalg.norm(matrix - query.reshape(1, -1), axis=1)
        return 1.0 / (1.0 + distances)

    dots = matrix @ query
    if metric is SimilarityMetric.DOT:
        n = query.shape[0]
        return (dots + n) / (2 * n)

    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    scores = np.zeros_like(dots)
    nonzero = norms != 0
    scores[nonzero] = dots[nonzero] / norms[nonzero]
    return scores


__all__ = [
    "SimilarityMetric",
    "cosine_similarity",
    "euclidean_similarity",
    "dot_product",
    "dot_similarity",
    "similarity",
    "score_vectors",
]
