"""Similarity primitives"""
from typing import Hashable, Iterable, Sequence

import numpy as np


def set_overlap(set_a: Iterable[Hashable], set_b: Iterable[Hashable]) -> float:
    """Exact-match Jaccard index. Empty union scores 0.0, not 1.0."""
    s1, s2 = set(set_a), set(set_b)
    union = s1 | s2
    if not union:
        return 0.0
    return len(s1 & s2) / len(union)


def jaccard_similarity(set_a: Iterable[str], set_b: Iterable[str]) -> float:
    """Case-insensitive Jaccard index over free-text labels"""
    return set_overlap((s.lower() for s in set_a), (s.lower() for s in set_b))


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Cosine of the angle between two vectors.

    Vectors of different length, or with zero norm, are incomparable and
    score 0.0.
    """
    a = np.asarray(vec_a, dtype=float)
    b = np.asarray(vec_b, dtype=float)
    if a.shape != b.shape:
        return 0.0

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    # Rounding can push identical vectors a hair past 1.0
    return float(np.clip(np.dot(a, b) / (norm_a * norm_b), -1.0, 1.0))
