"""Similarity scoring for fuzzyrank.

This package provides the edit-distance engine and the scoring strategies
built on it.
"""

from .distance import indel_distance, levenshtein
from .processing import full_process
from .scoring import (
    DEFAULT_WEIGHTS,
    Scorer,
    WeightedRatioSettings,
    partial_ratio,
    ratio,
    token_set_partial_ratio,
    token_set_ratio,
    token_sort_partial_ratio,
    token_sort_ratio,
    weighted_ratio,
)
from .types import ExtractedResult

__all__ = [
    "DEFAULT_WEIGHTS",
    "ExtractedResult",
    "Scorer",
    "WeightedRatioSettings",
    "full_process",
    "indel_distance",
    "levenshtein",
    "partial_ratio",
    "ratio",
    "token_set_partial_ratio",
    "token_set_ratio",
    "token_sort_partial_ratio",
    "token_sort_ratio",
    "weighted_ratio",
]
