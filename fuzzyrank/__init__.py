"""fuzzyrank: fuzzy string scoring and ranking."""

from fuzzyrank.exceptions import (
    ConfigurationError,
    EmptyChoicesError,
    FuzzyRankError,
    NoMatchError,
)
from fuzzyrank.extractor import Extractor
from fuzzyrank.process import extract_all, extract_all_sorted, extract_one, extract_top
from fuzzyrank.similarity import (
    ExtractedResult,
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

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EmptyChoicesError",
    "ExtractedResult",
    "Extractor",
    "FuzzyRankError",
    "NoMatchError",
    "Scorer",
    "WeightedRatioSettings",
    "extract_all",
    "extract_all_sorted",
    "extract_one",
    "extract_top",
    "partial_ratio",
    "ratio",
    "token_set_partial_ratio",
    "token_set_ratio",
    "token_sort_partial_ratio",
    "token_sort_ratio",
    "weighted_ratio",
]
