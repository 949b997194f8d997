"""Module-level shortcuts over :class:`~fuzzyrank.extractor.Extractor`.

Each call builds a throwaway extractor with the given cutoff, so these are
the simplest way to run a one-off match::

    >>> extract_one("cowboys", ["Atlanta Falcons", "Dallas Cowboys"]).choice
    'Dallas Cowboys'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional, TypeVar

from fuzzyrank.extractor import Extractor
from fuzzyrank.similarity.scoring import Scorer
from fuzzyrank.similarity.types import ExtractedResult

T = TypeVar("T")


def extract_one(
    query: str,
    choices: Iterable[T],
    scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
    cutoff: int = 0,
    accessor: Optional[Callable[[T], str]] = None,
) -> ExtractedResult[T]:
    """Best single match for ``query``."""
    return Extractor(cutoff).extract_one(query, choices, scorer, accessor)


def extract_all(
    query: str,
    choices: Iterable[T],
    scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
    cutoff: int = 0,
    accessor: Optional[Callable[[T], str]] = None,
) -> list[ExtractedResult[T]]:
    """All matches at or above ``cutoff`` in input order."""
    return Extractor(cutoff).extract_without_order(query, choices, scorer, accessor)


def extract_all_sorted(
    query: str,
    choices: Iterable[T],
    scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
    cutoff: int = 0,
    accessor: Optional[Callable[[T], str]] = None,
) -> list[ExtractedResult[T]]:
    """All matches at or above ``cutoff``, best first."""
    return Extractor(cutoff).extract_sorted(query, choices, scorer, accessor)


def extract_top(
    query: str,
    choices: Iterable[T],
    scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
    limit: int = 5,
    cutoff: int = 0,
    accessor: Optional[Callable[[T], str]] = None,
) -> list[ExtractedResult[T]]:
    """The ``limit`` best matches, best first."""
    return Extractor(cutoff).extract_top(query, choices, scorer, limit, accessor)
