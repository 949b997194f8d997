"""Extraction of scored matches from a collection of choices."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional, TypeVar

from fuzzyrank.exceptions import ConfigurationError, EmptyChoicesError, NoMatchError
from fuzzyrank.similarity.scoring import Scorer, WeightedRatioSettings
from fuzzyrank.similarity.types import ExtractedResult, identity
from fuzzyrank.utils.heap import top_k
from fuzzyrank.utils.io_utils import get_section

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _resolve_accessor(
    choices: Sequence[T], accessor: Optional[Callable[[T], str]]
) -> Callable[[T], str]:
    """Return the accessor to use, failing before any scoring if one is required."""
    if accessor is not None:
        if not callable(accessor):
            raise ConfigurationError(f"Accessor must be callable, got {type(accessor).__name__}")
        return accessor

    for index, choice in enumerate(choices):
        if not isinstance(choice, str):
            raise ConfigurationError(
                f"An accessor is required for non-string choices "
                f"(choice {index} is {type(choice).__name__})",
            )
    return identity


class Extractor:
    """Scores a query against collections of choices.

    Instances are stateless apart from their configuration, so one extractor
    can be shared freely. Query and choice strings are lowercased before they
    reach the scorer; caller-owned collections are never modified.
    """

    def __init__(
        self,
        cutoff: int = 0,
        weights: Optional[WeightedRatioSettings] = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            cutoff: Minimum score a result needs to be returned
            weights: Constants for the weighted ratio scorer

        """
        if not isinstance(cutoff, int) or isinstance(cutoff, bool):
            raise ConfigurationError(f"Cutoff must be an int, got {cutoff!r}")
        self.cutoff = cutoff
        self.weights = weights

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> Extractor:
        """Build an extractor from loaded settings."""
        cutoff = get_section(settings, "extractor").get("cutoff", 0)
        return cls(cutoff=cutoff, weights=WeightedRatioSettings.from_settings(settings))

    def _score(self, scorer: Scorer, query: str, text: str) -> int:
        return scorer.apply(query.lower(), text.lower(), weights=self.weights)

    def extract_without_order(
        self,
        query: str,
        choices: Iterable[T],
        scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
        accessor: Optional[Callable[[T], str]] = None,
    ) -> list[ExtractedResult[T]]:
        """Score every choice and keep those at or above the cutoff.

        Args:
            query: String to match
            choices: Candidate items
            scorer: Scoring strategy (member or name)
            accessor: Maps a choice to the string to score; required unless
                every choice is a string

        Returns:
            Results in input order

        Raises:
            ConfigurationError: If a non-string choice has no accessor

        """
        scorer = Scorer.resolve(scorer)
        items = list(choices)
        getter = _resolve_accessor(items, accessor)

        results = []
        for index, choice in enumerate(items):
            score = self._score(scorer, query, getter(choice))
            if score >= self.cutoff:
                results.append(ExtractedResult(choice, score, index, getter))

        logger.debug(
            f"{scorer.value}: kept {len(results)} of {len(items)} choices "
            f"at cutoff {self.cutoff}",
        )
        return results

    def extract_without_order_multi_field(
        self,
        query: str,
        choices: Iterable[T],
        scorer: Scorer | str,
        accessors: Sequence[Callable[[T], str]],
        cutoffs: Sequence[int],
    ) -> list[ExtractedResult[T]]:
        """Score each choice on several fields and average the qualifying fields.

        A field counts only when its score exceeds its own cutoff. A counted
        field whose text contains the query outright contributes 100. The
        choice's score is the mean of the counted fields (0 when none count),
        truncated to an int and still subject to the extractor cutoff.

        Args:
            query: String to match
            choices: Candidate items
            scorer: Scoring strategy (member or name)
            accessors: One accessor per field
            cutoffs: One cutoff per accessor

        Returns:
            Results in input order, each carrying the first accessor

        Raises:
            ConfigurationError: If accessors is empty or the lengths differ

        """
        scorer = Scorer.resolve(scorer)
        if not accessors:
            raise ConfigurationError("At least one accessor is required for multi-field extraction")
        if len(accessors) != len(cutoffs):
            raise ConfigurationError(
                f"Got {len(accessors)} accessors but {len(cutoffs)} cutoffs",
            )

        items = list(choices)
        query_lower = query.lower()
        results = []
        for index, choice in enumerate(items):
            sub_scores = []
            for accessor, field_cutoff in zip(accessors, cutoffs):
                field = accessor(choice).lower()
                sub_score = self._score(scorer, query_lower, field)
                if sub_score > field_cutoff:
                    sub_scores.append(100 if query_lower in field else sub_score)

            score = int(sum(sub_scores) / len(sub_scores)) if sub_scores else 0
            if score >= self.cutoff:
                results.append(ExtractedResult(choice, score, index, accessors[0]))

        logger.debug(
            f"{scorer.value}: kept {len(results)} of {len(items)} choices "
            f"across {len(accessors)} fields",
        )
        return results

    def extract_one(
        self,
        query: str,
        choices: Iterable[T],
        scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
        accessor: Optional[Callable[[T], str]] = None,
    ) -> ExtractedResult[T]:
        """Return the best match; ties go to the earliest choice.

        Raises:
            EmptyChoicesError: If ``choices`` is empty
            NoMatchError: If no choice reaches the cutoff

        """
        items = list(choices)
        if not items:
            raise EmptyChoicesError(query)

        results = self.extract_without_order(query, items, scorer, accessor)
        if not results:
            raise NoMatchError(query, self.cutoff)
        return max(results, key=lambda result: result.rank_key)

    def extract_sorted(
        self,
        query: str,
        choices: Iterable[T],
        scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
        accessor: Optional[Callable[[T], str]] = None,
    ) -> list[ExtractedResult[T]]:
        """Return all results at or above the cutoff, best first."""
        results = self.extract_without_order(query, choices, scorer, accessor)
        return sorted(results, key=lambda result: result.rank_key, reverse=True)

    def extract_sorted_multi_field(
        self,
        query: str,
        choices: Iterable[T],
        scorer: Scorer | str,
        accessors: Sequence[Callable[[T], str]],
        cutoffs: Sequence[int],
    ) -> list[ExtractedResult[T]]:
        """Multi-field variant of :meth:`extract_sorted`."""
        results = self.extract_without_order_multi_field(
            query, choices, scorer, accessors, cutoffs,
        )
        return sorted(results, key=lambda result: result.rank_key, reverse=True)

    def extract_top(
        self,
        query: str,
        choices: Iterable[T],
        scorer: Scorer | str = Scorer.WEIGHTED_RATIO,
        limit: int = 5,
        accessor: Optional[Callable[[T], str]] = None,
    ) -> list[ExtractedResult[T]]:
        """Return the ``limit`` best results, best first.

        Same ordering as :meth:`extract_sorted` truncated to ``limit``, but
        selected with a bounded heap.

        Raises:
            ConfigurationError: If ``limit`` is negative

        """
        if limit < 0:
            raise ConfigurationError(f"Limit must be >= 0, got {limit}")
        results = self.extract_without_order(query, choices, scorer, accessor)
        return top_k(results, limit, key=lambda result: result.rank_key)
