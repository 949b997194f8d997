"""Similarity scoring strategies.

Every scorer takes two strings and returns an integer in [0, 100]. Scorers
are pure and symmetric; empty vs empty scores 100 and empty vs non-empty
scores 0.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from fuzzyrank.exceptions import ConfigurationError
from fuzzyrank.similarity import distance
from fuzzyrank.similarity.processing import full_process, sorted_tokens, tokenize

Processor = Optional[Callable[[str], str]]


@dataclass(frozen=True)
class WeightedRatioSettings:
    """Length-dependent weighting used by :func:`weighted_ratio`.

    ``partial_threshold`` and ``long_threshold`` are limits on
    ``len(longer) / len(shorter)``.
    """

    unbase_scale: float = 0.95
    partial_scale: float = 0.90
    long_partial_scale: float = 0.60
    partial_threshold: float = 1.5
    long_threshold: float = 8.0

    @classmethod
    def from_settings(cls, settings: dict[str, Any] | None) -> WeightedRatioSettings:
        """Build from the ``weighted_ratio`` section of loaded settings."""
        section = (settings or {}).get("weighted_ratio") or {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Settings section 'weighted_ratio' must be a mapping, got {type(section).__name__}",
            )
        unknown = sorted(set(section) - set(cls.__dataclass_fields__))
        if unknown:
            raise ConfigurationError(f"Unknown weighted_ratio settings: {', '.join(unknown)}")
        try:
            values = {name: float(value) for name, value in section.items()}
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"weighted_ratio settings must be numeric: {exc}") from exc
        return cls(**values)


DEFAULT_WEIGHTS = WeightedRatioSettings()


def _empty_score(s1: str, s2: str) -> Optional[int]:
    if not s1 and not s2:
        return 100
    if not s1 or not s2:
        return 0
    return None


def ratio(s1: str, s2: str) -> int:
    """Whole-string similarity."""
    return distance.ratio(s1, s2)


def partial_ratio(s1: str, s2: str) -> int:
    """Best ratio of the shorter string against any equal-length window of the longer."""
    empty = _empty_score(s1, s2)
    if empty is not None:
        return empty

    shorter, longer = (s1, s2) if len(s1) <= len(s2) else (s2, s1)
    if shorter in longer:
        return 100

    width = len(shorter)
    best = 0
    for start in range(len(longer) - width + 1):
        score = distance.ratio(shorter, longer[start : start + width])
        if score > best:
            best = score
    return best


def _process(s1: str, s2: str, processor: Processor) -> tuple[str, str]:
    if processor is None:
        return s1, s2
    return processor(s1), processor(s2)


def _token_sort(s1: str, s2: str, processor: Processor, partial: bool) -> int:
    p1, p2 = _process(s1, s2, processor)
    sorted1 = sorted_tokens(p1)
    sorted2 = sorted_tokens(p2)
    if partial:
        return partial_ratio(sorted1, sorted2)
    return ratio(sorted1, sorted2)


def token_sort_ratio(s1: str, s2: str, processor: Processor = full_process) -> int:
    """Ratio of the two strings after sorting their tokens."""
    return _token_sort(s1, s2, processor, partial=False)


def token_sort_partial_ratio(s1: str, s2: str, processor: Processor = full_process) -> int:
    """Partial ratio of the two strings after sorting their tokens."""
    return _token_sort(s1, s2, processor, partial=True)


def _token_set(s1: str, s2: str, processor: Processor, partial: bool) -> int:
    p1, p2 = _process(s1, s2, processor)
    tokens1 = set(tokenize(p1))
    tokens2 = set(tokenize(p2))
    if not tokens1 or not tokens2:
        return 100 if tokens1 == tokens2 else 0

    sect = " ".join(sorted(tokens1 & tokens2))
    diff1to2 = " ".join(sorted(tokens1 - tokens2))
    diff2to1 = " ".join(sorted(tokens2 - tokens1))

    combined1to2 = f"{sect} {diff1to2}".strip()
    combined2to1 = f"{sect} {diff2to1}".strip()

    scorer = partial_ratio if partial else ratio
    return max(
        scorer(sect, combined1to2),
        scorer(sect, combined2to1),
        scorer(combined1to2, combined2to1),
    )


def token_set_ratio(s1: str, s2: str, processor: Processor = full_process) -> int:
    """Ratio over the shared token core plus each side's extra tokens."""
    return _token_set(s1, s2, processor, partial=False)


def token_set_partial_ratio(s1: str, s2: str, processor: Processor = full_process) -> int:
    """Partial-ratio variant of :func:`token_set_ratio`."""
    return _token_set(s1, s2, processor, partial=True)


def weighted_ratio(
    s1: str,
    s2: str,
    weights: Optional[WeightedRatioSettings] = None,
    processor: Processor = full_process,
) -> int:
    """Combine the other scorers with length-dependent weights.

    Strings of comparable length are judged on whole-string and token
    ratios. When one string is much longer than the other the partial
    variants take over, so a short query contained in a long candidate is
    not punished for the length gap.

    Args:
        s1: First string
        s2: Second string
        weights: Scaling constants (defaults to :data:`DEFAULT_WEIGHTS`)
        processor: Applied to both strings first; None to skip

    Returns:
        Score in [0, 100]

    """
    weights = weights or DEFAULT_WEIGHTS
    p1, p2 = _process(s1, s2, processor)
    empty = _empty_score(p1, p2)
    if empty is not None:
        return empty

    base = ratio(p1, p2)
    length_ratio = max(len(p1), len(p2)) / min(len(p1), len(p2))

    if length_ratio < weights.partial_threshold:
        best = max(
            float(base),
            token_sort_ratio(p1, p2, processor=None) * weights.unbase_scale,
            token_set_ratio(p1, p2, processor=None) * weights.unbase_scale,
        )
    else:
        scale = weights.partial_scale
        if length_ratio > weights.long_threshold:
            scale = weights.long_partial_scale
        best = max(
            float(base),
            partial_ratio(p1, p2) * scale,
            token_sort_partial_ratio(p1, p2, processor=None) * weights.unbase_scale * scale,
            token_set_partial_ratio(p1, p2, processor=None) * weights.unbase_scale * scale,
        )

    return max(0, min(100, distance.round_half_up(best)))


class Scorer(Enum):
    """The closed set of scoring strategies an extractor can dispatch to."""

    RATIO = "ratio"
    PARTIAL_RATIO = "partial_ratio"
    TOKEN_SORT_RATIO = "token_sort_ratio"
    TOKEN_SORT_PARTIAL_RATIO = "token_sort_partial_ratio"
    TOKEN_SET_RATIO = "token_set_ratio"
    TOKEN_SET_PARTIAL_RATIO = "token_set_partial_ratio"
    WEIGHTED_RATIO = "weighted_ratio"

    def apply(
        self,
        query: str,
        choice: str,
        weights: Optional[WeightedRatioSettings] = None,
    ) -> int:
        """Score ``choice`` against ``query`` with this strategy."""
        if self is Scorer.WEIGHTED_RATIO:
            return weighted_ratio(query, choice, weights=weights)
        return _SCORER_FUNCTIONS[self](query, choice)

    @classmethod
    def resolve(cls, value: Scorer | str) -> Scorer:
        """Return the member for ``value``, accepting members or their names.

        Raises:
            ConfigurationError: If ``value`` names no known scorer

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Unknown scorer {value!r}; expected one of: {valid}")


_SCORER_FUNCTIONS: dict[Scorer, Callable[[str, str], int]] = {
    Scorer.RATIO: ratio,
    Scorer.PARTIAL_RATIO: partial_ratio,
    Scorer.TOKEN_SORT_RATIO: token_sort_ratio,
    Scorer.TOKEN_SORT_PARTIAL_RATIO: token_sort_partial_ratio,
    Scorer.TOKEN_SET_RATIO: token_set_ratio,
    Scorer.TOKEN_SET_PARTIAL_RATIO: token_set_partial_ratio,
}
