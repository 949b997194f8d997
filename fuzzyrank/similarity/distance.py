"""Edit distance and the normalized similarity ratio.

Distances are computed over Unicode code points when given strings, but any
sequence of hashable units works (token lists included).
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence

from rapidfuzz.distance import Indel, Levenshtein


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def levenshtein(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    substitution_cost: int = 1,
) -> int:
    """Compute the weighted edit distance between two sequences.

    Insertions and deletions cost 1, substitutions cost ``substitution_cost``.

    Args:
        a: First sequence
        b: Second sequence
        substitution_cost: Cost of replacing one unit with another

    Returns:
        Minimum total cost of turning ``a`` into ``b``

    """
    return Levenshtein.distance(a, b, weights=(1, 1, substitution_cost))


def indel_distance(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Edit distance where a substitution costs a deletion plus an insertion."""
    return Indel.distance(a, b)


def ratio(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Normalized similarity in [0, 100] derived from the indel distance.

    ``round(100 * (len(a) + len(b) - distance) / (len(a) + len(b)))``, or 100
    when both sequences are empty. Integer arithmetic keeps it exact.
    """
    total = len(a) + len(b)
    if total == 0:
        return 100
    matched = total - indel_distance(a, b)
    return (200 * matched + total) // (2 * total)
