"""Type definitions for extraction results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Accessor = Callable[[Any], str]


def identity(obj: str) -> str:
    """Accessor used for plain string choices."""
    return obj


@dataclass(frozen=True)
class ExtractedResult(Generic[T]):
    """A scored choice from an extraction call.

    Holds the caller's original object by reference together with its score,
    its position in the input collection and the accessor that produced the
    string it was scored on.
    """

    choice: T
    score: int
    index: int
    accessor: Accessor = identity

    @property
    def string(self) -> str:
        """The string the choice was scored on, before lowercasing."""
        return self.accessor(self.choice)

    @property
    def rank_key(self) -> tuple[int, int]:
        """Total order for ranking: higher score first, then lower index."""
        return (self.score, -self.index)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "choice": self.string,
            "score": self.score,
            "index": self.index,
        }

    def __str__(self) -> str:
        return f"(string: {self.string}, score: {self.score}, index: {self.index})"
