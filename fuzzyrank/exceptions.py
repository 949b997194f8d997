"""Exception hierarchy for fuzzyrank.

All errors are caller-contract violations surfaced immediately; the library
never retries or recovers from them internally.
"""


class FuzzyRankError(Exception):
    """Base exception for all fuzzyrank errors."""


class ConfigurationError(FuzzyRankError, ValueError):
    """An extraction or scoring call was configured incorrectly."""


class NoMatchError(FuzzyRankError, LookupError):
    """No candidate reached the cutoff when a single best match was requested."""

    def __init__(self, query: str, cutoff: int):
        self.query = query
        self.cutoff = cutoff
        super().__init__(f"No choice scored >= {cutoff} for query '{query}'")


class EmptyChoicesError(NoMatchError):
    """A single best match was requested from an empty collection."""

    def __init__(self, query: str):
        self.query = query
        self.cutoff = 0
        Exception.__init__(self, f"Cannot extract a best match for '{query}' from no choices")
