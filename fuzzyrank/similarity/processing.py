"""String preparation shared by the token and weighted scorers."""

import re

_NON_WORD_RE = re.compile(r"\W", re.UNICODE)


def full_process(s: str) -> str:
    """Lowercase, turn every non-word character into a space and trim."""
    return _NON_WORD_RE.sub(" ", s).lower().strip()


def tokenize(s: str) -> list[str]:
    """Split on whitespace, dropping empty tokens."""
    return s.split()


def sorted_tokens(s: str) -> str:
    """Rejoin the tokens of ``s`` in lexicographic order with single spaces."""
    return " ".join(sorted(tokenize(s)))
