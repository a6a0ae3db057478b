from __future__ import annotations

import re
from typing import List, Optional, Tuple

_WHITESPACE = re.compile(r"\s+")


class QueryMatcher:
    """Case-insensitive literal matcher over one or more query tokens.

    A text matches when it contains any token. Spans come from a single
    left-to-right scan, so overlapping matches never both appear and a match
    starting earlier always wins.
    """

    def __init__(self, tokens: Tuple[str, ...]):
        if not tokens:
            raise ValueError("QueryMatcher needs at least one token")
        self.tokens = tokens
        # Tokens are escaped: query text never acts as a pattern.
        self._pattern = re.compile(
            "|".join(re.escape(t) for t in tokens), re.IGNORECASE
        )

    def matches(self, text: Optional[str]) -> bool:
        if not text:
            return False
        return self._pattern.search(text) is not None

    def spans(self, text: Optional[str]) -> List[Tuple[int, int]]:
        if not text:
            return []
        return [m.span() for m in self._pattern.finditer(text)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryMatcher):
            return NotImplemented
        return self.tokens == other.tokens

    def __hash__(self) -> int:
        return hash(self.tokens)

    def __repr__(self) -> str:
        return f"QueryMatcher(tokens={self.tokens!r})"


def tokenize(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a raw query into unique whitespace-separated tokens."""
    tokens: List[str] = []
    seen = set()
    for token in _WHITESPACE.split((raw or "").strip()):
        if not token:
            continue
        folded = token.lower()
        if folded in seen:
            continue
        seen.add(folded)
        tokens.append(token)
    return tuple(tokens)


def compile_query(raw: Optional[str]) -> Optional[QueryMatcher]:
    """Compile a search string, or return None when there is nothing to match."""
    tokens = tokenize(raw)
    if not tokens:
        return None
    return QueryMatcher(tokens)
