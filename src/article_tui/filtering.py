"""Article filtering, starred-first ordering, and result messages."""

from __future__ import annotations

from typing import AbstractSet, List, Optional, Sequence

from .datamodels import Article
from .query import QueryMatcher

EMPTY_HINT = "Try different keywords or turn off filters"


def filter_and_sort(
    articles: Sequence[Article],
    matcher: Optional[QueryMatcher],
    starred_only: bool,
    starred: AbstractSet[int],
) -> List[Article]:
    """Return the visible articles, starred first, otherwise in source order."""
    visible = list(articles)
    if matcher is not None:
        visible = [
            a for a in visible if matcher.matches(a.title) or matcher.matches(a.content)
        ]
    if starred_only:
        visible = [a for a in visible if a.id in starred]

    # Stable partition: two passes keep each group's original order.
    return [a for a in visible if a.id in starred] + [
        a for a in visible if a.id not in starred
    ]


def result_message(count: int, query_text: str, starred_only: bool) -> str:
    message = f"{count} article{'' if count == 1 else 's'} found"
    if query_text:
        message += f' for "{query_text}"'
    if starred_only:
        message += " • filtering: Starred"
    return message


def empty_message(query_text: str, starred_only: bool) -> str:
    message = "No articles found"
    if query_text:
        message += f' matching "{query_text}"'
    if starred_only:
        message += " in Starred"
    return message
