from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .datamodels import Article, Segment
from .filtering import empty_message, filter_and_sort, result_message
from .highlight import highlight
from .query import QueryMatcher, compile_query
from .stars import StarStore

logger = logging.getLogger("articles")


@dataclass(frozen=True)
class ViewState:
    query_text: str = ""
    starred_only: bool = False
    expanded_article_id: Optional[int] = None


@dataclass(frozen=True)
class ViewModel:
    articles: Tuple[Article, ...]
    matcher: Optional[QueryMatcher]
    starred: FrozenSet[int]
    state: ViewState
    status: str
    empty_message: Optional[str] = None


class ViewController:
    """Owns the browser's mutable state and rebuilds the view after each action."""

    def __init__(self, articles: Sequence[Article], star_store: StarStore):
        self.articles: Tuple[Article, ...] = tuple(articles)
        self.star_store = star_store
        self._known_ids = frozenset(a.id for a in self.articles)

        loaded = star_store.load()
        self.starred: FrozenSet[int] = loaded & self._known_ids
        if loaded != self.starred:
            logger.info(
                "Dropping %d starred ids not in the collection",
                len(loaded - self._known_ids),
            )

        self.state = ViewState()
        self.matcher: Optional[QueryMatcher] = None
        self._recompute()

    def _recompute(self) -> None:
        visible = filter_and_sort(
            self.articles, self.matcher, self.state.starred_only, self.starred
        )
        self.view = ViewModel(
            articles=tuple(visible),
            matcher=self.matcher,
            starred=self.starred,
            state=self.state,
            status=result_message(
                len(visible), self.state.query_text, self.state.starred_only
            ),
            empty_message=(
                None
                if visible
                else empty_message(self.state.query_text, self.state.starred_only)
            ),
        )

    def set_query(self, text: str) -> ViewModel:
        if text != self.state.query_text:
            self.matcher = compile_query(text)
        self.state = replace(self.state, query_text=text)
        self._recompute()
        return self.view

    def set_starred_only(self, starred_only: bool) -> ViewModel:
        self.state = replace(self.state, starred_only=starred_only)
        self._recompute()
        return self.view

    def toggle_expand(self, article_id: int) -> ViewModel:
        expanded = None if self.state.expanded_article_id == article_id else article_id
        self.state = replace(self.state, expanded_article_id=expanded)
        self._recompute()
        return self.view

    def toggle_star(self, article_id: int) -> ViewModel:
        if article_id not in self._known_ids:
            logger.warning("Ignoring star toggle for unknown article id %s", article_id)
            return self.view
        self.starred = StarStore.toggle(self.starred, article_id)
        self.star_store.save(self.starred)
        logger.debug("Article %s starred=%s", article_id, article_id in self.starred)
        self._recompute()
        return self.view

    def is_starred(self, article_id: int) -> bool:
        return article_id in self.starred

    def is_expanded(self, article_id: int) -> bool:
        return self.state.expanded_article_id == article_id

    def highlight(self, text: str) -> List[Segment]:
        return highlight(text, self.matcher)
