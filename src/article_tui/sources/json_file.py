from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Tuple

from ..datamodels import Article
from ..errors import SourceError
from .base import ArticleSource

logger = logging.getLogger("articles")


class JsonFileSource(ArticleSource):
    """Articles from a JSON array of ``{"id", "title", "content"}`` objects."""

    name = "json"

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        path = self.config.get("path")
        if not path:
            raise SourceError("The json source needs a 'path'")
        self.path = os.path.expanduser(path)

    def get_articles(self) -> Tuple[Article, ...]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SourceError(f"Failed to read articles from {self.path}: {e}") from e

        if not isinstance(data, list):
            raise SourceError(f"Expected a list of articles in {self.path}")

        articles: List[Article] = []
        seen_ids = set()
        for index, entry in enumerate(data):
            article = _parse_article(entry, index)
            if article.id in seen_ids:
                raise SourceError(f"Duplicate article id {article.id} in {self.path}")
            seen_ids.add(article.id)
            articles.append(article)

        logger.info("Loaded %d articles from %s", len(articles), self.path)
        return tuple(articles)


def _parse_article(entry: Any, index: int) -> Article:
    if not isinstance(entry, dict):
        raise SourceError(f"Article #{index} is not an object")
    article_id = entry.get("id")
    if not isinstance(article_id, int) or isinstance(article_id, bool):
        raise SourceError(f"Article #{index} has no integer 'id'")
    title = entry.get("title")
    content = entry.get("content")
    if not isinstance(title, str) or not isinstance(content, str):
        raise SourceError(f"Article {article_id} needs string 'title' and 'content'")
    return Article(id=article_id, title=title, content=content)
