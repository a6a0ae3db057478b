from __future__ import annotations

import hashlib
import logging
from typing import Any, Dict, List, Tuple

import feedparser
import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import HTTP_TIMEOUT, REQUEST_HEADERS, RETRY_ATTEMPTS
from ..datamodels import Article
from ..errors import SourceError
from .base import ArticleSource

logger = logging.getLogger("articles")

DEFAULT_LIMIT = 50


class RSSSource(ArticleSource):
    """Articles from one RSS or Atom feed, fetched once."""

    name = "rss"

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.url = self.config.get("url")
        if not self.url:
            raise SourceError("The rss source needs a 'url'")
        self.limit = int(self.config.get("limit", DEFAULT_LIMIT))
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update(REQUEST_HEADERS)
        retries = Retry(
            total=RETRY_ATTEMPTS,
            backoff_factor=0.3,
            status_forcelist=[429, 500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retries)
        s.mount("https://", adapter)
        s.mount("http://", adapter)
        return s

    def _fetch(self) -> bytes:
        logger.debug("Fetching feed %s", self.url)
        try:
            resp = self.session.get(self.url, timeout=HTTP_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise SourceError(f"Failed to fetch {self.url}: {e}") from e
        return resp.content

    def get_articles(self) -> Tuple[Article, ...]:
        feed = feedparser.parse(self._fetch())
        if feed.get("bozo") and not feed.entries:
            raise SourceError(
                f"Could not parse feed {self.url}: {feed.get('bozo_exception')}"
            )

        articles: List[Article] = []
        seen_ids = set()
        for entry in feed.entries[: self.limit]:
            key = entry.get("id") or entry.get("link") or entry.get("title")
            if not key:
                continue
            article_id = stable_id(key)
            if article_id in seen_ids:
                continue
            seen_ids.add(article_id)
            articles.append(
                Article(
                    id=article_id,
                    title=_plain_text(entry.get("title", "")),
                    content=_plain_text(entry.get("summary", "")),
                )
            )
        logger.info("Loaded %d articles from %s", len(articles), self.url)
        return tuple(articles)


def stable_id(key: str) -> int:
    """Map a feed entry key to an int id that survives restarts."""
    return int(hashlib.sha256(key.encode("utf-8")).hexdigest()[:12], 16)


def _plain_text(markup: str) -> str:
    if not markup:
        return ""
    return BeautifulSoup(markup, "lxml").get_text(" ", strip=True)
