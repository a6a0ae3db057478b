from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from ..datamodels import Article


class ArticleSource(ABC):
    """Abstract base class for an article source."""

    name = "source"

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @abstractmethod
    def get_articles(self) -> Tuple[Article, ...]:
        """Return the full article collection, in display order.

        Raises SourceError when the collection cannot be produced.
        """
        pass
