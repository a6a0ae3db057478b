from __future__ import annotations

from typing import Any, Dict, Type

from ..config import DEFAULT_SOURCE
from ..errors import SourceError
from .base import ArticleSource
from .builtin import BuiltinSource
from .json_file import JsonFileSource
from .rss import RSSSource

SOURCES: Dict[str, Type[ArticleSource]] = {
    "builtin": BuiltinSource,
    "json": JsonFileSource,
    "rss": RSSSource,
}


def get_source(config: Dict[str, Any]) -> ArticleSource:
    source_name = config.get("source", DEFAULT_SOURCE)
    source_config = config.get("sources", {}).get(source_name, {})
    source_class = SOURCES.get(source_name)
    if not source_class:
        raise SourceError(f"Unknown source: {source_name}")
    return source_class(source_config)
