from __future__ import annotations


class ArticleBrowserError(Exception):
    """Base class for errors raised by the article browser."""


class StorageError(ArticleBrowserError):
    """A key-value store could not be read or written."""


class SourceError(ArticleBrowserError):
    """An article source could not produce its collection."""
