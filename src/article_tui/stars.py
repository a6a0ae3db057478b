from __future__ import annotations

import json
import logging
from typing import AbstractSet, FrozenSet

from .config import STARRED_KEY
from .errors import StorageError
from .storage import KeyValueStore

logger = logging.getLogger("articles")


class StarStore:
    """Load and save the set of starred article ids.

    The ids are kept as a JSON array of integers under a single key of the
    injected store. Reading never raises: anything missing or malformed is
    treated as "nothing starred". Writing is best-effort.
    """

    def __init__(self, store: KeyValueStore, key: str = STARRED_KEY):
        self.store = store
        self.key = key

    def load(self) -> FrozenSet[int]:
        try:
            raw = self.store.get(self.key)
        except StorageError as e:
            logger.warning("Could not read starred articles: %s", e)
            return frozenset()
        if raw is None:
            return frozenset()

        try:
            ids = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning("Ignoring malformed starred articles %r: %s", raw, e)
            return frozenset()
        if not isinstance(ids, list) or not all(_is_id(i) for i in ids):
            logger.warning("Ignoring malformed starred articles %r", raw)
            return frozenset()
        return frozenset(ids)

    def save(self, starred: AbstractSet[int]) -> None:
        try:
            self.store.set(self.key, json.dumps(sorted(starred)))
        except StorageError as e:
            logger.warning("Could not save starred articles: %s", e)

    @staticmethod
    def toggle(current: AbstractSet[int], article_id: int) -> FrozenSet[int]:
        if article_id in current:
            return frozenset(current) - {article_id}
        return frozenset(current) | {article_id}


def _is_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
