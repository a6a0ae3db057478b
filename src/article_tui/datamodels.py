from __future__ import annotations
from dataclasses import dataclass


# --- Data models ---
@dataclass(frozen=True)
class Article:
    id: int
    title: str
    content: str


@dataclass(frozen=True)
class Segment:
    text: str
    matched: bool = False
