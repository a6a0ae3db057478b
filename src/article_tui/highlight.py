from __future__ import annotations

from typing import Iterable, List, Optional

from rich.text import Text

from .datamodels import Segment
from .query import QueryMatcher


def highlight(text: str, matcher: Optional[QueryMatcher]) -> List[Segment]:
    """Split ``text`` into plain and matched segments.

    The segments always join back into ``text`` unchanged.
    """
    if matcher is None or not text:
        return [Segment(text, False)]

    segments: List[Segment] = []
    cursor = 0
    for start, end in matcher.spans(text):
        if start > cursor:
            segments.append(Segment(text[cursor:start], False))
        segments.append(Segment(text[start:end], True))
        cursor = end
    if cursor < len(text):
        segments.append(Segment(text[cursor:], False))
    return segments


def to_text(segments: Iterable[Segment], style: str) -> Text:
    """Render segments as rich Text, styling only the matched ones."""
    text = Text()
    for segment in segments:
        text.append(segment.text, style=style if segment.matched else None)
    return text
