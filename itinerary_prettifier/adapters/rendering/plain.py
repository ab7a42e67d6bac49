"""Plain span renderer: resolved values are written as bare text."""

from __future__ import annotations


class PlainSpanRenderer:
    """Renderer for output that is written to files."""

    def airport(self, text: str) -> str:
        return text

    def city(self, text: str) -> str:
        return text

    def date(self, text: str) -> str:
        return text

    def time(self, text: str) -> str:
        return text

    def offset(self, text: str) -> str:
        return text
