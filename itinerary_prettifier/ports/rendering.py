"""Rendering port - Abstraction for presenting resolved tokens.

A span renderer decides how a resolved value is written into the
output text. All renderers must emit the same underlying characters;
they may only add decoration around them.
"""

from __future__ import annotations

from typing import Protocol


class SpanRendererPort(Protocol):
    """Port for rendering resolved spans.

    Implementations:
    - adapters/rendering/plain.py (PlainSpanRenderer)
    - adapters/rendering/styled.py (StyledSpanRenderer)
    """

    def airport(self, text: str) -> str:
        """Render an airport name."""
        ...

    def city(self, text: str) -> str:
        """Render a municipality."""
        ...

    def date(self, text: str) -> str:
        """Render a formatted date such as '15 Mar 2025'."""
        ...

    def time(self, text: str) -> str:
        """Render a formatted clock time such as '02:30PM'."""
        ...

    def offset(self, text: str) -> str:
        """Render a UTC offset such as '(-04:00)'."""
        ...
