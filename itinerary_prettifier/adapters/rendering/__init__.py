"""Rendering adapters - Implementations of SpanRendererPort.

Available implementations:
- PlainSpanRenderer: bare text for files
- StyledSpanRenderer: rich styles rendered to ANSI for terminals
"""

from .plain import PlainSpanRenderer
from .styled import StyledSpanRenderer

__all__ = ["PlainSpanRenderer", "StyledSpanRenderer"]
