"""Itinerary formatter service - Main orchestrator.

Runs the token rewriter and the whitespace normalizer once per
rendering mode and returns both renderings. The airport directory is
injected and only ever read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..adapters.rendering import PlainSpanRenderer, StyledSpanRenderer
from ..config import RenderingConfig
from ..domain.models import FormattedItinerary, RenderMode
from ..ports.directory import AirportLookupPort
from ..ports.rendering import SpanRendererPort
from ..text.scanner import TokenRewriter
from ..text.whitespace import normalize_whitespace


@dataclass
class ItineraryFormatterService:
    """Turn placeholder-laden itinerary text into readable text.

    Attributes:
        directory: Airport lookup used to resolve codes
        plain_renderer: Renderer for RenderMode.PLAIN
        annotated_renderer: Renderer for RenderMode.ANNOTATED
    """

    directory: AirportLookupPort
    plain_renderer: SpanRendererPort = field(default_factory=PlainSpanRenderer)
    annotated_renderer: SpanRendererPort = field(default_factory=StyledSpanRenderer)

    _rewriters: Dict[RenderMode, TokenRewriter] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._rewriters = {
            RenderMode.PLAIN: TokenRewriter(self.directory, self.plain_renderer),
            RenderMode.ANNOTATED: TokenRewriter(self.directory, self.annotated_renderer),
        }

    @classmethod
    def with_styles(
        cls,
        directory: AirportLookupPort,
        rendering: Optional[RenderingConfig] = None,
    ) -> ItineraryFormatterService:
        """Build a service whose annotated renderer uses the given styles."""
        if rendering is None:
            return cls(directory)
        return cls(directory, annotated_renderer=StyledSpanRenderer(rendering))

    def transform(self, text: str, mode: RenderMode = RenderMode.PLAIN) -> str:
        """Rewrite tokens and normalize whitespace for one rendering mode.

        Never raises for any input text: unresolvable tokens are kept
        verbatim.
        """
        rewritten = self._rewriters[mode].rewrite(text)
        return normalize_whitespace(rewritten)

    def format(self, text: str) -> FormattedItinerary:
        """Produce both the plain and the annotated rendering of text."""
        self._logger.info(
            "Formatting itinerary",
            extra={"text_length": len(text)},
        )
        result = FormattedItinerary(
            plain=self.transform(text, RenderMode.PLAIN),
            annotated=self.transform(text, RenderMode.ANNOTATED),
        )
        self._logger.debug(
            "Itinerary formatted",
            extra={"plain_length": len(result.plain)},
        )
        return result
