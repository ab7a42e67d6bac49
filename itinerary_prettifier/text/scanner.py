"""Placeholder token grammar and the multi-pass rewriter.

The rewriter runs one regex pass per token kind, in a fixed order:
IATA codes, ICAO codes, dates, 12-hour times, 24-hour times. Each pass
replaces every non-overlapping match left to right and hands the
result to the next pass.

Resolution is fail-open: an unknown airport code or an unparsable
timestamp is written back exactly as it was matched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from ..domain.models import Token, TokenKind
from ..ports.directory import AirportLookupPort
from ..ports.rendering import SpanRendererPort
from . import timestamps

_TIMESTAMP = r"([0-9T:.Z+-]{16,})"

TOKEN_PATTERNS: Tuple[Tuple[TokenKind, re.Pattern[str]], ...] = (
    (TokenKind.IATA_CODE, re.compile(r"(\*?)#([A-Z]{3})")),
    (TokenKind.ICAO_CODE, re.compile(r"(\*?)##([A-Z]{4})")),
    (TokenKind.DATE, re.compile(r"D\(" + _TIMESTAMP + r"\)")),
    (TokenKind.TIME_12H, re.compile(r"T12\(" + _TIMESTAMP + r"\)")),
    (TokenKind.TIME_24H, re.compile(r"T24\(" + _TIMESTAMP + r"\)")),
)


def token_from_match(kind: TokenKind, match: re.Match) -> Token:
    """Turn a regex match of the given kind into a Token."""
    if kind.is_airport:
        return Token(
            kind=kind,
            literal=match.group(0),
            code=match.group(2),
            city_flag=match.group(1) == "*",
        )
    return Token(kind=kind, literal=match.group(0), raw_timestamp=match.group(1))


@dataclass
class TokenRewriter:
    """Replace placeholder tokens using a directory and a span renderer.

    The rewriter keeps no state between calls, so one instance can be
    shared freely as long as the directory is not mutated.

    Attributes:
        directory: Resolves airport codes
        renderer: Decides how resolved values are written out
    """

    directory: AirportLookupPort
    renderer: SpanRendererPort
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def rewrite(self, text: str) -> str:
        """Apply every token pass to text, in grammar order."""
        for kind, pattern in TOKEN_PATTERNS:
            text = pattern.sub(self._replacer(kind), text)
        return text

    def render(self, token: Token) -> str:
        """Render a single token, falling back to its literal text."""
        if token.kind.is_airport:
            rendered = self._render_airport(token)
        else:
            rendered = self._render_timestamp(token)

        if rendered is None:
            self._logger.debug(
                "Token left unresolved",
                extra={"token_kind": token.kind.name, "literal": token.literal},
            )
            return token.literal
        return rendered

    def _replacer(self, kind: TokenKind) -> Callable[[re.Match], str]:
        def replace(match: re.Match) -> str:
            return self.render(token_from_match(kind, match))

        return replace

    def _render_airport(self, token: Token) -> Optional[str]:
        record = self.directory.lookup(token.code or "")
        if record is None:
            return None
        if token.city_flag and record.has_municipality:
            return self.renderer.city(record.municipality)
        return self.renderer.airport(record.name)

    def _render_timestamp(self, token: Token) -> Optional[str]:
        moment = timestamps.parse_timestamp(token.raw_timestamp or "")
        if moment is None:
            return None

        if token.kind is TokenKind.DATE:
            return self.renderer.date(timestamps.format_date(moment))

        if token.kind is TokenKind.TIME_12H:
            clock = timestamps.format_time_12h(moment)
        else:
            clock = timestamps.format_time_24h(moment)
        offset = timestamps.format_offset(moment)
        return f"{self.renderer.time(clock)} {self.renderer.offset(offset)}"
