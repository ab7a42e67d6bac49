"""Styled span renderer for terminal display.

Each category of resolved value is wrapped in the ANSI sequences of a
rich Style. Every span is closed with a reset, so a style never leaks
into the text that follows it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.errors import StyleSyntaxError
from rich.style import Style

from ...config import RenderingConfig, get_config
from ...domain.errors import ConfigurationError


def _parse_style(setting_name: str, definition: str) -> Style:
    try:
        style = Style.parse(definition)
    except StyleSyntaxError as e:
        raise ConfigurationError(
            f"Invalid style for {setting_name}: {definition!r}",
            setting_name=setting_name,
            expected_type="rich style definition",
            cause=e,
        )
    # Hyperlinks render as OSC 8 sequences ending in ESC + backslash,
    # which the whitespace pass would read as a literal escape.
    if style.link:
        raise ConfigurationError(
            f"Links are not supported in {setting_name}: {definition!r}",
            setting_name=setting_name,
            expected_type="rich style definition without link",
        )
    return style


def _wrap(style: Style, text: str) -> str:
    # Edge whitespace stays outside the markers so whitespace collapsing
    # treats both renderings identically.
    core = text.strip()
    if not core:
        return text
    start = text.index(core)
    return text[:start] + style.render(core) + text[start + len(core):]


@dataclass
class StyledSpanRenderer:
    """Renderer for annotated terminal output.

    Attributes:
        config: Style definitions for each value category
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _styles: dict = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._styles = {
            name: _parse_style(name, getattr(self.config, name))
            for name in (
                "airport_style",
                "city_style",
                "date_style",
                "time_style",
                "offset_style",
            )
        }
        self._logger.debug(
            "Styles loaded",
            extra={"styles": {k: str(v) for k, v in self._styles.items()}},
        )

    def airport(self, text: str) -> str:
        return _wrap(self._styles["airport_style"], text)

    def city(self, text: str) -> str:
        return _wrap(self._styles["city_style"], text)

    def date(self, text: str) -> str:
        return _wrap(self._styles["date_style"], text)

    def time(self, text: str) -> str:
        return _wrap(self._styles["time_style"], text)

    def offset(self, text: str) -> str:
        return _wrap(self._styles["offset_style"], text)
