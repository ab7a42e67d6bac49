"""Whitespace normalization applied after token substitution.

Annotated text carries SGR style markers next to substituted values.
The vertical pass steps over those markers, so plain and annotated text
collapse the same way once the markers are stripped.
"""

from __future__ import annotations

import re

# Blanks inside a line. The ASCII separators \x1c-\x1f are ordinary
# characters here even though str.isspace() accepts them.
_BLANK = r"[^\S\n\x1c-\x1f]"
_STYLE_MARKER = r"\x1b\[[0-9;]*m"

_BLANK_RUN = re.compile(_BLANK + "+")
_MARKER = re.compile(_STYLE_MARKER)
# Literal backslash escapes as typed in the text, e.g. "\r" as two characters.
_ESCAPED_BREAK = re.compile(
    rf"((?:{_BLANK}|{_STYLE_MARKER})*)\\[rvf]((?:{_BLANK}|{_STYLE_MARKER})*)"
)
_CONTROL_BREAKS = re.compile(r"[\r\v\f]+")
_BLANK_LINE_RUN = re.compile(rf"\n(?:{_STYLE_MARKER})*\n(?:(?:{_STYLE_MARKER})*\n)+")


def _markers(text: str) -> str:
    return "".join(_MARKER.findall(text))


def collapse_horizontal(text: str) -> str:
    """Collapse runs of whitespace inside each line to a single space.

    Leading and trailing whitespace on each line is dropped. Lines are
    split on '\\n' only, so CR/VT/FF inside a line count as blanks.
    """
    return "\n".join(_BLANK_RUN.sub(" ", line).strip(" ") for line in text.split("\n"))


def collapse_vertical(text: str) -> str:
    """Turn stray breaks into newlines and keep at most one blank line."""
    text = _ESCAPED_BREAK.sub(
        lambda m: _markers(m.group(1)) + "\n" + _markers(m.group(2)), text
    )
    text = _CONTROL_BREAKS.sub("\n", text)
    return _BLANK_LINE_RUN.sub(lambda m: _markers(m.group(0)) + "\n\n", text)


def normalize_whitespace(text: str) -> str:
    return collapse_vertical(collapse_horizontal(text))
