"""Text processing for itinerary placeholders.

This subpackage holds the token grammar and rewriter, the timestamp
codec used by date/time tokens, and the whitespace normalizer that runs
after substitution.
"""

from .scanner import TOKEN_PATTERNS, TokenRewriter
from .whitespace import normalize_whitespace

__all__ = ["TOKEN_PATTERNS", "TokenRewriter", "normalize_whitespace"]
