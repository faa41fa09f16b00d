"""Deterministic text normalization applied before every field extractor."""

import re

_QUOTE_VARIANTS = str.maketrans(
    {
        "\u201c": '"',
        "\u201d": '"',
        "\u201e": '"',
        "\u201f": '"',
    }
)

_NEWLINES_RE = re.compile(r"\n+")
_WHITESPACE_RE = re.compile(r"\s+")


def canonicalize_quotes(text: str) -> str:
    """Map the curly double-quote variants U+201C..U+201F to `"`."""
    return text.translate(_QUOTE_VARIANTS)


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_text(raw: str) -> str:
    """Normalize extracted text for pattern matching.

    Steps, in order: NBSP to space, drop carriage returns, newline runs to a
    single space, whitespace runs to a single space, trim, canonical quotes.
    The result is a fixed point: ``normalize_text(normalize_text(x)) ==
    normalize_text(x)``.
    """
    if not raw:
        return ""
    text = raw.replace("\u00a0", " ").replace("\r", "")
    text = _NEWLINES_RE.sub(" ", text)
    text = collapse_whitespace(text)
    return canonicalize_quotes(text)


def normalize_for_type_detection(raw: str) -> str:
    return normalize_text(raw).upper()
