"""Carátula (case caption) extraction.

Two rule sets coexist. ``extract_caratula`` keeps the caption as written and
is what the DOCX upload form uses. ``extract_caratula_strict`` is used by the
PDF extractor service: it upper-cases, drops parenthesized remarks and, for
oficios, falls back to any quoted ``X C/ Y`` caption.
"""

import re

from cedulas.extractors.models import DocumentType
from cedulas.extractors.rules import PatternRule, first_match
from cedulas.normalization import canonicalize_quotes, collapse_whitespace, normalize_text

_QUOTES = "\"\u201c\u201d\u201e\u201f"
_TRIGGER = r"Expediente\s+caratulado\s*:\s*"

_QUOTED_RE = re.compile(_TRIGGER + f"[{_QUOTES}]" + r"([\s\S]*?)" + f"[{_QUOTES}]", re.IGNORECASE)
_UNQUOTED_RE = re.compile(_TRIGGER + r"([^.\n]+?)(?:\.|\n|\s{2,}|$)", re.IGNORECASE)
_EDGE_QUOTE_RE = re.compile(f"^[{_QUOTES}]+|[{_QUOTES}]+$")

_STRICT_QUOTED_RE = re.compile(_TRIGGER + r'"([^"]+)"', re.IGNORECASE)
_STRICT_UNQUOTED_RE = re.compile(_TRIGGER + r"([^.\n]+?)(?:\.|$|\n)", re.IGNORECASE)
_EXPTE_CAPTION_RE = re.compile(
    r"(?:expten[°º]|Expte\s+N°)\s+\d+/\d+\s*"
    r'(?:"([^"]+?)"|([A-ZÁÉÍÓÚÑ][^(]+?)(?:\(|\s+que\s+tramita|\.\s*$))',
    re.IGNORECASE,
)
_ANY_QUOTED_RE = re.compile(r'"([^"]+?)"')
_LITIGANT_SEPARATOR_RE = re.compile(r"[cs]\s*/\s+", re.IGNORECASE)
_PARENTHESIZED_RE = re.compile(r"\([^)]*\)")
_OUTER_STRAIGHT_QUOTES_RE = re.compile(r'^"+|"+$')

_MIN_OFICIO_CAPTION = 15
_MIN_EXPTE_CAPTION = 10
_MAX_CAPTION = 500


def _quoted_span(match: re.Match[str]) -> str | None:
    return collapse_whitespace(match.group(1)) or None


def _unquoted_span(match: re.Match[str]) -> str | None:
    value = _EDGE_QUOTE_RE.sub("", match.group(1).strip())
    return value.strip() or None


_INLINE_RULES: tuple[PatternRule[str], ...] = (
    PatternRule("caratulado_quoted", _QUOTED_RE, _quoted_span),
    PatternRule("caratulado_unquoted", _UNQUOTED_RE, _unquoted_span),
)


def extract_caratula(text: str) -> str | None:
    """Caption after ``Expediente caratulado:``, quoted span first."""
    return first_match(_INLINE_RULES, normalize_text(text))


def clean_strict_caption(value: str) -> str:
    value = _OUTER_STRAIGHT_QUOTES_RE.sub("", canonicalize_quotes(value)).strip()
    value = _PARENTHESIZED_RE.sub("", value).strip()
    return collapse_whitespace(value)


def _has_litigant_separator(value: str) -> bool:
    return bool(_LITIGANT_SEPARATOR_RE.search(value))


def _strict_span(match: re.Match[str]) -> str | None:
    return clean_strict_caption(match.group(1)) or None


def _expte_caption(match: re.Match[str]) -> str | None:
    return clean_strict_caption(match.group(1) or match.group(2) or "") or None


def _is_expte_caption(value: str) -> bool:
    return _has_litigant_separator(value) and _MIN_EXPTE_CAPTION < len(value) < _MAX_CAPTION


_STRICT_RULES: tuple[PatternRule[str], ...] = (
    PatternRule("caratulado_quoted", _STRICT_QUOTED_RE, _strict_span),
    PatternRule("caratulado_unquoted", _STRICT_UNQUOTED_RE, _strict_span),
    PatternRule("expte_caption", _EXPTE_CAPTION_RE, _expte_caption, _is_expte_caption),
)


def _scan_quoted_captions(text: str) -> str | None:
    for match in _ANY_QUOTED_RE.finditer(text):
        if len(match.group(1).strip()) <= _MIN_OFICIO_CAPTION:
            continue
        value = clean_strict_caption(match.group(1))
        if _has_litigant_separator(value) and _MIN_OFICIO_CAPTION < len(value) < _MAX_CAPTION:
            return value
    return None


def extract_caratula_strict(
    text: str,
    document_type: DocumentType | None = None,
) -> str | None:
    """Upper-cased caption; oficios may fall back to any quoted ``C/``/``S/`` span."""
    normalized = normalize_text(text)
    value = first_match(_STRICT_RULES, normalized)
    if value is None and document_type is DocumentType.OFICIO:
        value = _scan_quoted_captions(normalized)
    return value.upper() if value else None
