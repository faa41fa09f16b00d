import re

from cedulas.extractors.rules import PatternRule, first_match
from cedulas.normalization import collapse_whitespace, normalize_text

_NUMERO = r"\bN°\s*\d+"

_TRAMITA_RE = re.compile(
    r"que\s+tramita\s+ante\s+(?:el\s+)?(Juzgado[^,]*?" + _NUMERO + ")",
    re.IGNORECASE,
)
_TRIBUNAL_RE = re.compile(r"TRIBUNAL\s+(.+?)(?:\s*-\s*|\s+Sito\s+en\s+)", re.IGNORECASE)
_JUZGADO_NACIONAL_RE = re.compile(r"(Juzgado\s+Nacional[^.]*?" + _NUMERO + ")", re.IGNORECASE)

_UP_TO_NUMERO_RE = re.compile(r"^(.*?" + _NUMERO + ")", re.IGNORECASE)
_HAS_NUMERO_RE = re.compile(_NUMERO, re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",\s*$")

_MIN_LENGTH = 10
_MAX_LENGTH = 200


def _truncate_after_numero(value: str) -> str:
    match = _UP_TO_NUMERO_RE.match(value)
    return match.group(1).strip() if match else value


def _court_with_numero(match: re.Match[str]) -> str | None:
    value = _truncate_after_numero(match.group(1).strip())
    value = collapse_whitespace(_TRAILING_COMMA_RE.sub("", value))
    return value.upper() or None


def _tribunal(match: re.Match[str]) -> str | None:
    value = _truncate_after_numero(match.group(1).strip())
    return value.upper() or None


def _is_numbered_court(value: str) -> bool:
    return bool(_HAS_NUMERO_RE.search(value)) and _MIN_LENGTH < len(value) < _MAX_LENGTH


def _is_short(value: str) -> bool:
    return len(value) < _MAX_LENGTH


_RULES: tuple[PatternRule[str], ...] = (
    PatternRule("que_tramita_ante", _TRAMITA_RE, _court_with_numero, _is_numbered_court),
    PatternRule("tribunal", _TRIBUNAL_RE, _tribunal, _is_short),
    PatternRule("juzgado_nacional", _JUZGADO_NACIONAL_RE, _court_with_numero, _is_numbered_court),
)


def extract_juzgado(text: str) -> str | None:
    """Court name and number, upper-cased."""
    return first_match(_RULES, normalize_text(text))
