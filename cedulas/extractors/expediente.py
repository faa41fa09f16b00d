import re

from cedulas.extractors.models import ExpedienteRef
from cedulas.extractors.rules import PatternRule, first_match
from cedulas.normalization import normalize_text

MIN_YEAR = 1900
MAX_YEAR = 2100

_BARE_WINDOW = 500


def _to_ref(match: re.Match[str]) -> ExpedienteRef:
    return ExpedienteRef(numero=match.group(1).strip(), anio=int(match.group(2)))


def _valid_year(ref: ExpedienteRef) -> bool:
    return MIN_YEAR <= ref.anio <= MAX_YEAR


_RULES: tuple[PatternRule[ExpedienteRef], ...] = (
    PatternRule(
        "expte_numero",
        re.compile(r"(?:Expte\s*N°|expten[°º])\s+(\d+)/(\d{4})", re.IGNORECASE),
        _to_ref,
        _valid_year,
    ),
    PatternRule(
        "keyword",
        re.compile(
            r"(?:expediente|expte|expten[°º]|exp\.?)\s*(?:n°|n\.?|°)?\s*(\d+)/(\d{4})",
            re.IGNORECASE,
        ),
        _to_ref,
        _valid_year,
    ),
    PatternRule(
        "bare_numero_anio",
        re.compile(r"\b(\d{4,6})/(\d{4})\b"),
        _to_ref,
        _valid_year,
        window=_BARE_WINDOW,
    ),
)


def extract_expediente(text: str) -> ExpedienteRef | None:
    """Docket number and year; the bare `nnnn/yyyy` tier only looks at the head."""
    return first_match(_RULES, normalize_text(text))
