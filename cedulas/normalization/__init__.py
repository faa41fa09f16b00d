from cedulas.normalization.normalizer import (
    canonicalize_quotes,
    collapse_whitespace,
    normalize_for_type_detection,
    normalize_text,
)

__all__ = [
    "canonicalize_quotes",
    "collapse_whitespace",
    "normalize_for_type_detection",
    "normalize_text",
]
