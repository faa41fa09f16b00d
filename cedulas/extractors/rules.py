"""Ordered pattern-precedence chains.

Each field extractor is an ordered tuple of rules; the first rule whose
pattern matches and whose candidate passes validation wins. A rule looks at
the first regex match only: when that candidate is rejected the chain moves
on to the next rule instead of scanning further matches.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from cedulas.logging.logger import Log

T = TypeVar("T")


def _accept(_value: object) -> bool:
    return True


@dataclass(frozen=True)
class PatternRule(Generic[T]):
    """One tier of a precedence chain: (pattern, transform, validator)."""

    name: str
    pattern: re.Pattern[str]
    transform: Callable[[re.Match[str]], T | None]
    validator: Callable[[T], bool] = _accept
    window: int | None = None

    def apply(self, text: str) -> T | None:
        haystack = text if self.window is None else text[: self.window]
        match = self.pattern.search(haystack)
        if match is None:
            return None
        candidate = self.transform(match)
        if candidate is None or not self.validator(candidate):
            Log.debug(f"Rule '{self.name}' matched but the candidate was rejected")
            return None
        return candidate


def first_match(rules: Iterable[PatternRule[T]], text: str) -> T | None:
    """Evaluate rules in order and return the first accepted candidate."""
    for rule in rules:
        candidate = rule.apply(text)
        if candidate is not None:
            Log.debug(f"Rule '{rule.name}' produced a match")
            return candidate
    return None
