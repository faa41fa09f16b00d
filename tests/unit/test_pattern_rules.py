import re

from cedulas.extractors.rules import PatternRule, first_match


def _digits(match: re.Match[str]) -> int:
    return int(match.group(1))


class TestPatternRule:
    def test_returns_transformed_candidate(self) -> None:
        rule = PatternRule("n", re.compile(r"n=(\d+)"), _digits)
        assert rule.apply("a n=42 b") == 42

    def test_no_match(self) -> None:
        rule = PatternRule("n", re.compile(r"n=(\d+)"), _digits)
        assert rule.apply("nothing") is None

    def test_rejected_candidate(self) -> None:
        rule = PatternRule("n", re.compile(r"n=(\d+)"), _digits, lambda v: v > 100)
        assert rule.apply("n=42") is None

    def test_only_first_match_is_considered(self) -> None:
        rule = PatternRule("n", re.compile(r"n=(\d+)"), _digits, lambda v: v > 100)
        assert rule.apply("n=42 n=500") is None

    def test_window_limits_search(self) -> None:
        rule = PatternRule("n", re.compile(r"n=(\d+)"), _digits, window=5)
        assert rule.apply("xxxxxn=1") is None
        assert rule.apply("n=1xxxxx") == 1


class TestFirstMatch:
    def test_first_accepted_rule_wins(self) -> None:
        rules = [
            PatternRule("a", re.compile(r"a=(\d+)"), _digits),
            PatternRule("b", re.compile(r"b=(\d+)"), _digits),
        ]
        assert first_match(rules, "b=2 a=1") == 1

    def test_continues_after_rejection(self) -> None:
        rules = [
            PatternRule("a", re.compile(r"a=(\d+)"), _digits, lambda v: v > 10),
            PatternRule("b", re.compile(r"b=(\d+)"), _digits),
        ]
        assert first_match(rules, "a=1 b=2") == 2

    def test_none_when_nothing_matches(self) -> None:
        assert first_match([PatternRule("a", re.compile("a"), lambda m: m.group(0))], "") is None
