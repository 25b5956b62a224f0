"""Tests for the oklch() token scanner."""

import inspect

import pytest

from oklch_names.codec.scanner import scan, token_at, tokens_in_range
from oklch_names.core.span import Span


class TestScan:
    """Grammar and parsing rules."""

    def test_simple_token(self) -> None:
        tokens = list(scan("color: oklch(0.985 0 0);"))
        assert len(tokens) == 1
        token = tokens[0]
        assert (token.l, token.c, token.h) == (0.985, 0.0, 0.0)
        assert token.span == Span(7, 23)
        assert token.alpha is None
        assert token.alpha_raw is None

    def test_percent_alpha(self) -> None:
        text = "oklch(0.554 0.046 257.417 / 15%)"
        token = next(scan(text))
        assert token.alpha == pytest.approx(0.15)
        assert token.alpha_raw == " / 15%"
        assert token.span == Span(0, len(text))

    def test_decimal_alpha_without_spaces(self) -> None:
        token = next(scan("oklch(0.5 0.1 120/0.8)"))
        assert token.alpha == pytest.approx(0.8)
        assert token.alpha_raw == "/0.8"

    def test_flexible_whitespace(self) -> None:
        text = "oklch(  0.5\t0.1   120  /  50%  )"
        token = next(scan(text))
        assert (token.l, token.c, token.h) == (0.5, 0.1, 120.0)
        assert token.alpha == pytest.approx(0.5)
        assert token.alpha_raw == "  /  50%"
        assert token.span == Span(0, len(text))

    def test_base_offset_rebases_spans(self) -> None:
        token = next(scan("a: oklch(1 0 0);", base_offset=100))
        assert token.span == Span(103, 115)

    def test_multiple_tokens_in_order(self) -> None:
        text = "border: oklch(1 0 0) oklch(0 0 0) oklch(0.5 0.1 120 / 0.5);"
        tokens = list(scan(text))
        assert [t.l for t in tokens] == [1.0, 0.0, 0.5]
        starts = [t.start for t in tokens]
        assert starts == sorted(starts)
        for prev, cur in zip(tokens, tokens[1:]):
            assert prev.end <= cur.start

    def test_is_lazy_and_restartable(self) -> None:
        text = "oklch(1 0 0) oklch(0 0 0)"
        assert inspect.isgenerator(scan(text))
        assert list(scan(text)) == list(scan(text))

    def test_requires_space_between_components(self) -> None:
        assert list(scan("oklch(0.5,0.1,120)")) == []
        assert list(scan("oklch(0.5 0.1)")) == []

    def test_does_not_cross_lines(self) -> None:
        assert list(scan("oklch(0.5\n0.1 120)")) == []

    def test_other_functions_ignored(self) -> None:
        assert list(scan("color: rgb(1 2 3); background: oklab(0.5 0.1 0.1);")) == []


class TestRejection:
    """Malformed tokens are dropped whole and never stop the scan."""

    @pytest.mark.parametrize("text", [
        "oklch(1.2.3 0 0)",
        "oklch(0.5 . 120)",
        "oklch(0.5 0.1 120 / %)",
        "oklch(0.5 0.1 120 / 1.2.3%)",
        "oklch(0.5 0.1 120 / 5%%)",
        "oklch(0.5 0.1 120 / ..)",
    ])
    def test_rejected(self, text: str) -> None:
        assert list(scan(text)) == []

    def test_scan_continues_after_rejection(self) -> None:
        tokens = list(scan("oklch(0.5 0.1 120 / %) oklch(1 0 0)"))
        assert len(tokens) == 1
        assert tokens[0].l == 1.0
        assert tokens[0].start == 23


class TestLookupHelpers:
    """token_at and tokens_in_range."""

    def test_token_at_is_end_inclusive(self) -> None:
        tokens = list(scan("x oklch(1 0 0) y"))
        assert token_at(tokens, 2) is tokens[0]
        assert token_at(tokens, 14) is tokens[0]
        assert token_at(tokens, 15) is None
        assert token_at(tokens, 1) is None

    def test_tokens_in_range(self) -> None:
        tokens = list(scan("oklch(1 0 0) oklch(0 0 0)"))
        assert tokens_in_range(tokens, Span(10, 15)) == tokens
        assert tokens_in_range(tokens, Span(13, 14)) == [tokens[1]]
        assert tokens_in_range(tokens, Span(12, 13)) == []
