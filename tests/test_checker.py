"""Tests for the z3-backed parenthesis balance check."""

from __future__ import annotations

import pytest

from sexpcalc.constraints import check_delimiter_balance, find_unmatched, require_balanced
from sexpcalc.errors import SexpSyntaxError


class TestFindUnmatched:
    def test_balanced(self) -> None:
        assert find_unmatched("(+ 1 (* 2 3))") is None

    def test_no_parens(self) -> None:
        assert find_unmatched("42") is None

    def test_unclosed_reports_outermost_open(self) -> None:
        assert find_unmatched("(+ 1 (* 2 3)") == 0

    def test_stray_close(self) -> None:
        assert find_unmatched("(+ 1))") == 5

    def test_close_before_open(self) -> None:
        assert find_unmatched(")(") == 0


class TestBalance:
    def test_balanced_is_sat(self) -> None:
        assert check_delimiter_balance("(+ 1 2 (* 3 4))")

    def test_unbalanced(self) -> None:
        assert not check_delimiter_balance("(+ 1 2")

    def test_wrong_order(self) -> None:
        assert not check_delimiter_balance(")(")

    def test_require_balanced_passes(self) -> None:
        require_balanced("()")

    def test_require_balanced_raises(self) -> None:
        with pytest.raises(SexpSyntaxError, match="unmatched parenthesis: position 7") as exc:
            require_balanced("(+ 1 2)) ")
        assert exc.value.position == 7
