"""Tests for expression nodes and their textual rendering."""

from __future__ import annotations

import math

import pytest

from sexpcalc.errors import EvalError
from sexpcalc.parser import parse
from sexpcalc.runtime import VOID
from sexpcalc.syntax.ast import ListExpr, Number, Symbol, show_expr


class TestRendering:
    def test_integer_valued_number(self) -> None:
        assert show_expr(Number(3.0)) == "3.000000"

    def test_fractional_number_is_distinct(self) -> None:
        assert show_expr(Number(3.5)) == "3.500000"
        assert show_expr(Number(3.5)) != show_expr(Number(3.0))

    def test_negative_number(self) -> None:
        assert show_expr(Number(-2.0)) == "-2.000000"

    def test_non_finite_numbers(self) -> None:
        assert show_expr(Number(math.inf)) == "inf"
        assert show_expr(Number(-math.inf)) == "-inf"
        assert show_expr(Number(math.nan)) == "nan"

    def test_symbol(self) -> None:
        assert show_expr(Symbol("+")) == "+"

    def test_empty_list(self) -> None:
        assert show_expr(ListExpr(())) == "()"

    def test_nested_list(self) -> None:
        tree = ListExpr((Symbol("+"), Number(1.0), ListExpr((Symbol("*"), Number(2.0)))))
        assert show_expr(tree) == "(+ 1.000000 (* 2.000000))"

    def test_void_cannot_be_rendered(self) -> None:
        with pytest.raises(EvalError, match="void value"):
            show_expr(VOID)


class TestStructure:
    def test_nodes_compare_structurally(self) -> None:
        assert ListExpr((Symbol("a"), Number(1.0))) == ListExpr((Symbol("a"), Number(1.0)))
        assert Number(1.0) != Symbol("1")

    def test_nodes_are_immutable(self) -> None:
        num = Number(1.0)
        with pytest.raises(AttributeError):
            num.value = 2.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "tree",
        [
            Number(42.0),
            Number(-0.5),
            Symbol("foo-bar"),
            ListExpr(()),
            ListExpr((Symbol("+"), Number(1.0), ListExpr((Symbol("-"), Number(-3.25))))),
            ListExpr((ListExpr(()), ListExpr((Symbol("x"),)))),
        ],
    )
    def test_render_parse_round_trip(self, tree) -> None:
        assert parse(show_expr(tree)) == tree
