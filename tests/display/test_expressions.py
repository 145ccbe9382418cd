"""Tests for gen_term, gen_expr and gen_eq."""

import pytest

from dq.display.expressions import gen_eq, gen_expr, gen_term
from dq.display.radicals import gen_frac


class TestGenTerm:
    """Test gen_term()."""

    def test_positive_with_plus(self):
        assert gen_term(3, "x") == "+3x"

    def test_positive_without_plus(self):
        assert gen_term(3, "x", include_plus=False) == "3x"

    def test_negative(self):
        """Test negative terms always carry '-'."""
        assert gen_term(-3, "x") == "-3x"
        assert gen_term(-3, "x", include_plus=False) == "-3x"

    def test_unit_coefficient_dropped(self):
        assert gen_term(1, "x") == "+x"
        assert gen_term(-1, "y") == "-y"

    def test_keep_1(self):
        assert gen_term(1, "x", keep_1=True) == "+1x"
        assert gen_term(-1, "", keep_1=True) == "-1"

    def test_zero(self):
        assert gen_term(0, "x") == "+0"
        assert gen_term(0, "x", include_plus=False) == "0"

    def test_string_coefficient_verbatim(self):
        """Test preformatted coefficients are embedded without sign handling."""
        assert gen_term("1 / 2", "x") == "1 / 2x"
        assert gen_term("(2/3)", "y", include_plus=False) == "(2/3)y"

    def test_float_coefficients(self):
        assert gen_term(2.5, "t") == "+2.5t"
        assert gen_term(-2.0, "t") == "-2t"
        assert gen_term(1.0, "t") == "+t"


class TestGenExpr:
    """Test gen_expr()."""

    def test_skips_zero_and_suppresses_leading_plus(self):
        assert gen_expr({"x": 2, "": 0, "y": -1}) == "2x-y"

    def test_quadratic(self):
        assert gen_expr({"x^2": 1, "x": -3, "": 2}) == "x^2-3x+2"

    def test_constant_keeps_1(self):
        """Test an empty label keeps a coefficient of 1."""
        assert gen_expr({"x": 2, "": 1}) == "2x+1"
        assert gen_expr({"": -1}) == "-1"

    def test_first_term_negative(self):
        assert gen_expr({"x": -1, "y": 4}) == "-x+4y"

    def test_leading_zero_skipped(self):
        """Test the '+' is suppressed on the first term actually printed."""
        assert gen_expr({"x": 0, "y": 5}) == "5y"

    def test_all_zero(self):
        assert gen_expr({"x": 0, "y": 0.0}) == "0"

    def test_empty(self):
        assert gen_expr({}) == "0"

    def test_string_coefficient_never_skipped(self):
        assert gen_expr({"x": "0", "y": 0}) == "0x"

    def test_fraction_coefficient(self):
        """Test gen_frac output can be used as a coefficient."""
        assert gen_expr({"x": gen_frac(1, 2, include_plus=True), "": 3}) == "+ 1 / 2x+3"

    def test_pairs(self):
        """Test a list of (label, coefficient) pairs."""
        assert gen_expr([("x", 4), ("x", -1)]) == "4x-x"

    def test_order_preserved(self):
        assert gen_expr({"": 5, "x": 1}) == "5+x"


class TestGenEq:
    """Test gen_eq()."""

    def test_simple_equation(self):
        assert gen_eq({"x": 2, "": -3}, {"": 7}) == "2x-3 = 7"

    def test_custom_operator(self):
        assert gen_eq({"x": 1}, {"": 4}, operator="<=") == "x <= 4"

    def test_backticks(self):
        assert gen_eq({"y": 1}, {"x": 3}, backticks=True) == "`y = 3x`"

    def test_configured_delimiter(self, settings_factory):
        settings_factory(MATH_DELIMITER="$")
        assert gen_eq({"y": 1}, {"x": 3}, backticks=True) == "$y = 3x$"

    def test_zero_side(self):
        assert gen_eq({"x": 1, "": -1}, {}) == "x-1 = 0"

    @pytest.mark.parametrize(
        "lhs, rhs",
        [
            ({"x": 2, "": -3}, {"": 7}),
            ({"y": 1}, {"x": -2, "": 1}),
            ({"x^2": 1, "x": 0, "": -4}, {"": 0}),
        ],
    )
    def test_formatted_sides_reformat_unchanged(self, lhs, rhs):
        """Test each formatted side, fed back as a preformatted constant, prints the same."""
        left, right = gen_expr(lhs), gen_expr(rhs)
        assert gen_expr({"": left}) == left
        assert gen_expr({"": right}) == right
        assert gen_eq({"": left}, {"": right}) == gen_eq(lhs, rhs)

    @pytest.mark.parametrize(
        "raw, reduced",
        [
            ({"x^2": 1, "x": 0, "": -4}, {"x^2": 1, "": -4}),
            ({"x": 0, "y": 5, "": 0}, {"y": 5}),
            ({"": 0, "x": -1, "y": 2.0}, {"x": -1, "y": 2}),
        ],
    )
    def test_reduced_map_formats_the_same(self, raw, reduced):
        """Test dropping zero terms from a map does not change its text."""
        assert gen_expr(reduced) == gen_expr(raw)
        assert gen_eq(reduced, {"": 0}) == gen_eq(raw, {})
