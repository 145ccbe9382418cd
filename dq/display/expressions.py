"""
Formatting of terms, expressions and equations as AsciiMath text.

A term map is an ordered mapping of variable label -> coefficient, e.g.
``{"x^2": 1, "x": -3, "": 2}`` for x^2-3x+2. A coefficient may be a number,
or a preformatted string (such as a fraction from gen_frac) which is
embedded verbatim. A list of (label, coefficient) pairs works as well.
"""

from collections.abc import Mapping
from typing import Iterable, Tuple, Union

from ..core.config import get_settings
from ..math.arithmetic import plain_number

Coefficient = Union[int, float, str]
TermMap = Union[Mapping, Iterable[Tuple[str, Coefficient]]]


def gen_term(coef: Coefficient, var: str, include_plus: bool = True, keep_1: bool = False) -> str:
    """
    Format a single term from a coefficient and a variable.

    Args:
        coef: Number, or a preformatted string coefficient (returned as coef + var)
        var: How the variable of the term is written
        include_plus: Prefix "+" when the coefficient is positive
        keep_1: Keep a coefficient of 1 or -1 in the output

    Example:
        gen_term(3, "x") → "+3x"
        gen_term(-1, "y") → "-y"
        gen_term(1, "", keep_1=True) → "+1"
        gen_term("1 / 2", "x") → "1 / 2x"
    """
    if isinstance(coef, str):
        return coef + var

    if coef == 0:
        return "+0" if include_plus else "0"

    term = var
    if keep_1 or abs(coef) != 1:
        term = plain_number(abs(coef)) + term

    if coef >= 0:
        if include_plus:
            term = "+" + term
    else:
        term = "-" + term

    return term


def _items(term_map: TermMap):
    if isinstance(term_map, Mapping):
        return term_map.items()
    return term_map


def gen_expr(term_map: TermMap) -> str:
    """
    Format an expression from a term map, in the order given.

    Numeric zero coefficients are skipped and the first printed term has no
    leading "+". An empty label is a constant, so its 1 is kept.
    Returns "0" when nothing is printed.

    Example:
        gen_expr({"x": 2, "": 0, "y": -1}) → "2x-y"
    """
    expr = ""
    first = True
    for var, coef in _items(term_map):
        if not isinstance(coef, str) and coef == 0:
            continue

        expr += gen_term(coef, var, include_plus=not first, keep_1=(var == ""))
        first = False

    return expr or "0"


def gen_eq(lhs: TermMap, rhs: TermMap, operator: str = "=", backticks: bool = False) -> str:
    """
    Format an equation (or inequality) from two term maps.

    Args:
        lhs: Term map left of the operator
        rhs: Term map right of the operator
        operator: Placed between the sides, "=" by default
        backticks: Wrap the result in the math delimiter (DQ_MATH_DELIMITER,
            a backtick unless configured)

    Example:
        gen_eq({"x": 2, "": -3}, {"": 7}) → "2x-3 = 7"
        gen_eq({"y": 1}, {"x": 3}, backticks=True) → "`y = 3x`"
    """
    eq = f"{gen_expr(lhs)} {operator} {gen_expr(rhs)}"
    if backticks:
        delimiter = get_settings().MATH_DELIMITER
        eq = f"{delimiter}{eq}{delimiter}"
    return eq
