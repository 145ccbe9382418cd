"""
Fractions and square roots for display through AsciiMath.
"""

import math
from typing import Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.logging import get_logger
from ..math.arithmetic import is_integer
from ..math.types import ReducedFraction

logger = get_logger(__name__)


def gen_frac(numer: int, denom: int, include_plus: bool = False) -> Union[int, str]:
    """
    Format numer/denom as a reduced fraction, or as an integer when whole.

    A zero numerator or denominator gives 0.

    Example:
        gen_frac(8, 4) → 2
        gen_frac(4, 8) → "1 / 2"
        gen_frac(-3, 9) → "- 1 / 3"
        gen_frac(2, 6, include_plus=True) → "+ 1 / 3"

    Raises:
        InvalidArgumentError: numer or denom is not an integer
    """
    for name, part in (("numer", numer), ("denom", denom)):
        if not is_integer(part):
            raise InvalidArgumentError(
                f"gen_frac expects integers, got {name}={part!r}", argument=name, value=part
            )

    if numer == 0 or denom == 0:
        return 0

    return ReducedFraction.reduce(numer, denom).to_display(include_plus)


def simplify_sqrt(sqrt_value: int) -> Optional[Union[int, str]]:
    """
    Simplified square root of an integer, e.g. sqrt(50) → "5 sqrt(2)".

    Negative values are written with "i". Perfect squares of non-negative
    values come back as int; everything else as a string. A non-integer
    argument gives None.

    Example:
        simplify_sqrt(9) → 3
        simplify_sqrt(12) → "2 sqrt(3)"
        simplify_sqrt(7) → "sqrt(7)"
        simplify_sqrt(-1) → "i"
        simplify_sqrt(-4) → "2 i"
        simplify_sqrt(-18) → "3 i sqrt(2)"
    """
    if not is_integer(sqrt_value):
        logger.debug("simplify_sqrt given a non-integer", extra_data={"sqrt_value": repr(sqrt_value)})
        return None

    positive = sqrt_value >= 0
    sqrt_value = abs(sqrt_value)

    root = math.isqrt(sqrt_value)
    if root * root == sqrt_value:
        if positive:
            return root
        return "i" if root == 1 else f"{root} i"

    divisor = 2
    inside_root = sqrt_value
    outside_root = 1

    while divisor * divisor <= inside_root:
        if inside_root % (divisor * divisor) == 0:
            inside_root //= divisor * divisor
            outside_root *= divisor
        else:
            divisor += 1

    if outside_root == 1:
        return f"sqrt({inside_root})" if positive else f"i sqrt({inside_root})"
    return f"{outside_root} sqrt({inside_root})" if positive else f"{outside_root} i sqrt({inside_root})"
