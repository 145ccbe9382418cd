"""
Arithmetic helpers for dynamic questions.

- factors:        divisors of an integer (unsorted)
- pythag_triplet: random Pythagorean triple below a bound
- sigfig:         rounding to significant figures
"""

import math
import random as _random
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Integral
from typing import List, Optional, Tuple, Union

from ..core.config import get_settings
from ..core.errors import DegenerateRangeError, InvalidArgumentError, UndefinedResultError
from ..core.logging import get_logger
from .types import Triple

logger = get_logger(__name__)


def is_integer(value) -> bool:
    """
    True for integers of any Integral type, excluding bool.

    Example:
        is_integer(4) → True
        is_integer(4.0) → False
        is_integer(True) → False
    """
    return isinstance(value, Integral) and not isinstance(value, bool)


def plain_number(value: Union[int, float]) -> str:
    """
    Shortest textual form of a number, printing integral floats without ``.0``.

    Example:
        plain_number(2.0) → "2"
        plain_number(0.25) → "0.25"
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def factors(n: int) -> List[int]:
    """
    Factors of n, found by trial division up to sqrt(|n|).

    For every divisor x both x and n // x are added, so the list is unsorted
    and a perfect square contributes its root twice.

    Example:
        factors(12) → [1, 12, 2, 6, 3, 4]
        factors(9) → [1, 9, 3, 3]

    Raises:
        InvalidArgumentError: n is not an integer
        UndefinedResultError: n is zero
    """
    if not is_integer(n):
        raise InvalidArgumentError(f"factors expects an integer, got {n!r}", argument="n", value=n)
    if n == 0:
        logger.debug("factors(0) requested", extra_data={"n": n})
        raise UndefinedResultError("0 has no finite set of factors", details={"n": n})

    factors_list = []
    for x in range(1, math.isqrt(abs(n)) + 1):
        if n % x == 0:
            factors_list.extend((x, n // x))

    return factors_list


# (seed, generator) built from DQ_RANDOM_SEED; rebuilt when the seed changes
_seeded_rng: Optional[Tuple[int, _random.Random]] = None


def _default_rng():
    global _seeded_rng
    seed = get_settings().RANDOM_SEED
    if seed is None:
        return _random
    if _seeded_rng is None or _seeded_rng[0] != seed:
        _seeded_rng = (seed, _random.Random(seed))
    return _seeded_rng[1]


def pythag_triplet(max: Union[int, float], rng=None) -> Tuple[int, int, int]:
    """
    Generate a Pythagorean triple (base, height, hypotenuse) with hypotenuse <= max.

    Uses base = m^2 - n^2, height = 2mn, hypotenuse = m^2 + n^2 with
    2 <= m <= m_max and 1 <= n < m, where m_max is the largest m with
    m^2 + (m - 1)^2 <= max.

    Args:
        max: Upper bound for the hypotenuse, at least 5
        rng: Object providing ``randint``; defaults to the ``random`` module,
            or a shared generator seeded with ``DQ_RANDOM_SEED`` when that is set,
            so successive calls vary and the sequence replays for the same seed

    Raises:
        DegenerateRangeError: max is below 5, leaving no valid (m, n)
    """
    if max < 1:
        raise DegenerateRangeError(f"pythag_triplet needs max >= 5, got {max}", max=max)

    # from the quadratic m^2 + (m-1)^2 <= max
    max_m = math.floor((1 + math.sqrt(2 * max - 1)) / 2)
    if max_m < 2:
        logger.debug("Empty parameter range for pythag_triplet", extra_data={"max": max, "max_m": max_m})
        raise DegenerateRangeError(f"pythag_triplet needs max >= 5, got {max}", max=max, max_m=max_m)

    rng = rng or _default_rng()
    m = rng.randint(2, max_m)
    n = rng.randint(1, m - 1)

    triple = Triple.from_parameters(m, n)
    logger.debug("Generated triple", extra_data={"m": m, "n": n, "triple": triple.as_tuple()})
    return triple.as_tuple()


def _round_half_up(value: Union[int, float], places: int) -> Decimal:
    text = plain_number(value)
    with localcontext() as ctx:
        # room for every digit of the input plus any padding zeros
        ctx.prec = len(text) + abs(places) + 1
        return Decimal(text).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def sigfig(value: Union[int, float], digits: int) -> Union[str, int]:
    """
    Round value to the given number of significant figures.

    The decimal-place count d = digits - floor(log10|value|) - 1 picks the
    result form:
        d > 0   fixed-point string, trailing zeros kept
        d == 0  integer part with a trailing "." (marks the units digit as significant)
        d < 0   int rounded to the tens/hundreds/... place

    Values whose plain text is already no longer than ``digits`` characters
    are returned unchanged as text.

    Example:
        sigfig(123.456, 4) → "123.5"
        sigfig(0.0, 3) → "0.00"
        sigfig(1534.2, 4) → "1534."
        sigfig(1530, 2) → 1500

    Raises:
        InvalidArgumentError: digits is not a positive integer
    """
    if not is_integer(digits) or digits < 1:
        raise InvalidArgumentError(
            f"digits must be a positive integer, got {digits!r}", argument="digits", value=digits
        )

    if value == 0:
        decimal_places = digits - 1
    else:
        if len(plain_number(abs(value))) <= digits:
            return plain_number(value)
        decimal_places = digits - math.floor(math.log10(abs(value))) - 1

    rounded = _round_half_up(value, decimal_places)
    if decimal_places > 0:
        return f"{rounded:f}"
    elif decimal_places == 0:
        return f"{int(rounded)}."
    else:
        return int(rounded)
