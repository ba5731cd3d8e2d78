"""
Extended Euclidean Algorithm

Finds gcd(a, b) together with Bézout coefficients x, y such that
a*x + b*y = gcd(a, b), for positive int64 operands.

Invalid input (a < 1 or b < 1) is not an exception. ``extended_gcd``
returns the sentinel (0, 0, 0); ``solve_bezout`` returns an
InvalidEuclidInput value instead, so callers can branch on the type.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from .int64 import c_div, c_mod, to_int64


class EuclidResult(NamedTuple):
    """gcd with Bézout coefficients: a*x + b*y == gcd."""
    gcd: int
    x: int
    y: int

    @property
    def is_invalid(self) -> bool:
        """True for the (0, 0, 0) sentinel."""
        return self == INVALID_RESULT


INVALID_RESULT = EuclidResult(0, 0, 0)


@dataclass(frozen=True)
class InvalidEuclidInput:
    """Operands rejected by the extended Euclidean algorithm."""
    a: int
    b: int
    reason: str = "operands must be >= 1"


def solve_bezout(a: int, b: int) -> Union[EuclidResult, InvalidEuclidInput]:
    """
    Extended Euclidean Algorithm with an explicit invalid-input variant.

    Works on two state triples (u1, u2, u3) and (v1, v2, v3) where
    u1 = a*u2 + b*u3 and v1 = a*v2 + b*v3 hold throughout. The larger
    operand goes first; swapping whole triples keeps the coefficients
    attached to the caller's a and b.

    Args:
        a: First operand (>= 1)
        b: Second operand (>= 1)

    Returns:
        EuclidResult (gcd, x, y) with a*x + b*y == gcd, or
        InvalidEuclidInput if a < 1 or b < 1
    """
    if a < 1 or b < 1:
        return InvalidEuclidInput(a, b)

    u1, u2, u3 = a, 1, 0
    v1, v2, v3 = b, 0, 1
    if a < b:
        u1, v1 = v1, u1
        u2, v2 = v2, u2
        u3, v3 = v3, u3

    while v1 != 0:
        q = c_div(u1, v1)

        t1 = c_mod(u1, v1)
        t2 = to_int64(u2 - to_int64(q * v2))
        t3 = to_int64(u3 - to_int64(q * v3))

        u1, u2, u3 = v1, v2, v3
        v1, v2, v3 = t1, t2, t3

    return EuclidResult(u1, u2, u3)


def extended_gcd(a: int, b: int) -> EuclidResult:
    """
    Extended Euclidean Algorithm.

    Example:
        >>> extended_gcd(10, 35)
        EuclidResult(gcd=5, x=-3, y=1)
        >>> extended_gcd(0, 7)
        EuclidResult(gcd=0, x=0, y=0)

    Returns:
        (gcd, x, y) with a*x + b*y == gcd, or (0, 0, 0) if a < 1 or b < 1
    """
    result = solve_bezout(a, b)
    if isinstance(result, InvalidEuclidInput):
        return INVALID_RESULT
    return result


def mod_inverse(a: int, m: int) -> Optional[int]:
    """
    Modular multiplicative inverse via the extended Euclidean algorithm.

    Finds x such that (a * x) mod m = 1

    Returns:
        The inverse in [0, m), or None if it doesn't exist
        (gcd(a, m) != 1) or an operand is < 1
    """
    result = solve_bezout(a, m)
    if isinstance(result, InvalidEuclidInput) or result.gcd != 1:
        return None
    return result.x % m
