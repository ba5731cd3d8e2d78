"""
Fixed-width signed 64-bit integer helpers.

The number-theory primitives in this package operate on the int64 domain:
products that leave the range wrap around (two's complement), and division
truncates toward zero. Python ints are unbounded and floor-divide, so the
helpers below restore machine-integer behaviour where it matters.
"""

INT64_BITS = 64
INT64_MIN = -(1 << (INT64_BITS - 1))
INT64_MAX = (1 << (INT64_BITS - 1)) - 1

_MASK = (1 << INT64_BITS) - 1


def to_int64(n: int) -> int:
    """
    Wrap an arbitrary integer into the signed 64-bit range.

    Example:
        >>> to_int64(2 ** 63)
        -9223372036854775808
        >>> to_int64(-1)
        -1
    """
    n &= _MASK
    if n > INT64_MAX:
        n -= 1 << INT64_BITS
    return n


def c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return to_int64(q)


def c_mod(a: int, b: int) -> int:
    """Remainder of truncating division; the result has the sign of ``a``."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r
