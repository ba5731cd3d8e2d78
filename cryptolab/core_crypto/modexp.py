"""
Modular Exponentiation

Right-to-left binary exponentiation (square-and-multiply) over the signed
64-bit integer domain.

Note: the default algorithm multiplies the accumulator by each reduced base
WITHOUT reducing the product modulo the modulus; only the final result is
reduced. The product wraps around at 64 bits, so for large moduli or
exponents with many set bits the result is wrong. This is kept for
bit-exact compatibility with existing outputs. Pass ``strict=True`` to get
the textbook result (reduction after every multiplication, exact products).
"""

from .int64 import INT64_BITS, c_mod, to_int64


def mod_exp(base: int, exponent: int, modulus: int, strict: bool = False) -> int:
    """
    Compute (base^exponent) mod modulus by square-and-multiply.

    Algorithm (right-to-left binary method):
    1. Start with y = 1
    2. While exponent != 0:
       - m = base mod modulus
       - If the low bit of exponent is 1, y = y * m
       - base = m * m
       - Shift exponent right by one bit
    3. Return y mod modulus

    Inputs are not validated: ``exponent`` must be non-negative and
    ``modulus`` positive, otherwise the result is meaningless (a zero
    modulus raises ZeroDivisionError as the remainder does).

    Args:
        base: The base number
        exponent: The exponent (should be non-negative)
        modulus: The modulus (should be positive)
        strict: Reduce after every multiplication and use exact products

    Returns:
        (base^exponent) mod modulus; possibly garbage on int64 overflow
        when ``strict`` is False
    """
    if strict:
        return _mod_exp_strict(base, exponent, modulus)

    y = 1
    # A negative exponent never shifts down to zero; stop after the
    # width of the domain.
    for _ in range(INT64_BITS if exponent < 0 else exponent.bit_length()):
        mod_base = c_mod(base, modulus)
        if exponent & 1:
            y = to_int64(y * mod_base)
        base = to_int64(mod_base * mod_base)
        exponent >>= 1

    return c_mod(y, modulus)


def _mod_exp_strict(base: int, exponent: int, modulus: int) -> int:
    result = 1 % modulus
    base %= modulus

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1

    return result
