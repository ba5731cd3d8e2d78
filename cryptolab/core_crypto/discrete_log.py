"""
Baby-step giant-step discrete logarithm.

Solves a^x ≡ y (mod p) for x using O(sqrt(p)) modular exponentiations
and a lookup table.
"""

from math import isqrt
from typing import Dict, List

from .int64 import c_mod, to_int64
from .modexp import mod_exp


def baby_step_giant_step(a: int, y: int, p: int, strict: bool = False) -> List[int]:
    """
    Find exponents x with a^x ≡ y (mod p).

    With m = ceil(sqrt(p)), baby steps store (a^j * y) mod p -> j for
    j in [0, m); giant steps compute a^(i*m) mod p for i in [1, m] and
    report i*m - j on every table hit. Later j overwrite earlier ones.

    Args:
        a: Base
        y: Target value
        p: Modulus (values below 2 give no solutions)
        strict: Forwarded to mod_exp

    Returns:
        Exponents found, in giant-step order (possibly empty)
    """
    if p < 2:
        return []

    m = isqrt(p)
    if m * m < p:
        m += 1

    y = c_mod(y, p)
    baby_steps: Dict[int, int] = {}
    for j in range(m):
        value = c_mod(to_int64(mod_exp(a, j, p, strict=strict) * y), p)
        baby_steps[value] = j

    solutions = []
    for i in range(1, m + 1):
        giant = mod_exp(a, i * m, p, strict=strict)
        if giant in baby_steps:
            solutions.append(i * m - baby_steps[giant])

    return solutions
