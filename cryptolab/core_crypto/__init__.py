# Core Cryptography Module
"""
Number-theory primitives over the signed 64-bit integer domain:
- Modular exponentiation (square-and-multiply)
- Fermat primality test
- Extended Euclidean algorithm and modular inverse
- Baby-step giant-step discrete logarithm
- Injectable random source
"""

from .int64 import INT64_MIN, INT64_MAX, to_int64, c_div, c_mod
from .modexp import mod_exp
from .primality import FermatWitness, fermat_witness, is_probably_prime
from .euclid import (
    EuclidResult,
    InvalidEuclidInput,
    INVALID_RESULT,
    extended_gcd,
    solve_bezout,
    mod_inverse,
)
from .discrete_log import baby_step_giant_step
from .random_source import (
    RandomSource,
    SeededRandomSource,
    default_random_source,
    set_seed,
)

__all__ = [
    # Int64
    'INT64_MIN',
    'INT64_MAX',
    'to_int64',
    'c_div',
    'c_mod',
    # Modular exponentiation
    'mod_exp',
    # Primality
    'FermatWitness',
    'fermat_witness',
    'is_probably_prime',
    # Euclid
    'EuclidResult',
    'InvalidEuclidInput',
    'INVALID_RESULT',
    'extended_gcd',
    'solve_bezout',
    'mod_inverse',
    # Discrete log
    'baby_step_giant_step',
    # Randomness
    'RandomSource',
    'SeededRandomSource',
    'default_random_source',
    'set_seed',
]
