"""
cryptolab - number-theory building blocks for public-key cryptography.

Modular exponentiation, Fermat primality testing and the extended
Euclidean algorithm on 64-bit integers, plus random operand generators.
"""

from .core_crypto import (
    EuclidResult,
    FermatWitness,
    SeededRandomSource,
    extended_gcd,
    fermat_witness,
    is_probably_prime,
    mod_exp,
    set_seed,
)
from .sampling import (
    PairWithResult,
    SamplingExhaustedError,
    extended_gcd_with_prime_pair,
    extended_gcd_with_uniform_random_pair,
)
from .config import SamplingConfig, load_config

__version__ = "1.0.0"

__all__ = [
    'EuclidResult',
    'FermatWitness',
    'PairWithResult',
    'SamplingConfig',
    'SamplingExhaustedError',
    'SeededRandomSource',
    'extended_gcd',
    'extended_gcd_with_prime_pair',
    'extended_gcd_with_uniform_random_pair',
    'fermat_witness',
    'is_probably_prime',
    'load_config',
    'mod_exp',
    'set_seed',
]
