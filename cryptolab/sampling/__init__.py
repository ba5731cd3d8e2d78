# Sampling Module
"""
Randomized drivers for the arithmetic core:
- Probable prime generation
- Uniform and prime operand pairs for the extended Euclidean algorithm
"""

from .pairs import (
    PairWithResult,
    SamplingExhaustedError,
    generate_prime,
    extended_gcd_with_uniform_random_pair,
    extended_gcd_with_prime_pair,
)

__all__ = [
    'PairWithResult',
    'SamplingExhaustedError',
    'generate_prime',
    'extended_gcd_with_uniform_random_pair',
    'extended_gcd_with_prime_pair',
]
