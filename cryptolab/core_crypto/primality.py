"""
Fermat Primality Test

Probabilistic primality testing based on Fermat's little theorem:
if p is prime and gcd(a, p) = 1, then a^(p-1) ≡ 1 (mod p).

Security Note:
    Carmichael numbers (561, 1105, ...) satisfy the congruence for every
    coprime witness, so false positives are possible. Even numbers are
    rejected up front, which also rejects 2.
"""

from enum import Enum
from typing import Optional

from ..config import FERMAT_ROUNDS
from .modexp import mod_exp
from .random_source import RandomSource, resolve


class FermatWitness(Enum):
    """Outcome of a single Fermat check."""

    COMPOSITE_WITNESS = "composite"
    PROBABLE_PRIME_WITNESS = "probable_prime"
    INVALID = "invalid"


def fermat_witness(a: int, p: int, strict: bool = False) -> FermatWitness:
    """
    Run one Fermat check of ``p`` with witness ``a``.

    Args:
        a: Witness, must be smaller than p
        p: Number under test
        strict: Forwarded to mod_exp

    Returns:
        INVALID if a >= p, PROBABLE_PRIME_WITNESS if a^(p-1) mod p == 1,
        COMPOSITE_WITNESS otherwise
    """
    if a >= p:
        return FermatWitness.INVALID

    if mod_exp(a, p - 1, p, strict=strict) == 1:
        return FermatWitness.PROBABLE_PRIME_WITNESS
    return FermatWitness.COMPOSITE_WITNESS


def is_probably_prime(
    x: int,
    rng: Optional[RandomSource] = None,
    rounds: int = FERMAT_ROUNDS,
    strict: bool = False
) -> bool:
    """
    Fermat primality test.

    Draws up to ``rounds`` random witnesses in [2, x-1] (never more than
    x of them) and stops at the first composite witness.

    Args:
        x: Number to test
        rng: Random source for witnesses (process default if None)
        rounds: Maximum number of witnesses
        strict: Forwarded to mod_exp

    Returns:
        False if x <= 1, x is even, or a composite witness was found;
        True otherwise
    """
    if x <= 1 or x % 2 == 0:
        return False

    source = resolve(rng)
    for _ in range(min(rounds, x)):
        a = source.next_in_range(2, x - 1)
        if a % x == 0:
            continue
        if fermat_witness(a, x, strict=strict) is FermatWitness.COMPOSITE_WITNESS:
            return False

    return True
