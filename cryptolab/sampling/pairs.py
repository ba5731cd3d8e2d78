"""
Random operand pairs for the extended Euclidean algorithm.

Both generators are rejection-sampling loops: draw b, then redraw a until
a >= b, and return the pair with its extended gcd. The prime variant
draws every operand as a fresh probable prime.

Loops are unbounded unless SamplingConfig.max_attempts is set, in which
case SamplingExhaustedError is raised once a loop has used up its draws.
"""

import logging
from typing import Callable, NamedTuple, Optional

from ..config import DEFAULT_CONFIG, SamplingConfig
from ..core_crypto.euclid import EuclidResult, extended_gcd
from ..core_crypto.primality import is_probably_prime
from ..core_crypto.random_source import RandomSource, resolve

logger = logging.getLogger(__name__)


class SamplingExhaustedError(RuntimeError):
    """A rejection-sampling loop hit its attempt cap. Safe to retry."""


class PairWithResult(NamedTuple):
    """Two operands and their extended gcd."""
    a: int
    b: int
    result: EuclidResult


def _sample_until(
    draw: Callable[[], int],
    accept: Callable[[int], bool],
    max_attempts: Optional[int],
    label: str
) -> int:
    attempts = 0
    while True:
        value = draw()
        attempts += 1
        if accept(value):
            logger.debug("%s: accepted %d after %d draw(s)", label, value, attempts)
            return value
        if max_attempts is not None and attempts >= max_attempts:
            logger.warning("%s: no acceptable value in %d draws", label, attempts)
            raise SamplingExhaustedError(
                f"{label}: no acceptable value after {attempts} attempts"
            )


def generate_prime(
    low: int,
    high: int,
    rng: Optional[RandomSource] = None,
    config: Optional[SamplingConfig] = None
) -> int:
    """
    Draw uniform candidates in [low, high] until one is probably prime.

    Args:
        low: Lower bound of candidates
        high: Upper bound of candidates
        rng: Random source (process default if None)
        config: Fermat rounds, mod_exp mode and attempt cap

    Returns:
        A probable prime, or 0 if low < 2 or high < 3

    Raises:
        SamplingExhaustedError: If config.max_attempts is set and exceeded
    """
    if low < 2 or high < 3:
        return 0

    config = config or DEFAULT_CONFIG
    source = resolve(rng)

    return _sample_until(
        lambda: source.next_in_range(low, high),
        lambda x: is_probably_prime(
            x, source, rounds=config.fermat_rounds, strict=config.strict_mod_exp
        ),
        config.max_attempts,
        "generate_prime",
    )


def extended_gcd_with_uniform_random_pair(
    rng: Optional[RandomSource] = None,
    config: Optional[SamplingConfig] = None
) -> PairWithResult:
    """
    Extended gcd of a uniform random pair with a >= b.

    b is drawn once from [uniform_low, uniform_high]; a is redrawn from
    the same range until a >= b.
    """
    config = config or DEFAULT_CONFIG
    source = resolve(rng)
    low, high = config.uniform_low, config.uniform_high

    b = source.next_in_range(low, high)
    a = _sample_until(
        lambda: source.next_in_range(low, high),
        lambda candidate: candidate >= b,
        config.max_attempts,
        "uniform pair",
    )

    logger.debug("uniform pair a=%d b=%d", a, b)
    return PairWithResult(a, b, extended_gcd(a, b))


def extended_gcd_with_prime_pair(
    rng: Optional[RandomSource] = None,
    config: Optional[SamplingConfig] = None
) -> PairWithResult:
    """
    Extended gcd of two probable primes with a >= b.

    b is a probable prime from [prime_low, prime_high]; a is redrawn as a
    fresh probable prime until a >= b.
    """
    config = config or DEFAULT_CONFIG
    source = resolve(rng)

    def draw_prime() -> int:
        return generate_prime(config.prime_low, config.prime_high, source, config)

    b = draw_prime()
    a = _sample_until(
        draw_prime,
        lambda candidate: candidate >= b,
        config.max_attempts,
        "prime pair",
    )

    logger.debug("prime pair a=%d b=%d", a, b)
    return PairWithResult(a, b, extended_gcd(a, b))
