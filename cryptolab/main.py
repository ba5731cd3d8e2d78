"""
cryptolab - Main Entry Point

Demonstrates modular exponentiation, the Fermat primality test and the
extended Euclidean algorithm on fixed and random inputs, then asks for
two numbers of your own.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import DEFAULT_CONFIG, SamplingConfig, load_config
from .core_crypto.euclid import EuclidResult, extended_gcd
from .core_crypto.modexp import mod_exp
from .core_crypto.primality import is_probably_prime
from .core_crypto.random_source import SeededRandomSource
from .sampling.pairs import (
    PairWithResult,
    extended_gcd_with_prime_pair,
    extended_gcd_with_uniform_random_pair,
)

logger = logging.getLogger(__name__)

MOD_EXP_EXAMPLES = [(5, 12, 7), (3, 21, 11), (7, 31, 17)]
PRIMALITY_EXAMPLES = [3, 2377, 10, 11]


def print_header(title: str, out: TextIO) -> None:
    """Print a formatted section header"""
    print("\n" + "=" * 50, file=out)
    print(f"  {title}", file=out)
    print("=" * 50, file=out)


def format_result(result: EuclidResult) -> str:
    if result.is_invalid:
        return "invalid input (both numbers must be >= 1)"
    return f"gcd(a, b) = {result.gcd}, x = {result.x}, y = {result.y}"


def print_pair(title: str, pair: PairWithResult, out: TextIO) -> None:
    print(f"\n  {title}:", file=out)
    print(f"  a = {pair.a}, b = {pair.b}:", file=out)
    print(f"  {format_result(pair.result)}", file=out)


def read_pair(inp: TextIO, out: TextIO) -> Optional[List[int]]:
    """
    Prompt until two integers are entered.

    Returns:
        [a, b], or None on end of input
    """
    while True:
        print("\n  Enter a, b: ", end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            return None
        try:
            numbers = [int(token) for token in line.replace(",", " ").split()]
        except ValueError:
            numbers = []
        if len(numbers) == 2:
            return numbers
        print("  Error: enter two integers", file=out)


def run_demo(
    config: SamplingConfig = DEFAULT_CONFIG,
    inp: Optional[TextIO] = None,
    out: Optional[TextIO] = None
) -> None:
    """Run the demonstration with the given settings (stdin/stdout by default)."""
    inp = inp or sys.stdin
    out = out or sys.stdout
    rng = SeededRandomSource(config.seed)
    logger.info("random source seed: %d", rng.seed)
    strict = config.strict_mod_exp

    print_header("1. Fast modular exponentiation", out)
    for base, exponent, modulus in MOD_EXP_EXAMPLES:
        value = mod_exp(base, exponent, modulus, strict=strict)
        print(f"  {base}^{exponent} mod {modulus:2d} = {value}", file=out)

    print_header("2. Fermat primality test", out)
    for x in PRIMALITY_EXAMPLES:
        verdict = is_probably_prime(x, rng, rounds=config.fermat_rounds, strict=strict)
        print(f"  {x:4d} is probably prime: {str(verdict).lower()}", file=out)

    print_header("3. Extended Euclidean algorithm", out)
    print("  a = 10, b = 35:", file=out)
    print(f"  {format_result(extended_gcd(10, 35))}", file=out)

    print_pair("Random numbers", extended_gcd_with_uniform_random_pair(rng, config), out)
    print_pair("Probably prime numbers", extended_gcd_with_prime_pair(rng, config), out)

    print("\n  Your numbers:", file=out)
    numbers = read_pair(inp, out)
    if numbers is None:
        print("", file=out)
        return
    a, b = numbers
    print(f"  {format_result(extended_gcd(a, b))}", file=out)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cryptolab",
        description="Modular exponentiation, Fermat test and extended Euclid demo",
    )
    parser.add_argument("--config", help="JSON file with sampling settings")
    parser.add_argument("--seed", type=int, help="Seed for reproducible random draws")
    parser.add_argument("--strict", action="store_true",
                        help="Reduce every product in mod_exp (no int64 overflow)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for cryptolab."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.strict:
        overrides["strict_mod_exp"] = True
    if overrides:
        config = config.model_copy(update=overrides)

    run_demo(config)


if __name__ == "__main__":
    main()
