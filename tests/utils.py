"""Test helpers shared across modules."""

from typing import Iterable, List


class ScriptedSource:
    """Random source that replays fixed values and records each request."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self.requests: List[tuple] = []

    @property
    def consumed(self) -> int:
        return len(self.requests)

    def next_in_range(self, lo: int, hi: int) -> int:
        value = self._values[len(self.requests)]
        self.requests.append((lo, hi))
        assert lo <= value <= hi, f"scripted value {value} outside [{lo}, {hi}]"
        return value


def is_prime_reference(n: int) -> bool:
    """Trial division, for checking generated primes."""
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True
