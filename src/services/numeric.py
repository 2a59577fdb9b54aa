"""
Numeric Engine - Pure arithmetic helpers behind the /bfhl operations.

Everything here is deterministic and side-effect free. GCD and LCM
follow the raw Euclidean formulas without sign correction, so negative
operands may produce negative results, and an all-zero LCM fold raises
ZeroDivisionError instead of returning a chosen value.
"""
from functools import reduce
from math import isqrt
from typing import List, Sequence

from src.core.exceptions import EmptyOperandError


def fibonacci_series(n: int) -> List[int]:
    """
    Return the first n Fibonacci numbers, starting 0, 1, 1, 2, ...

    n <= 0 gives an empty list.
    """
    series = [0, 1]
    for i in range(2, n):
        series.append(series[i - 1] + series[i - 2])
    return series[:max(n, 0)]


def is_prime(value: int) -> bool:
    """Trial division up to the integer square root."""
    if value < 2:
        return False
    for i in range(2, isqrt(value) + 1):
        if value % i == 0:
            return False
    return True


def filter_primes(values: Sequence[int]) -> List[int]:
    """Keep the primes, preserving input order."""
    return [v for v in values if is_prime(v)]


def _remainder(a: int, b: int) -> int:
    # Truncated remainder: the result takes the sign of the dividend.
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Euclidean algorithm; gcd(a, 0) == a."""
    while b:
        a, b = b, _remainder(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Pairwise a * b / gcd(a, b)."""
    return a * b // gcd(a, b)


def _require_operands(values: Sequence[int]) -> None:
    if len(values) == 0:
        raise EmptyOperandError()


def compute_lcm(values: Sequence[int]) -> int:
    """
    Least common multiple of a non-empty sequence.

    Folds lcm() left to right with no seed.

    Raises:
        EmptyOperandError: If values is empty
    """
    _require_operands(values)
    return reduce(lcm, values)


def compute_hcf(values: Sequence[int]) -> int:
    """
    Highest common factor of a non-empty sequence.

    Raises:
        EmptyOperandError: If values is empty
    """
    _require_operands(values)
    return reduce(gcd, values)
