"""Integer utilities: divisors, primes, digits and simple sequences."""

from __future__ import annotations

import math
from collections.abc import Iterator


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of ``a``."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of ``n`` last to first, each carrying the sign of ``n``."""
    while n != 0:
        n, digit = _truncated_divmod(n, 10)
        yield digit


def _require_positive(a: int, b: int) -> None:
    if a < 1 or b < 1:
        raise ValueError(f"both numbers must be positive integers, got {a} and {b}")


def hcf(a: int, b: int) -> int:
    """Highest common factor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_divmod(a, b)[1]
    return a


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    _require_positive(a, b)
    return hcf(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    _require_positive(a, b)
    return a * b // hcf(a, b)


def factorial(n: int) -> int:
    """Return ``n!``; negative numbers have no factorial."""
    if n < 0:
        raise ValueError("Factorial of a negative number doesn't exist.")
    return math.prod(range(1, n + 1))


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number; 0, 1 and negatives are not."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def primes_between(low: int, high: int) -> list[int]:
    """Primes ``p`` with ``low <= p < high``."""
    return [n for n in range(low, high) if is_prime(n)]


def primes_strictly_between(low: int, high: int) -> list[int]:
    """Primes ``p`` with ``low < p < high``."""
    return primes_between(low + 1, high)


def prime_sum_pairs(n: int) -> list[tuple[int, int]]:
    """All ways of writing ``n`` as ``p + q`` with primes ``p <= q``."""
    return [(p, n - p) for p in range(2, n // 2 + 1) if is_prime(p) and is_prime(n - p)]


def factors(n: int) -> list[int]:
    """Positive divisors of ``n`` in increasing order."""
    return [d for d in range(1, n + 1) if n % d == 0]


def is_armstrong(n: int) -> bool:
    """True if the sum of the cubes of the digits of ``n`` equals ``n``."""
    return sum(d**3 for d in _digits(n)) == n


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome(n: int) -> bool:
    """True if ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def count_digits(n: int) -> int:
    """Number of decimal digits in ``n``; zero has one digit."""
    return max(1, sum(1 for _ in _digits(n)))


def is_even(n: int) -> bool:
    """True if ``n`` is divisible by two."""
    return n % 2 == 0


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def sum_natural(n: int) -> int:
    """Sum of the natural numbers ``1..n``; zero when ``n < 1``."""
    return sum(range(1, n + 1))


def fibonacci(n: int) -> list[int]:
    """The first ``n`` Fibonacci terms; the first two terms are always included."""
    terms = [0, 1]
    while len(terms) < n:
        terms.append(terms[-1] + terms[-2])
    return terms


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return base**exponent


def quotient_remainder(dividend: int, divisor: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder with the dividend's sign."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    return _truncated_divmod(dividend, divisor)