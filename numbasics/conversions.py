"""Number-base conversions and character helpers."""

from __future__ import annotations

from collections.abc import Iterator


def _digits(n: int, base: int) -> Iterator[int]:
    """Yield the digits of ``n`` in ``base``, last to first, carrying the sign of ``n``."""
    while n != 0:
        q = abs(n) // base
        if n < 0:
            q = -q
        yield n - q * base
        n = q


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary number and return its value."""
    return sum(digit * 2**i for i, digit in enumerate(_digits(n, 10)))


def decimal_to_octal(n: int) -> int:
    """Return an integer whose decimal digits spell ``n`` in octal."""
    return sum(digit * 10**i for i, digit in enumerate(_digits(n, 8)))


def _require_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def ascii_value(c: str) -> int:
    """Character code of a single character."""
    _require_char(c)
    return ord(c)


def is_alphabet(c: str) -> bool:
    """True if ``c`` is an ASCII letter."""
    _require_char(c)
    return "a" <= c <= "z" or "A" <= c <= "Z"


def alphabet_letters() -> str:
    """The upper-case letters from A to Z."""
    return "".join(chr(code) for code in range(ord("A"), ord("Z") + 1))


def reverse_sentence(text: str) -> str:
    """Reverse the characters of ``text`` up to its first newline."""
    return text.split("\n", 1)[0][::-1]