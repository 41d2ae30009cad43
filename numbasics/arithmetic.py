"""Basic arithmetic: a four-function calculator, signs, quadratics and tables."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass

_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
}


def _divide(first: float, second: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    if second != 0:
        return first / second
    if first == 0 or math.isnan(first):
        return math.nan
    return math.copysign(math.inf, first) * math.copysign(1.0, second)


def calculate(op: str, first: float, second: float) -> float:
    """Apply one of ``+ - * /`` to two operands."""
    if op == "/":
        return _divide(first, second)
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError("Error! operator is not correct") from None
    return operation(first, second)


def sign_description(num: float) -> str:
    """Describe whether ``num`` is positive, negative or zero."""
    if num == 0.0:
        return "You entered 0."
    if num < 0.0:
        return "You entered a negative number."
    return "You entered a positive number."


@dataclass(frozen=True)
class QuadraticRoots:
    """The two roots of a quadratic and the discriminant that classifies them."""

    root1: complex
    root2: complex
    discriminant: float

    @property
    def are_real(self) -> bool:
        return self.discriminant >= 0

    @property
    def are_equal(self) -> bool:
        return self.discriminant == 0

    def __str__(self) -> str:
        if self.discriminant > 0:
            return f"root1 = {self.root1.real:.2f} and root2 = {self.root2.real:.2f}"
        if self.discriminant == 0:
            return f"root1 = root2 = {self.root1.real:.2f};"
        real, imag = self.root1.real, self.root1.imag
        return f"root1 = {real:.2f}+{imag:.2f}i and root2 = {real:.2f}-{imag:.2f}i"


def quadratic_roots(a: float, b: float, c: float) -> QuadraticRoots:
    """Roots of ``a*x**2 + b*x + c = 0``; ``a`` must be non-zero."""
    if a == 0:
        raise ValueError("coefficient a must be non-zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return QuadraticRoots(
            complex((-b + root) / (2 * a)), complex((-b - root) / (2 * a)), discriminant
        )
    if discriminant == 0:
        root = complex(-b / (2 * a))
        return QuadraticRoots(root, root, discriminant)
    real = -b / (2 * a)
    imag = math.sqrt(-discriminant) / (2 * a)
    return QuadraticRoots(complex(real, imag), complex(real, -imag), discriminant)


def multiplication_table(n: int) -> list[str]:
    """Lines ``n * i = n*i`` for ``i`` from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]


def swap(first: float, second: float) -> tuple[float, float]:
    """Return the two values in exchanged order."""
    return second, first


__all__ = [
    "QuadraticRoots",
    "calculate",
    "cmath",
    "multiplication_table",
    "quadratic_roots",
    "sign_description",
    "swap",
]