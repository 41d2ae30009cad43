"""Small dense matrices as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(m: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(m)
    cols = len(m[0]) if rows else 0
    if any(len(row) != cols for row in m):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError(f"matrix shapes differ: {_shape(a)} and {_shape(b)}")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def transpose(m: Sequence[Sequence[int]]) -> Matrix:
    """Swap the rows and columns of a rectangular matrix."""
    _shape(m)
    return [list(column) for column in zip(*m)]


def format_matrix(m: Sequence[Sequence[int]], separator: str = "  ") -> str:
    """Render each element followed by ``separator``, one row per line."""
    return "".join("".join(f"{v}{separator}" for v in row) + "\n" for row in m)