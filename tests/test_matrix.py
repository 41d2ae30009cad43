import pytest

from numbasics.matrix import add_matrices, format_matrix, transpose

A = [[1, 2, 3], [4, 5, 6]]
B = [[10, 20, 30], [40, 50, 60]]


def test_add_matrices_elementwise():
    result = add_matrices(A, B)
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            assert value == A[i][j] + B[i][j]


def test_add_matrices_keeps_shape():
    result = add_matrices(A, B)
    assert (len(result), len(result[0])) == (len(A), len(A[0]))


def test_add_matrices_is_commutative():
    assert add_matrices(A, B) == add_matrices(B, A)


def test_add_zero_matrix_is_identity():
    zeros = [[0] * 3 for _ in range(2)]
    assert add_matrices(A, zeros) == A


def test_add_matrices_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices(A, [[1, 2], [3, 4]])


def test_add_matrices_ragged_rows():
    with pytest.raises(ValueError):
        add_matrices([[1, 2], [3]], [[1, 2], [3, 4]])


def test_transpose_swaps_indices():
    t = transpose(A)
    assert len(t) == len(A[0])
    assert len(t[0]) == len(A)
    for i, row in enumerate(A):
        for j, value in enumerate(row):
            assert t[j][i] == value


def test_transpose_twice_is_identity():
    assert transpose(transpose(A)) == A


def test_transpose_ragged_raises():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]], "  ") == "1  2  \n3  4  \n"


def test_format_matrix_one_line_per_row():
    text = format_matrix(A, "   ")
    lines = text.splitlines()
    assert len(lines) == len(A)
    assert [[int(v) for v in line.split()] for line in lines] == A