"""Operations on matrices held as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "main_diagonal",
    "secondary_diagonal",
    "transpose",
    "is_symmetric",
    "multiply",
    "find",
    "sum_elements",
    "subtract_elements",
    "add",
    "subtract",
]

Matrix = Sequence[Sequence[Any]]


def main_diagonal(matrix: Matrix) -> list[Any]:
    """Return the elements from the top-left to the bottom-right corner."""
    return [row[i] for i, row in enumerate(matrix)]


def secondary_diagonal(matrix: Matrix) -> list[Any]:
    """Return the elements from the top-right to the bottom-left corner."""
    size = len(matrix)
    return [row[size - i - 1] for i, row in enumerate(matrix)]


def transpose(matrix: Matrix) -> list[list[Any]]:
    """Return a new matrix whose rows are the columns of ``matrix``."""
    return [list(column) for column in zip(*matrix)]


def is_symmetric(matrix: Matrix) -> bool:
    """Return True if the square ``matrix`` equals its transpose."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("symmetry is only defined for square matrices")
    return all(
        matrix[i][j] == matrix[j][i]
        for i in range(size)
        for j in range(i + 1, size)
    )


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def multiply(first: Matrix, second: Matrix) -> list[list[Any]]:
    """Return the matrix product of ``first`` and ``second``."""
    _, inner = _shape(first)
    rows_second, _ = _shape(second)
    if inner != rows_second:
        raise ValueError("columns of the first matrix must match rows of the second")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def find(matrix: Matrix, target: Any) -> tuple[int, int] | None:
    """Return the (row, column) of the first occurrence of ``target``, or None."""
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == target:
                return i, j
    return None


def sum_elements(matrix: Matrix) -> Any:
    """Return the sum of every element."""
    return sum(sum(row) for row in matrix)


def subtract_elements(matrix: Matrix) -> Any:
    """Return zero minus every element in turn."""
    result = 0
    for row in matrix:
        for value in row:
            result -= value
    return result


def _elementwise(first: Matrix, second: Matrix, operation) -> list[list[Any]]:
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [
        [operation(a, b) for a, b in zip(row_a, row_b)]
        for row_a, row_b in zip(first, second)
    ]


def add(first: Matrix, second: Matrix) -> list[list[Any]]:
    """Return the element-wise sum of two matrices of the same shape."""
    return _elementwise(first, second, lambda a, b: a + b)


def subtract(first: Matrix, second: Matrix) -> list[list[Any]]:
    """Return the element-wise difference of two matrices of the same shape."""
    return _elementwise(first, second, lambda a, b: a - b)