"""Traversal orders over rectangular matrices."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    if not rows:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("every row of the matrix must have the same length")
    return rows, cols


def wave_order(matrix: Matrix) -> list[int]:
    """Columns read alternately top to bottom and bottom to top, starting downwards."""
    rows, cols = _shape(matrix)
    result: list[int] = []
    for col in range(cols):
        order = range(rows) if col % 2 == 0 else range(rows - 1, -1, -1)
        result.extend(matrix[row][col] for row in order)
    return result


def spiral_order(matrix: Matrix) -> list[int]:
    """Cells read clockwise from the top-left corner, spiralling inwards."""
    rows, cols = _shape(matrix)
    total = rows * cols
    result: list[int] = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while len(result) < total:
        ring = [
            *((top, col) for col in range(left, right + 1)),
            *((row, right) for row in range(top + 1, bottom + 1)),
            *((bottom, col) for col in range(right - 1, left - 1, -1)),
            *((row, left) for row in range(bottom - 1, top, -1)),
        ]
        result.extend(matrix[row][col] for row, col in ring[: total - len(result)])
        top += 1
        left += 1
        bottom -= 1
        right -= 1
    return result