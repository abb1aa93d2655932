"""Intervals, square matrices, spirals and Sudoku boards."""

from __future__ import annotations

from collections.abc import Sequence


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Add ``new_interval`` to ``intervals`` and merge the result."""
    return merge_intervals([*intervals, new_interval])


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def generate_spiral_matrix(n: int) -> list[list[int]]:
    """An n by n matrix filled with 1..n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError("size must not be negative")
    matrix = [[0] * n for _ in range(n)]
    row, col = 0, 0
    d_row, d_col = 0, 1
    for value in range(1, n * n + 1):
        matrix[row][col] = value
        nr, nc = row + d_row, col + d_col
        if not (0 <= nr < n and 0 <= nc < n and matrix[nr][nc] == 0):
            d_row, d_col = d_col, -d_row
            nr, nc = row + d_row, col + d_col
        row, col = nr, nc
    return matrix


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order."""
    result: list[int] = []
    rows = [list(row) for row in matrix]
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Whether the filled cells of a 9x9 board break no Sudoku rule.

    Empty cells are marked with ``"."``.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9 by 9")
    seen: set[tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == ".":
                continue
            if cell not in "123456789" or len(cell) != 1:
                raise ValueError(f"invalid cell {cell!r} at ({r}, {c})")
            keys = (("row", r, cell), ("col", c, cell), ("box", 3 * (r // 3) + c // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True