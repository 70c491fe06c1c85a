"""Grid puzzles: sudoku validation, zeroing, search and skyline sums."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import chain


def _has_duplicate(cells: Iterable[str]) -> bool:
    seen: set[str] = set()
    for cell in cells:
        if cell == ".":
            continue
        if cell in seen:
            return True
        seen.add(cell)
    return False


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no row, column or 3x3 box repeats a digit; '.' marks an empty cell."""
    rows = list(board)
    columns = ([row[c] for row in rows] for c in range(9))
    boxes = (
        [rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
        for top in range(0, 9, 3)
        for left in range(0, 9, 3)
    )
    return not any(_has_duplicate(unit) for unit in chain(rows, columns, boxes))


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in turn, ascend."""
    if not matrix or not matrix[0]:
        return False
    row_index = bisect_right([row[0] for row in matrix], target) - 1
    if row_index < 0:
        return False
    row = matrix[row_index]
    if target > row[-1]:
        return False
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target


def max_increase_keeping_skyline(grid: Sequence[Sequence[int]]) -> int:
    """Total height that can be added to a square grid without changing its skylines.

    Raises ValueError if the grid is not square.
    """
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    row_peaks = [max([0, *row]) for row in grid]
    col_peaks = [max([0, *col]) for col in zip(*grid)]
    return sum(
        min(row_peak, col_peak) - height
        for row_peak, row in zip(row_peaks, grid)
        for col_peak, height in zip(col_peaks, row)
    )


def maximum_wealth(accounts: Iterable[Iterable[int]]) -> int:
    """Largest total held by one customer; 0 when there are none."""
    return max([0, *map(sum, accounts)])