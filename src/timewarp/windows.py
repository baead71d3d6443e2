"""Cell visitation orders for the cost table.

A window is a single-pass iterator over 1-based ``(row, column)`` cells in
row-major order: rows strictly increase, and within a row the columns
strictly increase. Rows follow the y sequence, columns follow x.
"""

from __future__ import annotations

import math
import sys
from typing import Iterable, Iterator, List, Sequence, Tuple

Cell = Tuple[int, int]

# marker for a row no cell has been assigned to yet
EMPTY_ROW: Tuple[int, int] = (sys.maxsize, 0)


class FullWindow:
    """Every cell of a ``rows x columns`` table, for classical DTW."""

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        self._row = 1
        self._column = 1

    def __iter__(self) -> Iterator[Cell]:
        return self

    def __next__(self) -> Cell:
        if self._column > self.columns:
            self._row += 1
            self._column = 1
        if self._row > self.rows or self.columns <= 0:
            # park the cursor so the window stays exhausted
            self._row = self.rows + 1
            raise StopIteration
        cell = (self._row, self._column)
        self._column += 1
        return cell


class ConstrainedWindow:
    """Cells inside a per-row ``[min, max]`` column band.

    ``constraints[row]`` holds the band of ``row``; index 0 is the boundary
    row and is never visited. Rows with an empty band (``min > max``) are
    skipped.
    """

    def __init__(self, constraints: Sequence[Tuple[int, int]]):
        self.constraints: List[Tuple[int, int]] = [tuple(c) for c in constraints]
        self._row = 1
        self._column: int | None = None

    @classmethod
    def empty(cls, rows: int) -> "ConstrainedWindow":
        return cls([EMPTY_ROW] * (rows + 1))

    @property
    def rows(self) -> int:
        return len(self.constraints) - 1

    def visit(self, row: int, column: int) -> None:
        """Widen the band of ``row`` so that it contains ``column``."""
        low, high = self.constraints[row]
        self.constraints[row] = (min(low, column), max(high, column))

    def is_marked(self, row: int) -> bool:
        low, high = self.constraints[row]
        return low <= high

    def __iter__(self) -> Iterator[Cell]:
        return self

    def __next__(self) -> Cell:
        while self._row < len(self.constraints):
            low, high = self.constraints[self._row]
            if self._column is None:
                self._column = max(low, 1)
            if self._column <= high:
                cell = (self._row, self._column)
                self._column += 1
                return cell
            self._row += 1
            self._column = None
        raise StopIteration

    @classmethod
    def from_low_res_path(
        cls,
        low_res_path: Iterable[Cell],
        resolution_factor: int,
        search_radius: int,
        high_res_rows: int,
        high_res_columns: int,
    ) -> "ConstrainedWindow":
        """Project a coarse warp path onto the next finer resolution.

        Each coarse cell covers a ``resolution_factor`` square block of fine
        cells. Diagonal steps of the coarse path get two extra half-blocks
        around the shared corner so the band stays edge-connected, then every
        band is widened by ``search_radius`` cells.
        """
        if resolution_factor < 1:
            raise ValueError("resolution_factor must be at least 1")
        if search_radius < 0:
            raise ValueError("search_radius must be non-negative")

        window = cls.empty(high_res_rows)
        factor = resolution_factor
        half = math.ceil(factor / 2)

        prev_row = prev_column = None
        for low_row, low_column in low_res_path:
            low_row += 1
            low_column += 1

            first_row = (low_row - 1) * factor + 1
            first_column = (low_column - 1) * factor + 1
            for row in range(first_row, min(first_row + factor, high_res_rows + 1)):
                for column in range(first_column, min(first_column + factor, high_res_columns + 1)):
                    window.visit(row, column)

            #   |_|_|x|x|          |_|_|x|x|
            #   |_|_|x|x|   -->    |_|X|x|x|
            #   |x|x|_|_|          |x|x|X|_|
            #   |x|x|_|_|          |x|x|_|_|
            if prev_row is not None and prev_row < low_row and prev_column < low_column:
                corner_row = prev_row * factor
                corner_column = prev_column * factor
                for i in range(half):
                    for j in range(half):
                        # right of the lower-left block
                        if corner_column + 1 + j <= high_res_columns and corner_row - i >= 1:
                            window.visit(corner_row - i, corner_column + 1 + j)
                        # left of the upper-right block
                        if corner_row + 1 + i <= high_res_rows and corner_column - j >= 1:
                            window.visit(corner_row + 1 + i, corner_column - j)
            prev_row, prev_column = low_row, low_column

        window._expand(search_radius, high_res_rows, high_res_columns)
        return window

    def _expand(self, radius: int, rows: int, columns: int) -> None:
        # maxima first, top-down, pushed onto the rows above
        for row in range(1, rows + 1):
            if not self.is_marked(row):
                continue
            expanded_max = min(self.constraints[row][1] + radius, columns)
            for i in range(radius + 1):
                if row - i < 1:
                    break
                self.visit(row - i, expanded_max)
        # then minima, bottom-up, pushed onto the rows below
        for row in range(rows, 0, -1):
            if not self.is_marked(row):
                continue
            low = self.constraints[row][0]
            expanded_min = low - radius if low > radius else 1
            for i in range(radius + 1):
                if row + i > rows:
                    break
                self.visit(row + i, expanded_min)
