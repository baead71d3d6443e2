"""Accumulated-cost storage for the DTW recurrence.

Both storages address a conceptual ``(rows + 1) x (columns + 1)`` table in
1-based coordinates. Row 0 and column 0 are never stored: ``(0, 0)`` reads
as 0 and every other boundary cell reads as infinity.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List

import numpy as np

from .actions import Action
from .config import resolve_max_matrix_bytes

logger = logging.getLogger(__name__)

# bytes per dense cost cell (float64)
COST_CELL_SIZE = np.dtype(np.float64).itemsize


def _check_inside(row: int, column: int) -> None:
    if row <= 0 or column <= 0:
        raise ValueError(f"cell ({row}, {column}) lies on the table boundary")


class CostStorage(ABC):
    """Common interface of the dense and sparse cost tables."""

    @abstractmethod
    def get_cost(self, row: int, column: int) -> float: ...

    @abstractmethod
    def set_cost(self, row: int, column: int, cost: float) -> None: ...

    @abstractmethod
    def get_action(self, row: int, column: int) -> Action: ...

    @abstractmethod
    def set_action(self, row: int, column: int, action: Action) -> None: ...


class CostMatrix(CostStorage):
    """Dense storage: the whole table is allocated up front."""

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        self._costs = np.full((rows, columns), np.inf, dtype=np.float64)
        self._actions = np.zeros((rows, columns), dtype=np.int8)

    def get_cost(self, row: int, column: int) -> float:
        if row == 0 and column == 0:
            return 0.0
        if row == 0 or column == 0:
            return float("inf")
        return float(self._costs[row - 1, column - 1])

    def set_cost(self, row: int, column: int, cost: float) -> None:
        _check_inside(row, column)
        self._costs[row - 1, column - 1] = cost

    def get_action(self, row: int, column: int) -> Action:
        _check_inside(row, column)
        return Action(int(self._actions[row - 1, column - 1]))

    def set_action(self, row: int, column: int, action: Action) -> None:
        _check_inside(row, column)
        self._actions[row - 1, column - 1] = int(action)


class CostCache(CostStorage):
    """Sparse storage: one mapping per row, filled only for visited cells."""

    def __init__(self, rows: int):
        self.rows = rows
        self._costs: List[Dict[int, float]] = [{} for _ in range(rows)]
        self._actions: List[Dict[int, Action]] = [{} for _ in range(rows)]

    def get_cost(self, row: int, column: int) -> float:
        if row == 0 and column == 0:
            return 0.0
        if row == 0 or column == 0:
            return float("inf")
        return self._costs[row - 1].get(column - 1, float("inf"))

    def set_cost(self, row: int, column: int, cost: float) -> None:
        _check_inside(row, column)
        self._costs[row - 1][column - 1] = float(cost)

    def get_action(self, row: int, column: int) -> Action:
        """Raises KeyError for a cell that was never written."""
        _check_inside(row, column)
        return self._actions[row - 1][column - 1]

    def set_action(self, row: int, column: int, action: Action) -> None:
        _check_inside(row, column)
        self._actions[row - 1][column - 1] = action


def projected_matrix_size(rows: int, columns: int) -> int:
    """Bytes a dense cost table of this shape would take."""
    return rows * columns * COST_CELL_SIZE


def cost_storage(rows: int, columns: int, max_matrix_bytes: int | None = None) -> CostStorage:
    """Pick dense storage when it fits strictly under the budget, else sparse."""
    budget = resolve_max_matrix_bytes(max_matrix_bytes)
    size = projected_matrix_size(rows, columns)
    if size < budget:
        logger.debug("dense cost storage %dx%d (%d bytes < %d)", rows, columns, size, budget)
        return CostMatrix(rows, columns)
    logger.debug("sparse cost storage %dx%d (%d bytes >= %d)", rows, columns, size, budget)
    return CostCache(rows)
