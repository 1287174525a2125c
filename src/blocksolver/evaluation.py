"""Static board heuristic used as the leaf value of the minimax search.

``evaluate`` rewards lines that are complete but not yet cleared and
penalises holes.  A hole here is narrower than the Tetris notion of "any
empty cell below a block": only the cell *directly* underneath a filled
cell counts, so a two-cell gap under a block is one hole, not two.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .board import Grid
from .lines import completed_columns, completed_rows


@dataclass(frozen=True)
class EvaluationWeights:
    """Coefficients of the board heuristic."""

    line_weight: float = 100.0
    hole_penalty: float = 5.0


DEFAULT_WEIGHTS = EvaluationWeights()


def count_holes(grid: Grid) -> int:
    """Return the number of empty cells with a filled cell directly above."""

    cells = grid.cells
    if cells.shape[0] < 2:
        return 0
    above = cells[:-1, :] != 0
    below = cells[1:, :] == 0
    return int(np.count_nonzero(above & below))


def count_complete_lines(grid: Grid) -> int:
    return int(completed_rows(grid).size + completed_columns(grid).size)


def evaluate(grid: Grid, weights: EvaluationWeights = DEFAULT_WEIGHTS) -> float:
    """Score ``grid`` without clearing anything."""

    return (
        weights.line_weight * count_complete_lines(grid)
        - weights.hole_penalty * count_holes(grid)
    )


__all__ = [
    "EvaluationWeights",
    "DEFAULT_WEIGHTS",
    "count_holes",
    "count_complete_lines",
    "evaluate",
]
