"""Grid mutation: locking pieces and clearing completed lines.

Every function here returns a new :class:`~blocksolver.board.Grid`; inputs are
never modified.  Rows and columns are cleared simultaneously: completeness
of both is decided on the grid as it was before any clearing, so a filled
cell at the crossing of a full row and a full column counts towards both
lines but is only emptied once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .board import Grid
from .moves import is_valid_placement
from .pieces import Piece


class InvalidPlacementError(AssertionError):
    """Raised when a caller applies a placement it did not validate."""


@dataclass(frozen=True)
class PlacementOutcome:
    """Result of locking one piece and clearing the lines it completed."""

    placed: Grid
    cleared: Grid
    lines_cleared: int


def completed_rows(grid: Grid) -> NDArray[np.intp]:
    """Return the indices of rows whose cells are all filled."""

    return np.flatnonzero(np.all(grid.cells != 0, axis=1))


def completed_columns(grid: Grid) -> NDArray[np.intp]:
    """Return the indices of columns whose cells are all filled."""

    return np.flatnonzero(np.all(grid.cells != 0, axis=0))


def apply_placement(grid: Grid, piece: Piece, row: int, col: int) -> Grid:
    """Return a copy of ``grid`` with ``piece`` locked at ``(row, col)``.

    Raises:
        InvalidPlacementError: If the placement is out of bounds or overlaps
            a filled cell.  Callers are expected to have checked with
            :func:`~blocksolver.moves.is_valid_placement`.
    """

    if not is_valid_placement(grid, piece, row, col):
        raise InvalidPlacementError(
            f"Piece {piece!r} does not fit at ({row}, {col})"
        )
    cells = grid.cells.copy()
    cells[row : row + piece.height, col : col + piece.width] |= piece.mask
    return Grid(cells)


def clear_lines(grid: Grid) -> Tuple[Grid, int]:
    """Empty every complete row and column.

    Returns ``(new_grid, lines_cleared)`` where ``lines_cleared`` is the number
    of complete rows plus the number of complete columns.
    """

    rows = completed_rows(grid)
    cols = completed_columns(grid)
    cleared = int(rows.size + cols.size)
    if not cleared:
        return grid, 0
    cells = grid.cells.copy()
    cells[rows, :] = 0
    cells[:, cols] = 0
    return Grid(cells), cleared


def place_and_clear(grid: Grid, piece: Piece, row: int, col: int) -> PlacementOutcome:
    """Lock ``piece`` then clear lines, keeping both intermediate grids."""

    placed = apply_placement(grid, piece, row, col)
    cleared, lines = clear_lines(placed)
    return PlacementOutcome(placed=placed, cleared=cleared, lines_cleared=lines)


__all__ = [
    "InvalidPlacementError",
    "PlacementOutcome",
    "completed_rows",
    "completed_columns",
    "apply_placement",
    "clear_lines",
    "place_and_clear",
]
