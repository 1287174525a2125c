"""Legal move generation.

A move is the ``(row, col)`` anchor of a piece's top-left bounding-box cell.
``enumerate_moves`` scans anchors row-major then column-minor and the search
strategies rely on that order: among equally scored moves the first one
found wins.

The scan is vectorised with ``sliding_window_view`` so that every candidate
window of the grid is tested against the piece mask in a single NumPy
expression instead of a Python loop per anchor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .board import Grid
from .pieces import Piece


Move = Tuple[int, int]


@dataclass(frozen=True)
class Placement:
    """A piece, identified by its index in the input list, at an anchor."""

    piece_index: int
    row: int
    col: int


def is_valid_placement(grid: Grid, piece: Piece, row: int, col: int) -> bool:
    """Return ``True`` if ``piece`` fits at ``(row, col)``.

    The whole bounding box must lie inside the grid and no filled piece cell
    may cover a filled grid cell.  Empty cells of the mask may overlap
    anything.
    """

    size = grid.size
    if row < 0 or col < 0 or row + piece.height > size or col + piece.width > size:
        return False
    window = grid.cells[row : row + piece.height, col : col + piece.width]
    return not bool(np.any(window & piece.mask))


def enumerate_moves(grid: Grid, piece: Piece) -> List[Move]:
    """Return every valid anchor for ``piece`` in row-major order."""

    size = grid.size
    if piece.height > size or piece.width > size:
        return []
    windows = sliding_window_view(grid.cells, piece.mask.shape)
    overlaps = np.any(windows & piece.mask, axis=(2, 3))
    return [(int(r), int(c)) for r, c in np.argwhere(~overlaps)]


__all__ = ["Move", "Placement", "is_valid_placement", "enumerate_moves"]
