"""Grid representation for the block-packing playfield."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray


# Side length of the classic 1010!/Block Blast board.
DEFAULT_SIZE = 8

Cells = NDArray[np.uint8]

GridLike = Sequence[Sequence[int]]


def binary_cells(rows: GridLike | NDArray, *, what: str) -> Cells:
    """Return ``rows`` as a fresh read-only ``uint8`` array of zeros and ones.

    Raises:
        ValueError: If ``rows`` is ragged, not two dimensional, not numeric
            or holds values other than ``0`` and ``1``.
    """

    if isinstance(rows, np.ndarray):
        array = np.asarray(rows)
    else:
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise ValueError(f"{what} rows must all have the same length")
        array = np.asarray([list(row) for row in rows])
        if array.size == 0:
            array = array.reshape(len(rows), 0)
    if array.ndim != 2:
        raise ValueError(f"{what} must be two dimensional")
    # Values are checked before the cast so 0.5 is rejected, not truncated.
    if array.dtype.kind not in "biuf":
        raise ValueError(f"{what} cells must be numeric, got dtype {array.dtype}")
    if not np.isin(array, (0, 1)).all():
        raise ValueError(f"{what} cells must be 0 or 1")
    cells = array.astype(np.uint8)
    cells.setflags(write=False)
    return cells


@dataclass(frozen=True, eq=False)
class Grid:
    """Immutable N x N occupancy grid.

    ``0`` marks an empty cell and ``1`` a filled one.  The backing array is
    flagged read-only so accidental in-place mutation raises immediately;
    every change goes through :mod:`blocksolver.lines`, which returns a new
    grid.
    """

    cells: Cells

    def __post_init__(self) -> None:
        cells = binary_cells(self.cells, what="Grid")
        rows, cols = cells.shape
        if rows != cols:
            raise ValueError(f"Grid must be square, got {rows}x{cols}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_rows(cls, rows: GridLike) -> "Grid":
        return cls(rows)  # type: ignore[arg-type]

    @classmethod
    def empty(cls, size: int = DEFAULT_SIZE) -> "Grid":
        """Return an empty ``size`` x ``size`` grid."""

        if size < 0:
            raise ValueError("Grid size must be non-negative")
        return cls(np.zeros((size, size), dtype=np.uint8))

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    @property
    def filled_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def is_filled(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is filled.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """

        if 0 <= row < self.size and 0 <= col < self.size:
            return bool(self.cells[row, col])
        raise IndexError("Cell out of bounds")

    def to_rows(self) -> List[List[int]]:
        """Return a copy of the grid as a plain 0/1 nested list."""

        return [[int(v) for v in row] for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash((self.cells.shape, self.cells.tobytes()))

    def __repr__(self) -> str:
        body = "/".join("".join(str(int(v)) for v in row) for row in self.cells)
        return f"Grid({body!r})"


__all__ = ["DEFAULT_SIZE", "Grid", "GridLike", "binary_cells"]
