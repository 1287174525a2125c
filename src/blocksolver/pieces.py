"""Polyomino piece definitions.

A :class:`Piece` is a rectangular 0/1 mask; filled cells are the blocks that
land on the grid, empty cells are padding inside the bounding box (e.g. the
corners of an L).  Pieces never rotate in this game, so each orientation of
a shape is its own catalog entry.

Masks can be written compactly as row strings separated by ``/``::

    >>> Piece.parse("110/011").cell_count
    4
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from .board import Cells, GridLike, binary_cells


@dataclass(frozen=True, eq=False)
class Piece:
    """Immutable binary piece mask with at least one filled cell."""

    mask: Cells
    name: str = ""

    def __post_init__(self) -> None:
        mask = binary_cells(self.mask, what="Piece")
        if not np.any(mask):
            raise ValueError("Piece must contain at least one filled cell")
        object.__setattr__(self, "mask", mask)

    @classmethod
    def from_rows(cls, rows: GridLike, name: str = "") -> "Piece":
        return cls(rows, name)  # type: ignore[arg-type]

    @classmethod
    def parse(cls, text: str, name: str = "") -> "Piece":
        """Build a piece from ``/``-separated rows of ``0``/``1`` characters."""

        return cls(parse_rows(text), name or text)  # type: ignore[arg-type]

    @property
    def height(self) -> int:
        return int(self.mask.shape[0])

    @property
    def width(self) -> int:
        return int(self.mask.shape[1])

    @property
    def cell_count(self) -> int:
        return int(np.count_nonzero(self.mask))

    def cells(self) -> List[Tuple[int, int]]:
        """Return the ``(row, col)`` offsets of the filled cells."""

        rows, cols = np.nonzero(self.mask)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.mask]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return np.array_equal(self.mask, other.mask)

    def __hash__(self) -> int:
        return hash((self.mask.shape, self.mask.tobytes()))

    def __repr__(self) -> str:
        body = "/".join("".join(str(int(v)) for v in row) for row in self.mask)
        label = f", name={self.name!r}" if self.name and self.name != body else ""
        return f"Piece({body!r}{label})"


def parse_rows(text: str) -> List[List[int]]:
    """Parse ``"101/111"`` style text into a nested list of ints.

    Whitespace around rows is ignored.  An empty string yields an empty list
    so that ``Grid.from_rows(parse_rows(""))`` is the 0 x 0 grid.

    Raises:
        ValueError: If a character other than ``0`` or ``1`` is present.
    """

    text = text.strip()
    if not text:
        return []
    rows: List[List[int]] = []
    for chunk in text.split("/"):
        chunk = chunk.strip()
        if not chunk or any(ch not in "01" for ch in chunk):
            raise ValueError(f"Invalid row {chunk!r}; expected only '0' and '1'")
        rows.append([int(ch) for ch in chunk])
    return rows


# Standard piece set of the 1010!/Block Blast family.  Names follow the
# ``<cells><orientation>`` convention: H = horizontal, V = vertical.
PIECE_CATALOG: Dict[str, str] = {
    "1": "1",
    "2H": "11",
    "2V": "1/1",
    "3H": "111",
    "3V": "1/1/1",
    "4H": "1111",
    "4V": "1/1/1/1",
    "5H": "11111",
    "5V": "1/1/1/1/1",
    "SQ2": "11/11",
    "SQ3": "111/111/111",
    "L3_NW": "11/10",
    "L3_NE": "11/01",
    "L3_SW": "10/11",
    "L3_SE": "01/11",
    "L5_NW": "111/100/100",
    "L5_NE": "111/001/001",
    "L5_SW": "100/100/111",
    "L5_SE": "001/001/111",
    "T_N": "111/010",
    "T_S": "010/111",
    "T_E": "10/11/10",
    "T_W": "01/11/01",
    "S_H": "011/110",
    "Z_H": "110/011",
    "S_V": "10/11/01",
    "Z_V": "01/11/10",
}


def catalog_piece(name: str) -> Piece:
    """Return the catalog piece called ``name``.

    Raises:
        ValueError: If ``name`` is not a catalog entry.
    """

    if name not in PIECE_CATALOG:
        raise ValueError(f"Unknown piece: {name}")
    return Piece.parse(PIECE_CATALOG[name], name)


__all__ = ["Piece", "PIECE_CATALOG", "catalog_piece", "parse_rows"]
