from __future__ import annotations

from typing import List

import pytest

from blocksolver.board import Grid
from blocksolver.pieces import Piece


REFERENCE_ROWS = [
    [0, 1, 0, 0, 1, 0, 0, 1],
    [0, 0, 1, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 1, 1, 0, 0],
    [0, 0, 1, 1, 0, 0, 1, 1],
    [0, 0, 1, 0, 0, 0, 0, 0],
    [0, 1, 1, 0, 0, 1, 1, 1],
    [0, 1, 1, 0, 0, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
]


@pytest.fixture
def reference_rows() -> List[List[int]]:
    return [row[:] for row in REFERENCE_ROWS]


@pytest.fixture
def reference_grid() -> Grid:
    return Grid.from_rows(REFERENCE_ROWS)


@pytest.fixture
def reference_pieces() -> List[Piece]:
    # 2x2 square followed by a vertical domino.
    return [Piece.parse("11/11"), Piece.parse("1/1")]
