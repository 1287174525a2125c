from __future__ import annotations

from blocksolver.board import Grid
from blocksolver.moves import enumerate_moves, is_valid_placement
from blocksolver.pieces import PIECE_CATALOG, Piece, catalog_piece


def test_moves_are_listed_row_major() -> None:
    moves = enumerate_moves(Grid.empty(3), Piece.parse("11"))
    assert moves == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]


def test_moves_match_validity_check_within_bounds(reference_grid: Grid) -> None:
    grid = reference_grid
    size = grid.size
    for name in PIECE_CATALOG:
        piece = catalog_piece(name)
        moves = enumerate_moves(grid, piece)
        for row, col in moves:
            assert 0 <= row <= size - piece.height
            assert 0 <= col <= size - piece.width
        expected = [
            (row, col)
            for row in range(size)
            for col in range(size)
            if is_valid_placement(grid, piece, row, col)
        ]
        assert moves == expected, name


def test_reference_square_first_fits_top_right(reference_grid: Grid) -> None:
    grid = reference_grid
    moves = enumerate_moves(grid, Piece.parse("11/11"))
    assert moves[0] == (0, 5)
    assert (4, 3) in moves
    assert (4, 0) not in moves  # (5, 1) is filled


def test_out_of_bounds_anchors_are_invalid() -> None:
    grid = Grid.empty(4)
    piece = Piece.parse("111")
    assert is_valid_placement(grid, piece, 0, 1)
    assert not is_valid_placement(grid, piece, 0, 2)
    assert not is_valid_placement(grid, piece, -1, 0)
    assert not is_valid_placement(grid, piece, 0, -1)
    assert not is_valid_placement(grid, piece, 4, 0)


def test_empty_mask_cells_may_cover_filled_cells() -> None:
    grid = Grid.from_rows([[0, 0], [0, 1]])
    corner = Piece.parse("11/10")
    assert is_valid_placement(grid, corner, 0, 0)
    assert not is_valid_placement(grid, Piece.parse("11/11"), 0, 0)


def test_piece_larger_than_grid_has_no_moves() -> None:
    assert enumerate_moves(Grid.empty(2), Piece.parse("111")) == []
    assert enumerate_moves(Grid.empty(0), Piece.parse("1")) == []


def test_full_grid_has_no_moves() -> None:
    full = Grid.from_rows([[1] * 3 for _ in range(3)])
    assert enumerate_moves(full, Piece.parse("1")) == []
