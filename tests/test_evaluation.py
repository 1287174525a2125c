from __future__ import annotations

import pytest

from blocksolver.board import Grid
from blocksolver.evaluation import (
    EvaluationWeights,
    count_complete_lines,
    count_holes,
    evaluate,
)
from blocksolver.pieces import parse_rows


def _grid(text: str) -> Grid:
    return Grid.from_rows(parse_rows(text))


def test_hole_needs_filled_cell_directly_above() -> None:
    assert count_holes(_grid("100/000/000")) == 1
    assert count_holes(_grid("100/100/000")) == 1
    assert count_holes(_grid("000/000/111")) == 0
    assert count_holes(_grid("010/101/000")) == 3


def test_reference_grid_holes_and_lines(reference_grid: Grid) -> None:
    grid = reference_grid
    # Counted by hand column by column: 0, 2, 1, 1, 2, 2, 2, 3.
    assert count_holes(grid) == 13
    assert count_complete_lines(grid) == 0
    assert evaluate(grid) == pytest.approx(-65.0)


def test_complete_lines_are_rewarded_without_clearing() -> None:
    grid = _grid("111/000/000")
    assert count_complete_lines(grid) == 1
    assert evaluate(grid) == pytest.approx(100.0 - 3 * 5.0)
    assert grid.to_rows()[0] == [1, 1, 1]


def test_row_and_column_both_count() -> None:
    grid = _grid("111/100/100")
    assert count_complete_lines(grid) == 2
    assert count_holes(grid) == 2
    assert evaluate(grid) == pytest.approx(190.0)


def test_custom_weights() -> None:
    grid = _grid("111/000/000")
    weights = EvaluationWeights(line_weight=10.0, hole_penalty=1.0)
    assert evaluate(grid, weights) == pytest.approx(7.0)


def test_empty_grids_score_zero() -> None:
    assert evaluate(Grid.empty(8)) == 0
    assert evaluate(Grid.empty(0)) == 0
