from __future__ import annotations

import logging
from typing import List

import pytest

from blocksolver import (
    Grid,
    InvalidPlacementError,
    Piece,
    Placement,
    SearchStats,
    SolverConfig,
    Strategy,
    replay,
    solve,
)
from blocksolver.search import backtrack


def test_default_strategy_is_exhaustive(
    reference_grid: Grid, reference_pieces: List[Piece]
) -> None:
    result = solve(reference_grid, reference_pieces)
    assert result == backtrack(reference_grid, reference_pieces)
    assert result is not None and result.score == 1


def test_lookahead_strategy_uses_configured_depth(
    reference_grid: Grid, reference_pieces: List[Piece]
) -> None:
    shallow = solve(
        reference_grid,
        reference_pieces,
        SolverConfig(strategy=Strategy.LOOKAHEAD, lookahead=1),
    )
    deep = solve(
        reference_grid,
        reference_pieces,
        SolverConfig(strategy=Strategy.LOOKAHEAD, lookahead=2),
    )
    assert shallow is not None and len(shallow.placements) == 1
    assert deep == solve(reference_grid, reference_pieces)


def test_minimax_strategy_produces_replayable_result(
    reference_grid: Grid, reference_pieces: List[Piece]
) -> None:
    stats = SearchStats()
    result = solve(
        reference_grid, reference_pieces, SolverConfig(strategy="minimax"), stats=stats
    )
    assert result is not None
    assert stats.orderings == 2
    assert {p.piece_index for p in result.placements} == {0, 1}
    steps = replay(reference_grid, reference_pieces, result.placements)
    assert steps[-1].grid == result.grid
    assert sum(step.lines_cleared for step in steps) == result.score


def test_minimax_without_pieces_returns_none() -> None:
    config = SolverConfig(strategy=Strategy.MINIMAX)
    assert solve(Grid.empty(8), [], config) is None


def test_other_strategies_handle_empty_input() -> None:
    grid = Grid.empty(0)
    for strategy in (Strategy.EXHAUSTIVE, Strategy.LOOKAHEAD):
        result = solve(grid, [Piece.parse("1")], SolverConfig(strategy=strategy))
        assert result is not None
        assert result.score == 0
        assert result.grid == grid
        assert result.placements == ()


def test_config_validation() -> None:
    assert SolverConfig(strategy="lookahead").strategy is Strategy.LOOKAHEAD
    with pytest.raises(ValueError):
        SolverConfig(strategy="greedy")
    with pytest.raises(ValueError):
        SolverConfig(lookahead=-1)
    with pytest.raises(ValueError):
        SolverConfig(max_pieces=-2)


def test_piece_limit_guards_recursion() -> None:
    pieces = [Piece.parse("1")] * 3
    with pytest.raises(ValueError):
        solve(Grid.empty(4), pieces, SolverConfig(max_pieces=2))


def test_replay_reports_intermediate_grids(
    reference_grid: Grid, reference_pieces: List[Piece]
) -> None:
    result = solve(reference_grid, reference_pieces)
    assert result is not None
    steps = replay(reference_grid, reference_pieces, result.placements)

    assert [step.placement for step in steps] == [Placement(0, 4, 3), Placement(1, 4, 0)]
    assert [step.lines_cleared for step in steps] == [0, 1]
    assert steps[0].placed == steps[0].grid
    assert steps[1].placed.to_rows()[5] == [1] * 8
    assert steps[1].grid.to_rows()[5] == [0] * 8
    assert steps[1].grid == result.grid


def test_replay_rejects_foreign_placements(
    reference_grid: Grid, reference_pieces: List[Piece]
) -> None:
    with pytest.raises(InvalidPlacementError):
        replay(reference_grid, reference_pieces, [Placement(0, 0, 0)])


def test_solve_logs_summary(
    caplog, reference_grid: Grid, reference_pieces: List[Piece]
) -> None:
    with caplog.at_level(logging.DEBUG, logger="blocksolver.solver"):
        solve(reference_grid, reference_pieces)
    message = "".join(caplog.messages)
    assert "exhaustive search: score=1" in message
    assert "nodes=" in message
