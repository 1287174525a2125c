"""Command-line demo for the solver.

Run with::

    PYTHONPATH=src python -m blocksolver
    PYTHONPATH=src python -m blocksolver --strategy minimax --piece SQ2 --piece 3H

Without arguments the reference 8x8 puzzle is solved.  Grids and pieces are
given as ``/``-separated rows of ``0``/``1``; pieces may also be named by their
catalog entry (``SQ2``, ``L3_NW``...).  Every placement of the solution is
printed with ``*`` marking the cells of the piece just placed.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from .board import Grid
from .pieces import PIECE_CATALOG, Piece, catalog_piece, parse_rows
from .solver import ReplayStep, SolverConfig, Strategy, replay, solve
from .stats import SearchStats


LOGGER = logging.getLogger(__name__)

REFERENCE_GRID = "/".join(
    [
        "01001001",
        "00100000",
        "00111100",
        "00110011",
        "00100000",
        "01100111",
        "01100110",
        "00000000",
    ]
)
REFERENCE_PIECES = ["11/11", "1/1"]


def format_grid(grid: Grid, highlight: Sequence[Tuple[int, int]] = ()) -> str:
    marked = set(highlight)
    lines: List[str] = []
    for r, row in enumerate(grid.to_rows()):
        chars = []
        for c, cell in enumerate(row):
            if (r, c) in marked:
                chars.append("*")
            else:
                chars.append("#" if cell else ".")
        lines.append("".join(chars))
    return "\n".join(lines)


def format_step(step: ReplayStep, piece: Piece) -> str:
    placement = step.placement
    cells = [(placement.row + dr, placement.col + dc) for dr, dc in piece.cells()]
    parts = [
        f"Placing piece {placement.piece_index + 1} at ({placement.row}, {placement.col}):",
        format_grid(step.placed, cells),
    ]
    if step.lines_cleared:
        parts.append(f"Cleared {step.lines_cleared} line(s):")
        parts.append(format_grid(step.grid))
    return "\n".join(parts)


def _piece_from_arg(text: str) -> Piece:
    if text in PIECE_CATALOG:
        return catalog_piece(text)
    return Piece.parse(text)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="blocksolver", description="Find the best placements for a set of pieces."
    )
    parser.add_argument(
        "--grid",
        default=REFERENCE_GRID,
        help="Starting grid as '/'-separated rows of 0/1 (default: reference puzzle).",
    )
    parser.add_argument(
        "--piece",
        dest="pieces",
        action="append",
        help="Piece as rows ('11/11') or catalog name; repeat for several pieces.",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=Strategy.EXHAUSTIVE.value,
        help="Search strategy.",
    )
    parser.add_argument(
        "--lookahead",
        type=int,
        default=2,
        help="Depth bound for the lookahead strategy.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    args = parser.parse_args(argv)
    try:
        args.grid = Grid.from_rows(parse_rows(args.grid))
        args.pieces = [_piece_from_arg(p) for p in (args.pieces or REFERENCE_PIECES)]
        args.config = SolverConfig(strategy=Strategy(args.strategy), lookahead=args.lookahead)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s"
    )

    stats = SearchStats()
    result = solve(args.grid, args.pieces, args.config, stats=stats)
    if result is None:
        LOGGER.info("No pieces to place.")
        return 0

    print("Displaying board after each piece is placed:")
    for step in replay(args.grid, args.pieces, result.placements):
        print(format_step(step, args.pieces[step.placement.piece_index]))
        print("---")
    print(f"Final score: {result.score}")
    print("Final grid:")
    print(format_grid(result.grid))
    LOGGER.info("Solved with %s search: %s", args.config.strategy.value, stats.describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
