"""Backtracking search over placements in a fixed piece order.

Both entry points explore the same tree: level ``i`` places piece ``i`` at
every legal anchor, clears lines and descends.  The score of a branch is the
total number of lines cleared along it and the best branch is the one with
the highest score; ties go to the branch reached first in move-enumeration
order.

* :func:`backtrack` expands the full tree.  Its cost is exponential in the
  number of pieces (up to ``N**2`` children per level) which is fine for the
  handful of pieces a turn deals.
* :func:`backtrack_lookahead` stops descending after ``lookahead`` levels and
  reports the partial state reached there.

A piece with no legal anchor is skipped: the branch carries on with the next
piece on the unchanged grid and the piece simply has no entry in the
placement history.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .board import Grid
from .lines import place_and_clear
from .moves import Placement, enumerate_moves
from .pieces import Piece
from .stats import SearchStats


@dataclass(frozen=True)
class SearchResult:
    """Final grid, total lines cleared and the placements that led there."""

    grid: Grid
    score: int
    placements: Tuple[Placement, ...] = ()


def _expand(
    grid: Grid,
    pieces: Sequence[Piece],
    index: int,
    score: int,
    history: Tuple[Placement, ...],
    lookahead: Optional[int],
    stats: Optional[SearchStats],
) -> SearchResult:
    if stats is not None:
        stats.nodes += 1
    if index == len(pieces) or lookahead == 0:
        if stats is not None:
            stats.leaves += 1
        return SearchResult(grid=grid, score=score, placements=history)

    remaining = None if lookahead is None else lookahead - 1
    piece = pieces[index]
    best: Optional[SearchResult] = None
    for row, col in enumerate_moves(grid, piece):
        outcome = place_and_clear(grid, piece, row, col)
        result = _expand(
            outcome.cleared,
            pieces,
            index + 1,
            score + outcome.lines_cleared,
            history + (Placement(index, row, col),),
            remaining,
            stats,
        )
        if best is None or result.score > best.score:
            best = result

    if best is None:
        # No anchor fits; skip the piece.
        return _expand(grid, pieces, index + 1, score, history, remaining, stats)
    return best


def backtrack(
    grid: Grid,
    pieces: Sequence[Piece],
    *,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Return the highest scoring placement sequence for ``pieces`` in order."""

    return _expand(grid, pieces, 0, 0, (), None, stats)


def backtrack_lookahead(
    grid: Grid,
    pieces: Sequence[Piece],
    lookahead: int,
    *,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Like :func:`backtrack` but descend at most ``lookahead`` levels.

    With ``lookahead >= len(pieces)`` the result equals :func:`backtrack`.

    Raises:
        ValueError: If ``lookahead`` is negative.
    """

    if lookahead < 0:
        raise ValueError("lookahead must be non-negative")
    return _expand(grid, pieces, 0, 0, (), lookahead, stats)


__all__ = ["SearchResult", "backtrack", "backtrack_lookahead"]
