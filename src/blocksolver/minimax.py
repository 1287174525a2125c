"""Alpha-beta search with heuristic leaves and piece-order search.

The placement sequence is treated as an alternating-sign game tree so that
alpha-beta bounds can cut branches.  There is no opponent: the same player
places every piece.  On maximizing plies the immediate line-clear count is
added to the child's value, on minimizing plies it is subtracted and the
minimum is kept.  Leaves are scored with :func:`~blocksolver.evaluation.evaluate`,
not with the running line count.

This sign flip is a pruning device inherited from earlier versions of the
solver and is kept as is; values returned here are only comparable with
other values from this module.

:func:`search_orderings` runs one full-depth search per permutation of the
piece list and keeps the best ordering, then plays it back greedily to
obtain concrete placements.  Its cost is ``k!`` searches, so it is only meant
for the three to five pieces of a single turn.
"""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .board import Grid
from .evaluation import DEFAULT_WEIGHTS, EvaluationWeights, evaluate
from .lines import place_and_clear
from .moves import Move, Placement, enumerate_moves
from .pieces import Piece
from .search import SearchResult
from .stats import SearchStats


# Upper bound on pieces accepted by the factorial order search (6! = 720).
MAX_ORDER_PIECES = 6


@dataclass(frozen=True)
class MinimaxOutcome:
    """Value of a ply and the first move that achieved it."""

    value: float
    move: Optional[Move] = None


@dataclass(frozen=True)
class OrderSearchResult:
    """Best piece ordering found by :func:`search_orderings`.

    ``order`` lists indices into the original piece list; ``value`` is the
    minimax value of that ordering and ``result`` the played-back placements.
    """

    order: Tuple[int, ...]
    value: float
    orderings_evaluated: int
    result: SearchResult


def minimax(
    grid: Grid,
    pieces: Sequence[Piece],
    depth: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    maximizing: bool = True,
    *,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> MinimaxOutcome:
    """Search ``pieces`` in order, ``depth`` plies deep.

    ``prune=False`` disables the ``beta <= alpha`` cutoff.  Bounds are handed
    to children without the line-clear offset, so pruned and unpruned values
    only agree when no line is cleared below the root.
    """

    if stats is not None:
        stats.nodes += 1
    if depth <= 0 or not pieces:
        if stats is not None:
            stats.leaves += 1
        return MinimaxOutcome(evaluate(grid, weights))

    piece, rest = pieces[0], pieces[1:]
    moves = enumerate_moves(grid, piece)
    if not moves:
        skipped = minimax(
            grid, rest, depth - 1, alpha, beta, not maximizing,
            weights=weights, prune=prune, stats=stats,
        )
        return MinimaxOutcome(skipped.value)

    best_value = -math.inf if maximizing else math.inf
    chosen: Optional[Move] = None
    for row, col in moves:
        outcome = place_and_clear(grid, piece, row, col)
        child = minimax(
            outcome.cleared, rest, depth - 1, alpha, beta, not maximizing,
            weights=weights, prune=prune, stats=stats,
        )
        if maximizing:
            value = child.value + outcome.lines_cleared
            if value > best_value:
                best_value, chosen = value, (row, col)
            alpha = max(alpha, best_value)
        else:
            value = child.value - outcome.lines_cleared
            if value < best_value:
                best_value, chosen = value, (row, col)
            beta = min(beta, best_value)
        if prune and beta <= alpha:
            if stats is not None:
                stats.pruned += 1
            break
    return MinimaxOutcome(best_value, chosen)


def best_move(
    grid: Grid,
    piece: Piece,
    *,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
    stats: Optional[SearchStats] = None,
) -> Optional[Move]:
    """Return the best single-piece move (a depth-1 maximizing search)."""

    return minimax(grid, [piece], 1, weights=weights, stats=stats).move


def play_order(
    grid: Grid,
    pieces: Sequence[Piece],
    order: Sequence[int],
    *,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Place ``pieces`` in ``order`` choosing each move greedily.

    Pieces without a legal move are skipped.  The score is the number of
    lines cleared during playback.
    """

    score = 0
    placements: List[Placement] = []
    for index in order:
        piece = pieces[index]
        move = best_move(grid, piece, weights=weights, stats=stats)
        if move is None:
            continue
        row, col = move
        outcome = place_and_clear(grid, piece, row, col)
        grid = outcome.cleared
        score += outcome.lines_cleared
        placements.append(Placement(index, row, col))
    return SearchResult(grid=grid, score=score, placements=tuple(placements))


def search_orderings(
    grid: Grid,
    pieces: Sequence[Piece],
    *,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
    max_pieces: int = MAX_ORDER_PIECES,
    stats: Optional[SearchStats] = None,
) -> Optional[OrderSearchResult]:
    """Try every ordering of ``pieces`` and keep the one with the best value.

    Returns ``None`` when there are no pieces to order.

    Raises:
        ValueError: If more than ``max_pieces`` pieces are given.
    """

    count = len(pieces)
    if count == 0:
        return None
    if count > max_pieces:
        raise ValueError(
            f"Order search over {count} pieces exceeds the limit of {max_pieces}"
        )

    orderings = itertools.permutations(range(count))
    best_order: Tuple[int, ...] = next(orderings)
    best_value = minimax(
        grid, [pieces[i] for i in best_order], count, weights=weights, stats=stats
    ).value
    evaluated = 1
    if stats is not None:
        stats.orderings += 1
    for order in orderings:
        evaluated += 1
        if stats is not None:
            stats.orderings += 1
        ordered = [pieces[i] for i in order]
        value = minimax(grid, ordered, count, weights=weights, stats=stats).value
        if value > best_value:
            best_order, best_value = order, value

    result = play_order(grid, pieces, best_order, weights=weights, stats=stats)
    return OrderSearchResult(
        order=best_order,
        value=best_value,
        orderings_evaluated=evaluated,
        result=result,
    )


__all__ = [
    "MAX_ORDER_PIECES",
    "MinimaxOutcome",
    "OrderSearchResult",
    "minimax",
    "best_move",
    "play_order",
    "search_orderings",
]
