"""High level entry point tying the search strategies together.

>>> from blocksolver import Grid, Piece, solve
>>> result = solve(Grid.empty(4), [Piece.parse("1111")])
>>> result.score
1
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .board import Grid
from .evaluation import DEFAULT_WEIGHTS, EvaluationWeights
from .lines import place_and_clear
from .minimax import MAX_ORDER_PIECES, search_orderings
from .moves import Placement
from .pieces import Piece
from .search import SearchResult, backtrack, backtrack_lookahead
from .stats import SearchStats


LOGGER = logging.getLogger(__name__)

# Recursion depth equals the piece count; refuse inputs that would make the
# exhaustive search hopeless long before Python's recursion limit matters.
MAX_SEARCH_PIECES = 12


class Strategy(str, Enum):
    """Available search strategies."""

    EXHAUSTIVE = "exhaustive"
    LOOKAHEAD = "lookahead"
    MINIMAX = "minimax"


@dataclass(frozen=True)
class SolverConfig:
    """Parameters for :func:`solve`.

    ``lookahead`` only applies to :attr:`Strategy.LOOKAHEAD`;
    ``max_order_pieces`` only to :attr:`Strategy.MINIMAX`.
    """

    strategy: Strategy = Strategy.EXHAUSTIVE
    lookahead: int = 2
    max_pieces: int = MAX_SEARCH_PIECES
    max_order_pieces: int = MAX_ORDER_PIECES
    weights: EvaluationWeights = DEFAULT_WEIGHTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", Strategy(self.strategy))
        if self.lookahead < 0:
            raise ValueError("lookahead must be non-negative")
        if self.max_pieces < 0 or self.max_order_pieces < 0:
            raise ValueError("piece limits must be non-negative")


@dataclass(frozen=True)
class ReplayStep:
    """One placement of a replayed solution.

    ``placed`` shows the grid with the piece locked but before any line is
    cleared, ``grid`` the state after clearing.
    """

    placement: Placement
    placed: Grid
    grid: Grid
    lines_cleared: int


def solve(
    grid: Grid,
    pieces: Sequence[Piece],
    config: Optional[SolverConfig] = None,
    *,
    stats: Optional[SearchStats] = None,
) -> Optional[SearchResult]:
    """Search placements for ``pieces`` on ``grid``.

    Returns ``None`` only for the minimax strategy with an empty piece list,
    where there is no ordering to report.

    Raises:
        ValueError: If there are more pieces than ``config.max_pieces``.
    """

    config = config or SolverConfig()
    if len(pieces) > config.max_pieces:
        raise ValueError(
            f"{len(pieces)} pieces exceed the search limit of {config.max_pieces}"
        )
    stats = stats if stats is not None else SearchStats()

    with stats.timed():
        if config.strategy is Strategy.EXHAUSTIVE:
            result: Optional[SearchResult] = backtrack(grid, pieces, stats=stats)
        elif config.strategy is Strategy.LOOKAHEAD:
            result = backtrack_lookahead(grid, pieces, config.lookahead, stats=stats)
        else:
            ordered = search_orderings(
                grid,
                pieces,
                weights=config.weights,
                max_pieces=config.max_order_pieces,
                stats=stats,
            )
            result = ordered.result if ordered is not None else None

    if result is None:
        LOGGER.debug("%s search produced no result (%s)", config.strategy.value, stats.describe())
    else:
        LOGGER.debug(
            "%s search: score=%d, placements=%d (%s)",
            config.strategy.value,
            result.score,
            len(result.placements),
            stats.describe(),
        )
    return result


def replay(
    grid: Grid, pieces: Sequence[Piece], placements: Sequence[Placement]
) -> List[ReplayStep]:
    """Re-apply ``placements`` to ``grid`` and return every intermediate state.

    Raises:
        InvalidPlacementError: If a placement does not fit, which means the
            placements were not produced for this grid and piece list.
    """

    steps: List[ReplayStep] = []
    for placement in placements:
        piece = pieces[placement.piece_index]
        outcome = place_and_clear(grid, piece, placement.row, placement.col)
        steps.append(
            ReplayStep(
                placement=placement,
                placed=outcome.placed,
                grid=outcome.cleared,
                lines_cleared=outcome.lines_cleared,
            )
        )
        grid = outcome.cleared
    return steps


__all__ = [
    "MAX_SEARCH_PIECES",
    "Strategy",
    "SolverConfig",
    "ReplayStep",
    "solve",
    "replay",
]
