"""Search engine for 1010!/Block Blast style block-packing puzzles."""

from .board import DEFAULT_SIZE, Grid
from .pieces import PIECE_CATALOG, Piece, catalog_piece, parse_rows
from .moves import Placement, enumerate_moves, is_valid_placement
from .lines import (
    InvalidPlacementError,
    PlacementOutcome,
    apply_placement,
    clear_lines,
    place_and_clear,
)
from .evaluation import DEFAULT_WEIGHTS, EvaluationWeights, count_holes, evaluate
from .stats import SearchStats
from .search import SearchResult, backtrack, backtrack_lookahead
from .minimax import (
    MinimaxOutcome,
    OrderSearchResult,
    best_move,
    minimax,
    play_order,
    search_orderings,
)
from .solver import ReplayStep, SolverConfig, Strategy, replay, solve

__all__ = [
    "DEFAULT_SIZE",
    "Grid",
    "Piece",
    "PIECE_CATALOG",
    "catalog_piece",
    "parse_rows",
    "Placement",
    "enumerate_moves",
    "is_valid_placement",
    "InvalidPlacementError",
    "PlacementOutcome",
    "apply_placement",
    "clear_lines",
    "place_and_clear",
    "DEFAULT_WEIGHTS",
    "EvaluationWeights",
    "count_holes",
    "evaluate",
    "SearchStats",
    "SearchResult",
    "backtrack",
    "backtrack_lookahead",
    "MinimaxOutcome",
    "OrderSearchResult",
    "best_move",
    "minimax",
    "play_order",
    "search_orderings",
    "ReplayStep",
    "SolverConfig",
    "Strategy",
    "replay",
    "solve",
]
