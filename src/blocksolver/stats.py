"""Counters collected while a search runs."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator


@dataclass
class SearchStats:
    """Aggregated work counters for one or more searches.

    ``nodes`` counts every state visited (including leaves), ``leaves`` the
    terminal ones, ``pruned`` the alpha-beta cutoffs and ``orderings`` the
    piece orders tried by the permutation search.  ``elapsed`` accumulates
    wall time spent inside :meth:`timed` blocks.
    """

    nodes: int = 0
    leaves: int = 0
    pruned: int = 0
    orderings: int = 0
    elapsed: float = 0.0
    clock: Callable[[], float] = field(default=time.perf_counter, repr=False, compare=False)

    @contextmanager
    def timed(self) -> Iterator["SearchStats"]:
        """Add the runtime of the ``with`` body to :attr:`elapsed`."""

        start = self.clock()
        try:
            yield self
        finally:
            self.elapsed += self.clock() - start

    def reset(self) -> None:
        self.nodes = 0
        self.leaves = 0
        self.pruned = 0
        self.orderings = 0
        self.elapsed = 0.0

    def as_dict(self) -> Dict[str, float | int]:
        return {
            "nodes": self.nodes,
            "leaves": self.leaves,
            "pruned": self.pruned,
            "orderings": self.orderings,
            "elapsed": self.elapsed,
        }

    def describe(self) -> str:
        return (
            f"nodes={self.nodes}, leaves={self.leaves}, pruned={self.pruned}, "
            f"orderings={self.orderings}, elapsed={self.elapsed * 1000.0:.3f}ms"
        )


__all__ = ["SearchStats"]
