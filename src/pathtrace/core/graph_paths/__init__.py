"""Graph path finding functionality."""

import logging
from typing import Dict, Optional, Type, Union

from ..graph import GraphStore
from .algorithms import (
    BidirectionalWaveFinder,
    BreadthFirstFinder,
    DepthFirstFinder,
    DijkstraFinder,
    WaveFinder,
)
from .base import SearchEngine, SearchOutput
from .models import PathResult, PathValidationError, SearchMetrics
from .types import SearchStatus, Strategy
from .utils import calculate_path_weight

logger = logging.getLogger(__name__)

ENGINES: Dict[Strategy, Type[SearchEngine]] = {
    Strategy.DFS: DepthFirstFinder,
    Strategy.BFS: BreadthFirstFinder,
    Strategy.DIJKSTRA: DijkstraFinder,
    Strategy.WAVE: WaveFinder,
    Strategy.BIDIRECTIONAL_WAVE: BidirectionalWaveFinder,
}

__all__ = [
    "ENGINES",
    "PathFinding",
    "PathResult",
    "PathValidationError",
    "SearchEngine",
    "SearchMetrics",
    "SearchOutput",
    "SearchStatus",
    "Strategy",
    "calculate_path_weight",
    "compute_path",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def get_engine(
        store: GraphStore, strategy: Union[Strategy, str], reverse_traversal: bool = False
    ) -> SearchEngine:
        """Create the search engine for ``strategy``."""
        if not isinstance(strategy, Strategy):
            strategy = Strategy.parse(strategy)
        return ENGINES[strategy](store, reverse_traversal=reverse_traversal)

    @classmethod
    def search(
        cls,
        store: GraphStore,
        start_id: str,
        end_id: str,
        strategy: Union[Strategy, str] = Strategy.DFS,
        reverse_traversal: bool = False,
    ) -> SearchEngine:
        """
        Run a search and return the engine that ran it.

        The engine carries ``status`` and ``metrics`` even when nothing was
        found; use :meth:`compute_path` when only the outcome matters.
        """
        engine = cls.get_engine(store, strategy, reverse_traversal)
        engine.find_path(start_id, end_id)
        return engine

    @classmethod
    def compute_path(
        cls,
        store: GraphStore,
        start_id: str,
        end_id: str,
        strategy: Union[Strategy, str] = Strategy.DFS,
        reverse_traversal: bool = False,
    ) -> Optional[SearchOutput]:
        """
        Find a path between two nodes and record its animation trace.

        Args:
            store: Graph to search
            start_id: Start node id
            end_id: Target node id
            strategy: Strategy or strategy name
            reverse_traversal: Walk edges against their direction

        Returns:
            ``(PathResult, AnimationTrace)``, or None when the selection is
            invalid or the target is unreachable.

        Raises:
            ValueError: If ``strategy`` names no known strategy
        """
        engine = cls.search(store, start_id, end_id, strategy, reverse_traversal)
        if engine.status is not SearchStatus.FOUND:
            logger.info(
                "No path from %r to %r with %s: %s",
                start_id,
                end_id,
                engine.strategy.value,
                engine.status.value,
            )
        return engine.output


def compute_path(
    store: GraphStore,
    start_id: str,
    end_id: str,
    strategy: Union[Strategy, str] = Strategy.DFS,
    reverse_traversal: bool = False,
) -> Optional[SearchOutput]:
    """Module-level shortcut for :meth:`PathFinding.compute_path`."""
    return PathFinding.compute_path(store, start_id, end_id, strategy, reverse_traversal)
