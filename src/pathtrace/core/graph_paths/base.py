import logging
from abc import ABC, abstractmethod
from time import perf_counter
from typing import ClassVar, List, Optional, Tuple

from pathtrace.core.adjacency import AdjacencyIndex, build_adjacency
from pathtrace.core.animation.steps import AnimationTrace, TraceRecorder
from pathtrace.core.graph import GraphStore
from pathtrace.core.graph_paths.models import PathResult, SearchMetrics
from pathtrace.core.graph_paths.types import SearchStatus, Strategy

logger = logging.getLogger(__name__)

# A found path and its distance, as returned by a strategy's search loop
FoundPath = Tuple[List[str], float]

SearchOutput = Tuple[PathResult, AnimationTrace]


class SearchEngine(ABC):
    """Abstract base class for path search strategies."""

    strategy: ClassVar[Strategy]

    def __init__(self, store: GraphStore, reverse_traversal: bool = False):
        """Initialize engine with the graph store and traversal mode."""
        self.store = store
        self.reverse_traversal = reverse_traversal
        self.status: Optional[SearchStatus] = None
        self.metrics: Optional[SearchMetrics] = None
        self.output: Optional[SearchOutput] = None

    def find_path(self, start_node: str, end_node: str) -> Optional[SearchOutput]:
        """
        Search for a path and record the animation trace.

        Returns:
            The path and its trace, or None when the selection is invalid or
            the target cannot be reached. ``status`` tells the two apart.
        """
        self.metrics = SearchMetrics(operation=self.strategy.value, start_time=perf_counter())
        self.output = None

        if not self.validate_selection(start_node, end_node):
            self.status = SearchStatus.INVALID_SELECTION
            self.metrics.finish()
            logger.debug(
                "%s skipped: invalid selection start=%r end=%r",
                self.strategy.value,
                start_node,
                end_node,
            )
            return None

        recorder = TraceRecorder()
        found = self._search(self.build_adjacency(), start_node, end_node, recorder)
        self.metrics.steps_recorded = len(recorder)
        self.metrics.finish()

        if found is None:
            self.status = SearchStatus.UNREACHABLE_TARGET
            logger.debug(
                "%s exhausted without reaching %s from %s (%d nodes explored)",
                self.strategy.value,
                end_node,
                start_node,
                self.metrics.nodes_explored,
            )
            return None

        path, distance = found
        result = PathResult(
            path=tuple(path),
            total_distance=distance,
            strategy=self.strategy,
            reverse_traversal=self.reverse_traversal,
            metrics=self.metrics,
        )
        self.status = SearchStatus.FOUND
        logger.debug(
            "%s found %s (distance %s) in %.3fms with %d steps",
            self.strategy.value,
            " -> ".join(path),
            distance,
            self.metrics.duration,
            self.metrics.steps_recorded,
        )
        self.output = (result, recorder.build())
        return self.output

    def validate_selection(self, start_node: str, end_node: str) -> bool:
        """Check that both endpoints are set, distinct and present in the graph."""
        if not start_node or not end_node or start_node == end_node:
            return False
        return self.store.has_node(start_node) and self.store.has_node(end_node)

    def node_order(self) -> List[str]:
        """Distinct node ids in store order."""
        return list(dict.fromkeys(self.store.get_node_ids()))

    def build_adjacency(self, transpose: bool = False) -> AdjacencyIndex:
        """Build the adjacency index for the current traversal mode."""
        return build_adjacency(
            self.node_order(),
            self.store.get_edges(),
            reverse_traversal=self.reverse_traversal,
            transpose=transpose,
        )

    def explored(self, count: int = 1) -> None:
        """Count nodes entered by the search."""
        if self.metrics is not None:
            self.metrics.nodes_explored += count

    @abstractmethod
    def _search(
        self,
        adjacency: AdjacencyIndex,
        start_node: str,
        end_node: str,
        recorder: TraceRecorder,
    ) -> Optional[FoundPath]:
        """Run the strategy, recording steps; return the path and distance if found."""
