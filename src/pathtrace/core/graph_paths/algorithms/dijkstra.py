"""
Dijkstra shortest path search.

The next node is picked with a linear scan over the unvisited nodes instead of
a heap. That makes the search O(V^2), which is fine for the small maps this
engine animates and keeps every iteration easy to follow in the trace.

Precondition: edge weights are non-negative. The mutation service only
accepts positive weights, so graphs built through it always satisfy this.
"""

import logging
from typing import Dict, Optional

from pathtrace.core.adjacency import AdjacencyIndex
from pathtrace.core.animation.steps import TraceRecorder
from pathtrace.core.graph_paths.base import FoundPath, SearchEngine
from pathtrace.core.graph_paths.types import Strategy
from pathtrace.core.graph_paths.utils import INFINITY, initial_distances, walk_predecessors

logger = logging.getLogger(__name__)


class DijkstraFinder(SearchEngine):
    """
    Classic relaxation search returning the minimum-weight path.

    Trace: ``Visit`` for the start, then for the selected node a ``Probe`` per
    still-unvisited neighbor and a ``Visit`` for each successful relaxation.
    Rejected relaxations are probed but not visited.
    """

    strategy = Strategy.DIJKSTRA

    def _search(
        self,
        adjacency: AdjacencyIndex,
        start_node: str,
        end_node: str,
        recorder: TraceRecorder,
    ) -> Optional[FoundPath]:
        order = self.node_order()
        distances = initial_distances(order, start_node)
        previous: Dict[str, Optional[str]] = {node_id: None for node_id in order}
        # Insertion-ordered, so ties go to the node listed first
        unvisited: Dict[str, None] = dict.fromkeys(order)

        recorder.visit(start_node)

        while unvisited:
            current = self._closest(unvisited, distances)
            if current is None:
                logger.debug("No reachable unvisited node left; stopping")
                break
            if current == end_node:
                break

            del unvisited[current]
            self.explored()
            current_path = walk_predecessors(previous, current)

            for neighbor in adjacency.get(current, ()):
                if neighbor.node not in unvisited:
                    continue

                recorder.probe(current, neighbor.node, current_path)
                candidate = distances[current] + neighbor.weight
                if candidate < distances[neighbor.node]:
                    distances[neighbor.node] = candidate
                    previous[neighbor.node] = current
                    recorder.visit(neighbor.node, walk_predecessors(previous, neighbor.node))

        if previous.get(end_node) is None:
            return None
        return walk_predecessors(previous, end_node), distances[end_node]

    @staticmethod
    def _closest(unvisited: Dict[str, None], distances: Dict[str, float]) -> Optional[str]:
        """Unvisited node with the smallest finite tentative distance."""
        closest: Optional[str] = None
        best = INFINITY
        for node_id in unvisited:
            if distances[node_id] < best:
                best = distances[node_id]
                closest = node_id
        return closest
