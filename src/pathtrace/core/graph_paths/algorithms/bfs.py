"""Breadth-first path search."""

from collections import deque
from typing import Deque, Optional, Set, Tuple

from pathtrace.core.adjacency import AdjacencyIndex
from pathtrace.core.animation.steps import TraceRecorder
from pathtrace.core.graph_paths.base import FoundPath, SearchEngine
from pathtrace.core.graph_paths.types import Strategy


class BreadthFirstFinder(SearchEngine):
    """
    Queue-based breadth-first search.

    Nodes are marked visited when enqueued, so no node is queued twice. Each
    queue entry carries its own path so far; the target is detected when it is
    dequeued. The result has the fewest hops; its distance is informational.
    """

    strategy = Strategy.BFS

    def _search(
        self,
        adjacency: AdjacencyIndex,
        start_node: str,
        end_node: str,
        recorder: TraceRecorder,
    ) -> Optional[FoundPath]:
        queue: Deque[Tuple[str, Tuple[str, ...], float]] = deque([(start_node, (), 0.0)])
        visited: Set[str] = {start_node}
        recorder.visit(start_node)

        while queue:
            node, prefix, distance = queue.popleft()
            self.explored()
            current_path = prefix + (node,)

            if node == end_node:
                return list(current_path), distance

            for neighbor in adjacency.get(node, ()):
                if neighbor.node in visited:
                    continue
                visited.add(neighbor.node)
                recorder.probe(node, neighbor.node, current_path)
                recorder.visit(neighbor.node, current_path)
                queue.append((neighbor.node, current_path, distance + neighbor.weight))

        return None
