"""
Depth-first path search.

The first path found wins. DFS guarantees neither the fewest hops nor the
smallest weight; it is kept for the shape of its exploration, which the trace
shows as long dives followed by backtracks.
"""

from typing import List, Optional, Set

from pathtrace.core.adjacency import AdjacencyIndex
from pathtrace.core.animation.steps import TraceRecorder
from pathtrace.core.graph_paths.base import FoundPath, SearchEngine
from pathtrace.core.graph_paths.types import Strategy


class DepthFirstFinder(SearchEngine):
    """
    Recursive depth-first search with an explicit visited set.

    Trace: ``Visit`` on entering a node (the target included), ``Probe`` before
    recursing into each unvisited neighbor, ``Backtrack`` when a node runs out
    of neighbors. Distance is summed along the single explored path.
    """

    strategy = Strategy.DFS

    def _search(
        self,
        adjacency: AdjacencyIndex,
        start_node: str,
        end_node: str,
        recorder: TraceRecorder,
    ) -> Optional[FoundPath]:
        visited: Set[str] = set()
        # Owned buffer; every call pushes its node and pops it again on a dead end
        path: List[str] = []

        def dfs(current: str, distance: float) -> Optional[float]:
            self.explored()
            recorder.visit(current, path)
            path.append(current)

            if current == end_node:
                return distance

            visited.add(current)
            for neighbor in adjacency.get(current, ()):
                if neighbor.node in visited:
                    continue
                recorder.probe(current, neighbor.node, path)
                found = dfs(neighbor.node, distance + neighbor.weight)
                if found is not None:
                    return found

            recorder.backtrack(current, path)
            path.pop()
            return None

        total = dfs(start_node, 0.0)
        if total is None:
            return None
        return list(path), total
