"""
Layered ("wave") path search.

The frontier is expanded one full layer at a time so the animation can show
several nodes advancing together. Distances are bookkept as
``distance[neighbor] = distance[current] + weight`` in discovery order, which is
layer order rather than weight order: on graphs with uneven weights the
reported distance can be larger than Dijkstra's.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, List, Optional, Set, Tuple

from pathtrace.core.adjacency import AdjacencyIndex
from pathtrace.core.animation.steps import TraceRecorder
from pathtrace.core.graph_paths.base import FoundPath, SearchEngine
from pathtrace.core.graph_paths.types import Strategy
from pathtrace.core.graph_paths.utils import walk_predecessors

logger = logging.getLogger(__name__)

NodePredicate = Callable[[str], bool]


@dataclass
class WaveFront:
    """
    One growing frontier: its queue, visited set and predecessor/distance tables.

    Attributes:
        origin: Node the frontier grows from
        adjacency: Index the frontier expands over
        is_backward: Tags recorded waves as grown from the target
        wave_index: Index the next recorded wave will carry
    """

    origin: str
    adjacency: AdjacencyIndex
    is_backward: bool = False
    wave_index: int = 0
    queue: Deque[str] = field(init=False)
    visited: Set[str] = field(init=False)
    previous: Dict[str, Optional[str]] = field(init=False)
    distances: Dict[str, float] = field(init=False)

    def __post_init__(self):
        self.queue = deque([self.origin])
        self.visited = {self.origin}
        self.previous = {self.origin: None}
        self.distances = {self.origin: 0.0}

    def __bool__(self) -> bool:
        return bool(self.queue)

    def take_wave(self, stop_at: Optional[NodePredicate] = None) -> Tuple[List[str], Optional[str]]:
        """
        Dequeue the current frontier.

        Dequeuing stops at the first node matching ``stop_at``; nodes after it
        stay queued.

        Returns:
            The dequeued nodes and the matching node, if any.
        """
        wave: List[str] = []
        for _ in range(len(self.queue)):
            node = self.queue.popleft()
            wave.append(node)
            if stop_at is not None and stop_at(node):
                return wave, node
        return wave, None

    def expand(
        self, wave: List[str], stop_at: Optional[NodePredicate] = None
    ) -> Tuple[List[Tuple[str, str]], List[str], Optional[str]]:
        """
        Discover the unvisited neighbors of every node in ``wave``.

        Expansion stops right after discovering a node matching ``stop_at``.

        Returns:
            Walked edges, newly discovered nodes and the matching node, if any.
        """
        edges: List[Tuple[str, str]] = []
        discovered: List[str] = []

        for current in wave:
            for neighbor in self.adjacency.get(current, ()):
                if neighbor.node in self.visited:
                    continue

                self.visited.add(neighbor.node)
                self.previous[neighbor.node] = current
                self.distances[neighbor.node] = self.distances[current] + neighbor.weight
                edges.append((current, neighbor.node))
                discovered.append(neighbor.node)
                self.queue.append(neighbor.node)

                if stop_at is not None and stop_at(neighbor.node):
                    return edges, discovered, neighbor.node

        return edges, discovered, None

    def record(
        self,
        recorder: TraceRecorder,
        wave: List[str],
        edges: List[Tuple[str, str]],
        discovered: List[str],
        path: Tuple[str, ...] = (),
    ) -> None:
        """Record the wave as one step; waves that walked no edge are skipped."""
        if not edges:
            return
        recorder.wave(wave, edges, discovered, self.wave_index, self.is_backward, path)
        self.wave_index += 1

    def path_to(self, node: str) -> List[str]:
        """Predecessor chain from the origin to ``node``."""
        return walk_predecessors(self.previous, node)


class WaveFinder(SearchEngine):
    """
    Breadth-first search expanded one whole layer per step.

    Trace: ``Visit`` for the start, then one ``WaveExpand`` per layer that
    discovered at least one node, numbered from 0.
    """

    strategy = Strategy.WAVE

    def _search(
        self,
        adjacency: AdjacencyIndex,
        start_node: str,
        end_node: str,
        recorder: TraceRecorder,
    ) -> Optional[FoundPath]:
        front = WaveFront(start_node, adjacency)
        recorder.visit(start_node)

        while front:
            wave, reached = front.take_wave(stop_at=lambda node: node == end_node)
            self.explored(len(wave))
            if reached is not None:
                return front.path_to(end_node), front.distances[end_node]

            edges, discovered, _ = front.expand(wave)
            front.record(recorder, wave, edges, discovered, path=tuple(front.path_to(wave[0])))
            logger.debug(
                "Wave %d: %d nodes expanded, %d discovered", front.wave_index, len(wave), len(discovered)
            )

        return None
