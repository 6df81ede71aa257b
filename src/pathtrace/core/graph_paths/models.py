"""
Data models for graph path finding.

This module provides the core data structures used throughout the path finding package:
- PathResult: Container for a found path with validation against the live graph
- SearchMetrics: Container for per-search timing and exploration counters
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(path=("A", "B", "C"), total_distance=8.0)
    >>> result.hop_count
    2
    >>> result.validate(store)  # Ensures every hop is a live edge
"""

from dataclasses import dataclass, field
from time import perf_counter
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..graph import GraphStore
from .types import Strategy


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Fewer than two nodes in the path
    - Consecutive nodes not joined by a walkable edge
    - Distance inconsistent with the edge weights
    """


@dataclass
class SearchMetrics:
    """
    Container for path search performance metrics.

    Attributes:
        operation: Name of the strategy that ran
        start_time: Search start timestamp (``perf_counter`` seconds)
        end_time: Search end timestamp (0.0 while running)
        nodes_explored: Number of nodes the search entered
        steps_recorded: Number of animation steps in the trace

    Example:
        >>> metrics = SearchMetrics(operation="dijkstra", start_time=perf_counter())
        >>> # ... perform search ...
        >>> metrics.finish()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    steps_recorded: int = 0

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    def finish(self) -> None:
        """Stamp the end time."""
        self.end_time = perf_counter()

    @property
    def duration(self) -> float:
        """Duration of the search in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "steps_recorded": self.steps_recorded,
        }


@dataclass(frozen=True)
class PathResult:
    """
    Container for a found path.

    Attributes:
        path: Node ids from start to end, both inclusive
        total_distance: Sum of traversed edge weights as reported by the strategy
        strategy: Strategy that produced the path
        reverse_traversal: Traversal mode the path was found in
        metrics: Timing and exploration counters (not part of equality)
    """

    path: Tuple[str, ...]
    total_distance: float
    strategy: Optional[Strategy] = None
    reverse_traversal: bool = False
    metrics: Optional[SearchMetrics] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))
        if len(self.path) < 2:
            raise PathValidationError("path must contain at least a start and an end node")
        if not isinstance(self.total_distance, (int, float)):
            raise TypeError("total_distance must be a numeric value")

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.path)

    def __iter__(self) -> Iterator[str]:
        return iter(self.path)

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def end(self) -> str:
        return self.path[-1]

    @property
    def hop_count(self) -> int:
        """Number of edges walked."""
        return len(self.path) - 1

    @property
    def edges(self) -> List[Tuple[str, str]]:
        """Consecutive (from, to) pairs along the path."""
        return list(zip(self.path, self.path[1:]))

    def uses_node(self, node_id: str) -> bool:
        return node_id in self.path

    def uses_edge(self, a: str, b: str) -> bool:
        """Check whether the path walks between ``a`` and ``b`` in either order."""
        return any({a, b} == {u, v} for u, v in self.edges)

    def validate(self, store: GraphStore, weight_epsilon: float = 1e-9, check_distance: bool = False) -> None:
        """
        Validate the path against the live graph.

        Args:
            store: The graph store to validate against
            weight_epsilon: Precision for distance comparisons
            check_distance: Also require ``total_distance`` to equal the sum of
                the first walkable edge's weight for every hop

        Raises:
            PathValidationError: If any validation check fails
        """
        total = 0.0
        for index, (from_node, to_node) in enumerate(self.edges):
            edge = store.get_edge(from_node, to_node, reverse=self.reverse_traversal)
            if edge is None:
                raise PathValidationError(
                    f"No walkable edge between {from_node} and {to_node} at hop {index}"
                )
            total += edge.weight

        if check_distance and abs(total - self.total_distance) > weight_epsilon:
            raise PathValidationError(
                f"Distance mismatch: calculated {total} != stored {self.total_distance}"
            )

    def to_dict(self) -> Dict[str, object]:
        """Convert the result to a JSON-friendly dictionary."""
        return {
            "path": list(self.path),
            "total_distance": self.total_distance,
            "strategy": self.strategy.value if self.strategy else None,
            "reverse_traversal": self.reverse_traversal,
            "metrics": self.metrics.to_dict() if self.metrics else None,
        }
