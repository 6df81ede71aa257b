"""
Edge models for the path tracing engine.

This module defines the model representing a weighted connection between two
nodes, together with the matching rules the mutation service and the path
engines rely on.
"""

from dataclasses import dataclass

from .base import validate_dataclass, validate_identifier, validate_weight


@validate_dataclass
@dataclass(frozen=True)
class Edge:
    """
    A weighted connection between two nodes.

    An undirected edge can be traversed both ways; a directed edge only from
    ``source`` to ``target`` (or only from ``target`` to ``source`` while
    traversing in reverse).

    Attributes:
        source (str): First endpoint id
        target (str): Second endpoint id
        weight (float): Strictly positive distance
        directed (bool): Whether the edge is one-way
    """

    source: str
    target: str
    weight: float
    directed: bool = False

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_identifier("source", self.source)
        validate_identifier("target", self.target)
        object.__setattr__(self, "weight", validate_weight(self.weight))

    @property
    def endpoints(self):
        """Return the (source, target) tuple."""
        return (self.source, self.target)

    def touches(self, node_id: str) -> bool:
        """Check whether the node is one of the endpoints."""
        return node_id in (self.source, self.target)

    def connects(self, a: str, b: str) -> bool:
        """Check whether the edge joins ``a`` and ``b`` in either order."""
        return (self.source == a and self.target == b) or (self.source == b and self.target == a)

    def matches(self, source: str, target: str, directed: bool) -> bool:
        """
        Upsert matching rule.

        The same ``source -> target`` pair always matches; the swapped pair
        matches only when the incoming edge is undirected.
        """
        if self.source == source and self.target == target:
            return True
        return not directed and self.source == target and self.target == source

    def allows(self, from_node: str, to_node: str, reverse: bool = False) -> bool:
        """Check whether the edge can be walked from ``from_node`` to ``to_node``."""
        if not self.directed:
            return self.connects(from_node, to_node)
        if reverse:
            return self.source == to_node and self.target == from_node
        return self.source == from_node and self.target == to_node
