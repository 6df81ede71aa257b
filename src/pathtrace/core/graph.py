"""
Graph store holding the authoritative, ordered set of nodes and edges.

This module provides the GraphStore class, the single source of truth read by the
adjacency builder and the path engines. Insertion order of both nodes and edges
is preserved because it decides neighbor order, and with it the tie-breaks of
every traversal.

The store itself performs no policy checks (weight rules, duplicate names,
invalidation); those belong to the mutation service in ``pathtrace.core.session``,
which subscribes to the events the store emits.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from threading import RLock
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from .exceptions import EdgeNotFoundError, NodeNotFoundError
from .models import Edge, Node


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    NODE_ADDED = auto()
    NODE_REMOVED = auto()
    EDGE_ADDED = auto()
    EDGE_UPDATED = auto()
    EDGE_REMOVED = auto()
    GRAPH_CLEARED = auto()


class GraphStateListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Called when the graph state changes."""


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)


@dataclass(frozen=True)
class GraphSnapshot:
    """Immutable view of the graph returned by every mutation."""

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]

    @property
    def node_ids(self) -> List[str]:
        """Node ids in store order."""
        return [node.id for node in self.nodes]


class GraphStore:
    """
    Ordered node and edge storage with change notification.

    Attributes:
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock guarding state access
        _listeners (List[GraphStateListener]): State change listeners
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None, edges: Optional[Iterable[Edge]] = None):
        """
        Initialize the store.

        Args:
            nodes: Initial nodes, in display order
            edges: Initial edges, in insertion order
        """
        self._state = GraphState()
        self._state_lock = RLock()
        self._listeners: List[GraphStateListener] = []
        self._state.nodes.extend(nodes or ())
        self._state.edges.extend(edges or ())

    def add_state_listener(self, listener: GraphStateListener) -> None:
        """Add a listener for state changes."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_state_listener(self, listener: GraphStateListener) -> None:
        """Remove a state change listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Notify listeners of a state change."""
        for listener in list(self._listeners):
            listener.on_state_change(change_type, details)

    # Nodes

    def add_node(self, node: Node) -> None:
        """Append a node. Identifier uniqueness is not checked here."""
        with self._state_lock:
            self._state.nodes.append(node)
            self._notify_state_change(GraphEvent.NODE_ADDED, {"node": node})

    def remove_node(self, node_id: str) -> List[Edge]:
        """
        Remove every node entry with this id and every edge touching it.

        Returns:
            The removed edges, in store order. An unknown id removes nothing.
        """
        with self._state_lock:
            if not self.has_node(node_id):
                return []

            removed_edges = [edge for edge in self._state.edges if edge.touches(node_id)]
            self._state.nodes = [node for node in self._state.nodes if node.id != node_id]
            self._state.edges = [edge for edge in self._state.edges if not edge.touches(node_id)]

            self._notify_state_change(
                GraphEvent.NODE_REMOVED, {"node_id": node_id, "removed_edges": removed_edges}
            )
            return removed_edges

    def has_node(self, node_id: str) -> bool:
        """Check if a node exists in the graph."""
        with self._state_lock:
            return any(node.id == node_id for node in self._state.nodes)

    def get_node(self, node_id: str) -> Node:
        """Get the first node with this id, raising if there is none."""
        with self._state_lock:
            for node in self._state.nodes:
                if node.id == node_id:
                    return node
        raise NodeNotFoundError(f"Node '{node_id}' not found in the graph")

    def get_nodes(self) -> List[Node]:
        """Get all nodes in store order."""
        with self._state_lock:
            return list(self._state.nodes)

    def get_node_ids(self) -> List[str]:
        """Get all node ids in store order."""
        with self._state_lock:
            return [node.id for node in self._state.nodes]

    # Edges

    def upsert_edge(self, edge: Edge) -> bool:
        """
        Insert an edge, or overwrite weight and direction of every matching one.

        Matching edges (see ``Edge.matches``) are replaced at their positions, so
        an update never changes neighbor order. One ``EDGE_UPDATED`` event is
        sent per rewritten edge, after all of them are in place.

        Returns:
            True if any existing edge was updated, False if the edge was appended.
        """
        with self._state_lock:
            updates = []
            for index, existing in enumerate(self._state.edges):
                if existing.matches(edge.source, edge.target, edge.directed):
                    updated = replace(existing, weight=edge.weight, directed=edge.directed)
                    self._state.edges[index] = updated
                    updates.append((existing, updated))

            if not updates:
                self._state.edges.append(edge)
                self._notify_state_change(GraphEvent.EDGE_ADDED, {"edge": edge})
                return False

            for previous, updated in updates:
                self._notify_state_change(
                    GraphEvent.EDGE_UPDATED, {"previous": previous, "edge": updated}
                )
            return True

    def remove_edge(self, source: str, target: str) -> List[Edge]:
        """
        Remove every edge joining the two nodes, in either order.

        Returns:
            The removed edges. A missing edge removes nothing.
        """
        with self._state_lock:
            removed = [edge for edge in self._state.edges if edge.connects(source, target)]
            if not removed:
                return []

            self._state.edges = [
                edge for edge in self._state.edges if not edge.connects(source, target)
            ]
            self._notify_state_change(
                GraphEvent.EDGE_REMOVED,
                {"source": source, "target": target, "removed_edges": removed},
            )
            return removed

    def get_edges(self) -> List[Edge]:
        """Get all edges in insertion order."""
        with self._state_lock:
            return list(self._state.edges)

    def get_edge(self, from_node: str, to_node: str, reverse: bool = False) -> Optional[Edge]:
        """Get the first edge that can be walked from one node to the other."""
        with self._state_lock:
            for edge in self._state.edges:
                if edge.allows(from_node, to_node, reverse):
                    return edge
            return None

    def get_edge_safe(self, from_node: str, to_node: str, reverse: bool = False) -> Edge:
        """Get a walkable edge between two nodes, raising an error if it doesn't exist."""
        with self._state_lock:
            if not self.has_node(from_node):
                raise NodeNotFoundError(f"Source node '{from_node}' not found in the graph")
            if not self.has_node(to_node):
                raise NodeNotFoundError(f"Target node '{to_node}' not found in the graph")

            edge = self.get_edge(from_node, to_node, reverse)
            if edge is None:
                raise EdgeNotFoundError(f"No edge exists from '{from_node}' to '{to_node}'")
            return edge

    def has_edge(self, from_node: str, to_node: str, reverse: bool = False) -> bool:
        """Check if a walkable edge exists between two nodes."""
        return self.get_edge(from_node, to_node, reverse) is not None

    def get_edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        with self._state_lock:
            return len(self._state.edges)

    def get_connections(self, node_id: str) -> List[Tuple[str, float]]:
        """
        List the nodes joined to ``node_id`` by any edge, nearest first.

        Direction is ignored, each neighbor appears once (with the weight of the
        first edge found) and ties keep edge order.
        """
        with self._state_lock:
            if not self.has_node(node_id):
                raise NodeNotFoundError(f"Node '{node_id}' not found in the graph")

            seen: Dict[str, float] = {}
            for edge in self._state.edges:
                if not edge.touches(node_id):
                    continue
                other = edge.target if edge.source == node_id else edge.source
                if other not in seen:
                    seen[other] = edge.weight
            return sorted(seen.items(), key=lambda item: item[1])

    def snapshot(self) -> GraphSnapshot:
        """Return an immutable copy of the current nodes and edges."""
        with self._state_lock:
            return GraphSnapshot(nodes=tuple(self._state.nodes), edges=tuple(self._state.edges))

    def clear(self) -> None:
        """Remove all nodes and edges."""
        with self._state_lock:
            self._state = GraphState()
            self._notify_state_change(GraphEvent.GRAPH_CLEARED, {})

    @classmethod
    def from_edges(cls, edges: List[Edge]) -> "GraphStore":
        """Create a store from edges, adding endpoints as nodes in first-seen order."""
        node_ids: Dict[str, None] = {}
        for edge in edges:
            node_ids.setdefault(edge.source)
            node_ids.setdefault(edge.target)
        return cls(nodes=[Node(id=node_id) for node_id in node_ids], edges=edges)
