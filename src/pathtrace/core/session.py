"""
Graph mutation service and search session.

``PathSession`` is the only writer of its ``GraphStore``. It applies policy the
store does not know about (weight rules, duplicate names, endpoint checks),
keeps the start/end selection, runs searches and owns the resulting path,
trace and player.

Invalidation is driven by the store's change events: the session listens to
its own store and drops any path or trace that referenced a removed or
rewritten element, whichever entry point caused the change.
"""

import logging
from typing import List, Optional, Tuple, Union

from pathtrace.config import SessionConfig
from pathtrace.core.animation import AnimationTrace, TracePlayer
from pathtrace.core.exceptions import (
    DuplicateNodeError,
    InvalidEdgeError,
    NodeNotFoundError,
)
from pathtrace.core.graph import GraphEvent, GraphSnapshot, GraphStore
from pathtrace.core.graph_paths import PathFinding, PathResult, SearchMetrics, SearchStatus, Strategy
from pathtrace.core.models import Edge, Node

logger = logging.getLogger(__name__)


class PathSession:
    """
    Stateful front door to the engine.

    Attributes:
        store: Graph being edited and searched
        config: Session configuration
        start_id: Selected start node, None when the graph is empty
        end_id: Selected target node, None when the graph is empty
        result: Last found path, None when nothing is stored
        trace: Trace of the last found path
        status: Outcome of the last search
        player: Player for ``trace``
    """

    def __init__(self, store: Optional[GraphStore] = None, config: Optional[SessionConfig] = None):
        self.store = store if store is not None else GraphStore()
        self.config = config if config is not None else SessionConfig()
        self._strategy = self.config.default_strategy
        self.reverse_traversal = self.config.reverse_traversal

        node_ids = self.store.get_node_ids()
        self.start_id: Optional[str] = node_ids[0] if node_ids else None
        self.end_id: Optional[str] = node_ids[-1] if node_ids else None

        self.result: Optional[PathResult] = None
        self.trace: Optional[AnimationTrace] = None
        self.status: Optional[SearchStatus] = None
        self.metrics: Optional[SearchMetrics] = None
        self.player: Optional[TracePlayer] = None

        self.store.add_state_listener(self)

    def close(self) -> None:
        """Detach from the store."""
        self.store.remove_state_listener(self)

    # Selection

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, value: Union[Strategy, str]) -> None:
        self._strategy = Strategy.parse(value)

    def select(self, start_id: Optional[str] = None, end_id: Optional[str] = None) -> None:
        """
        Choose the search endpoints.

        Unknown ids are accepted here; the search reports them as an invalid
        selection.
        """
        if start_id is not None:
            self.start_id = start_id
        if end_id is not None:
            self.end_id = end_id

    # Mutations

    def add_node(self, name: str, x: float = 0.0, y: float = 0.0) -> GraphSnapshot:
        """
        Add a node named ``name`` at ``(x, y)``.

        Raises:
            DuplicateNodeError: If the name is taken and duplicates are not allowed
            ValueError: If the name is empty
        """
        if self.store.has_node(name) and not self.config.allow_duplicate_names:
            logger.warning("Rejected duplicate node %r", name)
            raise DuplicateNodeError(f"Node '{name}' already exists")

        self.store.add_node(Node(id=name, x=float(x), y=float(y)))
        if self.start_id is None:
            self.start_id = name
        if self.end_id is None:
            self.end_id = name
        logger.info("Added node %s at (%s, %s)", name, x, y)
        return self.store.snapshot()

    def delete_node(self, node_id: str) -> GraphSnapshot:
        """Delete a node and its edges; unknown ids are ignored."""
        if not self.store.has_node(node_id):
            logger.debug("delete_node: %r not in graph, nothing to do", node_id)
            return self.store.snapshot()

        removed = self.store.remove_node(node_id)
        logger.info("Deleted node %s and %d incident edges", node_id, len(removed))
        return self.store.snapshot()

    def add_edge(self, source: str, target: str, weight: float, directed: bool = False) -> GraphSnapshot:
        """
        Add an edge, or update weight and direction of every matching one.

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
            InvalidEdgeError: If the weight is not a positive finite number or
                the edge would be a self-loop
        """
        for node_id in (source, target):
            if not self.store.has_node(node_id):
                logger.warning("Rejected edge %s-%s: unknown node %r", source, target, node_id)
                raise NodeNotFoundError(f"Node '{node_id}' not found in the graph")
        if source == target:
            logger.warning("Rejected self-loop on %s", source)
            raise InvalidEdgeError(f"Edge cannot connect node '{source}' to itself")

        try:
            edge = Edge(source=source, target=target, weight=weight, directed=bool(directed))
        except (TypeError, ValueError) as e:
            logger.warning("Rejected edge %s-%s: %s", source, target, e)
            raise InvalidEdgeError(str(e)) from e

        updated = self.store.upsert_edge(edge)
        logger.info(
            "%s edge %s %s %s (weight %s)",
            "Updated" if updated else "Added",
            source,
            "->" if directed else "--",
            target,
            edge.weight,
        )
        return self.store.snapshot()

    def delete_edge(self, source: str, target: str) -> GraphSnapshot:
        """Delete every edge between two nodes, in either order; missing edges are ignored."""
        removed = self.store.remove_edge(source, target)
        if removed:
            logger.info("Deleted %d edge(s) between %s and %s", len(removed), source, target)
        else:
            logger.debug("delete_edge: no edge between %r and %r", source, target)
        return self.store.snapshot()

    def snapshot(self) -> GraphSnapshot:
        return self.store.snapshot()

    # Queries

    def connections(self, node_id: str) -> List[Tuple[str, float]]:
        """Neighbors of ``node_id`` in either direction, nearest first."""
        return self.store.get_connections(node_id)

    def find_path(self) -> Optional[PathResult]:
        """
        Search between the selected endpoints with the selected strategy.

        The result, its trace and a fresh player replace whatever was stored.

        Returns:
            The path, or None; ``status`` tells why nothing was found.
        """
        self.clear_result()
        engine = PathFinding.search(
            self.store,
            self.start_id or "",
            self.end_id or "",
            self._strategy,
            self.reverse_traversal,
        )
        self.status = engine.status
        self.metrics = engine.metrics

        if engine.output is None:
            logger.info(
                "No path from %r to %r (%s): %s",
                self.start_id,
                self.end_id,
                self._strategy.value,
                self.status.value,
            )
            return None

        self.result, self.trace = engine.output
        self.player = TracePlayer(self.trace, self.config.playback)
        logger.info(
            "%s path %s, distance %s, %d steps",
            self._strategy.value,
            " -> ".join(self.result.path),
            self.result.total_distance,
            len(self.trace),
        )
        return self.result

    def clear_result(self) -> None:
        """Drop the stored path, trace and player."""
        if self.player is not None:
            self.player.reset()
        self.result = None
        self.trace = None
        self.player = None

    # Invalidation

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Stop playback on every change and drop results the change made stale."""
        if self.player is not None:
            self.player.reset()

        if change_type is GraphEvent.NODE_REMOVED:
            self._node_removed(details["node_id"])
        elif change_type is GraphEvent.EDGE_REMOVED:
            if self._path_uses_any(details["removed_edges"]):
                self._invalidate(f"edge {details['source']}-{details['target']} removed")
        elif change_type is GraphEvent.EDGE_UPDATED:
            if self._path_uses_any([details["edge"]]):
                self._invalidate(f"edge {details['edge'].source}-{details['edge'].target} updated")
        elif change_type is GraphEvent.GRAPH_CLEARED:
            self.start_id = None
            self.end_id = None
            self._invalidate("graph cleared")

    def _node_removed(self, node_id: str) -> None:
        was_endpoint = node_id in (self.start_id, self.end_id)
        if was_endpoint or (self.result is not None and self.result.uses_node(node_id)):
            self._invalidate(f"node {node_id} removed")

        if was_endpoint:
            node_ids = self.store.get_node_ids()
            fallback = node_ids[0] if node_ids else None
            if self.start_id == node_id:
                self.start_id = fallback
            if self.end_id == node_id:
                self.end_id = fallback

    def _path_uses_any(self, edges: List[Edge]) -> bool:
        if self.result is None:
            return False
        return any(self.result.uses_edge(edge.source, edge.target) for edge in edges)

    def _invalidate(self, reason: str) -> None:
        if self.result is not None or self.trace is not None:
            logger.info("Cleared stored path: %s", reason)
        self.clear_result()
