"""
Tests for the graph store.
"""

from typing import List, Tuple

import pytest

from pathtrace.core.exceptions import EdgeNotFoundError, NodeNotFoundError
from pathtrace.core.graph import GraphEvent, GraphStore
from pathtrace.core.models import Edge, Node


class RecordingListener:
    """Listener collecting every event it receives."""

    def __init__(self):
        self.events: List[Tuple[GraphEvent, dict]] = []

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        self.events.append((change_type, details))

    @property
    def kinds(self) -> List[GraphEvent]:
        return [kind for kind, _ in self.events]


def test_store_creation(triangle_store):
    """Test creating a store keeps node and edge order."""
    assert triangle_store.get_node_ids() == ["A", "B", "C"]
    assert [edge.endpoints for edge in triangle_store.get_edges()] == [
        ("A", "B"),
        ("B", "C"),
        ("A", "C"),
    ]
    assert triangle_store.get_edge_count() == 3


def test_from_edges_adds_endpoints_in_first_seen_order():
    """Test building a store from edges alone."""
    store = GraphStore.from_edges([Edge("B", "C", 1), Edge("A", "B", 1)])
    assert store.get_node_ids() == ["B", "C", "A"]


def test_get_node(triangle_store):
    """Test node lookup."""
    assert triangle_store.get_node("B").id == "B"
    with pytest.raises(NodeNotFoundError):
        triangle_store.get_node("Z")


def test_remove_node_cascades_to_edges(triangle_store):
    """Test that removing a node removes every incident edge."""
    removed = triangle_store.remove_node("B")

    assert [edge.endpoints for edge in removed] == [("A", "B"), ("B", "C")]
    assert triangle_store.get_node_ids() == ["A", "C"]
    assert [edge.endpoints for edge in triangle_store.get_edges()] == [("A", "C")]


def test_remove_unknown_node_is_noop(triangle_store):
    """Test that removing an unknown node changes nothing and emits nothing."""
    listener = RecordingListener()
    triangle_store.add_state_listener(listener)

    assert triangle_store.remove_node("Z") == []
    assert triangle_store.get_node_ids() == ["A", "B", "C"]
    assert listener.events == []


def test_upsert_updates_in_place(triangle_store):
    """Test that an update keeps the edge at its position."""
    updated = triangle_store.upsert_edge(Edge("C", "B", 7))

    assert updated
    edges = triangle_store.get_edges()
    assert edges[1].endpoints == ("B", "C")
    assert edges[1].weight == pytest.approx(7.0)
    assert triangle_store.get_edge_count() == 3


def test_upsert_directed_reverse_pair_is_new_edge(triangle_store):
    """Test that a directed edge against an existing pair's orientation is appended."""
    updated = triangle_store.upsert_edge(Edge("B", "A", 2, directed=True))

    assert not updated
    assert triangle_store.get_edge_count() == 4
    assert triangle_store.get_edges()[-1] == Edge("B", "A", 2, directed=True)


def test_upsert_undirected_rewrites_both_directions():
    """Test that an undirected edge replaces one-way edges in both orientations."""
    store = GraphStore.from_edges(
        [Edge("A", "B", 3, directed=True), Edge("B", "A", 7, directed=True)]
    )
    listener = RecordingListener()
    store.add_state_listener(listener)

    assert store.upsert_edge(Edge("A", "B", 2))

    edges = [(edge.source, edge.target, edge.weight, edge.directed) for edge in store.get_edges()]
    assert edges == [
        ("A", "B", 2.0, False),
        ("B", "A", 2.0, False),
    ]
    assert listener.kinds == [GraphEvent.EDGE_UPDATED, GraphEvent.EDGE_UPDATED]
    assert [details["previous"].weight for _, details in listener.events] == [3.0, 7.0]


def test_remove_edge_either_order(triangle_store):
    """Test that edge removal ignores endpoint order."""
    removed = triangle_store.remove_edge("C", "A")

    assert [edge.endpoints for edge in removed] == [("A", "C")]
    assert not triangle_store.has_edge("A", "C")
    assert triangle_store.remove_edge("C", "A") == []


def test_get_edge_honours_direction(chain_store):
    """Test directed lookups in both traversal modes."""
    assert chain_store.get_edge("A", "B") is not None
    assert chain_store.get_edge("B", "A") is None
    assert chain_store.get_edge("B", "A", reverse=True) is not None

    with pytest.raises(EdgeNotFoundError):
        chain_store.get_edge_safe("B", "A")
    with pytest.raises(NodeNotFoundError):
        chain_store.get_edge_safe("A", "Z")


def test_get_connections(city_store):
    """Test neighbor listing, nearest first and ignoring direction."""
    assert city_store.get_connections("B") == [("C", 1.0), ("F", 1.0), ("A", 4.0), ("D", 5.0)]
    assert city_store.get_connections("G") == [("F", 7.0)]


def test_get_connections_deduplicates():
    """Test that parallel edges list a neighbor once."""
    store = GraphStore.from_edges([Edge("A", "B", 3), Edge("B", "A", 1, directed=True)])
    assert store.get_connections("A") == [("B", 3.0)]

    with pytest.raises(NodeNotFoundError):
        store.get_connections("Z")


def test_listeners_receive_events(triangle_store):
    """Test event notification for every kind of change."""
    listener = RecordingListener()
    triangle_store.add_state_listener(listener)

    triangle_store.add_node(Node(id="D"))
    triangle_store.upsert_edge(Edge("C", "D", 1))
    triangle_store.upsert_edge(Edge("C", "D", 2))
    triangle_store.remove_edge("C", "D")
    triangle_store.remove_node("D")
    triangle_store.clear()

    assert listener.kinds == [
        GraphEvent.NODE_ADDED,
        GraphEvent.EDGE_ADDED,
        GraphEvent.EDGE_UPDATED,
        GraphEvent.EDGE_REMOVED,
        GraphEvent.NODE_REMOVED,
        GraphEvent.GRAPH_CLEARED,
    ]
    assert listener.events[2][1]["previous"].weight == pytest.approx(1.0)
    assert listener.events[2][1]["edge"].weight == pytest.approx(2.0)


def test_remove_state_listener(triangle_store):
    """Test that removed listeners stop receiving events."""
    listener = RecordingListener()
    triangle_store.add_state_listener(listener)
    triangle_store.remove_state_listener(listener)

    triangle_store.add_node(Node(id="D"))
    assert listener.events == []


def test_snapshot_is_immutable(triangle_store):
    """Test that snapshots are detached from later changes."""
    snapshot = triangle_store.snapshot()
    triangle_store.remove_node("A")

    assert snapshot.node_ids == ["A", "B", "C"]
    assert isinstance(snapshot.edges, tuple)
    assert len(snapshot.edges) == 3
