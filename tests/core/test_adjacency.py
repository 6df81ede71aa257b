"""
Tests for adjacency index construction.
"""

from pathtrace.core.adjacency import Neighbor, build_adjacency
from pathtrace.core.models import Edge, Node


def neighbor_ids(index, node_id):
    return [neighbor.node for neighbor in index[node_id]]


def test_undirected_edges_go_both_ways(triangle_store):
    """Test that undirected edges produce entries in both directions, in edge order."""
    index = build_adjacency(triangle_store.get_nodes(), triangle_store.get_edges())

    assert index["A"] == (Neighbor("B", 5.0), Neighbor("C", 10.0))
    assert neighbor_ids(index, "B") == ["A", "C"]
    assert neighbor_ids(index, "C") == ["B", "A"]


def test_directed_edges_go_one_way(chain_store):
    """Test that directed edges only add source -> target."""
    index = build_adjacency(chain_store.get_node_ids(), chain_store.get_edges())

    assert neighbor_ids(index, "A") == ["B"]
    assert neighbor_ids(index, "B") == ["C"]
    assert index["D"] == ()


def test_every_node_has_an_entry():
    """Test that isolated nodes get an empty entry."""
    index = build_adjacency([Node(id="A"), Node(id="B"), Node(id="Z")], [Edge("A", "B", 1)])
    assert index["Z"] == ()


def test_reverse_traversal_flips_directed_edges(chain_store):
    """Test that reverse traversal walks directed edges backwards."""
    index = build_adjacency(chain_store.get_node_ids(), chain_store.get_edges(), reverse_traversal=True)

    assert neighbor_ids(index, "D") == ["C"]
    assert neighbor_ids(index, "B") == ["A"]
    assert index["A"] == ()


def test_reverse_traversal_reverses_neighbor_order(triangle_store):
    """Test that every neighbor list is reversed in full."""
    index = build_adjacency(triangle_store.get_node_ids(), triangle_store.get_edges(), reverse_traversal=True)

    assert neighbor_ids(index, "A") == ["C", "B"]
    assert neighbor_ids(index, "B") == ["C", "A"]
    assert neighbor_ids(index, "C") == ["A", "B"]


def test_transpose_keeps_order(chain_store):
    """Test that transposing flips directed edges without reordering."""
    store_edges = chain_store.get_edges() + [Edge("D", "A", 2, directed=True)]
    index = build_adjacency(chain_store.get_node_ids(), store_edges, transpose=True)

    assert neighbor_ids(index, "A") == ["D"]
    assert neighbor_ids(index, "B") == ["A"]
    assert neighbor_ids(index, "D") == ["C"]


def test_transpose_of_reverse_is_forward_direction(chain_store):
    """Test that transpose cancels the edge flip of reverse traversal."""
    index = build_adjacency(
        chain_store.get_node_ids(), chain_store.get_edges(), reverse_traversal=True, transpose=True
    )
    assert neighbor_ids(index, "A") == ["B"]
