"""
Tests for path result validation.
"""

import pytest

from pathtrace.core.graph_paths import PathResult, PathValidationError, Strategy


def test_path_needs_two_nodes():
    """Test that a path must name a start and an end."""
    with pytest.raises(PathValidationError, match="at least a start and an end"):
        PathResult(path=("A",), total_distance=0.0)


def test_path_is_coerced_to_tuple():
    """Test that list paths are stored as tuples."""
    result = PathResult(path=["A", "B", "C"], total_distance=8)

    assert result.path == ("A", "B", "C")
    assert len(result) == 3
    assert list(result) == ["A", "B", "C"]
    assert result.hop_count == 2
    assert result.edges == [("A", "B"), ("B", "C")]


def test_distance_must_be_numeric():
    """Test total distance type validation."""
    with pytest.raises(TypeError, match="total_distance must be a numeric value"):
        PathResult(path=("A", "B"), total_distance="far")


def test_uses_node_and_edge():
    """Test membership helpers used for invalidation."""
    result = PathResult(path=("A", "B", "C"), total_distance=8)

    assert result.uses_node("B")
    assert not result.uses_node("D")
    assert result.uses_edge("C", "B")
    assert not result.uses_edge("A", "C")


def test_validate_against_store(triangle_store):
    """Test validation of a correct path."""
    PathResult(path=("A", "B", "C"), total_distance=8).validate(triangle_store, check_distance=True)


def test_validate_missing_edge(triangle_store):
    """Test validation fails when a hop has no edge."""
    triangle_store.remove_edge("A", "B")
    with pytest.raises(PathValidationError, match="No walkable edge between A and B at hop 0"):
        PathResult(path=("A", "B", "C"), total_distance=8).validate(triangle_store)


def test_validate_distance_mismatch(triangle_store):
    """Test validation fails when the stored distance is wrong."""
    result = PathResult(path=("A", "B", "C"), total_distance=9)

    result.validate(triangle_store)
    with pytest.raises(PathValidationError, match="Distance mismatch"):
        result.validate(triangle_store, check_distance=True)


def test_validate_respects_direction(chain_store):
    """Test that directed hops are only valid in their traversal mode."""
    with pytest.raises(PathValidationError):
        PathResult(path=("B", "A"), total_distance=1).validate(chain_store)

    PathResult(path=("B", "A"), total_distance=1, reverse_traversal=True).validate(chain_store)


def test_result_to_dict():
    """Test dictionary conversion."""
    result = PathResult(path=("A", "C"), total_distance=10, strategy=Strategy.BFS)
    assert result.to_dict() == {
        "path": ["A", "C"],
        "total_distance": 10,
        "strategy": "bfs",
        "reverse_traversal": False,
        "metrics": None,
    }
