"""
Tests for edge models.
"""

import math

import pytest

from pathtrace.core.models import Edge


def test_edge_creation():
    """Test basic edge creation and properties."""
    edge = Edge("A", "B", 5)

    assert edge.source == "A"
    assert edge.target == "B"
    assert edge.weight == pytest.approx(5.0)
    assert isinstance(edge.weight, float)
    assert not edge.directed
    assert edge.endpoints == ("A", "B")


@pytest.mark.parametrize("weight", [0, -1, -0.5])
def test_edge_rejects_non_positive_weight(weight):
    """Test that weights must be strictly positive."""
    with pytest.raises(ValueError, match="weight must be positive"):
        Edge("A", "B", weight)


@pytest.mark.parametrize("weight", [math.nan, math.inf])
def test_edge_rejects_non_finite_weight(weight):
    """Test that NaN and infinite weights are rejected."""
    with pytest.raises(ValueError, match="weight must be a finite number"):
        Edge("A", "B", weight)


@pytest.mark.parametrize("weight", ["5", None, True])
def test_edge_rejects_non_numeric_weight(weight):
    """Test that strings, None and booleans are not weights."""
    with pytest.raises(ValueError, match="weight must be a number"):
        Edge("A", "B", weight)


def test_edge_validation_empty_endpoints():
    """Test edge validation with empty endpoint ids."""
    with pytest.raises(ValueError, match="source must be a non-empty string"):
        Edge("", "B", 1)

    with pytest.raises(ValueError, match="target must be a non-empty string"):
        Edge("A", "", 1)


def test_edge_connects_in_either_order():
    """Test endpoint matching used by deletion."""
    edge = Edge("A", "B", 1, directed=True)

    assert edge.connects("A", "B")
    assert edge.connects("B", "A")
    assert not edge.connects("A", "C")
    assert edge.touches("B")
    assert not edge.touches("C")


def test_edge_upsert_matching():
    """Test the matching rule used when adding an edge that may already exist."""
    undirected = Edge("A", "B", 1)
    directed = Edge("A", "B", 1, directed=True)

    # Same orientation always matches
    assert undirected.matches("A", "B", directed=True)
    assert directed.matches("A", "B", directed=False)

    # Swapped pair only matches an undirected newcomer
    assert directed.matches("B", "A", directed=False)
    assert not directed.matches("B", "A", directed=True)


def test_edge_walkability():
    """Test which walks an edge allows in each traversal mode."""
    undirected = Edge("A", "B", 1)
    directed = Edge("A", "B", 1, directed=True)

    assert undirected.allows("A", "B")
    assert undirected.allows("B", "A")
    assert undirected.allows("B", "A", reverse=True)

    assert directed.allows("A", "B")
    assert not directed.allows("B", "A")
    assert directed.allows("B", "A", reverse=True)
    assert not directed.allows("A", "B", reverse=True)
