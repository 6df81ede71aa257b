"""Shared test fixtures."""

from typing import List

import pytest

from pathtrace.core.graph import GraphStore
from pathtrace.core.models import Edge, Node


def make_store(node_ids: str, edges: List[Edge]) -> GraphStore:
    """Build a store from a string of single-letter node ids and a list of edges."""
    return GraphStore(nodes=[Node(id=node_id) for node_id in node_ids], edges=edges)


@pytest.fixture
def triangle_store() -> GraphStore:
    """Fixture providing the triangle A-B 5, B-C 3, A-C 10, all undirected."""
    return make_store(
        "ABC",
        [
            Edge("A", "B", 5),
            Edge("B", "C", 3),
            Edge("A", "C", 10),
        ],
    )


@pytest.fixture
def chain_store() -> GraphStore:
    """Fixture providing the one-way chain A -> B -> C -> D with unit weights."""
    return make_store(
        "ABCD",
        [
            Edge("A", "B", 1, directed=True),
            Edge("B", "C", 1, directed=True),
            Edge("C", "D", 1, directed=True),
        ],
    )


@pytest.fixture
def city_store() -> GraphStore:
    """Fixture providing a small road map with uneven weights and one one-way street."""
    return make_store(
        "ABCDEFG",
        [
            Edge("A", "B", 4),
            Edge("A", "C", 2),
            Edge("B", "C", 1),
            Edge("B", "D", 5),
            Edge("C", "D", 8),
            Edge("C", "E", 10),
            Edge("D", "E", 2),
            Edge("D", "F", 6),
            Edge("E", "F", 3),
            Edge("F", "B", 1, directed=True),
            Edge("G", "F", 7, directed=True),
        ],
    )
