"""
Utility functions for path finding operations.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..exceptions import EdgeNotFoundError
from ..graph import GraphStore

INFINITY = math.inf


def walk_predecessors(previous: Mapping[str, Optional[str]], node: str) -> List[str]:
    """
    Follow a predecessor table back from ``node``.

    Returns:
        The chain ending at ``node``, ordered from its root to ``node``.
    """
    chain = [node]
    current = previous.get(node)
    while current is not None:
        chain.append(current)
        current = previous.get(current)
    chain.reverse()
    return chain


def path_edges(path: Iterable[str]) -> List[Tuple[str, str]]:
    """Consecutive (from, to) pairs of a path."""
    nodes = list(path)
    return list(zip(nodes, nodes[1:]))


def calculate_path_weight(store: GraphStore, path: List[str], reverse: bool = False) -> float:
    """
    Sum the real weight of every hop of a path, looked up in the live edge set.

    Raises:
        EdgeNotFoundError: If a hop has no walkable edge
    """
    total = 0.0
    for from_node, to_node in path_edges(path):
        edge = store.get_edge(from_node, to_node, reverse=reverse)
        if edge is None:
            raise EdgeNotFoundError(f"No edge exists from '{from_node}' to '{to_node}'")
        total += edge.weight
    return total


def initial_distances(node_ids: Iterable[str], origin: str) -> Dict[str, float]:
    """Distance table with 0 for the origin and infinity elsewhere."""
    return {node_id: 0.0 if node_id == origin else INFINITY for node_id in node_ids}
