"""
Adjacency index construction.

The adjacency index is derived from the graph store on demand and never
mutated afterwards. Its neighbor order is load-bearing: it decides DFS and BFS
tie-breaks and the expansion order of wave searches.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Tuple, Union

from .models import Edge, Node

logger = logging.getLogger(__name__)


class Neighbor(NamedTuple):
    """One outgoing entry of the adjacency index."""

    node: str
    weight: float


AdjacencyIndex = Dict[str, Tuple[Neighbor, ...]]


def build_adjacency(
    nodes: Iterable[Union[Node, str]],
    edges: Iterable[Edge],
    reverse_traversal: bool = False,
    transpose: bool = False,
) -> AdjacencyIndex:
    """
    Build a directed adjacency index from nodes and edges.

    For each edge ``source -> target`` is added, plus ``target -> source`` when
    the edge is undirected. In reverse traversal the endpoints swap roles first,
    and every neighbor list is reversed in full once built.

    Args:
        nodes: Nodes (or node ids); each gets an entry even if isolated
        edges: Edges in insertion order
        reverse_traversal: Walk directed edges against their direction and
            visit neighbors in reverse insertion order
        transpose: Flip directed edges once more while keeping neighbor order;
            used by searches growing backwards from the target

    Returns:
        Mapping of node id to an ordered tuple of neighbors
    """
    flip = reverse_traversal != transpose
    lists: Dict[str, List[Neighbor]] = {}

    for node in nodes:
        node_id = node.id if isinstance(node, Node) else node
        lists.setdefault(node_id, [])

    for edge in edges:
        source, target = (edge.target, edge.source) if flip else (edge.source, edge.target)
        lists.setdefault(source, []).append(Neighbor(target, edge.weight))
        lists.setdefault(target, [])
        if not edge.directed:
            lists[target].append(Neighbor(source, edge.weight))

    if reverse_traversal:
        for neighbors in lists.values():
            neighbors.reverse()

    logger.debug(
        "Built adjacency index: %d nodes, reverse=%s, transpose=%s",
        len(lists),
        reverse_traversal,
        transpose,
    )
    return {node_id: tuple(neighbors) for node_id, neighbors in lists.items()}
