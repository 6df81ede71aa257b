"""Core graph, search and animation functionality."""

from .exceptions import (
    ConfigurationError,
    DuplicateNodeError,
    DuplicateResourceError,
    EdgeNotFoundError,
    GraphDocumentError,
    InvalidEdgeError,
    NodeNotFoundError,
    PlaybackError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Edge, Node
from .graph import GraphEvent, GraphSnapshot, GraphStore
from .adjacency import AdjacencyIndex, Neighbor, build_adjacency
from .graph_paths import PathFinding, PathResult, SearchStatus, Strategy, compute_path
from .animation import AnimationTrace, HighlightState, TracePlayer, apply_step, replay

__all__ = [
    "AdjacencyIndex",
    "AnimationTrace",
    "ConfigurationError",
    "DuplicateNodeError",
    "DuplicateResourceError",
    "Edge",
    "EdgeNotFoundError",
    "GraphDocumentError",
    "GraphEvent",
    "GraphSnapshot",
    "GraphStore",
    "HighlightState",
    "InvalidEdgeError",
    "Neighbor",
    "Node",
    "NodeNotFoundError",
    "PathFinding",
    "PathResult",
    "PlaybackError",
    "ResourceNotFoundError",
    "SearchStatus",
    "Strategy",
    "TracePlayer",
    "ValidationError",
    "apply_step",
    "build_adjacency",
    "compute_path",
    "replay",
]
