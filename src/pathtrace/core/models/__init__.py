"""
Core domain models package for the path tracing engine.

This package provides the node and edge models stored in the graph.
"""

from .base import validate_dataclass, validate_identifier, validate_weight
from .edge import Edge
from .node import DEFAULT_NODE_COLOR, DEFAULT_NODE_RADIUS, Node

__all__ = [
    # Base utilities
    "validate_dataclass",
    "validate_identifier",
    "validate_weight",
    # Models
    "Node",
    "Edge",
    "DEFAULT_NODE_COLOR",
    "DEFAULT_NODE_RADIUS",
]
