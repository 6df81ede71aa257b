"""
pathtrace - Graph path search with step-by-step animation traces

This package finds paths between locations of a weighted graph with one of five
interchangeable strategies and records every decision the search made as an
animation trace that can be replayed one step at a time. It includes:

- A graph store with change notification and an adjacency builder
- Depth-first, breadth-first, Dijkstra, wave and bidirectional wave search
- Highlight state folding and a cancellable trace player
- A mutation service that invalidates stale results
- JSON graph documents and a command line interface
"""

__version__ = "0.1.0"
__author__ = "pathtrace Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("pathtrace requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.graph import GraphStore
from .core.models import Edge, Node
from .core.graph_paths import PathResult, Strategy, compute_path
from .core.session import PathSession
from .config import PlaybackConfig, SessionConfig

__all__ = [
    "GraphStore",
    "Node",
    "Edge",
    "PathResult",
    "Strategy",
    "compute_path",
    "PathSession",
    "PlaybackConfig",
    "SessionConfig",
]
