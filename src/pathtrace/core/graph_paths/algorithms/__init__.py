"""Path search algorithm implementations."""

from .bfs import BreadthFirstFinder
from .bidirectional import BidirectionalWaveFinder
from .dfs import DepthFirstFinder
from .dijkstra import DijkstraFinder
from .wave import WaveFinder, WaveFront

__all__ = [
    "BreadthFirstFinder",
    "BidirectionalWaveFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
    "WaveFinder",
    "WaveFront",
]
