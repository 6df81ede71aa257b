"""
Node models for the path tracing engine.

This module defines the model representing a location in the graph. Only the
identifier matters to traversal; position and display fields are carried for
the external renderer.
"""

from dataclasses import dataclass

from .base import validate_dataclass, validate_identifier

DEFAULT_NODE_RADIUS = 6.0
DEFAULT_NODE_COLOR = "#3498db"


@validate_dataclass
@dataclass(frozen=True)
class Node:
    """
    A location (vertex) in the graph.

    Attributes:
        id (str): Label identifying the node; used by every traversal
        x (float): Horizontal position, rendering only
        y (float): Vertical position, rendering only
        name (str): Display name, defaults to the id
        radius (float): Display radius
        color (str): Display fill colour
    """

    id: str
    x: float = 0.0
    y: float = 0.0
    name: str = ""
    radius: float = DEFAULT_NODE_RADIUS
    color: str = DEFAULT_NODE_COLOR

    def __post_init__(self):
        """Validate node after initialization."""
        validate_identifier("id", self.id)
        if not self.name:
            object.__setattr__(self, "name", self.id)

    @property
    def position(self):
        """Return the (x, y) position tuple."""
        return (self.x, self.y)
