"""
Tests for node models.
"""

import pytest

from pathtrace.core.models import DEFAULT_NODE_COLOR, DEFAULT_NODE_RADIUS, Node


def test_node_creation():
    """Test basic node creation and properties."""
    node = Node(id="Paris", x=10, y=20.5)

    assert node.id == "Paris"
    assert node.position == (10, 20.5)
    assert node.radius == pytest.approx(DEFAULT_NODE_RADIUS)
    assert node.color == DEFAULT_NODE_COLOR


def test_node_name_defaults_to_id():
    """Test that the display name falls back to the id."""
    assert Node(id="Rome").name == "Rome"
    assert Node(id="Rome", name="Roma").name == "Roma"


def test_node_validation_empty_id():
    """Test node validation with an empty id."""
    with pytest.raises(ValueError, match="id must be a non-empty string"):
        Node(id="")

    with pytest.raises(ValueError, match="id must be a non-empty string"):
        Node(id="   ")


def test_node_type_validation():
    """Test runtime type checking of node fields."""
    with pytest.raises(TypeError, match="Invalid type for Node.x"):
        Node(id="A", x="left")

    with pytest.raises(TypeError, match="Invalid type for Node.color"):
        Node(id="A", color=0x3498DB)


def test_node_is_immutable():
    """Test that nodes cannot be modified after creation."""
    node = Node(id="A")
    with pytest.raises(AttributeError):
        node.x = 5.0
