"""
Tests for shared model validation helpers.
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from pathtrace.core.models import validate_dataclass, validate_identifier, validate_weight


@validate_dataclass
@dataclass
class Sample:
    name: str
    weight: float
    note: Optional[str] = None

    def __post_init__(self):
        if self.name == "":
            raise ValueError("name must be a non-empty string")


def test_validate_weight_returns_float():
    """Test that integer weights are normalized to float."""
    assert validate_weight(3) == 3.0
    assert isinstance(validate_weight(3), float)


def test_validate_identifier():
    """Test identifier validation."""
    validate_identifier("id", "A")
    with pytest.raises(ValueError, match="id must be a non-empty string"):
        validate_identifier("id", None)


def test_validate_dataclass_accepts_valid_values():
    """Test that valid values, including ints for floats and None for optionals, pass."""
    sample = Sample(name="x", weight=1)
    assert sample.note is None


def test_validate_dataclass_runs_own_post_init_first():
    """Test that the class's own checks report before type checks."""
    with pytest.raises(ValueError, match="name must be a non-empty string"):
        Sample(name="", weight=1.0)


def test_validate_dataclass_rejects_wrong_types():
    """Test that wrong field types are rejected."""
    with pytest.raises(TypeError, match="Invalid type for Sample.name"):
        Sample(name=1, weight=1.0)

    with pytest.raises(TypeError, match="Invalid type for Sample.weight"):
        Sample(name="x", weight=True)

    with pytest.raises(TypeError, match="Invalid type for Sample.note"):
        Sample(name="x", weight=1.0, note=3)
