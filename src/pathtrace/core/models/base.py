"""
Core domain models base module for the path tracing engine.

This module provides the validation helpers shared by the node and edge models,
including a decorator that adds runtime type checking to dataclass fields.
"""

import math
from dataclasses import fields
from typing import Any, Type, Union, get_args, get_origin, get_type_hints


def validate_identifier(name: str, value: str) -> None:
    """Validate that an identifier is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def validate_weight(weight: Any) -> float:
    """
    Validate an edge weight and return it as a float.

    Weights must be real, finite and strictly positive; booleans are rejected
    even though they are ints.
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValueError(f"weight must be a number, got {type(weight).__name__}")
    if math.isnan(weight) or math.isinf(weight):
        raise ValueError("weight must be a finite number")
    if weight <= 0:
        raise ValueError(f"weight must be positive, got {weight}")
    return float(weight)


def _matches_type(value: Any, expected_type: Any) -> bool:
    """Check a value against a (possibly Optional) type hint."""
    if expected_type is Any:
        return True

    origin = get_origin(expected_type)
    if origin is Union:
        args = get_args(expected_type)
        if value is None:
            return type(None) in args
        return any(_matches_type(value, arg) for arg in args if arg is not type(None))

    if value is None:
        return False

    if expected_type is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    if origin is not None:
        try:
            return isinstance(value, origin)
        except TypeError:
            return True

    try:
        return isinstance(value, expected_type)
    except TypeError:
        return True


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The class's own ``__post_init__`` runs first so that value errors surface
    with their original message; field types are checked afterwards.

    Example:
        >>> @validate_dataclass
        ... @dataclass(frozen=True)
        ... class Example:
        ...     name: str
        ...     weight: float
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        if original_post_init:
            original_post_init(self)

        type_hints = get_type_hints(cls)
        for dataclass_field in fields(cls):
            value = getattr(self, dataclass_field.name)
            if not _matches_type(value, type_hints[dataclass_field.name]):
                raise TypeError(
                    f"Invalid type for {cls.__name__}.{dataclass_field.name}: "
                    f"{type(value).__name__}"
                )

    cls.__post_init__ = validated_post_init
    return cls
