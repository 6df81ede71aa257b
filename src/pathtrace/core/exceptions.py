"""
Custom exceptions for the path tracing engine.

This module defines the hierarchy of custom exceptions used throughout the engine
to handle error conditions in a structured and meaningful way. Each exception type
corresponds to a specific category of errors that may occur while editing a graph,
searching it or replaying a trace.

Note that an invalid start/end selection and an unreachable target are not errors:
path computation returns ``None`` for both (see ``SearchStatus``).
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as schema validation or business rule validation.

    Examples:
        * Non-positive edge weight
        * Malformed graph document
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidEdgeError(ValidationError):
    """
    Raised when an edge cannot be added to the graph.

    Examples:
        * Weight is zero or negative
        * Weight is not a finite number
        * Empty endpoint identifier
    """


class GraphDocumentError(ValidationError):
    """
    Raised when a serialized graph document does not match the expected schema.

    Examples:
        * Missing "nodes" or "edges" section
        * Edge entry without a weight
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown playback speed preset
        * Non-positive playback interval
    """


class PlaybackError(Exception):
    """
    Raised when the trace player is driven incorrectly.

    Examples:
        * Re-entrant tick while a step is being applied
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to operate on a resource that does
    not exist in the graph and the operation cannot be treated as a no-op.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Adding an edge whose endpoint does not exist
        * Looking up connections of an unknown node
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Weight lookup for a pair of nodes with no connecting edge
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    This exception is raised when attempting to create a resource that already
    exists, violating uniqueness constraints.
    """


class DuplicateNodeError(DuplicateResourceError):
    """
    Raised when a node is added with an identifier already used by a live node.

    Only raised while duplicate names are disallowed (the default).
    """
