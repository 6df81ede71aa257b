"""
Graph document reading and writing.

A graph document is JSON of the form::

    {
        "nodes": [{"id": "A", "x": 10, "y": 20}, ...],
        "edges": [{"source": "A", "target": "B", "weight": 5, "directed": false}, ...]
    }

Documents are checked against ``GRAPH_SCHEMA`` before any node or edge is
built, then against the graph rules the schema cannot express (edge endpoints
must exist, node ids must be unique).
"""

import json
import logging
from typing import Any, Dict, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import GraphDocumentError
from .graph import GraphStore
from .models import DEFAULT_NODE_COLOR, DEFAULT_NODE_RADIUS, Edge, Node

logger = logging.getLogger(__name__)

GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["nodes"],
    "properties": {
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "name": {"type": "string"},
                    "x": {"type": "number"},
                    "y": {"type": "number"},
                    "radius": {"type": "number", "exclusiveMinimum": 0},
                    "color": {"type": "string"},
                },
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["source", "target", "weight"],
                "properties": {
                    "source": {"type": "string", "minLength": 1},
                    "target": {"type": "string", "minLength": 1},
                    "weight": {"type": "number", "exclusiveMinimum": 0},
                    "directed": {"type": "boolean"},
                },
            },
        },
    },
}


def validate_document(data: Any) -> None:
    """
    Check a decoded document against ``GRAPH_SCHEMA``.

    Raises:
        GraphDocumentError: If the document does not match the schema
    """
    try:
        json_validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise GraphDocumentError(f"Graph document invalid at {location}: {e.message}") from e


def load_graph(data: Union[str, Dict[str, Any]], allow_duplicate_names: bool = False) -> GraphStore:
    """
    Build a graph store from a document or its JSON text.

    Args:
        data: Decoded document, or JSON text
        allow_duplicate_names: Keep repeated node ids instead of rejecting them

    Returns:
        A store holding the nodes and edges in document order

    Raises:
        GraphDocumentError: If the JSON, the schema or the graph rules are violated
    """
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise GraphDocumentError(f"Invalid JSON: {e}") from e

    validate_document(data)

    nodes = []
    seen = set()
    for item in data["nodes"]:
        if item["id"] in seen and not allow_duplicate_names:
            raise GraphDocumentError(f"Duplicate node id '{item['id']}'")
        seen.add(item["id"])
        nodes.append(
            Node(
                id=item["id"],
                x=float(item.get("x", 0.0)),
                y=float(item.get("y", 0.0)),
                name=item.get("name", ""),
                radius=float(item.get("radius", DEFAULT_NODE_RADIUS)),
                color=item.get("color", DEFAULT_NODE_COLOR),
            )
        )

    edges = []
    for index, item in enumerate(data.get("edges", [])):
        for endpoint in (item["source"], item["target"]):
            if endpoint not in seen:
                raise GraphDocumentError(f"Edge {index} references unknown node '{endpoint}'")
        try:
            edges.append(
                Edge(
                    source=item["source"],
                    target=item["target"],
                    weight=item["weight"],
                    directed=item.get("directed", False),
                )
            )
        except (TypeError, ValueError) as e:
            raise GraphDocumentError(f"Edge {index} is invalid: {e}") from e

    logger.debug("Loaded graph document: %d nodes, %d edges", len(nodes), len(edges))
    return GraphStore(nodes=nodes, edges=edges)


def dump_graph(store: GraphStore) -> Dict[str, Any]:
    """Convert a store to a graph document."""
    return {
        "nodes": [
            {
                "id": node.id,
                "name": node.name,
                "x": node.x,
                "y": node.y,
                "radius": node.radius,
                "color": node.color,
            }
            for node in store.get_nodes()
        ],
        "edges": [
            {
                "source": edge.source,
                "target": edge.target,
                "weight": edge.weight,
                "directed": edge.directed,
            }
            for edge in store.get_edges()
        ],
    }
