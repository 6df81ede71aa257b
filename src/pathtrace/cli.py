"""Command Line Interface for the path tracing engine.

This module provides a CLI for searching graph documents and replaying the
animation trace of a search in the terminal.

The CLI supports the following commands:
    - find: Find a path between two nodes and print it
    - connections: List the neighbors of a node, nearest first
    - play: Replay a search step by step, one highlight summary per tick

Graph input can be provided either as a direct JSON string or as a file path
prefixed with '@'. Relative file paths are resolved against the current directory.

Example Usage:
    python -m pathtrace find @maps/europe.json --start Paris --end Rome --algorithm dijkstra
    python -m pathtrace connections @maps/europe.json Paris
    python -m pathtrace play @maps/europe.json --start Paris --end Rome --speed fast
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from pathtrace.config import SPEED_PRESETS, PlaybackConfig, SessionConfig
from pathtrace.core.animation import HighlightState
from pathtrace.core.exceptions import (
    ConfigurationError,
    GraphDocumentError,
    ResourceNotFoundError,
)
from pathtrace.core.graph_paths import Strategy
from pathtrace.core.serialization import load_graph
from pathtrace.core.session import PathSession

logger = logging.getLogger(__name__)


def parse_json_input(json_str: str) -> Dict[str, Any]:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def load_session(graph: str, algorithm: Optional[str] = None, reverse: bool = False) -> PathSession:
    """Build a session over the graph document named on the command line."""
    store = load_graph(parse_json_input(graph))
    session = PathSession(store, SessionConfig(default_strategy=algorithm or Strategy.DFS))
    session.reverse_traversal = reverse
    return session


def run_find(args: argparse.Namespace) -> int:
    """Handle the find command."""
    session = load_session(args.graph, args.algorithm, args.reverse)
    session.select(args.start, args.end)
    result = session.find_path()

    if result is None:
        print(f"No path from {args.start} to {args.end} ({session.status.value})")
        return 1

    print(f"Algorithm: {session.strategy.value}")
    print(f"Path: {' -> '.join(result.path)}")
    print(f"Distance: {result.total_distance:g}")
    print(f"Time taken: {result.metrics.duration:.3f}ms")
    print(f"Steps: {len(session.trace)}")

    if args.trace:
        for index, step in enumerate(session.trace):
            print(f"{index}: {json.dumps(step.to_dict())}")
    return 0


def run_connections(args: argparse.Namespace) -> int:
    """Handle the connections command."""
    session = load_session(args.graph)
    connections = session.connections(args.node)
    if not connections:
        print(f"{args.node} has no connections")
        return 0

    print(f"Connections of {args.node}:")
    for other, weight in connections:
        print(f"- {other}: {weight:g}")
    return 0


def run_play(args: argparse.Namespace) -> int:
    """Handle the play command."""
    session = load_session(args.graph, args.algorithm, args.reverse)
    session.config.playback = PlaybackConfig(speed=args.speed, interval_ms=args.interval)
    session.select(args.start, args.end)
    result = session.find_path()

    if result is None:
        print(f"No path from {args.start} to {args.end} ({session.status.value})")
        return 1

    def show(state: HighlightState) -> None:
        print(state.summary())

    player = session.player
    player.on_step = show
    final = player.run()
    print(f"Path: {' -> '.join(result.path)} ({result.total_distance:g})")
    print(f"Visited {len(final.visited_nodes)} nodes in {player.position} steps")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="pathtrace", description="Path search and trace replay")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    algorithms = [strategy.value for strategy in Strategy]

    def add_search_arguments(command: argparse.ArgumentParser) -> None:
        command.add_argument("graph", help="JSON string or @filename containing the graph")
        command.add_argument("--start", required=True, help="Start node id")
        command.add_argument("--end", required=True, help="Target node id")
        command.add_argument(
            "--algorithm", choices=algorithms, default=Strategy.DFS.value, help="Search strategy"
        )
        command.add_argument(
            "--reverse", action="store_true", help="Walk directed edges against their direction"
        )

    find = subparsers.add_parser("find", help="Find a path between two nodes")
    add_search_arguments(find)
    find.add_argument("--trace", action="store_true", help="Print every animation step")

    connections = subparsers.add_parser("connections", help="List the neighbors of a node")
    connections.add_argument("graph", help="JSON string or @filename containing the graph")
    connections.add_argument("node", help="Node id")

    play = subparsers.add_parser("play", help="Replay a search step by step")
    add_search_arguments(play)
    play.add_argument("--speed", choices=list(SPEED_PRESETS), default="medium", help="Playback speed")
    play.add_argument("--interval", type=float, help="Tick interval in milliseconds, overrides --speed")

    return parser


COMMANDS = {
    "find": run_find,
    "connections": run_connections,
    "play": run_play,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit code; 0 on success, 1 when no path was found or the
        input was rejected.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except (ValueError, GraphDocumentError, ConfigurationError, ResourceNotFoundError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
