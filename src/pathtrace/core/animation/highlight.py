"""
Cumulative highlight state derived from animation steps.

``HighlightState`` is immutable; ``apply_step`` folds one step into a new
state and ``replay`` folds a whole trace. Renderers read the state, they never
modify it.
"""

from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Dict, FrozenSet, Iterable, NamedTuple, Optional, Sequence, Tuple

from pathtrace.config import WAVE_PALETTE_SIZE
from pathtrace.core.animation.steps import (
    AnimationStep,
    AnimationTrace,
    Backtrack,
    Meet,
    Probe,
    Reveal,
    Visit,
    WaveExpand,
)

# Undirected key for an edge highlight
EdgeKey = FrozenSet[str]


class WaveTag(NamedTuple):
    """Wave that first lit an edge."""

    wave_index: int
    is_backward: bool


class WaveColor(NamedTuple):
    """Palette slot for a wave: direction plus bucket index."""

    direction: str
    bucket: int


def edge_key(a: str, b: str) -> EdgeKey:
    return frozenset((a, b))


def _path_edge_keys(path: Sequence[str]) -> FrozenSet[EdgeKey]:
    return frozenset(edge_key(a, b) for a, b in zip(path, path[1:]))


def wave_color_bucket(wave_index: int, is_backward: bool = False) -> WaveColor:
    """Map a wave to its palette slot; forward and backward waves cycle separately."""
    return WaveColor("backward" if is_backward else "forward", wave_index % WAVE_PALETTE_SIZE)


@dataclass(frozen=True)
class HighlightState:
    """
    Everything a renderer needs to draw the animation at one point in time.

    Attributes:
        step_index: Index of the last applied step, -1 before the first
        current_node: Node the last step focused on
        current_edge: Edge the last step probed, as (from, to)
        visited_nodes: Nodes lit so far
        visited_edges: Edges lit so far, as undirected keys
        current_path: Partial path carried by the most recent step that had one
        path_edges: Edges of ``current_path``, plus the probed edge if any
        is_backtracking: True while the last step was a backtrack
        edge_waves: Wave that first lit each edge
        meeting_node: Node where bidirectional frontiers met
        revealed: True once the final path has been revealed
    """

    step_index: int = -1
    current_node: Optional[str] = None
    current_edge: Optional[Tuple[str, str]] = None
    visited_nodes: FrozenSet[str] = frozenset()
    visited_edges: FrozenSet[EdgeKey] = frozenset()
    current_path: Tuple[str, ...] = ()
    path_edges: FrozenSet[EdgeKey] = frozenset()
    is_backtracking: bool = False
    edge_waves: Dict[EdgeKey, WaveTag] = field(default_factory=dict, compare=False)
    meeting_node: Optional[str] = None
    revealed: bool = False

    def is_visited(self, node_id: str) -> bool:
        return node_id in self.visited_nodes

    def is_edge_visited(self, a: str, b: str) -> bool:
        return edge_key(a, b) in self.visited_edges

    def is_path_edge(self, a: str, b: str) -> bool:
        return edge_key(a, b) in self.path_edges

    def wave_of(self, a: str, b: str) -> Optional[WaveTag]:
        return self.edge_waves.get(edge_key(a, b))

    def summary(self) -> str:
        """One-line description, used by the command line player."""
        parts = [f"step {self.step_index}"]
        if self.current_edge:
            parts.append(f"edge {self.current_edge[0]}->{self.current_edge[1]}")
        elif self.current_node:
            parts.append(f"node {self.current_node}")
        if self.is_backtracking:
            parts.append("backtracking")
        if self.meeting_node:
            parts.append(f"met at {self.meeting_node}")
        parts.append(f"visited {len(self.visited_nodes)}")
        if self.current_path:
            parts.append("path " + " -> ".join(self.current_path))
        return " | ".join(parts)


def _with_path(state: HighlightState, path: Tuple[str, ...], extra: Iterable[EdgeKey] = ()) -> Dict:
    """Path fields for the next state; an empty path keeps the previous one."""
    if not path:
        return {"current_path": state.current_path, "path_edges": state.path_edges}
    return {"current_path": path, "path_edges": _path_edge_keys(path) | frozenset(extra)}


def apply_step(state: HighlightState, step: AnimationStep) -> HighlightState:
    """
    Fold one animation step into the highlight state.

    Pure: ``state`` is left untouched and a new state is returned.

    Raises:
        TypeError: If ``step`` is not a known step type
    """
    index = state.step_index + 1

    if isinstance(step, Visit):
        return replace(
            state,
            step_index=index,
            current_node=step.node,
            current_edge=None,
            visited_nodes=state.visited_nodes | {step.node},
            is_backtracking=False,
            **_with_path(state, step.path),
        )

    if isinstance(step, Probe):
        key = edge_key(step.source, step.target)
        return replace(
            state,
            step_index=index,
            current_node=step.source,
            current_edge=step.edge,
            visited_nodes=state.visited_nodes | {step.source},
            visited_edges=state.visited_edges | {key},
            is_backtracking=False,
            **_with_path(state, step.path, (key,)),
        )

    if isinstance(step, Backtrack):
        return replace(
            state,
            step_index=index,
            current_node=step.node,
            current_edge=None,
            is_backtracking=True,
            **_with_path(state, step.path),
        )

    if isinstance(step, WaveExpand):
        keys = [edge_key(a, b) for a, b in step.frontier_edges]
        edge_waves = dict(state.edge_waves)
        for key in keys:
            edge_waves.setdefault(key, WaveTag(step.wave_index, step.is_backward))
        return replace(
            state,
            step_index=index,
            current_node=None,
            current_edge=None,
            visited_nodes=state.visited_nodes | set(step.frontier_nodes) | set(step.next_frontier),
            visited_edges=state.visited_edges | set(keys),
            is_backtracking=False,
            edge_waves=edge_waves,
            **_with_path(state, step.path),
        )

    if isinstance(step, Meet):
        return replace(
            state,
            step_index=index,
            current_node=step.node,
            current_edge=None,
            visited_nodes=state.visited_nodes | {step.node},
            is_backtracking=False,
            meeting_node=step.node,
            **_with_path(state, step.path),
        )

    if isinstance(step, Reveal):
        return replace(
            state,
            step_index=index,
            current_node=None,
            current_edge=None,
            visited_nodes=state.visited_nodes | set(step.path),
            is_backtracking=False,
            revealed=True,
            **_with_path(state, step.path),
        )

    raise TypeError(f"Unknown animation step: {type(step).__name__}")


def replay(trace: AnimationTrace, initial: Optional[HighlightState] = None) -> HighlightState:
    """Fold every step of ``trace`` into a highlight state."""
    return reduce(apply_step, trace, initial if initial is not None else HighlightState())
