"""
Animation steps and traces.

A trace is the ordered log of every decision a path engine made during one
search. It is produced once, never modified, and read by index by the trace
player. Every step carries the partial path known when it was recorded.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Sequence, Tuple


class StepKind(Enum):
    """Kinds of animation steps."""

    VISIT = "visit"
    PROBE = "probe"
    BACKTRACK = "backtrack"
    WAVE_EXPAND = "wave_expand"
    MEET = "meet"
    REVEAL = "reveal"


@dataclass(frozen=True)
class AnimationStep:
    """Base class of all animation steps."""

    kind: ClassVar[StepKind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the step to a JSON-friendly dictionary."""
        return {"kind": self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class Visit(AnimationStep):
    """A node entered exploration."""

    kind: ClassVar[StepKind] = StepKind.VISIT

    node: str
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Probe(AnimationStep):
    """An edge is being considered."""

    kind: ClassVar[StepKind] = StepKind.PROBE

    source: str
    target: str
    path: Tuple[str, ...] = ()

    @property
    def edge(self) -> Tuple[str, str]:
        return (self.source, self.target)


@dataclass(frozen=True)
class Backtrack(AnimationStep):
    """Depth-first search exhausted a node's neighbors."""

    kind: ClassVar[StepKind] = StepKind.BACKTRACK

    node: str
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WaveExpand(AnimationStep):
    """
    A whole frontier layer expanded at once.

    Attributes:
        frontier_nodes: Nodes of the wave being expanded
        frontier_edges: Edges walked to newly discovered nodes
        next_frontier: Newly discovered nodes, forming the next wave
        wave_index: Per-direction wave counter, starting at 0
        is_backward: True for waves grown from the target
    """

    kind: ClassVar[StepKind] = StepKind.WAVE_EXPAND

    frontier_nodes: Tuple[str, ...]
    frontier_edges: Tuple[Tuple[str, str], ...]
    next_frontier: Tuple[str, ...]
    wave_index: int
    is_backward: bool = False
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Meet(AnimationStep):
    """Forward and backward frontiers met at this node."""

    kind: ClassVar[StepKind] = StepKind.MEET

    node: str
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Reveal(AnimationStep):
    """The complete path is known and shown at once."""

    kind: ClassVar[StepKind] = StepKind.REVEAL

    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AnimationTrace:
    """Immutable, random-access sequence of animation steps."""

    steps: Tuple[AnimationStep, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[AnimationStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> AnimationStep:
        return self.step_at(index)

    def step_at(self, index: int) -> AnimationStep:
        """Return step ``index``; negative indexes are not accepted."""
        if not 0 <= index < len(self.steps):
            raise IndexError(f"step index {index} out of range for trace of {len(self.steps)} steps")
        return self.steps[index]

    def to_list(self) -> List[Dict[str, Any]]:
        """Convert every step to a dictionary."""
        return [step.to_dict() for step in self.steps]


def step_count(trace: AnimationTrace) -> int:
    """Number of steps in a trace."""
    return len(trace)


def step_at(trace: AnimationTrace, index: int) -> AnimationStep:
    """Random access into a trace."""
    return trace.step_at(index)


@dataclass
class TraceRecorder:
    """Append-only builder used by the path engines while searching."""

    _steps: List[AnimationStep] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._steps)

    def visit(self, node: str, path: Sequence[str] = ()) -> None:
        self._steps.append(Visit(node=node, path=tuple(path)))

    def probe(self, source: str, target: str, path: Sequence[str] = ()) -> None:
        self._steps.append(Probe(source=source, target=target, path=tuple(path)))

    def backtrack(self, node: str, path: Sequence[str] = ()) -> None:
        self._steps.append(Backtrack(node=node, path=tuple(path)))

    def wave(
        self,
        frontier_nodes: Sequence[str],
        frontier_edges: Sequence[Tuple[str, str]],
        next_frontier: Sequence[str],
        wave_index: int,
        is_backward: bool = False,
        path: Sequence[str] = (),
    ) -> None:
        self._steps.append(
            WaveExpand(
                frontier_nodes=tuple(frontier_nodes),
                frontier_edges=tuple(tuple(edge) for edge in frontier_edges),
                next_frontier=tuple(next_frontier),
                wave_index=wave_index,
                is_backward=is_backward,
                path=tuple(path),
            )
        )

    def meet(self, node: str) -> None:
        self._steps.append(Meet(node=node))

    def reveal(self, path: Sequence[str]) -> None:
        self._steps.append(Reveal(path=tuple(path)))

    def build(self) -> AnimationTrace:
        """Freeze the recorded steps into a trace."""
        return AnimationTrace(steps=tuple(self._steps))
