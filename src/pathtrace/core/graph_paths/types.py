"""Type definitions for graph path finding."""

from enum import Enum
from typing import Dict


class Strategy(Enum):
    """Enumeration of search strategies."""

    DFS = "dfs"  # First path found, no hop or weight guarantee
    BFS = "bfs"  # Minimum hop count
    DIJKSTRA = "dijkstra"  # Minimum total weight, non-negative weights only
    WAVE = "wave"  # Layered BFS, distance follows discovery order
    BIDIRECTIONAL_WAVE = "bidirectional_wave"  # Two waves meeting in the middle

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Accept an enum member, its value or a case-insensitive alias."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        strategy = _ALIASES.get(key)
        if strategy is None:
            try:
                strategy = cls(key)
            except ValueError:
                raise ValueError(
                    f"Unknown strategy '{value}'. "
                    f"Must be one of: {', '.join(member.value for member in cls)}"
                ) from None
        return strategy


_ALIASES: Dict[str, Strategy] = {
    "bidirectional": Strategy.BIDIRECTIONAL_WAVE,
    "bidirectionalwave": Strategy.BIDIRECTIONAL_WAVE,
    "bidi": Strategy.BIDIRECTIONAL_WAVE,
}


class SearchStatus(Enum):
    """Outcome of a path computation; only FOUND carries a result."""

    FOUND = "found"
    INVALID_SELECTION = "invalid_selection"  # Missing endpoint or start == end
    UNREACHABLE_TARGET = "unreachable_target"  # Search exhausted

