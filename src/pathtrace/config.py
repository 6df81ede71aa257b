"""
Configuration for path sessions and trace playback.

Configuration objects are plain classes with constructor defaults; invalid
values are rejected when the object is built.
"""

from typing import Dict, Optional, Union

from pathtrace.core.exceptions import ConfigurationError
from pathtrace.core.graph_paths.types import Strategy

# Tick intervals in milliseconds
SPEED_PRESETS: Dict[str, int] = {
    "slow": 1000,
    "medium": 500,
    "fast": 200,
}

DEFAULT_SPEED = "medium"

# Number of distinct wave colours; waves cycle through them by index
WAVE_PALETTE_SIZE = 6


class PlaybackConfig:
    """
    Configuration for trace playback.

    Attributes:
        speed: Name of a speed preset (slow, medium or fast)
        interval_ms: Tick interval; overrides the preset when given
    """

    def __init__(self, speed: str = DEFAULT_SPEED, interval_ms: Optional[float] = None):
        if speed not in SPEED_PRESETS:
            raise ConfigurationError(
                f"Unknown speed '{speed}'. Must be one of: {', '.join(SPEED_PRESETS)}"
            )
        if interval_ms is not None:
            if isinstance(interval_ms, bool) or not isinstance(interval_ms, (int, float)):
                raise ConfigurationError("interval_ms must be a number")
            if interval_ms <= 0:
                raise ConfigurationError(f"interval_ms must be positive, got {interval_ms}")

        self.speed = speed
        self.interval_ms = float(interval_ms if interval_ms is not None else SPEED_PRESETS[speed])

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000

    def __repr__(self) -> str:
        return f"PlaybackConfig(speed={self.speed!r}, interval_ms={self.interval_ms})"


class SessionConfig:
    """
    Configuration for a path session.

    Attributes:
        allow_duplicate_names: Append nodes whose id is already taken instead
            of raising DuplicateNodeError
        default_strategy: Strategy selected when the session starts
        reverse_traversal: Initial traversal mode
        playback: Playback settings for players the session creates
    """

    def __init__(
        self,
        allow_duplicate_names: bool = False,
        default_strategy: Union[Strategy, str] = Strategy.DFS,
        reverse_traversal: bool = False,
        playback: Optional[PlaybackConfig] = None,
    ):
        try:
            strategy = Strategy.parse(default_strategy)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        self.allow_duplicate_names = allow_duplicate_names
        self.default_strategy = strategy
        self.reverse_traversal = reverse_traversal
        self.playback = playback if playback is not None else PlaybackConfig()
