"""
Tests for session and playback configuration.
"""

import pytest

from pathtrace.config import SPEED_PRESETS, PlaybackConfig, SessionConfig
from pathtrace.core.exceptions import ConfigurationError
from pathtrace.core.graph_paths import Strategy


@pytest.mark.parametrize("speed,interval", [("slow", 1000), ("medium", 500), ("fast", 200)])
def test_speed_presets(speed, interval):
    """Test preset tick intervals."""
    config = PlaybackConfig(speed=speed)
    assert config.interval_ms == pytest.approx(interval)
    assert SPEED_PRESETS[speed] == interval


def test_default_playback_is_medium():
    """Test the default playback speed."""
    config = PlaybackConfig()
    assert config.speed == "medium"
    assert config.interval_seconds == pytest.approx(0.5)


def test_explicit_interval_overrides_preset():
    """Test that an explicit interval wins over the preset."""
    assert PlaybackConfig(speed="slow", interval_ms=50).interval_ms == pytest.approx(50.0)


def test_invalid_playback_config():
    """Test playback configuration validation."""
    with pytest.raises(ConfigurationError, match="Unknown speed 'warp'"):
        PlaybackConfig(speed="warp")

    with pytest.raises(ConfigurationError, match="interval_ms must be positive"):
        PlaybackConfig(interval_ms=0)

    with pytest.raises(ConfigurationError, match="interval_ms must be a number"):
        PlaybackConfig(interval_ms="fast")


def test_session_config_defaults():
    """Test session configuration defaults."""
    config = SessionConfig()

    assert not config.allow_duplicate_names
    assert config.default_strategy is Strategy.DFS
    assert not config.reverse_traversal
    assert config.playback.interval_ms == pytest.approx(500.0)


def test_session_config_strategy_names():
    """Test that the default strategy may be given by name."""
    assert SessionConfig(default_strategy="bidirectional-wave").default_strategy is Strategy.BIDIRECTIONAL_WAVE

    with pytest.raises(ConfigurationError, match="Unknown strategy"):
        SessionConfig(default_strategy="astar")
