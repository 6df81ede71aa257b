"""Animation traces, highlight state and playback."""

from .steps import (
    AnimationStep,
    AnimationTrace,
    Backtrack,
    Meet,
    Probe,
    Reveal,
    StepKind,
    TraceRecorder,
    Visit,
    WaveExpand,
    step_at,
    step_count,
)
from .highlight import HighlightState, WaveColor, WaveTag, apply_step, replay, wave_color_bucket
from .player import TracePlayer

__all__ = [
    "AnimationStep",
    "AnimationTrace",
    "Backtrack",
    "HighlightState",
    "Meet",
    "Probe",
    "Reveal",
    "StepKind",
    "TracePlayer",
    "TraceRecorder",
    "Visit",
    "WaveColor",
    "WaveExpand",
    "WaveTag",
    "apply_step",
    "replay",
    "step_at",
    "step_count",
    "wave_color_bucket",
]
