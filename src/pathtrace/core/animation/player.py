"""
Step-by-step trace playback.

The player is a cursor over an ``AnimationTrace``. Every ``tick()`` applies
exactly one step, in order, to the cumulative highlight state. Timing belongs
to the caller: a UI timer calls ``tick()``, or ``run()`` drives it with a
sleep loop.
"""

import logging
import time
from typing import Callable, Iterator, Optional

from pathtrace.config import PlaybackConfig
from pathtrace.core.animation.highlight import HighlightState, apply_step
from pathtrace.core.animation.steps import AnimationTrace
from pathtrace.core.exceptions import PlaybackError

logger = logging.getLogger(__name__)

StepCallback = Callable[[HighlightState], None]


class TracePlayer:
    """
    Cancellable, single-threaded player for one animation trace.

    Example:
        >>> player = TracePlayer(trace, on_step=render)
        >>> player.start()
        >>> while player.tick():
        ...     pass
    """

    def __init__(
        self,
        trace: AnimationTrace,
        config: Optional[PlaybackConfig] = None,
        on_step: Optional[StepCallback] = None,
    ):
        self.trace = trace
        self.config = config if config is not None else PlaybackConfig()
        self.on_step = on_step
        self.state = HighlightState()
        self._position = 0
        self._running = False
        self._in_tick = False

    @property
    def position(self) -> int:
        """Index of the next step to apply."""
        return self._position

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_finished(self) -> bool:
        return self._position >= len(self.trace)

    def start(self) -> bool:
        """
        Restart playback from the first step with a clean highlight state.

        Returns:
            False if the trace is empty and there is nothing to play.
        """
        self.reset()
        if not len(self.trace):
            logger.debug("Nothing to play: empty trace")
            return False
        self._running = True
        logger.debug("Playback started: %d steps at %.0fms", len(self.trace), self.config.interval_ms)
        return True

    def resume(self) -> bool:
        """Continue a stopped playback from its current position."""
        if self.is_finished:
            return False
        self._running = True
        return True

    def stop(self) -> None:
        """Cancel future ticks; the highlight state is kept until reset."""
        if self._running:
            logger.debug("Playback stopped at step %d of %d", self._position, len(self.trace))
        self._running = False

    def reset(self) -> None:
        """Stop and clear all highlights."""
        self._running = False
        self._position = 0
        self.state = HighlightState()

    def tick(self) -> bool:
        """
        Apply the next step.

        Returns:
            True if a step was applied, False if playback is stopped or done.

        Raises:
            PlaybackError: If called again from inside a step callback
        """
        if self._in_tick:
            raise PlaybackError("tick() called while a step is being applied")
        if not self._running:
            return False
        if self.is_finished:
            self._running = False
            return False

        self._in_tick = True
        try:
            step = self.trace.step_at(self._position)
            self.state = apply_step(self.state, step)
            self._position += 1
            if self.on_step is not None:
                self.on_step(self.state)
        finally:
            self._in_tick = False

        if self.is_finished:
            self._running = False
            logger.debug("Playback finished after %d steps", self._position)
        return True

    def iter_states(self) -> Iterator[HighlightState]:
        """Yield the highlight state after each tick until stopped or done."""
        while self.tick():
            yield self.state

    def run(self, sleep: Callable[[float], None] = time.sleep) -> HighlightState:
        """
        Play from the start, waiting ``config.interval_ms`` between steps.

        Returns:
            The highlight state when playback ends or is stopped.
        """
        if not self.start():
            return self.state
        while self.tick():
            if self._running:
                sleep(self.config.interval_seconds)
        return self.state
