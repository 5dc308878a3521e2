"""Playback cursor over an immutable step sequence.

Stepping, seeking and auto-play only move an index; the steps themselves are
never touched.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from . import constants
from .step_types import AlgorithmStep

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackConfig:
    """Groups playback timing configuration."""

    speed_options: tuple[float, ...] = constants.SPEED_OPTIONS
    base_interval: float = constants.BASE_INTERVAL_SECONDS


class Playback:
    def __init__(
        self,
        steps: Sequence[AlgorithmStep],
        speed: float = constants.DEFAULT_SPEED,
        config: PlaybackConfig = PlaybackConfig(),
    ):
        self._steps = tuple(steps)
        self._config = config
        self._index = 0
        self.is_playing = False
        self.speed = constants.DEFAULT_SPEED
        self.set_speed(speed)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def current_step(self) -> AlgorithmStep | None:
        return self._steps[self._index] if self._steps else None

    @property
    def last_index(self) -> int:
        return max(0, len(self._steps) - 1)

    @property
    def at_end(self) -> bool:
        return self._index >= self.last_index

    @property
    def interval(self) -> float:
        """Seconds between auto-advances at the current speed."""
        return self._config.base_interval / self.speed

    def set_speed(self, speed: float) -> None:
        if speed not in self._config.speed_options:
            raise ValueError(
                f"Unsupported speed {speed}; choose one of {self._config.speed_options}"
            )
        self.speed = speed

    def next(self) -> AlgorithmStep | None:
        self.is_playing = False
        self._index = min(self.last_index, self._index + 1)
        return self.current_step

    def previous(self) -> AlgorithmStep | None:
        self.is_playing = False
        self._index = max(0, self._index - 1)
        return self.current_step

    def seek(self, index: int) -> AlgorithmStep | None:
        self.is_playing = False
        self._index = max(0, min(self.last_index, index))
        return self.current_step

    def reset(self) -> None:
        self.is_playing = False
        self._index = 0

    def play(self) -> None:
        """Start auto-play, rewinding first when already at the last step."""
        if len(self._steps) < 2:
            return
        if self.at_end:
            self._index = 0
        self.is_playing = True

    def pause(self) -> None:
        self.is_playing = False

    def tick(self) -> bool:
        """Advance one step while playing; stops itself on the last step.

        Returns True when the index moved.
        """
        if not self.is_playing:
            return False
        if self.at_end:
            self.is_playing = False
            return False
        self._index += 1
        if self.at_end:
            self.is_playing = False
        return True

    def run(
        self,
        on_step: Callable[[AlgorithmStep], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Auto-play until the last step or until pause() is called.

        The interval is re-read before every wait so speed changes made from
        *on_step* take effect immediately. Returns the number of advances.
        """
        self.play()
        advanced = 0
        while self.is_playing:
            sleep(self.interval)
            if not self.tick():
                break
            advanced += 1
            if on_step is not None:
                on_step(self._steps[self._index])
        logger.debug("Auto-play stopped at step %d after %d advances", self._index, advanced)
        return advanced
