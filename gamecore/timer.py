"""Frame timer built on a millisecond tick clock."""

from __future__ import annotations

import time
from typing import Callable

_U32 = 0xFFFFFFFF


def _default_clock() -> Callable[[], int]:
    origin = time.monotonic()
    return lambda: int((time.monotonic() - origin) * 1000)


class Timer:
    """Tracks frame ticks and computes frame delta and sleep times.

    ``clock`` returns the number of milliseconds elapsed since some origin.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self.clock = clock if clock is not None else _default_clock()
        self.prev_ticks = 0
        self.current_ticks = 0

    def start(self) -> None:
        self.prev_ticks = self.clock()
        self.current_ticks = self.clock()

    def update_frame_ticks(self) -> None:
        self.prev_ticks = self.current_ticks
        self.current_ticks = self.clock()

    def delta_time(self) -> float:
        """Seconds between the last two frame updates."""
        return ((self.current_ticks - self.prev_ticks) & _U32) / 1000.0

    def sleep_time(self, fps: int) -> int:
        """Milliseconds to sleep to hold the given frame rate."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        milli_per_frame = 1000 // fps
        if milli_per_frame == 0:
            return 0
        sleep = (milli_per_frame - self.clock()) & _U32
        if sleep > milli_per_frame:
            return milli_per_frame
        return sleep

    def current_tick(self) -> float:
        """Current frame tick in seconds."""
        return self.current_ticks / 1000.0