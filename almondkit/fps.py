"""Frames-per-second counting and a scene that drives it from many threads."""

from __future__ import annotations

import os
import threading
import time
from typing import Callable, Optional

Clock = Callable[[], float]

_WINDOW_MS = 1000


class FPS:
    """Counts updates and publishes the count once more than a second has passed.

    ``clock`` returns a monotonic time in seconds.
    """

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._fps = 0
        self._frames = 0
        self._last_time = clock()
        self._lock = threading.Lock()

    @property
    def fps(self) -> int:
        """Updates counted in the last completed window."""
        return self._fps

    @property
    def frames(self) -> int:
        """Updates counted so far in the current window."""
        return self._frames

    def update(self) -> None:
        """Count one frame; roll the window over once it exceeds a second."""
        with self._lock:
            self._frames += 1
            now = self._clock()
            elapsed_ms = int((now - self._last_time) * 1000)
            if elapsed_ms > _WINDOW_MS:
                self._fps = self._frames
                self._frames = 0
                self._last_time = now


def run_fps_counter(counter: FPS) -> int:
    """Update ``counter`` once, print its rate and return it."""
    counter.update()
    fps = counter.fps
    print(f"FPS: {fps}", flush=True)
    return fps


def load_fps_scene(thread_count: Optional[int] = None) -> FPS:
    """Run the FPS counter once on each of ``thread_count`` threads.

    With no count, one thread per available processor is used. Returns the
    shared counter after every thread has finished.
    """
    if thread_count is None:
        thread_count = os.cpu_count() or 1
    if thread_count < 0:
        raise ValueError("thread_count must not be negative")
    counter = FPS()
    threads = [
        threading.Thread(target=run_fps_counter, args=(counter,))
        for _ in range(thread_count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter