"""Entities that move around and can rewind to earlier positions."""

from __future__ import annotations

import os
import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Union

from .logger import LogLevel, Logger, TimeSource, default_time_source

PathArg = Union[str, os.PathLike]


@dataclass(frozen=True)
class State:
    """A saved position and the time it was saved."""

    x: float
    y: float
    time_stamp: str


class HistoryManager:
    """Keeps a bounded stack of past positions, logging each change."""

    MAX_HISTORY_SIZE = 100

    def __init__(self, log_file: PathArg, time_source: TimeSource = default_time_source) -> None:
        self._time_source = time_source
        self._logger = Logger(log_file, time_source, LogLevel.INFO)
        self._history: Deque[State] = deque(maxlen=self.MAX_HISTORY_SIZE)
        self._lock = threading.Lock()

    def save_state(self, x: float, y: float) -> State:
        """Record a position; the oldest one is dropped once the history is full."""
        with self._lock:
            state = State(x, y, self._time_source())
            self._history.append(state)
            self._logger.log(f"State saved: ({x:.6f}, {y:.6f}) at {state.time_stamp}")
            return state

    def rewind(self) -> Optional[State]:
        """Remove and return the most recent state, or None if there is none."""
        with self._lock:
            if not self._history:
                self._logger.log("No history to rewind to.")
                return None
            state = self._history.pop()
            self._logger.log(
                f"Rewind successful to: ({state.x:.6f}, {state.y:.6f}) at {state.time_stamp}"
            )
            return state

    def close(self) -> None:
        """Close the history log."""
        self._logger.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)


class Entity:
    """A positioned object whose moves are recorded so they can be undone."""

    def __init__(
        self,
        log_file: PathArg,
        time_source: TimeSource = default_time_source,
        entity_id: int = 0,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        if time_source is None:
            raise ValueError("time_source cannot be None")
        self._id = entity_id
        self._x = float(x)
        self._y = float(y)
        self._time_source = time_source
        self._log_file = os.fspath(log_file)
        self._history = HistoryManager(self._log_file, time_source)
        self._logger = Logger(self._log_file, time_source, LogLevel.INFO)
        self._logger.log(f"Entity created with ID: {self._id} at {self._time_source()}")

    @property
    def id(self) -> int:
        return self._id

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def history(self) -> HistoryManager:
        return self._history

    def move(self, delta_x: float, delta_y: float) -> None:
        """Save the current position, then move by the given offsets."""
        self._history.save_state(self._x, self._y)
        self._x += delta_x
        self._y += delta_y
        self._logger.log(
            f"Entity {self._id} moved to: ({self._x:.6f}, {self._y:.6f}) at {self._time_source()}"
        )

    def rewind(self) -> bool:
        """Return to the last saved position; False if there was none."""
        state = self._history.rewind()
        if state is None:
            self._logger.log(
                f"No previous state to rewind to for Entity {self._id} at {self._time_source()}"
            )
            return False
        self._x, self._y = state.x, state.y
        self._logger.log(
            f"Entity {self._id} rewound to: ({self._x:.6f}, {self._y:.6f}) at {self._time_source()}"
        )
        return True

    def clone(self) -> "Entity":
        """Return a new entity with the same id, position and log file, but no history."""
        return Entity(self._log_file, self._time_source, self._id, self._x, self._y)

    def describe(self) -> str:
        """Return a one-line description of the entity's position."""
        return f"Entity {self._id} Position: ({self._x:g}, {self._y:g})"

    def close(self) -> None:
        """Close the entity's logs."""
        self._history.close()
        self._logger.close()