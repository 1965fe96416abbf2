"""File logger with severity filtering and a pluggable time source."""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, Union

TimeSource = Callable[[], str]


class LogLevel(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    INFO = 0
    WARN = 1
    ERROR = 2

    @property
    def label(self) -> str:
        return self.name


def default_time_source() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class Logger:
    """Appends timestamped messages to a file.

    Messages below the logger's level are dropped.
    """

    def __init__(
        self,
        filename: Union[str, os.PathLike],
        time_source: TimeSource = default_time_source,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self.filename = os.fspath(filename)
        self.level = level
        self._time_source = time_source
        self._lock = threading.Lock()

        print(f"Attempting to open log file: {self.filename}")
        parent = Path(self.filename).parent
        if not parent.exists():
            raise FileNotFoundError(f"Directory for log file does not exist: {parent}")
        try:
            self._file = open(self.filename, "a", encoding="utf-8")
        except OSError as exc:
            print(f"Failed to open log file: {self.filename}", file=sys.stderr)
            raise OSError(f"Could not open log file: {self.filename}") from exc

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        """Write ``message`` if ``level`` meets the logger's threshold."""
        with self._lock:
            if level >= self.level:
                self._file.write(f"{self._time_source()} [{LogLevel(level).label}] - {message}\n")
                self._file.flush()

    def close(self) -> None:
        """Close the underlying file."""
        with self._lock:
            if not self._file.closed:
                self._file.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


_instance: Optional[Logger] = None
_instance_lock = threading.Lock()


def get_instance(
    filename: Union[str, os.PathLike], time_source: TimeSource = default_time_source
) -> Logger:
    """Return the shared logger, creating it on the first call.

    Later calls return the same logger whatever arguments they pass.
    """
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Logger(filename, time_source)
        return _instance