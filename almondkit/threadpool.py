"""A fixed-size pool of worker threads running queued jobs."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, List, Optional

_log = logging.getLogger(__name__)

Job = Optional[Callable[[], object]]


class ThreadPool:
    """Runs jobs on a fixed number of worker threads.

    On shutdown, jobs still in the queue are drained before the workers exit.
    """

    _POLL_SECONDS = 0.01

    def __init__(self, thread_count: int) -> None:
        if thread_count < 1:
            raise ValueError("thread_count must be at least 1")
        self._jobs: "queue.Queue[Job]" = queue.Queue()
        self._running = True
        self._lock = threading.Lock()
        self._workers: List[threading.Thread] = [
            threading.Thread(target=self._work, daemon=True) for _ in range(thread_count)
        ]
        for worker in self._workers:
            worker.start()

    def enqueue(self, job: Job) -> None:
        """Queue ``job`` to run on a worker thread."""
        with self._lock:
            if not self._running:
                raise RuntimeError("ThreadPool has been shut down")
            self._jobs.put(job)

    def shutdown(self) -> None:
        """Stop accepting jobs, finish queued ones and join the workers."""
        with self._lock:
            self._running = False
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _work(self) -> None:
        while self._running:
            try:
                job = self._jobs.get(timeout=self._POLL_SECONDS)
            except queue.Empty:
                continue
            self._run(job)
        while True:
            try:
                job = self._jobs.get_nowait()
            except queue.Empty:
                break
            self._run(job)

    @staticmethod
    def _run(job: Job) -> None:
        if job is None:
            return
        try:
            job()
        except Exception:
            _log.exception("job raised an exception")