"""A resumable task driven step by step, yielding integer values."""

from __future__ import annotations

from typing import Iterator


class Coroutine:
    """Wraps a generator so it can be resumed one step at a time.

    The wrapped generator does not run until the first call to :meth:`resume`.
    """

    def __init__(self, generator: Iterator[int]) -> None:
        self._generator = generator
        self._value = 0
        self._done = False

    @property
    def done(self) -> bool:
        """True once the generator has finished or raised."""
        return self._done

    def resume(self) -> bool:
        """Run to the next yield; return True if more steps remain.

        An exception raised by the generator is re-raised here, after which
        the coroutine counts as finished.
        """
        if self._done:
            return False
        try:
            self._value = next(self._generator)
        except StopIteration:
            self._done = True
            return False
        except BaseException:
            self._done = True
            raise
        return True

    def current_value(self) -> int:
        """Return the most recently yielded value."""
        if self._done:
            raise RuntimeError("Coroutine not in valid state to retrieve value.")
        return self._value