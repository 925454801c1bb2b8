"""Wall-clock timing helpers."""

from __future__ import annotations

import time
from typing import Optional, Type
from types import TracebackType


class Stopwatch:
    """Measures elapsed wall-clock time; usable directly or as a context manager.

    While running, `seconds` reports the time elapsed so far. Once stopped, it reports the frozen duration.
    """

    def __init__(self) -> None:
        """Initialize a stopwatch that has not been started."""
        self.start_time: Optional[float] = None
        self.stop_time: Optional[float] = None

    def start(self) -> Stopwatch:
        """Start (or restart) timing."""
        self.start_time = time.monotonic()
        self.stop_time = None
        return self

    def stop(self) -> None:
        """Freeze the elapsed duration."""
        if self.start_time is not None and self.stop_time is None:
            self.stop_time = time.monotonic()

    @property
    def running(self) -> bool:
        """Whether the stopwatch has been started and not yet stopped."""
        return self.start_time is not None and self.stop_time is None

    def __enter__(self) -> Stopwatch:
        """Enter the context."""
        return self.start()

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        """Exit the context."""
        self.stop()

    @property
    def seconds(self) -> float:
        """The elapsed duration in seconds."""
        if self.start_time is None:
            return 0.0
        end = self.stop_time if self.stop_time is not None else time.monotonic()
        return end - self.start_time

    @property
    def milliseconds(self) -> float:
        """The elapsed duration in milliseconds."""
        return self.seconds * 1000.0

    @property
    def milliseconds_formatted(self) -> str:
        """The elapsed duration in milliseconds, formatted as a string."""
        return f"{self.milliseconds:.1f}ms"
