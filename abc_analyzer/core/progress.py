"""Progress reporting and cooperative cancellation."""

from __future__ import annotations

import threading
from typing import Optional, Protocol


class ProgressSink(Protocol):
    """Receives progress updates and answers cancellation polls."""

    def advance(self, step: int = 1) -> None:
        ...

    def is_cancelled(self) -> bool:
        ...


class NullProgress:
    """Sink that ignores progress and never cancels."""

    def advance(self, step: int = 1) -> None:
        return None

    def is_cancelled(self) -> bool:
        return False


class CancellationToken:
    """Thread-safe progress counter with a cancellation flag.

    ``cancel`` may be called from another thread or a signal handler; the
    work loop only polls ``is_cancelled``.
    """

    def __init__(self, cancel_after: Optional[int] = None) -> None:
        self._event = threading.Event()
        self._progress = 0
        self._cancel_after = cancel_after

    @property
    def progress(self) -> int:
        return self._progress

    def advance(self, step: int = 1) -> None:
        self._progress += step
        if self._cancel_after is not None and self._progress >= self._cancel_after:
            self._event.set()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()
