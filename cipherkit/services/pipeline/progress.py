"""
Progress and status reporting for brute-force runs.

A :class:`BruteforceContext` is created and owned by the caller and handed
to the orchestrator. Worker threads only touch it through the narrow
``report_progress`` / ``report_status`` methods; every mutation happens
under one state lock and callbacks run after it is released.
"""

import threading
from collections.abc import Callable

MAX_PROGRESS = 360.0

ProgressCallback = Callable[[float], None]
StatusCallback = Callable[[str], None]


class BruteforceContext:
    """
    Shared progress state of one brute-force run.

    Progress is measured in degrees of a completion arc, 0 to 360, and
    never decreases until the caller calls :meth:`reset` before the next
    run. The context also carries the caller's cancellation signal.

    Progress callbacks are delivered one at a time, in order, while a
    notification lock is held; any worker reporting progress meanwhile
    waits for the callback to return. Callbacks must therefore be quick,
    e.g. setting a UI value or putting onto a queue. A callback doing
    I/O should hand the value to its own thread instead.
    """

    def __init__(
        self,
        on_progress: ProgressCallback | None = None,
        on_status: StatusCallback | None = None,
    ):
        self._on_progress = on_progress
        self._on_status = on_status
        self._lock = threading.Lock()
        # Serializes callbacks so observers see progress in order
        self._notify_lock = threading.RLock()
        self._progress = 0.0
        self._status = ""
        self._cancel_event = threading.Event()
        self._cancel_reason: str | None = None

    @property
    def progress(self) -> float:
        with self._lock:
            return self._progress

    @property
    def percent(self) -> float:
        return self.progress / MAX_PROGRESS * 100.0

    @property
    def status(self) -> str:
        with self._lock:
            return self._status

    def report_progress(self, delta: float) -> float:
        """Advance progress by ``delta`` degrees, capped at 360."""
        with self._notify_lock:
            with self._lock:
                if delta > 0:
                    self._progress = min(self._progress + delta, MAX_PROGRESS)
                current = self._progress

            if self._on_progress is not None:
                self._on_progress(current)
        return current

    def complete(self) -> None:
        """Mark the run finished (exactly 360 degrees)."""
        with self._notify_lock:
            with self._lock:
                self._progress = MAX_PROGRESS

            if self._on_progress is not None:
                self._on_progress(MAX_PROGRESS)

    def report_status(self, text: str) -> None:
        with self._lock:
            self._status = text

        if self._on_status is not None:
            self._on_status(text)

    def reset(self) -> None:
        """Clear progress, status and cancellation before a new run."""
        with self._lock:
            self._progress = 0.0
            self._status = ""
            self._cancel_reason = None
        self._cancel_event.clear()

    def cancel(self, reason: str = "cancelled by caller") -> None:
        with self._lock:
            if self._cancel_reason is None:
                self._cancel_reason = reason
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def cancel_reason(self) -> str | None:
        with self._lock:
            return self._cancel_reason
