"""
Timer Scheduling
================
Single-shot timers with cancellation tokens.

Why is this file needed?
------------------------
The scroll tracker and the selection engine both wait on timers. They ask a
`Scheduler` for a `TimerHandle` instead of owning QTimers directly, so the
same logic runs on the Qt event loop and under a deterministic test clock.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer: Optional[QTimer] = timer

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _release(self) -> None:
        if self._timer is not None:
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    """Scheduler backed by single-shot QTimers on the GUI thread."""
    def __init__(self, parent: Optional[QObject] = None) -> None:
        self.parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        handle = QtTimerHandle(timer)

        def fire() -> None:
            handle._release()
            callback()

        timer.timeout.connect(fire)
        timer.start(max(0, int(delay_ms)))
        return handle
