"""
Scroll Settle Detection
=======================
Turns a stream of scroll offsets into discrete "settle" events.

Every offset update restarts an idle timer. When the timer fires with no
intervening update, the tracker emits `settled(nearest_index)` once and then
asks the view to snap to that slot via `snap_requested(offset)`.

Offsets are logical: slot i is centered exactly when offset == i * slot_height.
The view converts its raw scrollbar value before calling `update()`.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from wordwheel.config import IDLE_MS, SLOT_HEIGHT
from wordwheel.controller.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class ScrollTracker(QObject):
    settled = Signal(int)
    snap_requested = Signal(float)

    def __init__(
        self,
        scheduler: Scheduler,
        slot_height: int = SLOT_HEIGHT,
        viewport_height: float = 0.0,
        idle_ms: int = IDLE_MS,
    ) -> None:
        super().__init__()
        if slot_height <= 0:
            raise ValueError(f"Slot height must be positive, got {slot_height}.")
        self.scheduler = scheduler
        self.slot_height = slot_height
        self.viewport_height = viewport_height
        self.idle_ms = idle_ms

        self.offset: float = 0.0
        self.is_scrolling: bool = False
        self._idle: Optional[TimerHandle] = None

    # --- GEOMETRY ---

    @property
    def center_line(self) -> float:
        return self.offset + self.viewport_height / 2

    @property
    def nearest_index(self) -> int:
        return int(round(self.offset / self.slot_height))

    def set_viewport_height(self, height: float) -> None:
        self.viewport_height = height

    # --- EVENTS ---

    def update(self, offset: float) -> None:
        """Record a new scroll offset and restart the idle timer."""
        self.offset = offset
        self.is_scrolling = True
        if self._idle is not None:
            self._idle.cancel()
        self._idle = self.scheduler.call_later(self.idle_ms, self._on_idle)

    def cancel(self) -> None:
        if self._idle is not None:
            self._idle.cancel()
            self._idle = None
        self.is_scrolling = False

    def _on_idle(self) -> None:
        self._idle = None
        self.is_scrolling = False
        index = self.nearest_index
        logger.debug(f"Scroll settled at offset {self.offset:.1f} -> slot {index}")
        # Injection must happen before the snap starts
        self.settled.emit(index)
        self.snap_requested.emit(float(index * self.slot_height))
