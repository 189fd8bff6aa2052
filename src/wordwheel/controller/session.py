"""
Wheel Session (Controller Root)
===============================
Owns one running wheel: the word source, the slot model, the history, the
scroll tracker and the selection engine, wired together.

Why is this file needed?
------------------------
1. Wiring: `ScrollTracker.settled` -> `SelectionEngine.on_settled` is the only
   path by which a settle event reaches the engine.
2. Language switch: rebuilds the wheel while keeping the viewer's relative
   position, and drops any settle that was about to fire for the old layout.
3. Decoupling: views attach through the `SlotView` protocol, so the session
   runs headless in tests.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject, Signal

from wordwheel.config import EngineSettings
from wordwheel.controller.engine import SelectionEngine
from wordwheel.controller.feedback import VisualFeedback
from wordwheel.controller.scheduler import Scheduler
from wordwheel.controller.scroll_tracker import ScrollTracker
from wordwheel.model.history import HistoryLog
from wordwheel.model.wheel import SlotView, WheelModel
from wordwheel.model.words import WordSource

logger = logging.getLogger(__name__)


class WheelSession(QObject):
    # Emitted with the slot index to show after a rebuild
    wheel_rebuilt = Signal(int)

    def __init__(
        self,
        word_source: WordSource,
        scheduler: Scheduler,
        settings: Optional[EngineSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or EngineSettings()
        self.word_source = word_source

        self.wheel = WheelModel.build(word_source.words(), total_slots=self.settings.total_slots)
        self.history = HistoryLog(cap=self.settings.history_cap)
        self.feedback = VisualFeedback(slot_height=self.settings.slot_height)

        self.tracker = ScrollTracker(
            scheduler,
            slot_height=self.settings.slot_height,
            viewport_height=self.settings.viewport_height,
            idle_ms=self.settings.idle_ms,
        )
        self.engine = SelectionEngine(
            view=self.wheel,
            word_source=word_source,
            history=self.history,
            scheduler=scheduler,
            settle_delay_ms=self.settings.settle_delay_ms,
            rng=rng,
            max_parameter=self.settings.max_parameter,
        )

        self.tracker.settled.connect(self.engine.on_settled)
        logger.info(
            f"Session ready: {self.wheel.slot_count()} slots, language {word_source.language}."
        )

    def attach_view(self, view: SlotView) -> None:
        """Route engine slot writes through `view` (which must wrap self.wheel)."""
        self.engine.view = view

    def place_at(self, index: int) -> None:
        """Record a programmatic jump to `index`; no settle is scheduled."""
        self.tracker.offset = float(index * self.settings.slot_height)
        self.feedback.mark_dirty()

    def scroll_to(self, offset: float) -> None:
        self.feedback.mark_dirty()
        self.tracker.update(offset)

    def toggle_language(self) -> int:
        """Switch language, rebuild the wheel, and return the slot to show."""
        index = self.tracker.nearest_index
        ratio = self.wheel.position_ratio(index)
        self.tracker.cancel()

        language = self.word_source.toggle_language()
        new_index = self.wheel.rebuild(self.word_source.words(), ratio)
        self.place_at(new_index)

        logger.info(f"Wheel rebuilt for {language}: slot {index} -> {new_index}")
        self.wheel_rebuilt.emit(new_index)
        return new_index
