"""
Selection Engine
================
The NORMAL / FORCE / VRTX state machine behind the wheel.

Why is this file needed?
------------------------
1. Injection: on every settle event it decides whether to overwrite the slot
   that is about to be centered. The write happens inside the settle handler,
   before the view starts its snap animation, so the swap looks like natural
   deceleration.
2. Read-back: once the snap is over (fixed delay, or an explicit
   `snap_finished()` from the view) it reads the centered word, de-duplicates
   it and records it in the HistoryLog.
3. Forwarding: every logged entry goes to the registered sinks on a
   best-effort basis.

Signals:
    result_logged(HistoryEntry): a new history entry was recorded.
    mode_changed(Mode): the active mode was replaced.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from wordwheel.config import MAX_PARAMETER, SETTLE_DELAY_MS
from wordwheel.controller.scheduler import Scheduler, TimerHandle
from wordwheel.model.history import HistoryEntry, HistoryLog
from wordwheel.model.modes import NORMAL, ForceMode, Mode, OutcomeType, VrtxMode
from wordwheel.model.wheel import SlotView
from wordwheel.model.words import WordSource

logger = logging.getLogger(__name__)

HistorySink = Callable[[HistoryEntry], None]


@dataclass
class PendingRead:
    index: int
    outcome: OutcomeType
    handle: Optional[TimerHandle] = None


class SelectionEngine(QObject):
    result_logged = Signal(object)
    mode_changed = Signal(object)

    def __init__(
        self,
        view: SlotView,
        word_source: WordSource,
        history: HistoryLog,
        scheduler: Scheduler,
        settle_delay_ms: int = SETTLE_DELAY_MS,
        rng: Optional[random.Random] = None,
        max_parameter: int = MAX_PARAMETER,
    ) -> None:
        super().__init__()
        self.view = view
        self.word_source = word_source
        self.history = history
        self.scheduler = scheduler
        self.settle_delay_ms = settle_delay_ms
        self.rng = rng or random.Random()
        self.max_parameter = max_parameter

        self._mode: Mode = NORMAL
        self._last_force: Optional[ForceMode] = None
        self._pending: Optional[PendingRead] = None
        self._last_logged_word: Optional[str] = None
        self._sinks: List[HistorySink] = []

    # --- STATE ---

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def has_pending_read(self) -> bool:
        return self._pending is not None

    def _set_mode(self, mode: Mode) -> None:
        self._mode = mode
        logger.debug(f"Mode -> {mode.kind}")
        self.mode_changed.emit(mode)

    # --- ACTIVATION ---

    def activate_force(self, target: str, count: int) -> ForceMode:
        """Force `target` onto the wheel at the `count`-th settle from now."""
        mode = ForceMode.create(target, count, self.max_parameter)
        self._last_force = replace(mode)
        logger.info(f"FORCE armed ({mode.initial} scrolls).")
        self._set_mode(mode)
        return mode

    def activate_vrtx(self, source: str, rank: int) -> VrtxMode:
        """Spell `source` one settle at a time using letter position `rank`."""
        mode = VrtxMode.create(source, rank, self.max_parameter)
        logger.info(f"VRTX armed ({len(mode.source)} letters, rank {mode.rank}).")
        self._set_mode(mode)
        return mode

    def repeat_last_force(self) -> Optional[ForceMode]:
        """Re-arm the most recent FORCE with its original count."""
        if self._last_force is None:
            return None
        mode = replace(self._last_force, remaining=self._last_force.initial)
        self._set_mode(mode)
        return mode

    def reset(self) -> None:
        if self._mode is not NORMAL:
            self._set_mode(NORMAL)

    # --- SINKS ---

    def add_sink(self, sink: HistorySink) -> None:
        self._sinks.append(sink)

    # --- SETTLE CYCLE ---

    def on_settled(self, index: int) -> None:
        """
        Handle one settle event for the slot about to be centered.

        Must run before the view starts its snap animation.
        """
        # At most one read pending: resolve a stale one now
        if self._pending is not None:
            logger.debug("Settle while a read is pending; flushing previous cycle.")
            self._complete_cycle()

        if not 0 <= index < self.view.slot_count():
            logger.debug(f"Settle index {index} outside wheel, cycle ignored.")
            return

        outcome = self._inject(index)
        pending = PendingRead(index=index, outcome=outcome)
        self._pending = pending
        pending.handle = self.scheduler.call_later(self.settle_delay_ms, self._on_delay_elapsed)

    def snap_finished(self) -> None:
        """The view reports that the snap animation has stopped."""
        if self._pending is not None:
            self._complete_cycle()

    def _on_delay_elapsed(self) -> None:
        if self._pending is not None:
            self._pending.handle = None
            self._complete_cycle()

    def _inject(self, index: int) -> OutcomeType:
        mode = self._mode

        if isinstance(mode, ForceMode):
            mode.remaining -= 1
            logger.debug(f"FORCE countdown: {mode.remaining} left")
            if mode.remaining > 0:
                return OutcomeType.NORMAL

            if self.view.get_slot_text(index) != mode.target:
                self.view.set_slot_text(index, mode.target)
            mode.remaining = mode.initial
            self._last_force = replace(mode)
            self._set_mode(NORMAL)
            return OutcomeType.FORCE

        if isinstance(mode, VrtxMode):
            letter = mode.source[mode.char_index]
            candidates = self.word_source.lookup(mode.rank, letter, exclude=mode.source)
            word = candidates[0] if len(candidates) == 1 else self.rng.choice(candidates)
            self.view.set_slot_text(index, word)
            mode.char_index += 1
            logger.debug(f"VRTX step {mode.char_index}/{len(mode.source)}")
            if mode.done:
                self._set_mode(NORMAL)
            return OutcomeType.VRTX

        return OutcomeType.NORMAL

    def _complete_cycle(self) -> None:
        pending = self._pending
        self._pending = None
        if pending is None:
            return
        if pending.handle is not None:
            pending.handle.cancel()

        word = self.view.get_slot_text(pending.index)
        if word is None:
            logger.debug(f"Slot {pending.index} vanished before read-back.")
            return
        if word == self._last_logged_word:
            return

        self._last_logged_word = word
        entry = self.history.append(word, pending.outcome)
        logger.info(f"Selected: {word} ({entry.type})")
        self.result_logged.emit(entry)
        self._forward(entry)

    def _forward(self, entry: HistoryEntry) -> None:
        for sink in list(self._sinks):
            try:
                sink(entry)
            except Exception as e:
                logger.warning(f"History sink {sink!r} failed: {e}")
