import os
import random
from typing import Callable, List

# Widgets run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEventLoop, QTimer
from PySide6.QtWidgets import QApplication

from wordwheel.config import EngineSettings
from wordwheel.controller.engine import SelectionEngine
from wordwheel.model.history import HistoryLog
from wordwheel.model.wheel import WheelModel
from wordwheel.model.words import WordSource

WORDS = [
    "AGREE", "SOLID", "ALPHA", "ADORE", "PIANO", "TIGER", "GOLD", "OCEAN",
    "MAISON", "EAGLE", "OLIVE", "SILVER",
]


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class FakeHandle:
    def __init__(self, due: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class FakeScheduler:
    """Deterministic clock: timers fire only inside advance()."""
    def __init__(self) -> None:
        self.now = 0
        self.handles: List[FakeHandle] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(self.now + delay_ms, callback)
        self.handles.append(handle)
        return handle

    def pending(self) -> List[FakeHandle]:
        return [h for h in self.handles if h.active]

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [h for h in self.pending() if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.now = handle.due
            handle.fired = True
            handle.callback()
        self.now = target


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(total_slots=200)


@pytest.fixture
def word_source() -> WordSource:
    return WordSource(languages={"FR": list(WORDS)})


@pytest.fixture
def wheel(settings) -> WheelModel:
    return WheelModel.build(WORDS, total_slots=settings.total_slots)


@pytest.fixture
def engine(wheel, word_source, scheduler, settings) -> SelectionEngine:
    return SelectionEngine(
        view=wheel,
        word_source=word_source,
        history=HistoryLog(cap=settings.history_cap),
        scheduler=scheduler,
        settle_delay_ms=settings.settle_delay_ms,
        rng=random.Random(1234),
    )


def run_event_loop(ms: int) -> None:
    """Run the Qt event loop for `ms` milliseconds."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


@pytest.fixture
def wait() -> Callable[[int], None]:
    return run_event_loop
