import random

import pytest
from PySide6.QtCore import QPoint

from wordwheel.config import EngineSettings
from wordwheel.controller.scheduler import QtScheduler
from wordwheel.controller.session import WheelSession
from wordwheel.model.modes import ForceMode, NormalMode, OutcomeType
from wordwheel.model.words import WordSource
from wordwheel.view.main_window import MainWindow

# Long enough for idle + snap animation to finish
SETTLE_WAIT_MS = 800


@pytest.fixture
def window(wait):
    settings = EngineSettings(total_slots=200, idle_ms=20, settle_delay_ms=400, snap_animation_ms=100)
    source = WordSource(languages={"FR": ["AGREE", "SOLID", "PIANO", "TIGER", "OCEAN"]})
    session = WheelSession(source, QtScheduler(), settings, rng=random.Random(7))
    win = MainWindow(session)
    win.show()
    wait(50)
    yield win
    win.close()
    win.deleteLater()


def centered_text(widget) -> str:
    viewport = widget.viewport()
    item = widget.itemAt(QPoint(viewport.width() // 2, viewport.height() // 2))
    assert item is not None
    return item.text()


class TestWheelWidget:
    def test_starts_centered_without_settle(self, window, wait):
        session = window.session
        start = session.wheel.initial_index()
        wait(100)

        assert session.tracker.nearest_index == start
        assert centered_text(window.wheel_widget) == session.wheel.get_slot_text(start)
        assert len(session.history) == 0

    def test_viewport_height_reaches_tracker(self, window):
        viewport = window.wheel_widget.viewport()
        assert window.session.tracker.viewport_height == viewport.height()

    def test_programmatic_jump_is_not_a_settle(self, window, wait):
        session = window.session
        session.engine.activate_force("PARIS", 1)

        window.wheel_widget.scroll_to_index(session.wheel.initial_index() + 10)
        wait(SETTLE_WAIT_MS)

        assert len(session.history) == 0
        assert isinstance(session.engine.mode, ForceMode)

    def test_one_scroll_is_one_settle(self, window, wait):
        session = window.session
        widget = window.wheel_widget
        session.engine.activate_force("PARIS", 2)

        bar = widget.verticalScrollBar()
        bar.setValue(bar.value() + 95)
        wait(SETTLE_WAIT_MS)

        mode = session.engine.mode
        assert isinstance(mode, ForceMode)
        assert mode.remaining == 1
        entries = session.history.snapshot()
        assert [e.type for e in entries] == [OutcomeType.NORMAL]

        # The snapped slot is the one the tracker settled on
        index = session.tracker.nearest_index
        assert centered_text(widget) == session.wheel.get_slot_text(index)
        assert entries[0].word == session.wheel.get_slot_text(index)

    def test_force_lands_on_centered_item(self, window, wait):
        session = window.session
        widget = window.wheel_widget
        session.engine.activate_force("PARIS", 2)
        bar = widget.verticalScrollBar()

        bar.setValue(bar.value() + 95)
        wait(SETTLE_WAIT_MS)
        bar.setValue(bar.value() + 70)
        wait(SETTLE_WAIT_MS)

        assert centered_text(widget) == "PARIS"
        assert session.wheel.get_slot_text(session.tracker.nearest_index) == "PARIS"
        latest = session.history.snapshot()[0]
        assert latest.word == "PARIS"
        assert latest.type == OutcomeType.FORCE
        assert isinstance(session.engine.mode, NormalMode)
