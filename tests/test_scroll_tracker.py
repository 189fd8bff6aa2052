import pytest

from wordwheel.controller.scroll_tracker import ScrollTracker


@pytest.fixture
def tracker(scheduler):
    return ScrollTracker(scheduler, slot_height=60, viewport_height=300, idle_ms=100)


@pytest.fixture
def events(tracker):
    settled, snaps = [], []
    tracker.settled.connect(settled.append)
    tracker.snap_requested.connect(snaps.append)
    return settled, snaps


def test_geometry(tracker):
    tracker.update(6029.0)
    assert tracker.center_line == 6029.0 + 150
    assert tracker.nearest_index == 100


def test_no_settle_while_moving(tracker, scheduler, events):
    settled, _ = events
    for offset in range(0, 600, 60):
        tracker.update(float(offset))
        scheduler.advance(50)
    assert settled == []
    assert tracker.is_scrolling


def test_single_settle_after_idle(tracker, scheduler, events):
    settled, snaps = events
    tracker.update(100.0)
    tracker.update(170.0)
    scheduler.advance(100)
    scheduler.advance(500)
    assert settled == [3]
    assert snaps == [180.0]
    assert not tracker.is_scrolling


def test_settle_emitted_before_snap(tracker, scheduler):
    order = []
    tracker.settled.connect(lambda i: order.append("settled"))
    tracker.snap_requested.connect(lambda o: order.append("snap"))
    tracker.update(0.0)
    scheduler.advance(100)
    assert order == ["settled", "snap"]


def test_cancel_drops_pending_settle(tracker, scheduler, events):
    settled, _ = events
    tracker.update(120.0)
    tracker.cancel()
    scheduler.advance(200)
    assert settled == []


def test_invalid_slot_height(scheduler):
    with pytest.raises(ValueError):
        ScrollTracker(scheduler, slot_height=0)
