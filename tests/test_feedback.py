import numpy as np

from wordwheel.controller.feedback import UNFOCUSED_OPACITY, UNFOCUSED_SCALE, VisualFeedback


def test_curve_is_monotonically_decreasing():
    fb = VisualFeedback(slot_height=60)
    distances = np.linspace(0, 200, 81)
    opacity, scale, _ = fb.curve(distances)
    assert np.all(np.diff(opacity) <= 0)
    assert np.all(np.diff(scale) <= 0)


def test_centered_slot_fully_focused():
    fb = VisualFeedback(slot_height=60)
    styles = {s.index: s for s in fb.styles_for(offset=600.0, viewport_height=300, slot_count=100)}
    center = styles[10]
    assert center.opacity == 1.0
    assert center.scale == 1.2
    assert center.weight == 700
    far = styles[13]
    assert far.opacity == UNFOCUSED_OPACITY
    assert far.scale == UNFOCUSED_SCALE
    assert far.weight == 400


def test_window_clipped_to_wheel():
    fb = VisualFeedback(slot_height=60)
    indexes = [s.index for s in fb.styles_for(offset=0.0, viewport_height=300, slot_count=5)]
    assert min(indexes) == 0
    assert max(indexes) <= 4


def test_tick_computes_once_per_change():
    fb = VisualFeedback(slot_height=60)
    assert fb.tick(600.0, 300, 100)
    assert fb.tick(600.0, 300, 100) == []
    fb.mark_dirty()
    assert fb.tick(630.0, 300, 100)
