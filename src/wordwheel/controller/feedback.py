"""
Visual Feedback ("fish-eye")
Maps each visible slot's distance from the center line to opacity, scale
and font weight. Purely cosmetic: reads geometry only, never engine state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

import numpy as np

from wordwheel.config import SLOT_HEIGHT

if TYPE_CHECKING:
    import numpy.typing as npt

# Focus curve: ratio 0 -> 1 as the slot approaches the center line
MIN_FOCUSED_OPACITY = 0.5
MAX_SCALE_BOOST = 0.2
UNFOCUSED_OPACITY = 0.3
UNFOCUSED_SCALE = 0.95
FOCUSED_WEIGHT = 700
UNFOCUSED_WEIGHT = 400


@dataclass(frozen=True)
class SlotStyle:
    index: int
    opacity: float
    scale: float
    weight: int


class VisualFeedback:
    def __init__(self, slot_height: int = SLOT_HEIGHT, window: int = 1) -> None:
        self.slot_height = slot_height
        # Extra slots styled beyond the visible ones
        self.window = window
        self._dirty = True

    def mark_dirty(self) -> None:
        self._dirty = True

    def styles_for(self, offset: float, viewport_height: float, slot_count: int) -> List[SlotStyle]:
        """Styles for every slot currently in view (plus `window` margin)."""
        h = self.slot_height
        first = max(0, int(np.floor(offset / h)) - self.window - int(np.ceil(viewport_height / (2 * h))))
        last = min(slot_count - 1, int(np.ceil(offset / h)) + self.window + int(np.ceil(viewport_height / (2 * h))))
        if last < first:
            return []

        indexes = np.arange(first, last + 1)
        # Slot i is centered at offset == i * h
        distances = np.abs(offset - indexes * h)
        opacity, scale, focused = self.curve(distances)
        weights = np.where(focused, FOCUSED_WEIGHT, UNFOCUSED_WEIGHT)

        return [
            SlotStyle(int(i), float(o), float(s), int(w))
            for i, o, s, w in zip(indexes, opacity, scale, weights)
        ]

    def curve(self, distances: npt.NDArray) -> tuple[npt.NDArray, npt.NDArray, npt.NDArray]:
        """Monotonically decreasing opacity/scale in distance."""
        distances = np.asarray(distances, dtype=float)
        focused = distances < self.slot_height
        ratio = np.clip(1.0 - distances / self.slot_height, 0.0, 1.0)
        opacity = np.where(focused, MIN_FOCUSED_OPACITY + ratio * (1.0 - MIN_FOCUSED_OPACITY), UNFOCUSED_OPACITY)
        scale = np.where(focused, 1.0 + ratio * MAX_SCALE_BOOST, UNFOCUSED_SCALE)
        return opacity, scale, focused

    def tick(self, offset: float, viewport_height: float, slot_count: int) -> List[SlotStyle]:
        """
        Frame-timer entry point: at most one computation per frame, and none
        when nothing scrolled since the last frame.
        """
        if not self._dirty:
            return []
        self._dirty = False
        return self.styles_for(offset, viewport_height, slot_count)
