"""
Wheel Model
===========
The ordered, effectively infinite sequence of slots shown by the wheel.

Why is this file needed?
------------------------
1. Layout: repeats the word list enough times that a session never visibly
   wraps.
2. Ownership: bulk replacement happens only in `rebuild()`; single-slot
   writes go through `set_slot_text()`, which only the SelectionEngine calls.
3. Decoupling: the engine depends on the `SlotView` protocol, not on Qt.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from wordwheel.config import TOTAL_SLOTS

logger = logging.getLogger(__name__)

# Lists at least this long only need a few copies
LARGE_LIST_REPEATS = 3


class SlotView(Protocol):
    """Minimal slot access needed by the SelectionEngine."""
    def get_slot_text(self, index: int) -> Optional[str]: ...
    def set_slot_text(self, index: int, text: str) -> bool: ...
    def slot_count(self) -> int: ...


@dataclass
class Slot:
    position: int
    text: str


def layout_words(words: Sequence[str], total_slots: int = TOTAL_SLOTS) -> List[str]:
    """Repeat `words` cyclically to fill the wheel."""
    if not words:
        return []
    if len(words) >= total_slots:
        return list(words) * LARGE_LIST_REPEATS
    return [words[i % len(words)] for i in range(total_slots)]


class WheelModel:
    def __init__(self, words: Sequence[str] = (), total_slots: int = TOTAL_SLOTS) -> None:
        self.total_slots = total_slots
        self.slots: List[Slot] = []
        if words:
            self._fill(words)

    @classmethod
    def build(cls, words: Sequence[str], total_slots: int = TOTAL_SLOTS) -> WheelModel:
        return cls(words, total_slots=total_slots)

    def _fill(self, words: Sequence[str]) -> None:
        self.slots = [Slot(i, text) for i, text in enumerate(layout_words(words, self.total_slots))]
        logger.debug(f"Wheel laid out: {len(self.slots)} slots from {len(words)} words.")

    def rebuild(self, words: Sequence[str], position_ratio: float) -> int:
        """
        Replace all slots and return the index matching `position_ratio`
        (fraction of the old sequence) in the new one.
        """
        self._fill(words)
        if not self.slots:
            return 0
        ratio = min(max(position_ratio, 0.0), 1.0)
        return min(int(round(ratio * len(self.slots))), len(self.slots) - 1)

    def position_ratio(self, index: int) -> float:
        if not self.slots:
            return 0.0
        return index / len(self.slots)

    def initial_index(self) -> int:
        """Start in the middle so the viewer can scroll both ways."""
        return len(self.slots) // 2

    def words(self) -> List[str]:
        return [slot.text for slot in self.slots]

    # --- SlotView ---

    def get_slot_text(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.slots):
            return self.slots[index].text
        return None

    def set_slot_text(self, index: int, text: str) -> bool:
        if 0 <= index < len(self.slots):
            self.slots[index].text = text
            return True
        return False

    def slot_count(self) -> int:
        return len(self.slots)

    def __len__(self) -> int:
        return len(self.slots)
