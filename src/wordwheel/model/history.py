"""
Selection History
Bounded FIFO record of the words the wheel settled on.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Deque, Dict, List

from wordwheel.config import HISTORY_CAP
from wordwheel.model.modes import OutcomeType


@dataclass(frozen=True)
class HistoryEntry:
    word: str
    type: OutcomeType
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "type": str(self.type),
            "timestamp": self.timestamp.isoformat(),
        }


class HistoryLog:
    def __init__(self, cap: int = HISTORY_CAP) -> None:
        if cap < 1:
            raise ValueError(f"History cap must be positive, got {cap}.")
        self.cap = cap
        self._entries: Deque[HistoryEntry] = deque(maxlen=cap)

    def append(self, word: str, type: OutcomeType = OutcomeType.NORMAL) -> HistoryEntry:
        entry = HistoryEntry(word=word, type=type)
        # deque(maxlen) drops from the left
        self._entries.append(entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> List[HistoryEntry]:
        """Most recent first."""
        return list(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
