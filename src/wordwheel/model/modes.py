"""
Selection Modes
===============
Exactly one mode is active at a time:

* NormalMode - the wheel is left alone.
* ForceMode  - after `initial` settles the centered word becomes `target`.
* VrtxMode   - each settle injects a word whose letter at `rank` spells `source`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union

from wordwheel.config import MAX_PARAMETER
from wordwheel.errors import ActivationError


class OutcomeType(StrEnum):
    NORMAL = "NORMAL"
    FORCE = "FORCE"
    VRTX = "VRTX"


@dataclass(frozen=True)
class NormalMode:
    kind: OutcomeType = OutcomeType.NORMAL


@dataclass
class ForceMode:
    target: str
    remaining: int
    initial: int
    kind: OutcomeType = OutcomeType.FORCE

    @classmethod
    def create(cls, target: str, count: int, max_count: int = MAX_PARAMETER) -> ForceMode:
        word = _clean_word(target)
        _check_range("count", count, max_count)
        return cls(target=word, remaining=count, initial=count)


@dataclass
class VrtxMode:
    source: str
    rank: int
    char_index: int = 0
    kind: OutcomeType = OutcomeType.VRTX

    @classmethod
    def create(cls, source: str, rank: int, max_rank: int = MAX_PARAMETER) -> VrtxMode:
        word = _clean_word(source)
        _check_range("rank", rank, max_rank)
        return cls(source=word, rank=rank, char_index=0)

    @property
    def done(self) -> bool:
        return self.char_index >= len(self.source)


Mode = Union[NormalMode, ForceMode, VrtxMode]

NORMAL = NormalMode()


def _clean_word(word: str) -> str:
    cleaned = (word or "").strip().upper()
    if not cleaned:
        raise ActivationError("Word must not be empty.")
    return cleaned


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ActivationError(f"{name} must be an integer, got {value!r}.")
    if not 1 <= value <= upper:
        raise ActivationError(f"{name} must be between 1 and {upper}, got {value}.")
