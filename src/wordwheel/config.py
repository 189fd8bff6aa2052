"""
Configuration & Path Management
===============================
Central registry for file paths, wheel geometry and timing constants.

Why is this file needed?
------------------------
1. Abstraction: no hardcoded paths or magic timings scattered through the
   controllers and widgets.
2. Deployment: handles PyInstaller (sys._MEIPASS) so the word list is found
   when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_WORDS_PATH (str): Absolute path to the bundled word list.
    EngineSettings: Tunable geometry/timing values for one wheel session.
"""
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """Resolve `relative_path` against the bundle dir (frozen) or the checkout root."""
    # PyInstaller unpacks bundled data under sys._MEIPASS
    frozen_root = getattr(sys, "_MEIPASS", None)
    root = Path(frozen_root) if frozen_root else Path(__file__).resolve().parents[2]
    return str(root / relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_WORDS_PATH: str = os.path.join(ASSETS_PATH, "words.json")

# Wheel geometry
SLOT_HEIGHT: int = 60
TOTAL_SLOTS: int = 2000
VIEWPORT_SLOTS: int = 5

# Timing (milliseconds)
IDLE_MS: int = 100
SETTLE_DELAY_MS: int = 350
SNAP_ANIMATION_MS: int = 300

# Selection limits
HISTORY_CAP: int = 20
MAX_PARAMETER: int = 6

LANGUAGES: tuple[str, ...] = ("FR", "EN")
DEFAULT_LANGUAGE: str = "FR"


@dataclass
class EngineSettings:
    """Geometry and timing for one wheel session."""
    slot_height: int = SLOT_HEIGHT
    total_slots: int = TOTAL_SLOTS
    viewport_slots: int = VIEWPORT_SLOTS
    idle_ms: int = IDLE_MS
    settle_delay_ms: int = SETTLE_DELAY_MS
    snap_animation_ms: int = SNAP_ANIMATION_MS
    history_cap: int = HISTORY_CAP
    max_parameter: int = MAX_PARAMETER

    @property
    def viewport_height(self) -> int:
        return self.slot_height * self.viewport_slots


if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
