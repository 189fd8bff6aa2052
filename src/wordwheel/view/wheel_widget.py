"""
Wheel Widget
============
QListWidget rendering of the WheelModel.

Why is this file needed?
------------------------
1. Rendering: one list item per slot, fixed slot height, fish-eye styling
   applied once per frame from VisualFeedback.
2. SlotView: engine writes land in both the model and the visible item.
3. Snap: animates the scrollbar to the grid line requested by the tracker
   and reports completion through `snap_finished`.

The tracker works in "logical" offsets where slot i is centered at
i * slot_height; the widget converts from raw scrollbar values.
"""
from typing import Optional

from PySide6.QtCore import QAbstractAnimation, QEasingCurve, QPropertyAnimation, QSize, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem

from wordwheel.config import EngineSettings
from wordwheel.controller.feedback import VisualFeedback
from wordwheel.model.wheel import WheelModel

FRAME_MS = 16
BASE_POINT_SIZE = 20


class WheelWidget(QListWidget):
    offset_changed = Signal(float)
    snap_finished = Signal()
    viewport_resized = Signal(float)

    def __init__(self, wheel: WheelModel, feedback: VisualFeedback, settings: EngineSettings) -> None:
        super().__init__()
        self.wheel = wheel
        self.feedback = feedback
        self.settings = settings
        # True while the scrollbar moves programmatically
        self._snapping = False
        self._current_index = 0

        self.setVerticalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.setFocusPolicy(Qt.NoFocus)
        self.setUniformItemSizes(True)

        self._snap_anim = QPropertyAnimation(self.verticalScrollBar(), b"value", self)
        self._snap_anim.setEasingCurve(QEasingCurve.OutCubic)
        self._snap_anim.setDuration(settings.snap_animation_ms)
        self._snap_anim.finished.connect(self._on_snap_done)
        self.setFixedHeight(settings.viewport_height)

        self.verticalScrollBar().valueChanged.connect(self._on_scroll_value)

        # Styling is throttled to one pass per frame
        self._frame_timer = QTimer(self)
        self._frame_timer.timeout.connect(self._apply_styles)
        self._frame_timer.start(FRAME_MS)

        self.populate()

    # --- CONTENT ---

    def populate(self) -> None:
        """Recreate all items from the model."""
        self.blockSignals(True)
        self.clear()
        hint = QSize(0, self.settings.slot_height)
        for text in self.wheel.words():
            item = QListWidgetItem(text)
            item.setTextAlignment(Qt.AlignCenter)
            item.setSizeHint(hint)
            self.addItem(item)
        self.blockSignals(False)
        self.feedback.mark_dirty()

    # --- SlotView ---

    def get_slot_text(self, index: int) -> Optional[str]:
        return self.wheel.get_slot_text(index)

    def set_slot_text(self, index: int, text: str) -> bool:
        if not self.wheel.set_slot_text(index, text):
            return False
        item = self.item(index)
        if item is not None:
            item.setText(text)
        return True

    def slot_count(self) -> int:
        return self.wheel.slot_count()

    # --- OFFSETS ---

    def _center_shift(self) -> float:
        return self.viewport().height() / 2 - self.settings.slot_height / 2

    def logical_offset(self) -> float:
        return self.verticalScrollBar().value() + self._center_shift()

    def scroll_to_index(self, index: int) -> None:
        """Jump to `index` without reporting it as a user scroll."""
        self._snap_anim.stop()
        self._current_index = index
        # Scrollbar range is only valid once items are laid out
        self.doItemsLayout()
        self._snapping = True
        try:
            self.verticalScrollBar().setValue(int(round(index * self.settings.slot_height - self._center_shift())))
        finally:
            self._snapping = False
        self.feedback.mark_dirty()

    def animate_to(self, logical_offset: float) -> None:
        """Snap to `logical_offset`; emits snap_finished when done."""
        self._current_index = int(round(logical_offset / self.settings.slot_height))
        target = int(round(logical_offset - self._center_shift()))
        bar = self.verticalScrollBar()
        if bar.value() == target:
            self.snap_finished.emit()
            return
        self._snapping = True
        self._snap_anim.stop()
        self._snap_anim.setStartValue(bar.value())
        self._snap_anim.setEndValue(target)
        self._snap_anim.start()

    def _on_snap_done(self) -> None:
        self._snapping = False
        self.snap_finished.emit()

    def _on_scroll_value(self, _value: int) -> None:
        self.feedback.mark_dirty()
        # Programmatic snap motion is not user scrolling
        if not self._snapping:
            self.offset_changed.emit(self.logical_offset())

    # --- EVENTS ---

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.viewport_resized.emit(float(self.viewport().height()))
        # Keep the same slot centered under the new viewport
        if self._snap_anim.state() != QAbstractAnimation.Running:
            self.scroll_to_index(self._current_index)

    def wheelEvent(self, event) -> None:
        if self._snapping:
            self._snap_anim.stop()
            self._snapping = False
        super().wheelEvent(event)

    def mousePressEvent(self, event) -> None:
        if self._snapping:
            self._snap_anim.stop()
            self._snapping = False
        super().mousePressEvent(event)

    # --- STYLING ---

    def _apply_styles(self) -> None:
        styles = self.feedback.tick(self.logical_offset(), self.viewport().height(), self.count())
        base_color = self.palette().text().color()
        for style in styles:
            item = self.item(style.index)
            if item is None:
                continue
            font = QFont(item.font())
            font.setPointSizeF(BASE_POINT_SIZE * style.scale)
            font.setWeight(QFont.Bold if style.weight >= 700 else QFont.Normal)
            item.setFont(font)
            color = QColor(base_color)
            color.setAlphaF(style.opacity)
            item.setForeground(color)
