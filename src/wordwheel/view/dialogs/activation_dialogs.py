"""
Activation Dialogs
==================
Performer-facing dialogs that arm FORCE and VRTX modes.

Both share the same layout: a word field plus a row of 1..N radio buttons.
Validation is delegated to the engine; an ActivationError keeps the dialog
open and is shown to the performer.
"""
from PySide6.QtWidgets import (
    QButtonGroup, QDialog, QDialogButtonBox, QHBoxLayout, QLabel, QLineEdit,
    QMessageBox, QRadioButton, QVBoxLayout, QWidget
)

from wordwheel.controller.engine import SelectionEngine
from wordwheel.errors import ActivationError


class _ActivationDialog(QDialog):
    title = ""
    word_label = ""
    number_label = ""

    def __init__(self, engine: SelectionEngine, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.engine = engine
        self.setWindowTitle(self.title)

        layout = QVBoxLayout(self)

        layout.addWidget(QLabel(self.word_label))
        self.word_input = QLineEdit()
        layout.addWidget(self.word_input)

        layout.addWidget(QLabel(self.number_label))
        row = QHBoxLayout()
        self.number_group = QButtonGroup(self)
        for i in range(1, engine.max_parameter + 1):
            btn = QRadioButton(str(i))
            self.number_group.addButton(btn, i)
            row.addWidget(btn)
        layout.addLayout(row)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.on_activate)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.word_input.setFocus()

    def selected_number(self) -> int:
        # -1 when nothing is checked; rejected by validation
        return self.number_group.checkedId()

    def on_activate(self) -> None:
        try:
            self._activate(self.word_input.text(), self.selected_number())
        except ActivationError as e:
            QMessageBox.warning(self, self.title, str(e))
            return
        self.accept()

    def _activate(self, word: str, number: int) -> None:
        raise NotImplementedError


class ForceDialog(_ActivationDialog):
    title = "Force"
    word_label = "Mot à forcer :"
    number_label = "Après combien de scrolls ?"

    def _activate(self, word: str, number: int) -> None:
        self.engine.activate_force(word, number)


class VrtxDialog(_ActivationDialog):
    title = "VRTX"
    word_label = "Mot secret :"
    number_label = "Rang de la lettre :"

    def __init__(self, engine: SelectionEngine, parent: QWidget = None) -> None:
        super().__init__(engine, parent)
        self.lbl_counter = QLabel("(0)")
        self.layout().insertWidget(2, self.lbl_counter)
        self.word_input.textChanged.connect(self.on_text_changed)

    def on_text_changed(self, text: str) -> None:
        self.lbl_counter.setText(f"({len(text)})")

    def _activate(self, word: str, number: int) -> None:
        self.engine.activate_vrtx(word, number)
