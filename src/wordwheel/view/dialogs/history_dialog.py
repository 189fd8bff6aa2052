"""
History Dialog
Shows recent selections, most recent first; forced ones are marked.
"""
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QDialog, QHBoxLayout, QListWidget, QListWidgetItem, QPushButton, QVBoxLayout

from wordwheel.model.history import HistoryLog
from wordwheel.model.modes import OutcomeType


class HistoryDialog(QDialog):
    def __init__(self, history: HistoryLog, parent=None) -> None:
        super().__init__(parent)
        self.history = history
        self.setWindowTitle("Historique")
        self.resize(300, 400)

        layout = QVBoxLayout(self)
        self.list_widget = QListWidget()
        layout.addWidget(self.list_widget)

        row = QHBoxLayout()
        self.btn_clear = QPushButton("Effacer")
        self.btn_clear.clicked.connect(self.on_clear)
        row.addWidget(self.btn_clear)
        self.btn_close = QPushButton("Fermer")
        self.btn_close.clicked.connect(self.accept)
        row.addWidget(self.btn_close)
        layout.addLayout(row)

        self.refresh()

    def refresh(self) -> None:
        self.list_widget.clear()
        for entry in self.history.snapshot():
            item = QListWidgetItem(entry.word)
            if entry.type != OutcomeType.NORMAL:
                item.setText(f"{entry.word}  ({entry.type})")
                font = QFont(item.font())
                font.setBold(True)
                item.setFont(font)
            item.setToolTip(entry.timestamp.strftime("%H:%M:%S"))
            self.list_widget.addItem(item)

    def on_clear(self) -> None:
        self.history.clear()
        self.refresh()
