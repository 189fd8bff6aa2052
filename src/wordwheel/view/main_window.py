"""
Main Application Window
=======================
Hosts the wheel and the performer's hidden controls.

Why is this file needed?
------------------------
1. Layout: the wheel in the middle, language/theme toggles on top.
2. Routing: connects the wheel widget to the session (scroll -> tracker,
   tracker snap -> widget, widget snap done -> engine) and the performer's
   shortcuts to the activation dialogs.
"""
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from wordwheel.controller.session import WheelSession
from wordwheel.view.dialogs.activation_dialogs import ForceDialog, VrtxDialog
from wordwheel.view.dialogs.history_dialog import HistoryDialog
from wordwheel.view.wheel_widget import WheelWidget

VISIBLE_APP_NAME = "Word Wheel"

DARK_STYLE = "QWidget { background-color: #111; color: #eee; }"
LIGHT_STYLE = "QWidget { background-color: #fafafa; color: #111; }"


class MainWindow(QMainWindow):
    def __init__(self, session: WheelSession) -> None:
        super().__init__()
        self.session = session
        self.is_dark = True

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(420, 520)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        # --- 1. HEADER ---
        header = QHBoxLayout()
        self.btn_lang = QPushButton(session.word_source.language)
        self.btn_lang.clicked.connect(self.on_toggle_language)
        header.addWidget(self.btn_lang)
        header.addStretch()
        self.btn_theme = QPushButton("☀️")
        self.btn_theme.clicked.connect(self.on_toggle_theme)
        header.addWidget(self.btn_theme)
        layout.addLayout(header)

        # --- 2. WHEEL ---
        self.wheel_widget = WheelWidget(session.wheel, session.feedback, session.settings)
        layout.addWidget(self.wheel_widget, alignment=Qt.AlignVCenter)
        session.attach_view(self.wheel_widget)

        # --- SIGNAL CONNECTIONS ---
        self.wheel_widget.offset_changed.connect(session.scroll_to)
        session.tracker.snap_requested.connect(self.wheel_widget.animate_to)
        self.wheel_widget.snap_finished.connect(session.engine.snap_finished)
        self.wheel_widget.viewport_resized.connect(session.tracker.set_viewport_height)
        session.wheel_rebuilt.connect(self.on_wheel_rebuilt)

        # --- HIDDEN ACTIONS ---
        self._create_actions()

        self._apply_theme()
        start = session.wheel.initial_index()
        self.wheel_widget.scroll_to_index(start)
        session.place_at(start)

    def _create_actions(self) -> None:
        self.act_force = QAction("Force", self)
        self.act_force.setShortcut(QKeySequence("Ctrl+F"))
        self.act_force.triggered.connect(self.on_open_force)

        self.act_vrtx = QAction("VRTX", self)
        self.act_vrtx.setShortcut(QKeySequence("Ctrl+R"))
        self.act_vrtx.triggered.connect(self.on_open_vrtx)

        self.act_history = QAction("History", self)
        self.act_history.setShortcut(QKeySequence("Ctrl+H"))
        self.act_history.triggered.connect(self.on_open_history)

        self.act_repeat = QAction("Repeat Force", self)
        self.act_repeat.setShortcut(QKeySequence("Ctrl+Shift+F"))
        self.act_repeat.triggered.connect(self.session.engine.repeat_last_force)

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut(QKeySequence("Ctrl+0"))
        self.act_reset.triggered.connect(self.session.engine.reset)

        # No menu bar: the controls stay invisible to the viewer
        for act in (self.act_force, self.act_vrtx, self.act_history, self.act_repeat, self.act_reset):
            self.addAction(act)

    # --- SLOTS ---

    def on_open_force(self) -> None:
        ForceDialog(self.session.engine, self).exec()

    def on_open_vrtx(self) -> None:
        VrtxDialog(self.session.engine, self).exec()

    def on_open_history(self) -> None:
        HistoryDialog(self.session.history, self).exec()

    def on_toggle_language(self) -> None:
        self.session.toggle_language()
        self.btn_lang.setText(self.session.word_source.language)

    def on_wheel_rebuilt(self, index: int) -> None:
        self.wheel_widget.populate()
        self.wheel_widget.scroll_to_index(index)

    def on_toggle_theme(self) -> None:
        self.is_dark = not self.is_dark
        self._apply_theme()

    def _apply_theme(self) -> None:
        self.setStyleSheet(DARK_STYLE if self.is_dark else LIGHT_STYLE)
        self.btn_theme.setText("☀️" if self.is_dark else "🌙")
