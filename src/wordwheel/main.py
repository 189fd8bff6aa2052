"""
Application Initialization
==========================
Builds the session (model + controllers), the main window, and starts the Qt
event loop.

Why is this file needed?
------------------------
It is the dependency-injection root:
1. Loads the word data into a WordSource.
2. Creates the WheelSession with a QtScheduler.
3. Registers the history sink.
4. Passes the session into the MainWindow.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from wordwheel.config import DEFAULT_WORDS_PATH, EngineSettings
from wordwheel.controller.scheduler import QtScheduler
from wordwheel.controller.session import WheelSession
from wordwheel.logging_config import setup_logging
from wordwheel.model.io import IOManager, JsonLinesHistorySink
from wordwheel.view.main_window import MainWindow


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wordwheel", description="Covert word-selection wheel.")
    parser.add_argument("--words", default=DEFAULT_WORDS_PATH, help="JSON word file")
    parser.add_argument("--history", default=None, help="Append selections to this JSON-lines file")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName("Word Wheel")

    # 3. Initialize the Data Model and Controllers
    word_source = IOManager.load_word_source(args.words)
    session = WheelSession(word_source, QtScheduler(app), EngineSettings())
    if args.history:
        session.engine.add_sink(JsonLinesHistorySink(args.history))

    # 4. Initialize the Main Window, passing the session
    window = MainWindow(session)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
