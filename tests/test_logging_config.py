import logging
import sys
from pathlib import Path

import pytest

from wordwheel import config
from wordwheel.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("wordwheel")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, logger.propagate = saved
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


def test_rerun_replaces_handlers(tmp_path):
    log_file = tmp_path / "wheel.log"
    setup_logging(logging.INFO, str(log_file))
    logger = setup_logging(logging.INFO, str(log_file))

    assert len(logger.handlers) == 2
    logging.getLogger("wordwheel.controller.engine").info("Selected: PARIS (FORCE)")
    for handler in logger.handlers:
        handler.flush()
    assert "Selected: PARIS (FORCE)" in log_file.read_text(encoding="utf-8")


def test_debug_format_carries_line_numbers():
    logger = setup_logging(logging.DEBUG)
    assert "%(lineno)d" in logger.handlers[0].formatter._fmt
    assert logger.level == logging.DEBUG


def test_resource_path_in_checkout():
    path = Path(config.get_resource_path("assets"))
    assert path.name == "assets"
    assert (path.parent / "src" / "wordwheel" / "config.py").exists()


def test_resource_path_when_frozen(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "_MEIPASS", str(tmp_path), raising=False)
    assert config.get_resource_path("assets") == str(tmp_path / "assets")
