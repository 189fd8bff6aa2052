"""
Logging Configuration
Routes the 'wordwheel' logger tree to the terminal and, optionally, a file.

Selections are logged at INFO; settle/injection steps only appear with DEBUG.
"""
import logging
import sys
from typing import Optional

CONSOLE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DEBUG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s:%(lineno)d: %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'wordwheel' logger and returns it.

    Args:
        level: Logging level. At DEBUG the timestamps carry milliseconds so
            idle/settle/snap timings can be read off the log.
        log_file: Optional path; the file is appended to across runs.
    """
    logger = logging.getLogger("wordwheel")
    logger.setLevel(level)
    logger.propagate = False

    # main() may run more than once in the same process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        DEBUG_FORMAT if level <= logging.DEBUG else CONSOLE_FORMAT,
        datefmt='%H:%M:%S',
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}" + (f", file {log_file}" if log_file else ""))
    return logger
