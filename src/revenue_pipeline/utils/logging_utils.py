"""
Logging utilities for the revenue pipeline.

Diagnostics go to stderr so that stdout carries only the rendered table and
the revenue summary.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
import colorlog

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    colorize: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up a logger with a console handler and an optional file handler.

    Calling it again for the same name replaces the previous handlers, so the
    orchestrator can reconfigure module loggers once settings are known.

    Args:
        name: Logger name (typically __name__ of the calling module)
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        colorize: Whether to colorize console output
        stream: Console stream (default: sys.stderr)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("revenue_pipeline", log_file="logs/pipeline.log")
        >>> logger.info("Loading data.csv")
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if colorize:
        console_formatter = colorlog.ColoredFormatter(
            '%(log_color)s' + LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS
        )
    else:
        console_formatter = file_formatter

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a pipeline module.

    Module loggers are children of the ``revenue_pipeline`` logger; the first
    call installs default handlers on that parent so that messages are visible
    before the orchestrator configures logging from settings.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    root_name = name.split('.')[0]
    root = logging.getLogger(root_name)

    if not root.handlers:
        setup_logger(root_name)

    return logging.getLogger(name)
