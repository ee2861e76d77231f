from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from PySide6.QtCore import QObject, Signal

from core.paths import get_logs_dir

LOGGER_NAME = "hogbridge"
LOG_FILE_NAME = "hogbridge.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 5


class LogEmitter(QObject):
    """Carries formatted log lines from any thread to the GUI thread."""

    log_message = Signal(int, str)


class QtSignalLogHandler(logging.Handler):
    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()
        self._emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._emitter.log_message.emit(record.levelno, self.format(record))
        except Exception:
            self.handleError(record)


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(logs_dir: Path | None = None, verbose: bool = False) -> tuple[logging.Logger, LogEmitter]:
    """Configure the application logger.

    Records go to a rotating file in the logs folder and to the in-app log
    console. With ``verbose`` debug records are kept as well and mirrored to
    stderr. Child loggers (``hogbridge.migration`` and friends) share these
    handlers through propagation.
    """
    directory = logs_dir or get_logs_dir()
    directory.mkdir(parents=True, exist_ok=True)
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    _close_handlers(logger)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    file_handler = RotatingFileHandler(
        filename=directory / LOG_FILE_NAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    emitter = LogEmitter()
    signal_handler = QtSignalLogHandler(emitter)
    signal_handler.setFormatter(formatter)
    # The console in the window never shows debug noise.
    signal_handler.setLevel(logging.INFO)
    logger.addHandler(signal_handler)

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(logging.DEBUG)
        logger.addHandler(stream_handler)

    return logger, emitter
