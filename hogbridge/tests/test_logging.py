from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

import pytest

from core.logging import LOG_FILE_NAME, LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _detach_handlers() -> Iterator[None]:
    yield
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


def test_records_reach_file_and_console_signal(tmp_path: Path) -> None:
    logger, emitter = setup_logging(logs_dir=tmp_path)
    received: list[tuple[int, str]] = []
    emitter.log_message.connect(lambda level, message: received.append((level, message)))

    get_logger("migration").warning("Writing file: %s", "HL-00-10.sav")
    logger.debug("hidden")

    for handler in logger.handlers:
        handler.flush()
    content = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "WARNING | hogbridge.migration | Writing file: HL-00-10.sav" in content
    assert "hidden" not in content
    assert received[0][0] == logging.WARNING


def test_verbose_keeps_debug_records(tmp_path: Path) -> None:
    logger, _emitter = setup_logging(logs_dir=tmp_path, verbose=True)
    logger.debug("slot map details")
    for handler in logger.handlers:
        handler.flush()
    assert "slot map details" in (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
