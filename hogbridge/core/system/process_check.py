from __future__ import annotations

import logging

import psutil

GAME_PROCESS_NAME = "HogwartsLegacy.exe"

_logger = logging.getLogger("hogbridge.system")


def is_process_running(process_name: str) -> bool:
    normalized = process_name.strip().lower()
    if normalized == "":
        return False

    for process in psutil.process_iter(["name"]):
        try:
            name = process.info.get("name")
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
        if isinstance(name, str) and name.lower() == normalized:
            return True
    return False


def can_write_saves(process_name: str = GAME_PROCESS_NAME) -> bool:
    try:
        running = is_process_running(process_name)
    except psutil.Error as error:
        _logger.warning("Could not inspect running processes: %s", error)
        return True
    return not running
