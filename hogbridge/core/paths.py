from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "HogBridge"
WORKING_DIR_NAME = "converter-output"

WGS_PACKAGE_NAME = "WarnerBros.Interactive.PHX_ktmk1xygcecda"


def get_app_data_dir() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base_dir = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    else:
        base_dir = Path.home() / ".config"

    app_data_dir = base_dir / APP_NAME
    app_data_dir.mkdir(parents=True, exist_ok=True)
    return app_data_dir.resolve()


def get_logs_dir() -> Path:
    logs_dir = get_app_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir.resolve()


def get_config_path() -> Path:
    return (get_app_data_dir() / "config.json").resolve()


def get_default_working_dir() -> Path:
    return (get_app_data_dir() / WORKING_DIR_NAME).resolve()


def get_local_app_data_dir() -> Path:
    local_appdata = os.getenv("LOCALAPPDATA")
    if local_appdata:
        return Path(local_appdata)
    return Path.home() / "AppData" / "Local"


def get_default_wgs_root() -> Path:
    return get_local_app_data_dir() / "Packages" / WGS_PACKAGE_NAME / "SystemAppData" / "wgs"


def get_default_steam_root() -> Path:
    return get_local_app_data_dir() / "Hogwarts Legacy" / "Saved" / "SaveGames"


def ensure_runtime_directories() -> None:
    get_app_data_dir()
    get_logs_dir()
