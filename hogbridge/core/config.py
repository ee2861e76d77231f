from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.paths import get_config_path, get_default_steam_root, get_default_wgs_root, get_default_working_dir


class AppConfig:
    _SUPPORTED_LANGUAGES = {"en", "de"}
    _SUPPORTED_DIRECTIONS = {"gp2steam", "steam2gp"}

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or get_config_path()
        self._defaults: dict[str, Any] = {
            "language": "en",
            "last_direction": "gp2steam",
            "wgs_root": str(get_default_wgs_root()),
            "steam_root": str(get_default_steam_root()),
            "working_dir": str(get_default_working_dir()),
            "last_opened_paths": [],
        }
        self._data: dict[str, Any] = {}
        self._load_or_create()

    def _load_or_create(self) -> None:
        if not self._config_path.exists():
            self._data = dict(self._defaults)
            self.save()
            return

        try:
            content = self._config_path.read_text(encoding="utf-8")
            loaded = json.loads(content)
            if not isinstance(loaded, dict):
                loaded = {}
        except (json.JSONDecodeError, OSError):
            loaded = {}

        self._data = dict(self._defaults)
        self._data.update(loaded)

        language = str(self._data.get("language", "")).strip().lower()
        if language not in self._SUPPORTED_LANGUAGES:
            language = self._defaults["language"]
        self._data["language"] = language

        direction = str(self._data.get("last_direction", "")).strip().lower()
        if direction not in self._SUPPORTED_DIRECTIONS:
            direction = self._defaults["last_direction"]
        self._data["last_direction"] = direction

        self.save()

    def save(self) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(
            json.dumps(self._data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def get_language(self) -> str:
        return str(self._data.get("language", self._defaults["language"]))

    def set_language(self, language: str) -> None:
        self._data["language"] = language
        self.save()

    def get_last_direction(self) -> str:
        return str(self._data.get("last_direction", self._defaults["last_direction"]))

    def set_last_direction(self, direction: str) -> None:
        self._data["last_direction"] = direction
        self.save()

    def get_wgs_root(self) -> str:
        return str(self._data.get("wgs_root", self._defaults["wgs_root"]))

    def set_wgs_root(self, root_path: str) -> None:
        self._data["wgs_root"] = str(root_path)
        self.save()

    def get_steam_root(self) -> str:
        return str(self._data.get("steam_root", self._defaults["steam_root"]))

    def set_steam_root(self, root_path: str) -> None:
        self._data["steam_root"] = str(root_path)
        self.save()

    def get_working_dir(self) -> str:
        return str(self._data.get("working_dir", self._defaults["working_dir"]))

    def set_working_dir(self, working_dir: str) -> None:
        self._data["working_dir"] = str(working_dir)
        self.save()

    def get_last_opened_paths(self) -> list[str]:
        paths = self._data.get("last_opened_paths", self._defaults["last_opened_paths"])
        if isinstance(paths, list):
            return [str(item) for item in paths]
        return []

    def add_last_opened_path(self, path: str) -> None:
        paths = self.get_last_opened_paths()
        if path in paths:
            paths.remove(path)
        paths.insert(0, path)
        self._data["last_opened_paths"] = paths[:10]
        self.save()
