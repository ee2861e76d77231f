from __future__ import annotations

import json
import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.resources import get_translations_dir

DEFAULT_LANGUAGE = "en"

_logger = logging.getLogger("hogbridge.i18n")


class I18nManager(QObject):
    """Holds the loaded translation tables and the active language.

    Lookups fall back from the active language to English and finally to the
    key itself, so a missing entry shows up as its key in the UI.
    """

    language_changed = Signal(str)

    def __init__(self, language: str = DEFAULT_LANGUAGE, fallback_language: str = DEFAULT_LANGUAGE) -> None:
        super().__init__()
        self._language = language
        self._fallback_language = fallback_language
        self._tables: dict[str, dict[str, str]] = {}

    @property
    def current_language(self) -> str:
        return self._language

    def load_translations(self, translations_dir: Path | None = None) -> None:
        directory = translations_dir or get_translations_dir()
        tables: dict[str, dict[str, str]] = {}

        if not directory.is_dir():
            _logger.warning("Translations folder missing: %s", directory)
        else:
            for file_path in sorted(directory.glob("*.json")):
                table = self._read_table(file_path)
                if table is not None:
                    tables[file_path.stem] = table

        self._tables = tables
        if self._fallback_language not in tables and tables:
            self._fallback_language = min(tables)
        if self._language not in tables:
            self._language = self._fallback_language

        for language in self.available_languages():
            missing = self.missing_keys(language)
            if missing:
                _logger.debug("Language %s lacks %s key(s)", language, len(missing))

    @staticmethod
    def _read_table(file_path: Path) -> dict[str, str] | None:
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            _logger.warning("Skipping translation file %s: %s", file_path.name, error)
            return None
        if not isinstance(payload, dict):
            _logger.warning("Skipping translation file %s: not an object", file_path.name)
            return None
        return {str(key): str(value) for key, value in payload.items()}

    def available_languages(self) -> list[str]:
        return sorted(self._tables)

    def keys(self, language: str) -> set[str]:
        return set(self._tables.get(language, {}))

    def missing_keys(self, language: str) -> set[str]:
        return self.keys(self._fallback_language) - self.keys(language)

    def set_language(self, language: str, emit_signal: bool = True) -> None:
        if language not in self._tables:
            language = self._fallback_language
        if language == self._language:
            return

        self._language = language
        if emit_signal:
            self.language_changed.emit(language)

    def translate(self, key: str, **kwargs: object) -> str:
        template = self._tables.get(self._language, {}).get(key)
        if template is None:
            template = self._tables.get(self._fallback_language, {}).get(key, key)
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return template


_i18n = I18nManager()


def initialize_i18n(language: str) -> None:
    _i18n.load_translations()
    _i18n.set_language(language, emit_signal=False)


def get_i18n() -> I18nManager:
    return _i18n


def tr(key: str, **kwargs: object) -> str:
    return _i18n.translate(key, **kwargs)
