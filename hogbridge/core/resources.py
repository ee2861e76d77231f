from __future__ import annotations

from pathlib import Path
import sys

TRANSLATIONS_DIR = "i18n/translations"


def _base_dir() -> Path:
    # Frozen builds unpack bundled data into a temporary folder.
    bundle_dir = getattr(sys, "_MEIPASS", None)
    if bundle_dir:
        return Path(bundle_dir)
    return Path(__file__).resolve().parents[1]


def resource_path(relative_path: str) -> Path:
    return (_base_dir() / relative_path).resolve()


def get_translations_dir() -> Path:
    return resource_path(TRANSLATIONS_DIR)


def get_translation_file(language: str) -> Path:
    return get_translations_dir() / f"{language}.json"
