from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from core.migration.migration_models import Direction
from core.paths import get_default_steam_root, get_default_wgs_root

WGS_INDEX_FILE_NAME = "containers.index"
WGS_TEMP_FOLDER_NAME = "t"
STEAM_ID_MIN_LENGTH = 8

_logger = logging.getLogger("hogbridge.discovery")


@dataclass(slots=True)
class RootResolution:
    path: Path | None
    candidates: list[Path] = field(default_factory=list)

    @property
    def needs_choice(self) -> bool:
        return self.path is None and len(self.candidates) > 1


def default_wgs_root() -> Path:
    return get_default_wgs_root()


def default_steam_root() -> Path:
    return get_default_steam_root()


def _has_entries(directory: Path) -> bool:
    try:
        return any(directory.iterdir())
    except OSError:
        return False


def _subdirectories(root: Path) -> list[Path]:
    try:
        return sorted((child for child in root.iterdir() if child.is_dir()), key=lambda path: path.name)
    except OSError as error:
        _logger.warning("Could not list %s: %s", root, error)
        return []


def list_wgs_user_folders(wgs_root: Path) -> list[Path]:
    root = Path(wgs_root)
    if not root.is_dir():
        return []

    return [
        child
        for child in _subdirectories(root)
        if child.name.lower() != WGS_TEMP_FOLDER_NAME and _has_entries(child)
    ]


def is_steam_id(name: str) -> bool:
    return len(name) >= STEAM_ID_MIN_LENGTH and name.isascii() and name.isdigit()


def list_steam_user_folders(steam_root: Path) -> list[Path]:
    root = Path(steam_root)
    if not root.is_dir():
        return []
    return [child for child in _subdirectories(root) if is_steam_id(child.name)]


def is_wgs_save_dir(path: Path) -> bool:
    return (Path(path) / WGS_INDEX_FILE_NAME).is_file()


def is_steam_save_dir(path: Path) -> bool:
    try:
        return any(child.is_file() for child in Path(path).glob("*.sav"))
    except OSError:
        return False


def resolve_save_dir(path: Path, direction: Direction) -> RootResolution:
    """Turn a user-supplied folder into the source folder for ``direction``.

    GamePass sources are WGS user folders; Steam sources are SteamID folders.
    When the folder is a platform root holding several user folders, the
    caller receives the candidates and must choose.
    """
    candidate = Path(path).expanduser()
    if not candidate.is_dir():
        return RootResolution(path=None)

    if direction is Direction.GP_TO_STEAM:
        if is_wgs_save_dir(candidate):
            return RootResolution(path=candidate, candidates=[candidate])
        subfolders = list_wgs_user_folders(candidate)
    else:
        if is_steam_save_dir(candidate):
            return RootResolution(path=candidate, candidates=[candidate])
        subfolders = [child for child in _subdirectories(candidate) if _has_entries(child)]

    if len(subfolders) == 1:
        return RootResolution(path=subfolders[0], candidates=subfolders)
    return RootResolution(path=None, candidates=subfolders)


def source_user_folders(direction: Direction, wgs_root: Path | None = None, steam_root: Path | None = None) -> list[Path]:
    if direction is Direction.GP_TO_STEAM:
        return list_wgs_user_folders(wgs_root or default_wgs_root())
    return list_steam_user_folders(steam_root or default_steam_root())


def destination_user_folders(
    direction: Direction,
    wgs_root: Path | None = None,
    steam_root: Path | None = None,
) -> list[Path]:
    if direction is Direction.GP_TO_STEAM:
        return list_steam_user_folders(steam_root or default_steam_root())
    return list_wgs_user_folders(wgs_root or default_wgs_root())
