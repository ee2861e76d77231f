from __future__ import annotations

from pathlib import Path

import pytest

from core.discovery.save_roots import (
    destination_user_folders,
    is_steam_id,
    list_steam_user_folders,
    list_wgs_user_folders,
    resolve_save_dir,
    source_user_folders,
)
from core.migration.migration_models import Direction


def _wgs_user(root: Path, name: str) -> Path:
    folder = root / name
    folder.mkdir(parents=True)
    (folder / "containers.index").write_bytes(b"\x0e")
    return folder


def _steam_user(root: Path, name: str) -> Path:
    folder = root / name
    folder.mkdir(parents=True)
    (folder / "HL-00-00.sav").write_bytes(b"x")
    return folder


def test_wgs_user_folders_skip_temp_and_empty(tmp_path: Path) -> None:
    wgs = tmp_path / "wgs"
    user = _wgs_user(wgs, "000901F0A1B2C3D4_0000000000000000000000006A1B2C3D")
    (wgs / "t").mkdir()
    (wgs / "t" / "temp.bin").write_bytes(b"x")
    (wgs / "empty").mkdir()

    assert list_wgs_user_folders(wgs) == [user]


@pytest.mark.parametrize(
    ("name", "expected"),
    [("76561198000000000", True), ("12345678", True), ("1234567", False), ("7656119800000000a", False)],
)
def test_steam_id(name: str, expected: bool) -> None:
    assert is_steam_id(name) is expected


def test_steam_user_folders(tmp_path: Path) -> None:
    user = _steam_user(tmp_path, "76561198000000000")
    (tmp_path / "Backup").mkdir()
    assert list_steam_user_folders(tmp_path) == [user]
    assert list_steam_user_folders(tmp_path / "absent") == []


def test_resolve_direct_wgs_user_folder(tmp_path: Path) -> None:
    user = _wgs_user(tmp_path, "ABCDEF")
    resolution = resolve_save_dir(user, Direction.GP_TO_STEAM)
    assert resolution.path == user
    assert resolution.needs_choice is False


def test_resolve_root_with_single_user(tmp_path: Path) -> None:
    user = _steam_user(tmp_path / "SaveGames", "76561198000000000")
    assert resolve_save_dir(tmp_path / "SaveGames", Direction.STEAM_TO_GP).path == user


def test_resolve_root_with_several_users_needs_choice(tmp_path: Path) -> None:
    wgs = tmp_path / "wgs"
    first = _wgs_user(wgs, "AAA")
    second = _wgs_user(wgs, "BBB")

    resolution = resolve_save_dir(wgs, Direction.GP_TO_STEAM)

    assert resolution.path is None
    assert resolution.needs_choice is True
    assert resolution.candidates == [first, second]


def test_resolve_missing_folder(tmp_path: Path) -> None:
    resolution = resolve_save_dir(tmp_path / "absent", Direction.GP_TO_STEAM)
    assert resolution.path is None
    assert resolution.candidates == []


def test_source_and_destination_follow_direction(tmp_path: Path) -> None:
    wgs_user = _wgs_user(tmp_path / "wgs", "AAA")
    steam_user = _steam_user(tmp_path / "steam", "76561198000000000")
    roots = {"wgs_root": tmp_path / "wgs", "steam_root": tmp_path / "steam"}

    assert source_user_folders(Direction.GP_TO_STEAM, **roots) == [wgs_user]
    assert destination_user_folders(Direction.GP_TO_STEAM, **roots) == [steam_user]
    assert source_user_folders(Direction.STEAM_TO_GP, **roots) == [steam_user]
    assert destination_user_folders(Direction.STEAM_TO_GP, **roots) == [wgs_user]
