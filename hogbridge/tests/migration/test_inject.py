from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from core.migration import migration_service
from core.migration.errors import DestinationNotFound, SourceNotFound
from core.migration.migration_models import OutcomeStatus
from core.migration.migration_service import inject


def _flat_folder(root: Path, files: dict[str, bytes]) -> Path:
    root.mkdir(parents=True)
    for name, payload in files.items():
        (root / name).write_bytes(payload)
    return root


def test_files_overwrite_matching_containers_in_place(
    tmp_path: Path,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
    payload_factory: dict[str, Callable[..., bytes]],
) -> None:
    store = make_wgs_store(complete_payloads)
    blobs_before = sorted(path.relative_to(store) for path in store.rglob("*") if path.is_file())
    new_autosave = payload_factory["game"]("HL-00-10", filler=b"\x42")
    new_options = payload_factory["settings"](b"changed")
    flat = _flat_folder(
        tmp_path / "steam",
        {"HL-00-10.sav": new_autosave, "SavedUserOptions.sav": new_options},
    )

    copied, outcomes = inject(flat, store)

    assert copied == 2
    assert all(outcome.status is OutcomeStatus.WRITTEN for outcome in outcomes)
    assert (store / "D4" / "D40000BLOB").read_bytes() == new_autosave
    assert (store / "A1" / "A10000BLOB").read_bytes() == new_options
    assert (store / "B2" / "B20000BLOB").read_bytes() == complete_payloads["B2"]
    assert sorted(path.relative_to(store) for path in store.rglob("*") if path.is_file()) == blobs_before


def test_unknown_slot_is_skipped_without_creating_files(
    tmp_path: Path,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
    payload_factory: dict[str, Callable[..., bytes]],
) -> None:
    store = make_wgs_store(complete_payloads)
    flat = _flat_folder(tmp_path / "steam", {"HL-05-00.sav": payload_factory["game"]("HL-05-00")})

    result = inject(flat, store)

    assert result.copied_count == 0
    assert [outcome.file_name for outcome in result.skipped] == ["HL-05-00.sav"]
    assert not any(path.name.startswith("HL-05-00") for path in store.rglob("*"))


def test_autocloud_file_is_excluded(
    tmp_path: Path,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
    payload_factory: dict[str, Callable[..., bytes]],
) -> None:
    store = make_wgs_store(complete_payloads)
    flat = _flat_folder(
        tmp_path / "steam",
        {"STEAM_AUTOCLOUD.VDF": b'"steam_autocloud.vdf"', "HL-00-00.sav": payload_factory["game"]("HL-00-00")},
    )

    copied, outcomes = inject(flat, store)

    assert copied == 1
    assert [outcome.file_name for outcome in outcomes] == ["HL-00-00.sav"]


def test_unparseable_file_name_is_skipped(
    tmp_path: Path,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
) -> None:
    store = make_wgs_store(complete_payloads)
    flat = _flat_folder(tmp_path / "steam", {"notes.txt": b"hello"})

    result = inject(flat, store)

    assert result.copied_count == 0
    assert result.outcomes[0].status is OutcomeStatus.SKIPPED_NO_TARGET
    assert result.outcomes[0].slot is None


def test_file_name_case_is_ignored(
    tmp_path: Path,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
) -> None:
    store = make_wgs_store(complete_payloads)
    flat = _flat_folder(tmp_path / "steam", {"savegamelist.SAV": complete_payloads["B2"] + b"\x00"})

    assert inject(flat, store).copied_count == 1


def test_missing_folders_raise(tmp_path: Path) -> None:
    existing = tmp_path / "here"
    existing.mkdir()
    with pytest.raises(SourceNotFound):
        inject(tmp_path / "absent", existing)
    with pytest.raises(DestinationNotFound):
        inject(existing, tmp_path / "absent")


def test_failed_write_is_reported_and_not_counted(
    tmp_path: Path,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
    payload_factory: dict[str, Callable[..., bytes]],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    store = make_wgs_store(complete_payloads)
    new_autosave = payload_factory["game"]("HL-00-10", filler=b"\x42")
    new_manual = payload_factory["game"]("HL-00-00", filler=b"\x24")
    flat = _flat_folder(tmp_path / "steam", {"HL-00-10.sav": new_autosave, "HL-00-00.sav": new_manual})
    real_write = migration_service.write_bytes_atomic

    def write_bytes_atomic(target: Path, payload: bytes) -> int:
        if target.parent.name == "D4":
            raise PermissionError("container is read-only")
        return real_write(target, payload)

    monkeypatch.setattr(migration_service, "write_bytes_atomic", write_bytes_atomic)

    result = inject(flat, store)

    assert result.copied_count == 1
    statuses = {outcome.file_name: outcome.status for outcome in result.outcomes}
    assert statuses == {"HL-00-10.sav": OutcomeStatus.FAILED, "HL-00-00.sav": OutcomeStatus.WRITTEN}
    failed = next(outcome for outcome in result.outcomes if outcome.status is OutcomeStatus.FAILED)
    assert "read-only" in failed.reason
    assert (store / "D4" / "D40000BLOB").read_bytes() == complete_payloads["D4"]
    assert (store / "C3" / "C30000BLOB").read_bytes() == new_manual
