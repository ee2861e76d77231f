from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from core.saves.container_mapper import ContainerMapper, build_slot_map
from core.saves.slots import AUTOSAVE_SLOT, MANUAL_SAVE_SLOT, LogicalSlot


def test_maps_every_slot_to_its_blob(
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
) -> None:
    store = make_wgs_store(complete_payloads)

    slot_map = build_slot_map(store)

    assert set(slot_map) == {LogicalSlot.user_options(), LogicalSlot.slot_list(), MANUAL_SAVE_SLOT, AUTOSAVE_SLOT}
    assert slot_map[AUTOSAVE_SLOT].parent.name == "D4"
    assert slot_map[LogicalSlot.user_options()].parent.name == "A1"


def test_noise_files_do_not_appear(make_wgs_store: Callable[..., Path]) -> None:
    store = make_wgs_store({"A1": b"\x00\x01 no markers here"})
    assert build_slot_map(store) == {}


def test_duplicate_slot_keeps_last_enumerated(
    make_wgs_store: Callable[..., Path],
    payload_factory: dict[str, Callable[..., bytes]],
) -> None:
    store = make_wgs_store(
        {
            "A1": payload_factory["slot_list"](),
            "B2": payload_factory["game"]("HL-00-00", "HL-00-10"),
        }
    )

    slot_map = build_slot_map(store)

    assert list(slot_map) == [LogicalSlot.slot_list()]
    assert slot_map[LogicalSlot.slot_list()].parent.name == "B2"


def test_building_twice_gives_same_map(
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
) -> None:
    store = make_wgs_store(complete_payloads)
    mapper = ContainerMapper()
    assert mapper.build_map(store) == mapper.build_map(store)


def test_missing_directory_gives_empty_map(tmp_path: Path) -> None:
    assert build_slot_map(tmp_path / "nowhere") == {}


def test_unreadable_file_is_left_out_of_map(
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    store = make_wgs_store(complete_payloads)
    locked = "A10000BLOB"
    real_read_bytes = Path.read_bytes

    def read_bytes(path: Path) -> bytes:
        if path.name == locked:
            raise PermissionError("locked by another process")
        return real_read_bytes(path)

    monkeypatch.setattr(Path, "read_bytes", read_bytes)

    slot_map = build_slot_map(store)

    assert LogicalSlot.user_options() not in slot_map
    assert set(slot_map) == {LogicalSlot.slot_list(), MANUAL_SAVE_SLOT, AUTOSAVE_SLOT}
