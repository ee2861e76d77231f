from __future__ import annotations

import pytest

from core.saves.slots import (
    AUTOSAVE_SLOT,
    MANUAL_SAVE_SLOT,
    FileNameSet,
    LogicalSlot,
    SlotKind,
)


def test_fixed_slot_file_names() -> None:
    assert LogicalSlot.user_options().file_name == "SavedUserOptions.sav"
    assert LogicalSlot.slot_list().file_name == "SaveGameList.sav"
    assert AUTOSAVE_SLOT.file_name == "HL-00-10.sav"
    assert MANUAL_SAVE_SLOT.slot_code == "HL-00-00"


def test_game_slot_accepts_prefixed_code() -> None:
    assert LogicalSlot.game_slot("HL-01-02") == LogicalSlot.game_slot("01-02")


def test_invalid_codes_rejected() -> None:
    with pytest.raises(ValueError):
        LogicalSlot.game_slot("1-2")
    with pytest.raises(ValueError):
        LogicalSlot(SlotKind.SLOT_LIST, "00-00")


def test_file_name_parsing_is_case_insensitive() -> None:
    assert LogicalSlot.from_file_name("savedUSEROPTIONS.SAV") == LogicalSlot.user_options()
    assert LogicalSlot.from_file_name("hl-00-10.sav") == AUTOSAVE_SLOT
    assert LogicalSlot.from_file_name("steam_autocloud.vdf") is None
    assert LogicalSlot.from_file_name("HL-00-10.sav.bak") is None


def test_file_name_roundtrip_for_every_kind() -> None:
    for slot in (LogicalSlot.user_options(), LogicalSlot.slot_list(), LogicalSlot.game_slot("03-07")):
        assert LogicalSlot.from_file_name(slot.file_name) == slot
        assert str(slot) == slot.file_name


def test_file_name_set_ignores_case() -> None:
    names = FileNameSet(["SaveGameList.sav", "savegamelist.SAV", "HL-00-00.sav"])
    assert len(names) == 2
    assert "SAVEGAMELIST.sav" in names
    assert 42 not in names
