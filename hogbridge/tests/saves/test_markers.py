from __future__ import annotations

from core.saves.markers import GAME_DATA_MARKER, SETTINGS_MARKER, contains_marker


def test_marker_found_in_middle_of_buffer() -> None:
    assert contains_marker(b"\x00\x01" + SETTINGS_MARKER + b"\x02", SETTINGS_MARKER) is True


def test_marker_at_buffer_edges() -> None:
    assert contains_marker(GAME_DATA_MARKER + b"tail", GAME_DATA_MARKER) is True
    assert contains_marker(b"head" + GAME_DATA_MARKER, GAME_DATA_MARKER) is True


def test_buffer_shorter_than_marker() -> None:
    assert contains_marker(SETTINGS_MARKER[:-1], SETTINGS_MARKER) is False


def test_empty_needle_never_matches() -> None:
    assert contains_marker(b"anything", b"") is False


def test_partial_marker_is_not_a_match() -> None:
    broken = SETTINGS_MARKER[:10] + b"\x00" + SETTINGS_MARKER[10:]
    assert contains_marker(broken, SETTINGS_MARKER) is False
