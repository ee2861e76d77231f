from __future__ import annotations

SETTINGS_MARKER = b"/Script/Phoenix.SavedSettingsData"
GAME_DATA_MARKER = b"/Script/PersistentData.PersistentGameData"


def contains_marker(haystack: bytes, needle: bytes) -> bool:
    if not needle or len(haystack) < len(needle):
        return False
    return haystack.find(needle) != -1
