from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
import re

USER_OPTIONS_FILE_NAME = "SavedUserOptions.sav"
SLOT_LIST_FILE_NAME = "SaveGameList.sav"
SAVE_FILE_SUFFIX = ".sav"
SLOT_CODE_PREFIX = "HL-"

_GAME_SLOT_FILE_PATTERN = re.compile(r"^HL-(\d{2}-\d{2})\.sav$", re.IGNORECASE | re.ASCII)
_CODE_PATTERN = re.compile(r"^\d{2}-\d{2}$", re.ASCII)


class SlotKind(str, Enum):
    USER_OPTIONS = "user_options"
    SLOT_LIST = "slot_list"
    GAME_SLOT = "game_slot"


@dataclass(frozen=True, slots=True)
class LogicalSlot:
    """A save slot identified by meaning rather than by physical location.

    ``code`` is only set for game slots and holds the two numeric groups
    (``"00-10"``); the game itself writes it with an ``HL-`` prefix.
    """

    kind: SlotKind
    code: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SlotKind.GAME_SLOT:
            if self.code is None or not _CODE_PATTERN.match(self.code):
                raise ValueError(f"invalid game slot code: {self.code!r}")
        elif self.code is not None:
            raise ValueError(f"{self.kind.value} does not take a code")

    @classmethod
    def user_options(cls) -> LogicalSlot:
        return cls(SlotKind.USER_OPTIONS)

    @classmethod
    def slot_list(cls) -> LogicalSlot:
        return cls(SlotKind.SLOT_LIST)

    @classmethod
    def game_slot(cls, code: str) -> LogicalSlot:
        if code.upper().startswith(SLOT_CODE_PREFIX):
            code = code[len(SLOT_CODE_PREFIX) :]
        return cls(SlotKind.GAME_SLOT, code)

    @classmethod
    def from_file_name(cls, file_name: str) -> LogicalSlot | None:
        key = file_name.strip()
        folded = key.casefold()
        if folded == USER_OPTIONS_FILE_NAME.casefold():
            return cls.user_options()
        if folded == SLOT_LIST_FILE_NAME.casefold():
            return cls.slot_list()

        match = _GAME_SLOT_FILE_PATTERN.match(key)
        if match is None:
            return None
        return cls.game_slot(match.group(1))

    @property
    def slot_code(self) -> str | None:
        if self.code is None:
            return None
        return f"{SLOT_CODE_PREFIX}{self.code}"

    @property
    def file_name(self) -> str:
        if self.kind is SlotKind.USER_OPTIONS:
            return USER_OPTIONS_FILE_NAME
        if self.kind is SlotKind.SLOT_LIST:
            return SLOT_LIST_FILE_NAME
        return f"{self.slot_code}{SAVE_FILE_SUFFIX}"

    def __str__(self) -> str:
        return self.file_name


MANUAL_SAVE_SLOT = LogicalSlot.game_slot("00-00")
AUTOSAVE_SLOT = LogicalSlot.game_slot("00-10")

REQUIRED_SLOTS: tuple[LogicalSlot, ...] = (
    LogicalSlot.user_options(),
    LogicalSlot.slot_list(),
    MANUAL_SAVE_SLOT,
    AUTOSAVE_SLOT,
)


class FileNameSet:
    """Set of file names compared case-insensitively."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: dict[str, str] = {}
        for name in names:
            self.add(name)

    @staticmethod
    def normalize(name: str) -> str:
        return name.strip().casefold()

    def add(self, name: str) -> None:
        self._names.setdefault(self.normalize(name), name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.normalize(name) in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

