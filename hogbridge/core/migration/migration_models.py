from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from core.saves.slots import LogicalSlot


class Direction(str, Enum):
    GP_TO_STEAM = "gp2steam"
    STEAM_TO_GP = "steam2gp"


_DIRECTION_TOKENS = {
    "gp2steam": Direction.GP_TO_STEAM,
    "gptosteam": Direction.GP_TO_STEAM,
    "gp-steam": Direction.GP_TO_STEAM,
    "steam2gp": Direction.STEAM_TO_GP,
    "steamtogp": Direction.STEAM_TO_GP,
    "steam-gp": Direction.STEAM_TO_GP,
}


def parse_direction_token(token: str | None) -> Direction | None:
    if token is None or token.strip() == "":
        return None
    return _DIRECTION_TOKENS.get(token.strip().lower())


class OutcomeStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED_NO_TARGET = "skipped_no_target"
    FAILED = "failed"


class MissingReason(str, Enum):
    NO_AUTOSAVE = "no_autosave"
    NO_MANUAL_SAVE = "no_manual_save"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class SlotOutcome:
    file_name: str
    slot: LogicalSlot | None
    status: OutcomeStatus
    source: Path | None = None
    target: Path | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.WRITTEN


@dataclass(frozen=True, slots=True)
class MissingSlotWarning:
    slot: LogicalSlot
    reason: MissingReason


@dataclass(frozen=True, slots=True)
class MigrationReport:
    source_dir: Path
    output_dir: Path
    outcomes: tuple[SlotOutcome, ...] = ()
    missing: tuple[MissingSlotWarning, ...] = ()

    @property
    def written_slots(self) -> tuple[LogicalSlot, ...]:
        return tuple(outcome.slot for outcome in self.outcomes if outcome.ok and outcome.slot is not None)

    @property
    def failures(self) -> tuple[SlotOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.status is OutcomeStatus.FAILED)


@dataclass(frozen=True, slots=True)
class InjectResult:
    copied_count: int
    outcomes: tuple[SlotOutcome, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[object]:
        yield self.copied_count
        yield self.outcomes

    @property
    def skipped(self) -> tuple[SlotOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.status is OutcomeStatus.SKIPPED_NO_TARGET)


@dataclass(frozen=True, slots=True)
class MigrationRunResult:
    direction: Direction
    report: MigrationReport | None = None
    copy_result: InjectResult | None = None
    working_dir: Path | None = None
