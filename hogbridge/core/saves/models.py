from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.saves.slots import LogicalSlot


@dataclass(slots=True)
class RecognizedSave:
    slot: LogicalSlot
    path: Path
    size_bytes: int | None


@dataclass(slots=True)
class SaveScanResult:
    root: Path
    saves: list[RecognizedSave]
    missing: list[LogicalSlot]
