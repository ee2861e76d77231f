from __future__ import annotations

import logging
from pathlib import Path

from core.saves.container_mapper import ContainerMapper
from core.saves.models import RecognizedSave, SaveScanResult
from core.saves.slots import REQUIRED_SLOTS, LogicalSlot, SlotKind


class SaveScannerService:
    def __init__(self, logger: logging.Logger | None = None, mapper: ContainerMapper | None = None) -> None:
        self._logger = logger or logging.getLogger("hogbridge.scanner")
        self._mapper = mapper or ContainerMapper(logger=self._logger)

    def scan(self, root: Path) -> SaveScanResult:
        safe_root = Path(root).expanduser()
        self._logger.info("Scanning save root: %s", safe_root)

        if not safe_root.is_dir():
            self._logger.warning("Save root does not exist: %s", safe_root)
            return SaveScanResult(root=safe_root, saves=[], missing=list(REQUIRED_SLOTS))

        slot_map = self._mapper.build_map(safe_root)
        saves = [
            RecognizedSave(slot=slot, path=path, size_bytes=self._file_size(path))
            for slot, path in sorted(slot_map.items(), key=lambda item: self._sort_key(item[0]))
        ]
        missing = [slot for slot in REQUIRED_SLOTS if slot not in slot_map]

        self._logger.info("Scan finished: saves=%s missing=%s", len(saves), len(missing))
        return SaveScanResult(root=safe_root, saves=saves, missing=missing)

    def looks_like_save_root(self, root: Path) -> bool:
        candidate = Path(root).expanduser()
        if not candidate.is_dir():
            return False
        return len(self._mapper.build_map(candidate)) > 0

    @staticmethod
    def _file_size(path: Path) -> int | None:
        try:
            return int(path.stat().st_size)
        except OSError:
            return None

    @staticmethod
    def _sort_key(slot: LogicalSlot) -> tuple[int, str]:
        order = {SlotKind.USER_OPTIONS: 0, SlotKind.SLOT_LIST: 1, SlotKind.GAME_SLOT: 2}
        return order[slot.kind], slot.code or ""
