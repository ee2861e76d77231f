from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot

from core.saves.scanner_service import SaveScannerService


class SaveScanWorker(QObject):
    """Runs a save folder scan off the GUI thread.

    ``finished`` carries a ``SaveScanResult``; a folder that does not exist is
    reported through ``failed`` instead of an empty result.
    """

    finished = Signal(object)
    failed = Signal(str)

    def __init__(self, scanner: SaveScannerService, root: Path, logger: logging.Logger | None = None) -> None:
        super().__init__()
        self._scanner = scanner
        self._root = Path(root).expanduser()
        self._logger = logger or logging.getLogger("hogbridge.scanner")

    @Slot()
    def run(self) -> None:
        if not self._root.is_dir():
            self.failed.emit(f"Folder not found: {self._root}")
            return
        try:
            self.finished.emit(self._scanner.scan(self._root))
        except Exception as error:
            self._logger.error("Scan of %s failed: %s", self._root, error)
            self.failed.emit(str(error))
