from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot

from core.migration.errors import GameRunningError
from core.migration.execute_local import ensure_separate_working_dir, prepare_working_dir, remove_working_dir
from core.migration.migration_models import Direction, MigrationRunResult
from core.migration.migration_service import MigrationService
from core.system.process_check import GAME_PROCESS_NAME, can_write_saves


class MigrationWorker(QObject):
    progress = Signal(int, str)
    finished = Signal(object)
    failed = Signal(str)

    def __init__(
        self,
        direction: Direction,
        source_dir: Path,
        destination_dir: Path | None,
        working_dir: Path,
        logger: logging.Logger,
        service: MigrationService | None = None,
        write_guard: Callable[[], bool] = can_write_saves,
    ) -> None:
        super().__init__()
        self._direction = direction
        self._source_dir = Path(source_dir)
        self._destination_dir = Path(destination_dir) if destination_dir is not None else None
        self._working_dir = Path(working_dir)
        self._logger = logger
        self._service = service or MigrationService(logger=logger)
        self._write_guard = write_guard

    @Slot()
    def run(self) -> None:
        try:
            if self._direction is Direction.GP_TO_STEAM:
                result = self._run_gp_to_steam()
            else:
                result = self._run_steam_to_gp()
            self.finished.emit(result)
        except Exception as error:
            self._logger.error("Migration failed: %s", error)
            self.failed.emit(str(error))

    def _run_gp_to_steam(self) -> MigrationRunResult:
        ensure_separate_working_dir(self._working_dir, self._source_dir, self._destination_dir)
        self.progress.emit(5, "prepare")
        prepare_working_dir(self._working_dir)

        self.progress.emit(20, "extract")
        report = self._service.extract(self._source_dir, self._working_dir)

        if self._destination_dir is None:
            self.progress.emit(100, "done")
            return MigrationRunResult(direction=self._direction, report=report, working_dir=self._working_dir)

        self._ensure_game_closed()
        self.progress.emit(60, "copy")
        copy_result = self._service.copy_flat(self._working_dir, self._destination_dir)

        working_dir: Path | None = self._working_dir
        if all(outcome.ok for outcome in copy_result.outcomes) and remove_working_dir(self._working_dir):
            working_dir = None

        self.progress.emit(100, "done")
        return MigrationRunResult(
            direction=self._direction,
            report=report,
            copy_result=copy_result,
            working_dir=working_dir,
        )

    def _run_steam_to_gp(self) -> MigrationRunResult:
        if self._destination_dir is None:
            raise ValueError("a GamePass destination folder is required")

        self._ensure_game_closed()
        self.progress.emit(30, "inject")
        copy_result = self._service.inject(self._source_dir, self._destination_dir)

        self.progress.emit(100, "done")
        return MigrationRunResult(direction=self._direction, copy_result=copy_result)

    def _ensure_game_closed(self) -> None:
        if not self._write_guard():
            raise GameRunningError(GAME_PROCESS_NAME)
