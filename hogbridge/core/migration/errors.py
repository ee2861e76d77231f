from __future__ import annotations

from pathlib import Path


class MigrationError(RuntimeError):
    pass


class SourceNotFound(MigrationError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Source folder not found: {path}")
        self.path = Path(path)


class DestinationNotFound(MigrationError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Destination folder not found: {path}")
        self.path = Path(path)


class GameRunningError(MigrationError):
    def __init__(self, process_name: str) -> None:
        super().__init__(f"{process_name} is running; close the game before writing saves")
        self.process_name = process_name


class WorkingDirConflict(MigrationError):
    def __init__(self, working_dir: Path, save_dir: Path) -> None:
        super().__init__(f"Working folder {working_dir} overlaps save folder {save_dir}; choose another working folder")
        self.path = Path(working_dir)
        self.save_dir = Path(save_dir)
