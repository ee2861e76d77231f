from __future__ import annotations

import logging
import os
from pathlib import Path
import shutil
import uuid

from core.migration.errors import WorkingDirConflict

_logger = logging.getLogger("hogbridge.migration")


def write_bytes_atomic(target: Path, payload: bytes) -> int:
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target.with_name(f"{target.name}.tmp-{uuid.uuid4().hex}")

    try:
        temp_path.write_bytes(payload)
        os.replace(temp_path, target)
    finally:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass

    return len(payload)


def copy_file_atomic(src: Path, dst: Path) -> int:
    source = Path(src)
    target = Path(dst)

    if not source.exists() or not source.is_file():
        raise FileNotFoundError(str(source))

    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target.with_name(f"{target.name}.tmp-{uuid.uuid4().hex}")

    try:
        shutil.copyfile(source, temp_path)
        os.replace(temp_path, target)
    finally:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass

    return int(target.stat().st_size)


def ensure_separate_working_dir(working_dir: Path, *save_dirs: Path | None) -> None:
    """Refuse a working folder that overlaps a save folder in either direction."""
    working = Path(working_dir).expanduser().resolve()
    for save_dir in save_dirs:
        if save_dir is None:
            continue
        protected = Path(save_dir).expanduser().resolve()
        if working.is_relative_to(protected) or protected.is_relative_to(working):
            raise WorkingDirConflict(working, protected)


def prepare_working_dir(path: Path) -> Path:
    working = Path(path)
    if working.exists():
        _logger.info("Clearing working folder %s", working)
        shutil.rmtree(working)
    working.mkdir(parents=True, exist_ok=True)
    return working


def remove_working_dir(path: Path) -> bool:
    working = Path(path)
    if not working.exists():
        return True
    try:
        shutil.rmtree(working)
    except OSError as error:
        _logger.warning("Could not delete working folder %s: %s", working, error)
        return False
    _logger.info("Cleaned up working folder %s", working)
    return True
