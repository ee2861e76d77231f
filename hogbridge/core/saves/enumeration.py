from __future__ import annotations

from collections.abc import Callable, Iterator
import logging
import os
from pathlib import Path

ErrorCallback = Callable[[Path, OSError], None]

_logger = logging.getLogger("hogbridge.enumeration")


def iter_files(
    root: Path,
    tolerate_errors: bool = True,
    on_error: ErrorCallback | None = None,
) -> Iterator[Path]:
    """Yield every regular file below ``root``, depth-first.

    With ``tolerate_errors`` a directory that cannot be listed is reported to
    ``on_error`` and skipped, so the result may be incomplete. Without it the
    first listing error is raised.
    """
    pending: list[Path] = [Path(root)]

    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as entries:
                children = sorted(entries, key=lambda entry: entry.name)
        except OSError as error:
            if not tolerate_errors:
                raise
            _report(directory, error, on_error)
            continue

        subdirectories: list[Path] = []
        for entry in children:
            try:
                if entry.is_file(follow_symlinks=False):
                    yield Path(entry.path)
                elif entry.is_dir(follow_symlinks=False):
                    subdirectories.append(Path(entry.path))
            except OSError as error:
                if not tolerate_errors:
                    raise
                _report(Path(entry.path), error, on_error)

        pending.extend(reversed(subdirectories))


def iter_top_level_files(directory: Path) -> list[Path]:
    return sorted((child for child in Path(directory).iterdir() if child.is_file()), key=lambda path: path.name)


def read_payload(path: Path, on_error: ErrorCallback | None = None) -> bytes | None:
    try:
        return Path(path).read_bytes()
    except OSError as error:
        _report(Path(path), error, on_error)
        return None


def _report(path: Path, error: OSError, on_error: ErrorCallback | None) -> None:
    if on_error is not None:
        on_error(path, error)
        return
    _logger.debug("Skipping unreadable path %s: %s", path, error)
