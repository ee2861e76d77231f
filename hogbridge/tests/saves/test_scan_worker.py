from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from core.saves.models import SaveScanResult
from core.saves.scan_worker import SaveScanWorker
from core.saves.scanner_service import SaveScannerService


class _BrokenScanner(SaveScannerService):
    def scan(self, root: Path) -> SaveScanResult:
        raise ValueError("unexpected payload layout")


def _run(worker: SaveScanWorker) -> tuple[list[object], list[str]]:
    results: list[object] = []
    errors: list[str] = []
    worker.finished.connect(results.append)
    worker.failed.connect(errors.append)
    worker.run()
    return results, errors


def test_scan_result_is_emitted(
    qapp: QCoreApplication,
    make_wgs_store: Callable[..., Path],
    complete_payloads: dict[str, bytes],
) -> None:
    results, errors = _run(SaveScanWorker(SaveScannerService(), make_wgs_store(complete_payloads)))
    assert errors == []
    assert isinstance(results[0], SaveScanResult)
    assert len(results[0].saves) == 4


def test_any_scan_error_is_reported(qapp: QCoreApplication, tmp_path: Path) -> None:
    results, errors = _run(SaveScanWorker(_BrokenScanner(), tmp_path))
    assert results == []
    assert errors == ["unexpected payload layout"]


def test_missing_folder_is_reported(qapp: QCoreApplication, tmp_path: Path) -> None:
    results, errors = _run(SaveScanWorker(SaveScannerService(), tmp_path / "absent"))
    assert results == []
    assert len(errors) == 1 and "absent" in errors[0]
