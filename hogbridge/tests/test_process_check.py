from __future__ import annotations

from types import SimpleNamespace

import psutil
import pytest

from core.system import process_check
from core.system.process_check import can_write_saves, is_process_running


def _processes(*names: str) -> list[SimpleNamespace]:
    return [SimpleNamespace(info={"name": name}) for name in names]


def test_process_match_ignores_case(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(process_check.psutil, "process_iter", lambda _attrs: _processes("explorer.exe", "hogwartslegacy.EXE"))
    assert is_process_running("HogwartsLegacy.exe") is True
    assert can_write_saves() is False


def test_no_match(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(process_check.psutil, "process_iter", lambda _attrs: _processes("explorer.exe"))
    assert is_process_running("HogwartsLegacy.exe") is False
    assert is_process_running("  ") is False
    assert can_write_saves() is True


def test_inspection_error_allows_writes(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(_attrs: list[str]) -> list[SimpleNamespace]:
        raise psutil.AccessDenied()

    monkeypatch.setattr(process_check.psutil, "process_iter", broken)
    assert can_write_saves() is True
