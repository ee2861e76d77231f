from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

from core.saves.markers import GAME_DATA_MARKER, SETTINGS_MARKER

GVAS_HEADER = b"GVAS\x03\x00\x00\x00\x0d\x02\x00\x00"


def settings_payload(extra: bytes = b"") -> bytes:
    return GVAS_HEADER + b"\x00\x1f" + SETTINGS_MARKER + b"\x00\x00\x00" + extra


def game_payload(*codes: str, filler: bytes = b"\x00\xff\x10") -> bytes:
    body = b"".join(filler + code.encode("ascii") for code in codes)
    return GVAS_HEADER + GAME_DATA_MARKER + b"\x00" + body + b"\xde\xad\xbe\xef"


def slot_list_payload() -> bytes:
    return game_payload("HL-00-00", "HL-00-10", "HL-01-00")


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def make_wgs_store(tmp_path: Path) -> Callable[..., Path]:
    """Build a GamePass user folder with one opaque blob per container."""

    def _make(payloads: dict[str, bytes], name: str = "000901F0A1B2C3D4_0000000000000000000000006A1B2C3D") -> Path:
        user_dir = tmp_path / "wgs" / name
        user_dir.mkdir(parents=True)
        (user_dir / "containers.index").write_bytes(b"\x0e\x00\x00\x00index")
        for container_name, payload in payloads.items():
            container_dir = user_dir / container_name
            container_dir.mkdir()
            (container_dir / "container.1").write_bytes(b"\x04\x00\x00\x00meta")
            (container_dir / f"{container_name}0000BLOB").write_bytes(payload)
        return user_dir

    return _make


@pytest.fixture
def complete_payloads() -> dict[str, bytes]:
    return {
        "A1": settings_payload(),
        "B2": slot_list_payload(),
        "C3": game_payload("HL-00-00"),
        "D4": game_payload("HL-00-10"),
    }


@pytest.fixture
def payload_factory() -> dict[str, Callable[..., bytes]]:
    return {
        "settings": settings_payload,
        "game": game_payload,
        "slot_list": slot_list_payload,
    }
