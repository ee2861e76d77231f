from __future__ import annotations

from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QWidget


class SectionCard(QGroupBox):
    """Titled block of a view; children go into ``body_layout()``."""

    def __init__(self, title: str | None = None, parent: QWidget | None = None) -> None:
        super().__init__(title or "", parent)
        self.setObjectName("SectionCard")
        self._body = QVBoxLayout(self)
        self._body.setContentsMargins(12, 12, 12, 12)
        self._body.setSpacing(10)

    def set_title(self, title: str | None) -> None:
        self.setTitle(title or "")

    def body_layout(self) -> QVBoxLayout:
        return self._body
