from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QGridLayout, QLabel, QWidget


class PageHeader(QWidget):
    """View title with an optional subtitle line and right-aligned action widgets."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._grid = QGridLayout(self)
        self._grid.setContentsMargins(0, 0, 0, 0)
        self._grid.setHorizontalSpacing(8)
        self._grid.setColumnStretch(0, 1)

        self._title = QLabel()
        title_font = QFont(self._title.font())
        title_font.setPointSizeF(title_font.pointSizeF() * 1.4)
        title_font.setBold(True)
        self._title.setFont(title_font)
        self._grid.addWidget(self._title, 0, 0)

        self._subtitle = QLabel()
        self._subtitle.setWordWrap(True)
        self._subtitle.setVisible(False)
        self._grid.addWidget(self._subtitle, 1, 0, 1, -1)

        self._action_count = 0

    def set_title(self, title: str) -> None:
        self._title.setText(title)

    def set_subtitle(self, subtitle: str | None) -> None:
        self._subtitle.setText(subtitle or "")
        self._subtitle.setVisible(bool(subtitle))

    def add_action(self, widget: QWidget) -> None:
        self._action_count += 1
        self._grid.addWidget(widget, 0, self._action_count)
