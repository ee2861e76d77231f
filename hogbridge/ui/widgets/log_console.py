from __future__ import annotations

import html
import logging

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget

from core.logging import LogEmitter
from core.paths import get_logs_dir
from i18n.i18n import get_i18n, tr

MAX_LOG_LINES = 2000

_LEVEL_COLORS = {
    logging.WARNING: "#c98a00",
    logging.ERROR: "#c0392b",
    logging.CRITICAL: "#c0392b",
}


class LogConsole(QWidget):
    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._group = QGroupBox()
        group_layout = QVBoxLayout(self._group)

        self._output = QPlainTextEdit()
        self._output.setReadOnly(True)
        self._output.setMaximumBlockCount(MAX_LOG_LINES)
        group_layout.addWidget(self._output)

        button_row = QHBoxLayout()
        button_row.addStretch(1)
        self._open_folder_button = QPushButton()
        self._open_folder_button.clicked.connect(self._open_logs_folder)
        button_row.addWidget(self._open_folder_button)
        self._clear_button = QPushButton()
        self._clear_button.clicked.connect(self._output.clear)
        button_row.addWidget(self._clear_button)
        group_layout.addLayout(button_row)

        layout.addWidget(self._group)

        emitter.log_message.connect(self.append_log)
        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

    def append_log(self, level: int, message: str) -> None:
        color = _LEVEL_COLORS.get(level)
        if color is None:
            self._output.appendPlainText(message)
            return
        self._output.appendHtml(f'<span style="color:{color}">{html.escape(message)}</span>')

    def _open_logs_folder(self) -> None:
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(get_logs_dir())))

    def retranslate_ui(self, _language: str | None = None) -> None:
        self._group.setTitle(tr("log.title"))
        self._open_folder_button.setText(tr("log.open_folder"))
        self._clear_button.setText(tr("log.clear"))
