from __future__ import annotations

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QListWidget, QPushButton, QVBoxLayout, QWidget

from i18n.i18n import tr
from ui.report_text import group_warnings


class WarningsDialog(QDialog):
    """Lists the warnings of the last migration, repeated messages folded together."""

    def __init__(self, warnings: list[str], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._lines = group_warnings(warnings)

        self.setModal(True)
        self.setMinimumSize(600, 360)
        self.setWindowTitle(tr("migration.warnings_modal.title"))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self._summary_label = QLabel()
        self._summary_label.setWordWrap(True)
        layout.addWidget(self._summary_label)

        self._list = QListWidget()
        self._list.setWordWrap(True)
        layout.addWidget(self._list, 1)

        button_row = QHBoxLayout()
        self._copy_button = QPushButton(tr("common.copy"))
        self._copy_button.clicked.connect(self._copy_to_clipboard)
        button_row.addWidget(self._copy_button)
        button_row.addStretch(1)
        close_button = QPushButton(tr("common.close"))
        close_button.clicked.connect(self.accept)
        button_row.addWidget(close_button)
        layout.addLayout(button_row)

        if self._lines:
            self._summary_label.setText(tr("migration.warnings_badge.some", count=len(warnings)))
            self._list.addItems(self._lines)
        else:
            self._summary_label.setText(tr("migration.warnings_badge.none"))
            self._copy_button.setEnabled(False)

    def _copy_to_clipboard(self) -> None:
        QGuiApplication.clipboard().setText("\n".join(self._lines))
