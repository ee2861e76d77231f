from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import QButtonGroup, QPushButton, QVBoxLayout, QWidget

from i18n.i18n import get_i18n, tr

VIEW_IDS = ("migrate", "settings")


class SidebarNavigation(QWidget):
    """Vertical view switcher; Ctrl+1, Ctrl+2 select the views in order."""

    view_selected = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("Sidebar")
        self.setFixedWidth(128)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 14, 10, 14)
        layout.setSpacing(10)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: dict[str, QPushButton] = {}

        for position, view_id in enumerate(VIEW_IDS, start=1):
            button = QPushButton()
            button.setObjectName("NavButton")
            button.setCheckable(True)
            button.setShortcut(QKeySequence(f"Ctrl+{position}"))
            button.clicked.connect(lambda _checked=False, value=view_id: self.select_view(value, emit_signal=True))
            self._group.addButton(button)
            layout.addWidget(button)
            self._buttons[view_id] = button

        layout.addStretch(1)
        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()
        self.select_view(VIEW_IDS[0], emit_signal=False)

    @property
    def current_view(self) -> str | None:
        for view_id, button in self._buttons.items():
            if button.isChecked():
                return view_id
        return None

    def select_view(self, view_id: str, emit_signal: bool) -> None:
        button = self._buttons.get(view_id)
        if button is None:
            return
        button.setChecked(True)
        if emit_signal:
            self.view_selected.emit(view_id)

    def retranslate_ui(self, _language: str | None = None) -> None:
        for view_id, button in self._buttons.items():
            button.setText(tr(f"nav.{view_id}"))
