from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.config import AppConfig
from core.logging import LogEmitter
from core.paths import get_default_steam_root, get_default_wgs_root, get_default_working_dir
from i18n.i18n import get_i18n, tr
from ui.components.page_header import PageHeader
from ui.components.section_card import SectionCard
from ui.widgets.log_console import LogConsole


class SettingsView(QWidget):
    language_selected = Signal(str)

    def __init__(self, config: AppConfig, log_emitter: LogEmitter) -> None:
        super().__init__()
        self._config = config
        self._language_codes = self._resolve_language_codes()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        self._header = PageHeader()
        main_layout.addWidget(self._header)

        self._general_card = SectionCard()
        language_row = QHBoxLayout()
        language_row.setSpacing(12)
        self._language_label = QLabel()
        self._language_combo = QComboBox()
        language_row.addWidget(self._language_label)
        language_row.addWidget(self._language_combo, 1)
        self._general_card.body_layout().addLayout(language_row)
        main_layout.addWidget(self._general_card)

        self._paths_card = SectionCard()
        paths_grid = QGridLayout()
        paths_grid.setHorizontalSpacing(12)
        paths_grid.setVerticalSpacing(8)

        self._path_rows: dict[str, tuple[QLabel, QLineEdit, QPushButton, QPushButton]] = {}
        path_values = {
            "wgs_root": self._config.get_wgs_root(),
            "steam_root": self._config.get_steam_root(),
            "working_dir": self._config.get_working_dir(),
        }
        for row, (key, value) in enumerate(path_values.items()):
            label = QLabel()
            edit = QLineEdit()
            edit.setText(value)
            edit.editingFinished.connect(lambda name=key: self._store_path(name))
            browse_button = QPushButton()
            browse_button.clicked.connect(lambda _checked=False, name=key: self._browse_path(name))
            reset_button = QPushButton()
            reset_button.clicked.connect(lambda _checked=False, name=key: self._reset_path(name))
            paths_grid.addWidget(label, row, 0)
            paths_grid.addWidget(edit, row, 1)
            paths_grid.addWidget(browse_button, row, 2)
            paths_grid.addWidget(reset_button, row, 3)
            self._path_rows[key] = (label, edit, browse_button, reset_button)

        self._paths_card.body_layout().addLayout(paths_grid)
        main_layout.addWidget(self._paths_card)

        self._log_console = LogConsole(log_emitter)
        main_layout.addWidget(self._log_console, 1)

        self._language_combo.currentIndexChanged.connect(self._emit_language_selected)
        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

    def _resolve_language_codes(self) -> list[str]:
        available = get_i18n().available_languages()
        return available or ["en"]

    def _emit_language_selected(self, index: int) -> None:
        if index < 0 or index >= len(self._language_codes):
            return
        language_code = self._language_codes[index]
        if language_code != get_i18n().current_language:
            self.language_selected.emit(language_code)

    def _store_path(self, key: str) -> None:
        _label, edit, _browse, _reset = self._path_rows[key]
        value = edit.text().strip()
        if value == "":
            return
        if key == "wgs_root":
            self._config.set_wgs_root(value)
        elif key == "steam_root":
            self._config.set_steam_root(value)
        elif key == "working_dir":
            self._config.set_working_dir(value)

    def _browse_path(self, key: str) -> None:
        _label, edit, _browse, _reset = self._path_rows[key]
        selected_dir = QFileDialog.getExistingDirectory(self, tr("common.browse_title"), edit.text().strip())
        if selected_dir:
            edit.setText(selected_dir)
            self._store_path(key)

    def _reset_path(self, key: str) -> None:
        defaults = {
            "wgs_root": get_default_wgs_root,
            "steam_root": get_default_steam_root,
            "working_dir": get_default_working_dir,
        }
        _label, edit, _browse, _reset = self._path_rows[key]
        edit.setText(str(defaults[key]()))
        self._store_path(key)

    def retranslate_ui(self, _language: str | None = None) -> None:
        self._header.set_title(tr("nav.settings"))
        self._header.set_subtitle(tr("settings.subtitle"))
        self._general_card.set_title(tr("settings.general.title"))
        self._paths_card.set_title(tr("settings.paths.title"))
        self._language_label.setText(tr("settings.language_label"))

        self._language_combo.blockSignals(True)
        self._language_combo.clear()
        for code in self._language_codes:
            self._language_combo.addItem(tr(f"settings.language.{code}"))
        current = get_i18n().current_language
        if current in self._language_codes:
            self._language_combo.setCurrentIndex(self._language_codes.index(current))
        self._language_combo.blockSignals(False)

        for key, (label, _edit, browse_button, reset_button) in self._path_rows.items():
            label.setText(tr(f"settings.paths.{key}"))
            browse_button.setText(tr("common.browse"))
            reset_button.setText(tr("settings.reset_default"))
