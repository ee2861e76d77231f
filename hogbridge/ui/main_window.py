from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QStackedWidget, QWidget

from core.config import AppConfig
from core.logging import LogEmitter
from core.migration.migration_models import Direction
from core.system.process_check import GAME_PROCESS_NAME, can_write_saves
from i18n.i18n import get_i18n, tr
from ui.navigation import SidebarNavigation
from ui.views.migration_view import MigrationView
from ui.views.settings_view import SettingsView

GAME_CHECK_INTERVAL_MS = 5000


class MainWindow(QMainWindow):
    def __init__(
        self,
        config: AppConfig,
        logger: logging.Logger,
        log_emitter: LogEmitter,
        initial_direction: Direction | None = None,
        initial_source: str | None = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._logger = logger
        self._game_running = False

        self.setMinimumSize(900, 640)
        self.resize(1100, 760)

        root = QWidget()
        self.setCentralWidget(root)
        body_layout = QHBoxLayout(root)
        body_layout.setContentsMargins(0, 8, 8, 8)
        body_layout.setSpacing(12)

        self._navigation = SidebarNavigation()
        body_layout.addWidget(self._navigation)
        self._stack = QStackedWidget()
        body_layout.addWidget(self._stack, 1)

        self._migration_view = MigrationView(
            config=config,
            logger=logger,
            initial_direction=initial_direction,
            initial_source=initial_source,
        )
        self._settings_view = SettingsView(config=config, log_emitter=log_emitter)
        self._settings_view.language_selected.connect(self._on_language_selected)
        self._views: dict[str, QWidget] = {"migrate": self._migration_view, "settings": self._settings_view}
        for view in self._views.values():
            self._stack.addWidget(view)

        self._game_status = QLabel()
        self.statusBar().addPermanentWidget(self._game_status)

        # Writing saves while the game runs gets them overwritten on exit.
        self._game_timer = QTimer(self)
        self._game_timer.setInterval(GAME_CHECK_INTERVAL_MS)
        self._game_timer.timeout.connect(self._refresh_game_status)
        self._game_timer.start()

        self._navigation.view_selected.connect(self._show_view)
        get_i18n().language_changed.connect(self.retranslate_ui)

        self._show_view("migrate")
        self._refresh_game_status()
        self.retranslate_ui()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._game_timer.stop()
        self._logger.info("Shutting down")
        super().closeEvent(event)

    def _show_view(self, view_id: str) -> None:
        view = self._views.get(view_id)
        if view is None:
            return
        self._stack.setCurrentWidget(view)
        self._navigation.select_view(view_id, emit_signal=False)

    def _refresh_game_status(self) -> None:
        running = not can_write_saves()
        if running and not self._game_running:
            self._logger.warning("%s is running; close the game before migrating saves", GAME_PROCESS_NAME)
        self._game_running = running
        self._update_game_status_text()

    def _update_game_status_text(self) -> None:
        if self._game_running:
            self._game_status.setText(tr("status.game_running", process=GAME_PROCESS_NAME))
        else:
            self._game_status.setText(tr("status.game_closed"))

    def _on_language_selected(self, language_code: str) -> None:
        self._config.set_language(language_code)
        get_i18n().set_language(language_code)
        self._logger.info(tr("startup.language.changed", language=tr(f"settings.language.{language_code}")))

    def retranslate_ui(self, _language: str | None = None) -> None:
        self.setWindowTitle(tr("app.window.title"))
        self._update_game_status_text()
