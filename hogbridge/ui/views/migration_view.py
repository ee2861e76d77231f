from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt, QThread, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QHeaderView,
    QInputDialog,
    QLabel,
    QLineEdit,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from core.config import AppConfig
from core.discovery.save_roots import destination_user_folders, resolve_save_dir, source_user_folders
from core.migration.errors import WorkingDirConflict
from core.migration.execute_local import ensure_separate_working_dir
from core.migration.migration_models import Direction, MigrationRunResult
from core.migration.migration_worker import MigrationWorker
from core.saves.models import SaveScanResult
from core.saves.scan_worker import SaveScanWorker
from core.saves.scanner_service import SaveScannerService
from i18n.i18n import get_i18n, tr
from ui.components.page_header import PageHeader
from ui.components.section_card import SectionCard
from ui.report_text import collect_warnings, direction_label, missing_slots_messages, summary_message
from ui.widgets.warnings_dialog import WarningsDialog


class MigrationView(QWidget):
    def __init__(
        self,
        config: AppConfig,
        logger: logging.Logger,
        initial_direction: Direction | None = None,
        initial_source: str | None = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._logger = logger
        self._scanner = SaveScannerService(logger=logger)
        self._scan_thread: QThread | None = None
        self._scan_worker: SaveScanWorker | None = None
        self._run_thread: QThread | None = None
        self._run_worker: MigrationWorker | None = None
        self._scan_result: SaveScanResult | None = None
        self._last_output_dir: Path | None = None
        self._warnings: list[str] = []

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(16, 16, 16, 16)
        root_layout.setSpacing(12)

        self._header = PageHeader()
        self._warnings_badge = QPushButton()
        self._warnings_badge.setProperty("variant", "secondary")
        self._warnings_badge.clicked.connect(self._open_warnings_modal)
        self._header.add_action(self._warnings_badge)
        root_layout.addWidget(self._header)

        self._direction_card = SectionCard()
        direction_row = QHBoxLayout()
        direction_row.setSpacing(12)
        self._direction_label = QLabel()
        self._direction_combo = QComboBox()
        for direction in Direction:
            self._direction_combo.addItem("", direction.value)
        direction_row.addWidget(self._direction_label)
        direction_row.addWidget(self._direction_combo, 1)
        self._direction_card.body_layout().addLayout(direction_row)
        root_layout.addWidget(self._direction_card)

        self._source_card = SectionCard()
        source_row = QHBoxLayout()
        source_row.setSpacing(12)
        self._source_edit = QLineEdit()
        source_row.addWidget(self._source_edit, 1)
        self._source_detect_button = QPushButton()
        self._source_detect_button.clicked.connect(self._detect_source)
        source_row.addWidget(self._source_detect_button)
        self._source_browse_button = QPushButton()
        self._source_browse_button.clicked.connect(lambda: self._browse_into(self._source_edit))
        source_row.addWidget(self._source_browse_button)
        self._scan_button = QPushButton()
        self._scan_button.setProperty("variant", "secondary")
        self._scan_button.clicked.connect(self.start_scan)
        source_row.addWidget(self._scan_button)
        self._source_card.body_layout().addLayout(source_row)

        self._slots_table = QTableWidget(0, 3)
        self._slots_table.setObjectName("SlotsTable")
        self._slots_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._slots_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._slots_table.verticalHeader().setVisible(False)
        header = self._slots_table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self._source_card.body_layout().addWidget(self._slots_table, 1)

        self._scan_status = QLabel()
        self._scan_status.setObjectName("infoBar")
        self._scan_status.setWordWrap(True)
        self._source_card.body_layout().addWidget(self._scan_status)
        root_layout.addWidget(self._source_card, 1)

        self._destination_card = SectionCard()
        self._auto_copy_checkbox = QCheckBox()
        self._auto_copy_checkbox.setChecked(True)
        self._auto_copy_checkbox.toggled.connect(self._sync_destination_state)
        self._destination_card.body_layout().addWidget(self._auto_copy_checkbox)
        destination_row = QHBoxLayout()
        destination_row.setSpacing(12)
        self._destination_edit = QLineEdit()
        destination_row.addWidget(self._destination_edit, 1)
        self._destination_detect_button = QPushButton()
        self._destination_detect_button.clicked.connect(self._detect_destination)
        destination_row.addWidget(self._destination_detect_button)
        self._destination_browse_button = QPushButton()
        self._destination_browse_button.clicked.connect(lambda: self._browse_into(self._destination_edit))
        destination_row.addWidget(self._destination_browse_button)
        self._destination_card.body_layout().addLayout(destination_row)
        root_layout.addWidget(self._destination_card)

        action_row = QHBoxLayout()
        action_row.setSpacing(12)
        self._progress_bar = QProgressBar()
        self._progress_bar.setRange(0, 100)
        self._progress_bar.setValue(0)
        action_row.addWidget(self._progress_bar, 1)
        self._open_output_button = QPushButton()
        self._open_output_button.setEnabled(False)
        self._open_output_button.clicked.connect(self._open_output_folder)
        action_row.addWidget(self._open_output_button)
        self._run_button = QPushButton()
        self._run_button.setProperty("variant", "primary")
        self._run_button.clicked.connect(self.start_migration)
        action_row.addWidget(self._run_button)
        root_layout.addLayout(action_row)

        self._status_label = QLabel()
        self._status_label.setObjectName("infoBar")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self._status_label.setWordWrap(True)
        root_layout.addWidget(self._status_label)

        direction = initial_direction or Direction(self._config.get_last_direction())
        self._direction_combo.setCurrentIndex(list(Direction).index(direction))
        self._direction_combo.currentIndexChanged.connect(self._on_direction_changed)
        if initial_source:
            self._apply_source_candidate(Path(initial_source))

        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()
        self._sync_destination_state()

    def current_direction(self) -> Direction:
        value = self._direction_combo.currentData()
        try:
            return Direction(value)
        except ValueError:
            return Direction.GP_TO_STEAM

    def _on_direction_changed(self, _index: int) -> None:
        direction = self.current_direction()
        self._config.set_last_direction(direction.value)
        self._source_edit.clear()
        self._destination_edit.clear()
        self._scan_result = None
        self._refresh_slots_table()
        self._sync_destination_state()
        self.retranslate_ui()

    def _sync_destination_state(self, _checked: bool = False) -> None:
        gp_to_steam = self.current_direction() is Direction.GP_TO_STEAM
        self._auto_copy_checkbox.setVisible(gp_to_steam)
        enabled = not gp_to_steam or self._auto_copy_checkbox.isChecked()
        self._destination_edit.setEnabled(enabled)
        self._destination_detect_button.setEnabled(enabled)
        self._destination_browse_button.setEnabled(enabled)

    def _platform_roots(self) -> tuple[Path, Path]:
        return Path(self._config.get_wgs_root()), Path(self._config.get_steam_root())

    def _detect_source(self) -> None:
        direction = self.current_direction()
        typed = self._source_edit.text().strip()
        if typed:
            resolution = resolve_save_dir(Path(typed), direction)
            if resolution.path is not None:
                self._apply_source_candidate(resolution.path)
                return
            if resolution.candidates:
                chosen = self._choose_folder(resolution.candidates, tr("migration.source.choose_prompt"))
                if chosen is not None:
                    self._apply_source_candidate(chosen)
                return
            self._status_label.setText(tr("migration.source.invalid_path", path=typed))

        wgs_root, steam_root = self._platform_roots()
        candidates = source_user_folders(direction, wgs_root=wgs_root, steam_root=steam_root)
        chosen = self._choose_folder(candidates, tr("migration.source.choose_prompt"))
        if chosen is not None:
            self._apply_source_candidate(chosen)

    def _detect_destination(self) -> None:
        direction = self.current_direction()
        wgs_root, steam_root = self._platform_roots()
        candidates = destination_user_folders(direction, wgs_root=wgs_root, steam_root=steam_root)
        chosen = self._choose_folder(candidates, tr("migration.destination.choose_prompt"))
        if chosen is not None:
            self._destination_edit.setText(str(chosen))

    def _choose_folder(self, candidates: list[Path], prompt: str) -> Path | None:
        if len(candidates) == 0:
            self._status_label.setText(tr("migration.detect.none_found"))
            return None
        if len(candidates) == 1:
            self._status_label.setText(tr("migration.detect.single", name=candidates[0].name))
            return candidates[0]

        items = [str(path) for path in candidates]
        selected, accepted = QInputDialog.getItem(self, tr("migration.detect.title"), prompt, items, 0, False)
        if accepted and selected:
            return Path(selected)
        return None

    def _apply_source_candidate(self, path: Path) -> None:
        resolution = resolve_save_dir(path, self.current_direction())
        chosen = resolution.path or path
        self._source_edit.setText(str(chosen))
        self._config.add_last_opened_path(str(chosen))

    def _browse_into(self, target: QLineEdit) -> None:
        selected_dir = QFileDialog.getExistingDirectory(self, tr("common.browse_title"), target.text().strip())
        if selected_dir:
            target.setText(selected_dir)

    def start_scan(self) -> None:
        if self._scan_thread is not None:
            return

        source = self._source_edit.text().strip()
        if source == "":
            self._status_label.setText(tr("migration.source.missing"))
            return

        self._scan_button.setEnabled(False)

        thread = QThread(self)
        worker = SaveScanWorker(scanner=self._scanner, root=Path(source), logger=self._logger)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(self._on_scan_finished)
        worker.failed.connect(self._on_scan_failed)
        worker.finished.connect(thread.quit)
        worker.failed.connect(thread.quit)
        thread.finished.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)
        thread.finished.connect(self._on_scan_thread_closed)

        self._scan_thread = thread
        self._scan_worker = worker
        thread.start()

    def _on_scan_thread_closed(self) -> None:
        self._scan_thread = None
        self._scan_worker = None
        self._scan_button.setEnabled(True)

    def _on_scan_finished(self, result: object) -> None:
        if not isinstance(result, SaveScanResult):
            return
        self._scan_result = result
        self._refresh_slots_table()

        if not result.saves:
            self._scan_status.setText(tr("migration.scan.nothing_found"))
            return

        missing = missing_slots_messages(result.missing)
        if missing:
            self._scan_status.setText("\n".join(missing))
        else:
            self._scan_status.setText(tr("migration.scan.complete", count=len(result.saves)))

    def _on_scan_failed(self, error_message: str) -> None:
        self._logger.error("Save scan failed: %s", error_message)
        self._scan_status.setText(tr("migration.scan.failed", error=error_message))

    def _refresh_slots_table(self) -> None:
        saves = self._scan_result.saves if self._scan_result is not None else []
        self._slots_table.setRowCount(len(saves))
        for row, save in enumerate(saves):
            values = [save.slot.file_name, str(save.path), self._format_size(save.size_bytes)]
            for column, value in enumerate(values):
                item = self._slots_table.item(row, column)
                if item is None:
                    item = QTableWidgetItem()
                    self._slots_table.setItem(row, column, item)
                item.setText(value)

    def start_migration(self) -> None:
        if self._run_thread is not None:
            return

        direction = self.current_direction()
        source_text = self._source_edit.text().strip()
        if source_text == "" or not Path(source_text).is_dir():
            QMessageBox.warning(self, tr("migration.title"), tr("migration.source.invalid_path", path=source_text))
            return

        destination: Path | None = None
        if direction is Direction.STEAM_TO_GP or self._auto_copy_checkbox.isChecked():
            destination_text = self._destination_edit.text().strip()
            if destination_text == "" or not Path(destination_text).is_dir():
                QMessageBox.warning(
                    self,
                    tr("migration.title"),
                    tr("migration.destination.invalid_path", path=destination_text),
                )
                return
            destination = Path(destination_text)

        working_dir = Path(self._config.get_working_dir())
        if direction is Direction.GP_TO_STEAM:
            try:
                ensure_separate_working_dir(working_dir, Path(source_text), destination)
            except WorkingDirConflict as error:
                QMessageBox.warning(
                    self,
                    tr("migration.title"),
                    tr("migration.working_conflict", path=str(error.path), save_dir=str(error.save_dir)),
                )
                return
        if direction is Direction.GP_TO_STEAM and working_dir.exists() and any(working_dir.iterdir()):
            if not self._confirm(tr("migration.confirm.erase_working", path=str(working_dir))):
                self._logger.info("Cancelled by user.")
                return

        if destination is not None:
            if not self._confirm(
                tr(
                    "migration.confirm.overwrite",
                    direction=direction_label(direction),
                    target=destination.name,
                )
            ):
                self._logger.info("Migration aborted by user.")
                return

        self._warnings = []
        self._update_warnings_badge()
        self._progress_bar.setValue(0)
        self._run_button.setEnabled(False)

        thread = QThread(self)
        worker = MigrationWorker(
            direction=direction,
            source_dir=Path(source_text),
            destination_dir=destination,
            working_dir=working_dir,
            logger=self._logger,
        )
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.progress.connect(self._on_run_progress)
        worker.finished.connect(self._on_run_finished)
        worker.failed.connect(self._on_run_failed)
        worker.finished.connect(thread.quit)
        worker.failed.connect(thread.quit)
        thread.finished.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)
        thread.finished.connect(self._on_run_thread_closed)

        self._run_thread = thread
        self._run_worker = worker
        thread.start()

    def _confirm(self, message: str) -> bool:
        answer = QMessageBox.question(
            self,
            tr("migration.confirm.title"),
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    def _on_run_progress(self, value: int, step: str) -> None:
        self._progress_bar.setValue(value)
        self._status_label.setText(tr(f"migration.progress.{step}"))

    def _on_run_thread_closed(self) -> None:
        self._run_thread = None
        self._run_worker = None
        self._run_button.setEnabled(True)

    def _on_run_finished(self, result: object) -> None:
        if not isinstance(result, MigrationRunResult):
            return

        self._warnings = collect_warnings(result)
        self._update_warnings_badge()
        summary = summary_message(result)
        self._status_label.setText(summary)
        self._logger.info(summary)

        self._last_output_dir = result.working_dir
        self._open_output_button.setEnabled(self._last_output_dir is not None)
        if result.copy_result is None and self._last_output_dir is not None:
            self._open_output_folder()

        if self._warnings:
            self._open_warnings_modal()
        else:
            QMessageBox.information(self, tr("migration.title"), summary)

    def _on_run_failed(self, error_message: str) -> None:
        self._progress_bar.setValue(0)
        self._status_label.setText(tr("migration.failed", error=error_message))
        QMessageBox.critical(self, tr("migration.title"), tr("migration.failed", error=error_message))

    def _open_output_folder(self) -> None:
        if self._last_output_dir is None or not self._last_output_dir.exists():
            return
        self._logger.info("Opening converted output folder: %s", self._last_output_dir)
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(self._last_output_dir)))

    def _open_warnings_modal(self) -> None:
        dialog = WarningsDialog(warnings=self._warnings, parent=self)
        dialog.exec()

    def _update_warnings_badge(self) -> None:
        warning_count = len(self._warnings)
        if warning_count == 0:
            self._warnings_badge.setText(tr("migration.warnings_badge.none"))
            self._warnings_badge.setProperty("alert", False)
        else:
            self._warnings_badge.setText(tr("migration.warnings_badge.some", count=warning_count))
            self._warnings_badge.setProperty("alert", True)

        self._warnings_badge.style().unpolish(self._warnings_badge)
        self._warnings_badge.style().polish(self._warnings_badge)
        self._warnings_badge.update()

    def retranslate_ui(self, _language: str | None = None) -> None:
        direction = self.current_direction()
        self._header.set_title(tr("nav.migrate"))
        self._header.set_subtitle(tr("migration.subtitle"))
        self._direction_card.set_title(tr("migration.direction.title"))
        self._direction_label.setText(tr("migration.direction.label"))
        for index in range(self._direction_combo.count()):
            value = self._direction_combo.itemData(index)
            self._direction_combo.setItemText(index, direction_label(Direction(value)))

        self._source_card.set_title(tr(f"migration.source.title.{direction.value}"))
        self._destination_card.set_title(tr(f"migration.destination.title.{direction.value}"))
        self._auto_copy_checkbox.setText(tr("migration.destination.auto_copy"))
        self._source_detect_button.setText(tr("migration.detect"))
        self._destination_detect_button.setText(tr("migration.detect"))
        self._source_browse_button.setText(tr("common.browse"))
        self._destination_browse_button.setText(tr("common.browse"))
        self._scan_button.setText(tr("migration.scan"))
        self._run_button.setText(tr("migration.run"))
        self._open_output_button.setText(tr("migration.open_output"))
        self._slots_table.setHorizontalHeaderLabels(
            [
                tr("migration.table.slot"),
                tr("migration.table.path"),
                tr("migration.table.size"),
            ]
        )
        self._update_warnings_badge()

    def _format_size(self, size_bytes: int | None) -> str:
        if size_bytes is None:
            return tr("common.not_available")
        if size_bytes < 1024:
            return tr("units.bytes", value=size_bytes)
        if size_bytes < 1024 * 1024:
            return tr("units.kib", value=f"{size_bytes / 1024:.1f}")
        return tr("units.mib", value=f"{size_bytes / (1024 * 1024):.2f}")
