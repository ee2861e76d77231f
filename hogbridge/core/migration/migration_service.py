from __future__ import annotations

import logging
from pathlib import Path

from core.migration.errors import DestinationNotFound, SourceNotFound
from core.migration.execute_local import copy_file_atomic, write_bytes_atomic
from core.migration.migration_models import (
    InjectResult,
    MigrationReport,
    MissingReason,
    MissingSlotWarning,
    OutcomeStatus,
    SlotOutcome,
)
from core.saves.classifier import PayloadClassifier
from core.saves.container_mapper import ContainerMapper
from core.saves.enumeration import iter_files, iter_top_level_files, read_payload
from core.saves.slots import AUTOSAVE_SLOT, MANUAL_SAVE_SLOT, REQUIRED_SLOTS, FileNameSet, LogicalSlot

# Steam keeps its cloud bookkeeping next to the saves; it must never reach a container.
EXCLUDED_FILE_NAMES = FileNameSet(["steam_autocloud.vdf"])


class MigrationService:
    def __init__(
        self,
        logger: logging.Logger | None = None,
        classifier: PayloadClassifier | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("hogbridge.migration")
        self._classifier = classifier or PayloadClassifier()
        self._mapper = ContainerMapper(classifier=self._classifier, logger=self._logger)

    def extract(self, source_dir: Path, output_dir: Path) -> MigrationReport:
        """Flatten a container store into one named file per slot."""
        source = Path(source_dir)
        output = Path(output_dir)
        if not source.is_dir():
            raise SourceNotFound(source)
        output.mkdir(parents=True, exist_ok=True)

        self._logger.info("Extracting saves from %s to %s", source, output)
        outcomes: dict[LogicalSlot, SlotOutcome] = {}

        for path in iter_files(source, on_error=self._on_skipped):
            payload = read_payload(path, on_error=self._on_skipped)
            if payload is None:
                continue

            slot = self._classifier.classify(payload)
            if slot is None:
                continue

            target = output / slot.file_name
            if slot in outcomes and outcomes[slot].ok:
                self._logger.info("Slot %s found again in %s, overwriting", slot, path.name)

            try:
                write_bytes_atomic(target, payload)
            except OSError as error:
                self._logger.error("Failed to write %s: %s", target, error)
                outcomes[slot] = SlotOutcome(
                    file_name=slot.file_name,
                    slot=slot,
                    status=OutcomeStatus.FAILED,
                    source=path,
                    target=target,
                    reason=str(error),
                )
                continue

            self._logger.info("Writing file: %s/%s", output.name, target.name)
            outcomes[slot] = SlotOutcome(
                file_name=slot.file_name,
                slot=slot,
                status=OutcomeStatus.WRITTEN,
                source=path,
                target=target,
            )

        written = {slot for slot, outcome in outcomes.items() if outcome.ok}
        missing = tuple(
            MissingSlotWarning(slot=slot, reason=missing_reason(slot))
            for slot in REQUIRED_SLOTS
            if slot not in written
        )
        for warning in missing:
            self._logger.warning("File %s not found (%s)", warning.slot.file_name, warning.reason.value)

        self._logger.info("Extraction finished: written=%s missing=%s", len(written), len(missing))
        return MigrationReport(
            source_dir=source,
            output_dir=output,
            outcomes=tuple(outcomes.values()),
            missing=missing,
        )

    def inject(self, flat_source_dir: Path, container_dest_dir: Path) -> InjectResult:
        """Write named slot files into the containers that already hold those slots."""
        source = Path(flat_source_dir)
        destination = Path(container_dest_dir)
        if not source.is_dir():
            raise SourceNotFound(source)
        if not destination.is_dir():
            raise DestinationNotFound(destination)

        target_map = self._mapper.build_map(destination)
        self._logger.info("Injecting saves from %s into %s", source, destination)

        outcomes: list[SlotOutcome] = []
        for path in iter_top_level_files(source):
            name = path.name
            if name in EXCLUDED_FILE_NAMES:
                continue

            slot = LogicalSlot.from_file_name(name)
            destination_path = target_map.get(slot) if slot is not None else None
            if destination_path is None:
                self._logger.warning(
                    "No existing container for %s; create this slot in-game once, then retry.",
                    name,
                )
                outcomes.append(
                    SlotOutcome(file_name=name, slot=slot, status=OutcomeStatus.SKIPPED_NO_TARGET, source=path)
                )
                continue

            try:
                write_bytes_atomic(destination_path, path.read_bytes())
            except OSError as error:
                self._logger.error("Failed to write %s into %s: %s", name, destination_path, error)
                outcomes.append(
                    SlotOutcome(
                        file_name=name,
                        slot=slot,
                        status=OutcomeStatus.FAILED,
                        source=path,
                        target=destination_path,
                        reason=str(error),
                    )
                )
                continue

            self._logger.info(
                "Writing file: %s -> %s/%s",
                name,
                destination_path.parent.name,
                destination_path.name,
            )
            outcomes.append(
                SlotOutcome(
                    file_name=name,
                    slot=slot,
                    status=OutcomeStatus.WRITTEN,
                    source=path,
                    target=destination_path,
                )
            )

        copied = sum(1 for outcome in outcomes if outcome.ok)
        self._logger.info("Injection finished: %s file(s) copied to %s", copied, destination)
        return InjectResult(copied_count=copied, outcomes=tuple(outcomes))

    def copy_flat(self, src_dir: Path, dest_dir: Path) -> InjectResult:
        """Copy every file of a flat folder into another flat folder, overwriting."""
        source = Path(src_dir)
        destination = Path(dest_dir)
        if not source.is_dir():
            raise SourceNotFound(source)
        if not destination.is_dir():
            raise DestinationNotFound(destination)

        outcomes: list[SlotOutcome] = []
        for path in iter_top_level_files(source):
            target = destination / path.name
            slot = LogicalSlot.from_file_name(path.name)
            try:
                copy_file_atomic(path, target)
            except OSError as error:
                self._logger.error("Failed to copy %s: %s", path.name, error)
                outcomes.append(
                    SlotOutcome(
                        file_name=path.name,
                        slot=slot,
                        status=OutcomeStatus.FAILED,
                        source=path,
                        target=target,
                        reason=str(error),
                    )
                )
                continue

            outcomes.append(
                SlotOutcome(file_name=path.name, slot=slot, status=OutcomeStatus.WRITTEN, source=path, target=target)
            )

        copied = sum(1 for outcome in outcomes if outcome.ok)
        self._logger.info("%s file(s) copied to: %s", copied, destination)
        return InjectResult(copied_count=copied, outcomes=tuple(outcomes))

    def _on_skipped(self, path: Path, error: OSError) -> None:
        self._logger.debug("Skipping %s: %s", path, error)


def missing_reason(slot: LogicalSlot) -> MissingReason:
    if slot == AUTOSAVE_SLOT:
        return MissingReason.NO_AUTOSAVE
    if slot == MANUAL_SAVE_SLOT:
        return MissingReason.NO_MANUAL_SAVE
    return MissingReason.MISSING


_default_service = MigrationService()


def extract(source_dir: Path, output_dir: Path) -> MigrationReport:
    return _default_service.extract(source_dir, output_dir)


def inject(flat_source_dir: Path, container_dest_dir: Path) -> InjectResult:
    return _default_service.inject(flat_source_dir, container_dest_dir)


def copy_flat(src_dir: Path, dest_dir: Path) -> InjectResult:
    return _default_service.copy_flat(src_dir, dest_dir)
