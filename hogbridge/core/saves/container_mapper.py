from __future__ import annotations

import logging
from pathlib import Path

from core.saves.classifier import PayloadClassifier
from core.saves.enumeration import iter_files, read_payload
from core.saves.slots import LogicalSlot

SlotMap = dict[LogicalSlot, Path]


class ContainerMapper:
    def __init__(self, classifier: PayloadClassifier | None = None, logger: logging.Logger | None = None) -> None:
        self._classifier = classifier or PayloadClassifier()
        self._logger = logger or logging.getLogger("hogbridge.mapper")

    def build_map(self, container_dir: Path) -> SlotMap:
        """Index a container store by the slot each file currently holds.

        Unreadable files and subdirectories are skipped. When two files
        classify to the same slot, the one enumerated later wins.
        """
        root = Path(container_dir)
        slot_map: SlotMap = {}
        scanned = 0

        for path in iter_files(root, on_error=self._on_skipped):
            payload = read_payload(path, on_error=self._on_skipped)
            if payload is None:
                continue
            scanned += 1

            slot = self._classifier.classify(payload)
            if slot is None:
                continue

            previous = slot_map.get(slot)
            if previous is not None and previous != path:
                self._logger.info("Slot %s found again in %s, replacing %s", slot, path.name, previous.name)
            slot_map[slot] = path

        self._logger.info("Container scan finished: root=%s files=%s slots=%s", root, scanned, len(slot_map))
        return slot_map

    def _on_skipped(self, path: Path, error: OSError) -> None:
        self._logger.debug("Skipping %s: %s", path, error)


def build_slot_map(container_dir: Path, logger: logging.Logger | None = None) -> SlotMap:
    return ContainerMapper(logger=logger).build_map(container_dir)
