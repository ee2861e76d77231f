from __future__ import annotations

from dataclasses import dataclass
import re

from core.saves.markers import GAME_DATA_MARKER, SETTINGS_MARKER, contains_marker
from core.saves.slot_codes import SLOT_CODE_PATTERN, decode_payload_text, find_slot_codes
from core.saves.slots import LogicalSlot


@dataclass(frozen=True, slots=True)
class ClassifierRules:
    settings_marker: bytes = SETTINGS_MARKER
    game_data_marker: bytes = GAME_DATA_MARKER
    slot_code_pattern: re.Pattern[str] = SLOT_CODE_PATTERN


class PayloadClassifier:
    """Decides whether a buffer is a save payload and which slot it holds.

    The settings marker wins over everything else. Game data payloads are told
    apart by how many slot codes they mention: one code means a single slot,
    several codes mean the aggregated slot list.
    """

    def __init__(self, rules: ClassifierRules | None = None) -> None:
        self._rules = rules or ClassifierRules()

    def classify(self, buffer: bytes) -> LogicalSlot | None:
        if contains_marker(buffer, self._rules.settings_marker):
            return LogicalSlot.user_options()

        if not contains_marker(buffer, self._rules.game_data_marker):
            return None

        codes = find_slot_codes(decode_payload_text(buffer), self._rules.slot_code_pattern)
        if len(codes) > 1:
            return LogicalSlot.slot_list()
        if len(codes) == 1:
            return LogicalSlot.game_slot(codes[0])
        return None


_default_classifier = PayloadClassifier()


def classify(buffer: bytes) -> LogicalSlot | None:
    return _default_classifier.classify(buffer)
