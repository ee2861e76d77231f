from core.saves.classifier import ClassifierRules, PayloadClassifier, classify
from core.saves.container_mapper import ContainerMapper, SlotMap, build_slot_map
from core.saves.models import RecognizedSave, SaveScanResult
from core.saves.scanner_service import SaveScannerService
from core.saves.slots import AUTOSAVE_SLOT, MANUAL_SAVE_SLOT, REQUIRED_SLOTS, LogicalSlot, SlotKind

__all__ = [
    "AUTOSAVE_SLOT",
    "ClassifierRules",
    "ContainerMapper",
    "LogicalSlot",
    "MANUAL_SAVE_SLOT",
    "PayloadClassifier",
    "REQUIRED_SLOTS",
    "RecognizedSave",
    "SaveScanResult",
    "SaveScannerService",
    "SlotKind",
    "SlotMap",
    "build_slot_map",
    "classify",
]
