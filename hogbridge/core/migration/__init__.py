from core.migration.errors import (
    DestinationNotFound,
    GameRunningError,
    MigrationError,
    SourceNotFound,
    WorkingDirConflict,
)
from core.migration.migration_models import (
    Direction,
    InjectResult,
    MigrationReport,
    MigrationRunResult,
    MissingReason,
    MissingSlotWarning,
    OutcomeStatus,
    SlotOutcome,
    parse_direction_token,
)
from core.migration.migration_service import MigrationService, copy_flat, extract, inject

__all__ = [
    "DestinationNotFound",
    "Direction",
    "GameRunningError",
    "InjectResult",
    "MigrationError",
    "MigrationReport",
    "MigrationRunResult",
    "MigrationService",
    "MissingReason",
    "MissingSlotWarning",
    "OutcomeStatus",
    "SlotOutcome",
    "SourceNotFound",
    "WorkingDirConflict",
    "copy_flat",
    "extract",
    "inject",
    "parse_direction_token",
]
