from __future__ import annotations

from core.migration.migration_models import (
    Direction,
    MigrationRunResult,
    MissingReason,
    MissingSlotWarning,
    OutcomeStatus,
    SlotOutcome,
)
from core.migration.migration_service import missing_reason
from core.saves.slots import LogicalSlot
from i18n.i18n import tr


def direction_label(direction: Direction) -> str:
    return tr(f"migration.direction.{direction.value}")


def missing_slot_message(warning: MissingSlotWarning) -> str:
    message = tr("migration.warning.missing_file", file_name=warning.slot.file_name)
    if warning.reason is MissingReason.NO_AUTOSAVE:
        return f"{message} {tr('migration.warning.no_autosave')}"
    if warning.reason is MissingReason.NO_MANUAL_SAVE:
        return f"{message} {tr('migration.warning.no_manual_save')}"
    return message


def missing_slots_messages(slots: list[LogicalSlot]) -> list[str]:
    return [missing_slot_message(MissingSlotWarning(slot=slot, reason=missing_reason(slot))) for slot in slots]


def outcome_message(outcome: SlotOutcome) -> str | None:
    if outcome.status is OutcomeStatus.SKIPPED_NO_TARGET:
        return tr("migration.warning.no_target", file_name=outcome.file_name)
    if outcome.status is OutcomeStatus.FAILED:
        return tr("migration.warning.failed", file_name=outcome.file_name, error=outcome.reason or "")
    return None


def collect_warnings(result: MigrationRunResult) -> list[str]:
    messages: list[str] = []
    if result.report is not None:
        for outcome in result.report.outcomes:
            message = outcome_message(outcome)
            if message:
                messages.append(message)
        messages.extend(missing_slot_message(warning) for warning in result.report.missing)

    if result.copy_result is not None:
        for outcome in result.copy_result.outcomes:
            message = outcome_message(outcome)
            if message:
                messages.append(message)

    return messages


def summary_message(result: MigrationRunResult) -> str:
    if result.copy_result is not None:
        return tr("migration.summary.copied", count=result.copy_result.copied_count)
    if result.report is not None:
        return tr(
            "migration.summary.extracted",
            count=len(result.report.written_slots),
            path=str(result.report.output_dir),
        )
    return tr("migration.summary.done")


def group_warnings(warnings: list[str]) -> list[str]:
    """Fold repeated messages into one line with a count, keeping first-seen order."""
    counts: dict[str, int] = {}
    for message in warnings:
        counts[message] = counts.get(message, 0) + 1
    return [
        tr("migration.warning.grouped_count", message=message, count=count) if count > 1 else message
        for message, count in counts.items()
    ]
