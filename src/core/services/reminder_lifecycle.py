"""
Reminder lifecycle state machine.

Owns every rule that changes a reminder: construction from a draft, edits,
status transitions, the reconciliation pass and the countdown badge.
Instances are never mutated; each operation returns a new Reminder.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from src.config import get_logger
from src.core.entities.countdown import Countdown, Severity
from src.core.entities.reminder import (
    RecurrenceInterval,
    Reminder,
    ReminderDraft,
    ReminderPatch,
    ReminderStatus,
)
from src.core.exceptions import InvalidTransitionError
from src.core.interfaces.clock import IClock
from src.core.services.date_math import add_days

logger = get_logger(__name__)


# User-initiated transitions. Reconciliation (open -> verpasst) is not listed
# here because it is never available as a manual action.
ALLOWED_TRANSITIONS: dict[ReminderStatus, frozenset[ReminderStatus]] = {
    ReminderStatus.AKTIV: frozenset(
        {ReminderStatus.ERLEDIGT, ReminderStatus.STUMMGESCHALTET}
    ),
    ReminderStatus.STUMMGESCHALTET: frozenset(
        {ReminderStatus.ERLEDIGT, ReminderStatus.AKTIV}
    ),
    ReminderStatus.VERPASST: frozenset({ReminderStatus.ERLEDIGT}),
    ReminderStatus.ERLEDIGT: frozenset({ReminderStatus.ERLEDIGT}),
}

DEFAULT_RECURRENCE = RecurrenceInterval.MONATLICH


def trigger_date_for(deadline_date: date, lead_days: int) -> date:
    """
    Date on which a reminder starts firing.

    Lead times reaching past the first representable day clamp to it.
    """
    if lead_days >= (deadline_date - date.min).days:
        return date.min
    return add_days(deadline_date, -lead_days)


def classify_countdown(days: int) -> Severity:
    """Urgency for a deadline ``days`` away (negative = overdue)."""
    if days <= 0:
        return Severity.CRITICAL
    if days <= 3:
        return Severity.HIGH
    if days <= 7:
        return Severity.MEDIUM
    return Severity.NORMAL


def countdown_text(days: int) -> str:
    """German countdown label as shown on the badge."""
    if days < 0:
        overdue = abs(days)
        return f"{overdue} {'Tag' if overdue == 1 else 'Tage'} ueberfaellig!"
    if days == 0:
        return "HEUTE!"
    if days == 1:
        return "Noch 1 Tag"
    return f"Noch {days} Tage"


def countdown(deadline_date: date, today: date) -> Countdown:
    """Countdown badge for a deadline as seen from ``today``."""
    days = (deadline_date - today).days
    return Countdown(days=days, severity=classify_countdown(days), text=countdown_text(days))


def _replace(reminder: Reminder, **changes: Any) -> Reminder:
    """Rebuild a reminder with changes applied, re-running validation."""
    data = reminder.model_dump()
    data.update(changes)
    return Reminder.model_validate(data)


def _resolve_recurrence(
    is_recurring: bool, interval: RecurrenceInterval | None
) -> RecurrenceInterval | None:
    if not is_recurring:
        return None
    return interval or DEFAULT_RECURRENCE


class ReminderLifecycle:
    """
    Applies lifecycle rules to reminders.

    Depends only on the injected clock, so every result is reproducible.
    """

    def __init__(self, clock: IClock) -> None:
        self._clock = clock

    def build(self, draft: ReminderDraft) -> Reminder:
        """Create a fresh, active reminder from user input."""
        lead_days = (
            draft.lead_days
            if draft.lead_days is not None
            else draft.category.default_lead_days
        )
        return Reminder(
            title=draft.title.strip() or draft.category.label,
            description=draft.description,
            category=draft.category,
            deadline_date=draft.deadline_date,
            trigger_date=trigger_date_for(draft.deadline_date, lead_days),
            lead_days=lead_days,
            priority=draft.priority,
            status=ReminderStatus.AKTIV,
            case_reference=draft.case_reference or None,
            is_recurring=draft.is_recurring,
            recurrence_interval=_resolve_recurrence(
                draft.is_recurring, draft.recurrence_interval
            ),
            created_at=self._clock.now(),
        )

    def apply_patch(self, reminder: Reminder, patch: ReminderPatch) -> Reminder:
        """
        Apply an edit.

        The trigger date is recomputed from the (possibly new) deadline and
        lead time. Status is left alone even if the new deadline is already
        past; the next reconciliation pass takes care of that.
        """
        changes = patch.model_dump(exclude_unset=True)

        if "title" in changes:
            category = changes.get("category") or reminder.category
            changes["title"] = (changes["title"] or "").strip() or category.label
        if "case_reference" in changes:
            changes["case_reference"] = changes["case_reference"] or None
        for key in ("category", "lead_days", "priority", "deadline_date", "description"):
            if key in changes and changes[key] is None:
                del changes[key]

        is_recurring = changes.get("is_recurring")
        if is_recurring is None:
            is_recurring = reminder.is_recurring
        changes["is_recurring"] = is_recurring
        changes["recurrence_interval"] = _resolve_recurrence(
            is_recurring,
            changes.get("recurrence_interval") or reminder.recurrence_interval,
        )

        deadline_date = changes.get("deadline_date", reminder.deadline_date)
        lead_days = changes.get("lead_days", reminder.lead_days)
        changes["trigger_date"] = trigger_date_for(deadline_date, lead_days)

        return _replace(reminder, **changes)

    def transition(self, reminder: Reminder, target: ReminderStatus) -> Reminder:
        """
        Validate and apply a user-initiated status change.

        Raises:
            InvalidTransitionError: If the transition is not defined.
        """
        if reminder.status == ReminderStatus.ERLEDIGT and target == ReminderStatus.ERLEDIGT:
            return reminder

        if target not in ALLOWED_TRANSITIONS[reminder.status]:
            logger.info(
                "reminder_transition_rejected",
                reminder_id=reminder.id,
                current=reminder.status.value,
                target=target.value,
            )
            raise InvalidTransitionError(reminder.id, reminder.status.value, target.value)

        completed_at = self._clock.now() if target == ReminderStatus.ERLEDIGT else None
        return _replace(reminder, status=target, completed_at=completed_at)

    def mark_complete(self, reminder: Reminder) -> Reminder:
        return self.transition(reminder, ReminderStatus.ERLEDIGT)

    def toggle_mute(self, reminder: Reminder) -> Reminder:
        """Flip aktiv <-> stummgeschaltet; other states come back unchanged."""
        if reminder.status == ReminderStatus.AKTIV:
            return self.transition(reminder, ReminderStatus.STUMMGESCHALTET)
        if reminder.status == ReminderStatus.STUMMGESCHALTET:
            return self.transition(reminder, ReminderStatus.AKTIV)
        return reminder

    @staticmethod
    def reconcile(reminders: list[Reminder], today: date) -> tuple[list[Reminder], int]:
        """
        Mark open reminders whose deadline has passed as missed.

        Returns the new collection and the number of reminders changed.
        Idempotent; completed reminders are never touched.
        """
        changed = 0
        result: list[Reminder] = []
        for reminder in reminders:
            if reminder.is_open and reminder.deadline_date < today:
                result.append(_replace(reminder, status=ReminderStatus.VERPASST))
                changed += 1
            else:
                result.append(reminder)
        return result, changed

    def countdown(self, reminder: Reminder) -> Countdown:
        """Countdown badge for a reminder as of the clock's today."""
        return countdown(reminder.deadline_date, self._clock.today())
