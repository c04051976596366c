"""Tests for the reminder lifecycle state machine."""

from datetime import date

import pytest

from src.core.entities.countdown import Severity
from src.core.entities.reminder import (
    Priority,
    RecurrenceInterval,
    ReminderCategory,
    ReminderDraft,
    ReminderPatch,
    ReminderStatus,
)
from src.core.exceptions import InvalidTransitionError
from src.core.services.reminder_lifecycle import (
    ReminderLifecycle,
    classify_countdown,
    countdown,
    countdown_text,
)


@pytest.fixture
def lifecycle(clock) -> ReminderLifecycle:
    return ReminderLifecycle(clock)


class TestBuild:
    def test_defaults_from_category(self, lifecycle, clock):
        reminder = lifecycle.build(
            ReminderDraft(category=ReminderCategory.TERMIN, deadline_date=date(2025, 5, 2))
        )
        assert reminder.title == "Termin beim Jobcenter"
        assert reminder.lead_days == 1
        assert reminder.trigger_date == date(2025, 5, 1)
        assert reminder.status == ReminderStatus.AKTIV
        assert reminder.created_at == clock.now()

    def test_explicit_lead_days(self, lifecycle):
        reminder = lifecycle.build(
            ReminderDraft(
                title="  Widerspruch  ",
                deadline_date=date(2025, 4, 13),
                lead_days=0,
            )
        )
        assert reminder.title == "Widerspruch"
        assert reminder.trigger_date == date(2025, 4, 13)

    def test_recurring_without_interval_defaults_to_monthly(self, lifecycle):
        reminder = lifecycle.build(
            ReminderDraft(deadline_date=date(2025, 5, 1), is_recurring=True)
        )
        assert reminder.recurrence_interval == RecurrenceInterval.MONATLICH

    def test_interval_dropped_when_not_recurring(self, lifecycle):
        reminder = lifecycle.build(
            ReminderDraft(
                deadline_date=date(2025, 5, 1),
                recurrence_interval=RecurrenceInterval.JAEHRLICH,
            )
        )
        assert reminder.is_recurring is False
        assert reminder.recurrence_interval is None

    def test_blank_case_reference_becomes_none(self, lifecycle):
        reminder = lifecycle.build(
            ReminderDraft(deadline_date=date(2025, 5, 1), case_reference="")
        )
        assert reminder.case_reference is None

    def test_lead_time_beyond_calendar_start_clamps(self, lifecycle):
        reminder = lifecycle.build(
            ReminderDraft(deadline_date=date(2025, 1, 1), lead_days=10**6)
        )
        assert reminder.trigger_date == date.min
        assert reminder.lead_days == 10**6
        assert reminder.trigger_date <= reminder.deadline_date

    def test_lead_time_reaching_calendar_start_exactly(self, lifecycle):
        deadline = date(1, 1, 11)
        reminder = lifecycle.build(ReminderDraft(deadline_date=deadline, lead_days=9))
        assert reminder.trigger_date == date(1, 1, 2)
        clamped = lifecycle.build(ReminderDraft(deadline_date=deadline, lead_days=10))
        assert clamped.trigger_date == date.min


class TestApplyPatch:
    def test_new_deadline_recomputes_trigger(self, lifecycle, make_reminder):
        reminder = make_reminder(deadline=date(2025, 4, 20), lead_days=3)
        patched = lifecycle.apply_patch(reminder, ReminderPatch(deadline_date=date(2025, 5, 10)))
        assert patched.deadline_date == date(2025, 5, 10)
        assert patched.trigger_date == date(2025, 5, 7)
        assert patched.id == reminder.id
        assert patched.created_at == reminder.created_at

    def test_new_lead_days_recomputes_trigger(self, lifecycle, make_reminder):
        reminder = make_reminder(deadline=date(2025, 4, 20), lead_days=3)
        patched = lifecycle.apply_patch(reminder, ReminderPatch(lead_days=10))
        assert patched.trigger_date == date(2025, 4, 10)

    def test_past_deadline_keeps_status(self, lifecycle, make_reminder):
        reminder = make_reminder()
        patched = lifecycle.apply_patch(reminder, ReminderPatch(deadline_date=date(2025, 1, 1)))
        assert patched.status == ReminderStatus.AKTIV

    def test_turning_recurrence_off_clears_interval(self, lifecycle, make_reminder):
        reminder = make_reminder(interval=RecurrenceInterval.QUARTALSWEISE)
        patched = lifecycle.apply_patch(reminder, ReminderPatch(is_recurring=False))
        assert patched.is_recurring is False
        assert patched.recurrence_interval is None

    def test_turning_recurrence_on(self, lifecycle, make_reminder):
        reminder = make_reminder()
        patched = lifecycle.apply_patch(
            reminder,
            ReminderPatch(is_recurring=True, recurrence_interval=RecurrenceInterval.JAEHRLICH),
        )
        assert patched.recurrence_interval == RecurrenceInterval.JAEHRLICH

    def test_unset_fields_untouched(self, lifecycle, make_reminder):
        reminder = make_reminder(priority=Priority.HOCH, case_reference="AZ-7")
        patched = lifecycle.apply_patch(reminder, ReminderPatch(description="neu"))
        assert patched.description == "neu"
        assert patched.priority == Priority.HOCH
        assert patched.case_reference == "AZ-7"

    def test_clearing_case_reference(self, lifecycle, make_reminder):
        reminder = make_reminder(case_reference="AZ-7")
        patched = lifecycle.apply_patch(reminder, ReminderPatch(case_reference=""))
        assert patched.case_reference is None

    def test_category_change_keeps_lead_days(self, lifecycle, make_reminder):
        reminder = make_reminder(lead_days=5)
        patched = lifecycle.apply_patch(
            reminder, ReminderPatch(category=ReminderCategory.WEITERBEWILLIGUNGSANTRAG)
        )
        assert patched.lead_days == 5

    def test_huge_lead_days_clamps_trigger(self, lifecycle, make_reminder):
        reminder = make_reminder(deadline=date(2025, 4, 20), lead_days=3)
        patched = lifecycle.apply_patch(reminder, ReminderPatch(lead_days=10**9))
        assert patched.trigger_date == date.min

    def test_original_instance_untouched(self, lifecycle, make_reminder):
        reminder = make_reminder(deadline=date(2025, 4, 20))
        lifecycle.apply_patch(reminder, ReminderPatch(deadline_date=date(2025, 6, 1)))
        assert reminder.deadline_date == date(2025, 4, 20)


class TestTransition:
    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (ReminderStatus.AKTIV, ReminderStatus.STUMMGESCHALTET),
            (ReminderStatus.STUMMGESCHALTET, ReminderStatus.AKTIV),
            (ReminderStatus.AKTIV, ReminderStatus.ERLEDIGT),
            (ReminderStatus.STUMMGESCHALTET, ReminderStatus.ERLEDIGT),
            (ReminderStatus.VERPASST, ReminderStatus.ERLEDIGT),
        ],
    )
    def test_allowed(self, lifecycle, make_reminder, current, target):
        updated = lifecycle.transition(make_reminder(status=current), target)
        assert updated.status == target

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (ReminderStatus.ERLEDIGT, ReminderStatus.AKTIV),
            (ReminderStatus.ERLEDIGT, ReminderStatus.STUMMGESCHALTET),
            (ReminderStatus.ERLEDIGT, ReminderStatus.VERPASST),
            (ReminderStatus.VERPASST, ReminderStatus.AKTIV),
            (ReminderStatus.VERPASST, ReminderStatus.STUMMGESCHALTET),
            (ReminderStatus.AKTIV, ReminderStatus.VERPASST),
            (ReminderStatus.AKTIV, ReminderStatus.AKTIV),
        ],
    )
    def test_rejected(self, lifecycle, make_reminder, current, target):
        reminder = make_reminder(status=current)
        with pytest.raises(InvalidTransitionError) as exc_info:
            lifecycle.transition(reminder, target)
        assert exc_info.value.details["current"] == current.value
        assert reminder.status == current

    def test_complete_stamps_completed_at(self, lifecycle, make_reminder, clock):
        done = lifecycle.mark_complete(make_reminder())
        assert done.status == ReminderStatus.ERLEDIGT
        assert done.completed_at == clock.now()

    def test_complete_twice_is_noop(self, lifecycle, make_reminder):
        done = make_reminder(status=ReminderStatus.ERLEDIGT)
        again = lifecycle.mark_complete(done)
        assert again is done
        assert again.completed_at == done.completed_at

    def test_unmute_clears_nothing_else(self, lifecycle, make_reminder):
        muted = make_reminder(status=ReminderStatus.STUMMGESCHALTET)
        active = lifecycle.toggle_mute(muted)
        assert active.status == ReminderStatus.AKTIV
        assert active.completed_at is None

    def test_toggle_mute_leaves_missed_alone(self, lifecycle, make_reminder):
        missed = make_reminder(status=ReminderStatus.VERPASST)
        assert lifecycle.toggle_mute(missed) is missed


class TestReconcile:
    def test_marks_overdue_open_reminders_missed(self, make_reminder, today):
        active = make_reminder(deadline=date(2025, 4, 9))
        muted = make_reminder(deadline=date(2025, 4, 1), status=ReminderStatus.STUMMGESCHALTET)
        due_today = make_reminder(deadline=today)
        done = make_reminder(deadline=date(2025, 1, 1), status=ReminderStatus.ERLEDIGT)

        result, changed = ReminderLifecycle.reconcile([active, muted, due_today, done], today)

        assert changed == 2
        assert [r.status for r in result] == [
            ReminderStatus.VERPASST,
            ReminderStatus.VERPASST,
            ReminderStatus.AKTIV,
            ReminderStatus.ERLEDIGT,
        ]

    def test_idempotent(self, make_reminder, today):
        reminders = [make_reminder(deadline=date(2025, 4, 1))]
        once, _ = ReminderLifecycle.reconcile(reminders, today)
        twice, changed = ReminderLifecycle.reconcile(once, today)
        assert changed == 0
        assert twice == once

    def test_no_open_reminder_left_overdue(self, make_reminder, today):
        reminders = [make_reminder(deadline=date(2025, 3, d)) for d in range(1, 29)]
        result, _ = ReminderLifecycle.reconcile(reminders, today)
        assert not any(r.is_open and r.deadline_date < today for r in result)


class TestCountdown:
    @pytest.mark.parametrize(
        ("days", "severity"),
        [
            (-1, Severity.CRITICAL),
            (0, Severity.CRITICAL),
            (1, Severity.HIGH),
            (3, Severity.HIGH),
            (4, Severity.MEDIUM),
            (7, Severity.MEDIUM),
            (8, Severity.NORMAL),
        ],
    )
    def test_classification_boundaries(self, days, severity):
        assert classify_countdown(days) == severity

    @pytest.mark.parametrize(
        ("days", "text"),
        [
            (-3, "3 Tage ueberfaellig!"),
            (-1, "1 Tag ueberfaellig!"),
            (0, "HEUTE!"),
            (1, "Noch 1 Tag"),
            (12, "Noch 12 Tage"),
        ],
    )
    def test_text(self, days, text):
        assert countdown_text(days) == text

    def test_countdown_for_date(self, today):
        badge = countdown(date(2025, 4, 13), today)
        assert badge.days == 3
        assert badge.severity == Severity.HIGH
        assert badge.is_overdue is False
        assert countdown(today, today).is_due_today is True

    def test_lifecycle_countdown_uses_clock(self, lifecycle, make_reminder):
        badge = lifecycle.countdown(make_reminder(deadline=date(2025, 4, 8)))
        assert badge.days == -2
        assert badge.is_overdue is True
