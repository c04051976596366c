"""Tests for DeadlineCalculator."""

from datetime import date

import pytest

from src.core.entities.countdown import Severity
from src.core.entities.deadline import DeadlineCategory
from src.core.entities.reminder import Priority, ReminderCategory
from src.core.services.deadline_calculator import (
    DEADLINE_RULES,
    DeadlineCalculator,
    HandoffDefaults,
)
from src.infrastructure.clock import FixedClock


@pytest.fixture
def calculator(clock) -> DeadlineCalculator:
    return DeadlineCalculator(clock)


class TestCompute:
    """Deadline computation per category."""

    def test_objection_by_mail(self, calculator):
        """Notice of 2025-03-10 by mail: received 03-13, deadline 04-13."""
        result = calculator.compute("2025-03-10", DeadlineCategory.WIDERSPRUCH, True)

        assert result is not None
        assert result.deemed_received_date == date(2025, 3, 13)
        assert result.deadline_date == date(2025, 4, 13)
        assert result.days_remaining == 3
        assert result.severity == Severity.HIGH
        assert result.legal_basis_label == "§ 84 Abs. 1 SGG"
        assert result.duration_label == "1 Monat"

    def test_objection_missed_one_day_later(self):
        calculator = DeadlineCalculator(FixedClock(date(2025, 4, 14)))
        result = calculator.compute("2025-03-10", DeadlineCategory.WIDERSPRUCH, True)
        assert result.days_remaining == -1
        assert result.severity == Severity.CRITICAL

    def test_due_today(self):
        calculator = DeadlineCalculator(FixedClock(date(2025, 4, 13)))
        result = calculator.compute("2025-03-10", "widerspruch", True)
        assert result.days_remaining == 0
        assert result.severity == Severity.CRITICAL

    def test_hand_delivery_skips_postal_offset(self, calculator):
        result = calculator.compute("2025-03-10", DeadlineCategory.WIDERSPRUCH, False)
        assert result.deemed_received_date == date(2025, 3, 10)
        assert result.deadline_date == date(2025, 4, 10)
        assert result.days_remaining == 0

    def test_postal_offset_composes_with_month_offset(self, calculator):
        """By-mail deadline equals the hand-delivered deadline of reference + 3."""
        by_mail = calculator.compute("2025-01-25", DeadlineCategory.KLAGE, True)
        by_hand = calculator.compute("2025-01-28", DeadlineCategory.KLAGE, False)
        assert by_mail.deadline_date == by_hand.deadline_date == date(2025, 2, 28)

    def test_month_clamps_in_leap_year(self, calculator):
        result = calculator.compute("2024-01-28", DeadlineCategory.WIDERSPRUCH, True)
        assert result.deemed_received_date == date(2024, 1, 31)
        assert result.deadline_date == date(2024, 2, 29)

    def test_month_clamps_in_common_year(self, calculator):
        result = calculator.compute("2023-01-31", DeadlineCategory.BERUFUNG, False)
        assert result.deadline_date == date(2023, 2, 28)
        assert result.legal_basis_label == "§ 151 Abs. 1 SGG"

    def test_review_adds_four_years(self, calculator):
        result = calculator.compute("2021-02-26", DeadlineCategory.UEBERPRUEFUNG, True)
        assert result.deemed_received_date == date(2021, 3, 1)
        assert result.deadline_date == date(2025, 3, 1)
        assert result.legal_basis_label == "§ 44 SGB X"

    def test_review_from_leap_day(self, calculator):
        result = calculator.compute("2020-02-29", DeadlineCategory.UEBERPRUEFUNG, False)
        assert result.deadline_date == date(2024, 2, 29)

    def test_review_back_payment_cap_is_guidance_only(self, calculator):
        result = calculator.compute("2024-06-01", DeadlineCategory.UEBERPRUEFUNG, False)
        assert result.deadline_date == date(2028, 6, 1)
        assert any("1 Jahr" in note for note in result.guidance_notes)

    def test_hearing_adds_fourteen_days(self, calculator):
        result = calculator.compute("2025-03-10", DeadlineCategory.ANHOERUNG, True)
        assert result.deadline_date == date(2025, 3, 27)
        assert result.legal_basis_label == "§ 24 SGB X"

    def test_cooperation_adds_fourteen_days(self, calculator):
        result = calculator.compute("2025-12-20", DeadlineCategory.MITWIRKUNG, False)
        assert result.deadline_date == date(2026, 1, 3)
        assert result.legal_basis_label == "§§ 60-67 SGB I"

    def test_interim_relief_is_open_ended(self, calculator):
        result = calculator.compute("2025-03-10", DeadlineCategory.EILANTRAG, True)
        assert result.is_open_ended is True
        assert result.deadline_date is None
        assert result.days_remaining is None
        assert result.severity is None
        assert result.legal_basis_label == "§ 86b SGG"

    def test_accepts_date_objects(self, calculator):
        result = calculator.compute(date(2025, 3, 10), DeadlineCategory.WIDERSPRUCH)
        assert result.deadline_date == date(2025, 4, 13)

    @pytest.mark.parametrize("category", list(DeadlineCategory))
    def test_every_category_has_four_guidance_notes(self, calculator, category):
        result = calculator.compute("2025-03-10", category)
        assert len(result.guidance_notes) == 4
        assert result.guidance_notes == list(DEADLINE_RULES[category].guidance_notes)


class TestInvalidInput:
    """Invalid input yields no result instead of a fabricated date."""

    @pytest.mark.parametrize("value", [None, "", "   ", "2025-13-45", "10.03.2025", "garbage"])
    def test_invalid_reference_date(self, calculator, value):
        assert calculator.compute(value, DeadlineCategory.WIDERSPRUCH) is None

    def test_unknown_category(self, calculator):
        assert calculator.compute("2025-03-10", "kuendigung") is None

    @pytest.mark.parametrize(
        ("value", "category", "by_mail"),
        [
            ("9999-12-20", DeadlineCategory.WIDERSPRUCH, True),
            ("9999-12-30", DeadlineCategory.ANHOERUNG, True),
            ("9998-06-01", DeadlineCategory.UEBERPRUEFUNG, False),
            ("9999-12-31", DeadlineCategory.KLAGE, False),
        ],
    )
    def test_deadline_past_calendar_end(self, calculator, value, category, by_mail):
        assert calculator.compute(value, category, by_mail) is None

    def test_open_ended_near_calendar_end_still_computes(self, calculator):
        result = calculator.compute("9999-12-20", DeadlineCategory.EILANTRAG, False)
        assert result is not None
        assert result.deadline_date is None

    def test_iso_timestamp_prefix_is_accepted(self, calculator):
        result = calculator.compute("2025-03-10T08:00:00", DeadlineCategory.WIDERSPRUCH)
        assert result.reference_date == date(2025, 3, 10)


class TestHandoff:
    """Pre-filled reminder drafts from a computed deadline."""

    def test_objection_draft(self, calculator):
        result = calculator.compute("2025-03-10", DeadlineCategory.WIDERSPRUCH, True)
        draft = calculator.to_reminder_draft(result)

        assert draft.category == ReminderCategory.WIDERSPRUCHSFRIST
        assert draft.title == "Widerspruchsfrist"
        assert draft.deadline_date == date(2025, 4, 13)
        assert draft.lead_days == 14
        assert draft.priority == Priority.HOCH
        assert draft.description == (
            "Bescheid vom 10.03.2025. Zustellung am 13.03.2025. Fristende: 13.04.2025."
        )

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            (DeadlineCategory.KLAGE, ReminderCategory.KLAGEFRIST),
            (DeadlineCategory.BERUFUNG, ReminderCategory.KLAGEFRIST),
            (DeadlineCategory.ANHOERUNG, ReminderCategory.ABGABEFRIST),
            (DeadlineCategory.MITWIRKUNG, ReminderCategory.ABGABEFRIST),
            (DeadlineCategory.UEBERPRUEFUNG, ReminderCategory.SONSTIGES),
        ],
    )
    def test_category_mapping(self, calculator, category, expected):
        result = calculator.compute("2025-03-10", category)
        assert calculator.to_reminder_draft(result).category == expected

    def test_open_ended_has_no_draft(self, calculator):
        result = calculator.compute("2025-03-10", DeadlineCategory.EILANTRAG)
        assert calculator.to_reminder_draft(result) is None

    def test_custom_handoff_defaults(self, clock):
        calculator = DeadlineCalculator(
            clock, handoff=HandoffDefaults(lead_days=7, priority=Priority.KRITISCH)
        )
        result = calculator.compute("2025-03-10", DeadlineCategory.KLAGE)
        draft = calculator.to_reminder_draft(result)
        assert draft.lead_days == 7
        assert draft.priority == Priority.KRITISCH
