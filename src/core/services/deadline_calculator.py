"""
Statutory deadline calculator.

Maps a notice date, a deadline category and the delivery mode to the end of
the period, including the three-day delivery fiction for mailed notices.
No weekend or holiday roll-forward is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.config import get_logger
from src.core.entities.deadline import DeadlineCategory, DeadlineResult
from src.core.entities.reminder import Priority, ReminderCategory, ReminderDraft
from src.core.exceptions import InvalidDateError
from src.core.interfaces.clock import IClock
from src.core.services.date_math import (
    add_days,
    add_months,
    add_years,
    format_date_de,
    parse_iso_date,
)
from src.core.services.reminder_lifecycle import classify_countdown

logger = get_logger(__name__)

POSTAL_DELIVERY_DAYS = 3


@dataclass(frozen=True)
class DeadlineRule:
    """Static configuration for one deadline category."""

    duration_label: str
    legal_basis_label: str
    guidance_notes: tuple[str, ...]
    months: int = 0
    years: int = 0
    days: int = 0
    open_ended: bool = False

    def apply(self, start: date) -> date | None:
        if self.open_ended:
            return None
        end = start
        if self.years:
            end = add_years(end, self.years)
        if self.months:
            end = add_months(end, self.months)
        if self.days:
            end = add_days(end, self.days)
        return end


DEADLINE_RULES: dict[DeadlineCategory, DeadlineRule] = {
    DeadlineCategory.WIDERSPRUCH: DeadlineRule(
        months=1,
        duration_label="1 Monat",
        legal_basis_label="§ 84 Abs. 1 SGG",
        guidance_notes=(
            "Der Widerspruch muss schriftlich oder zur Niederschrift beim Jobcenter eingelegt werden.",
            "Ein formloses Schreiben reicht aus - es muss nur klar sein, dass du mit dem Bescheid nicht einverstanden bist.",
            "Die Begruendung kann auch nachgereicht werden - lege zuerst fristwahrend Widerspruch ein!",
            "Sende den Widerspruch per Einschreiben oder gib ihn persoenlich ab und lass dir den Empfang bestaetigen.",
        ),
    ),
    DeadlineCategory.KLAGE: DeadlineRule(
        months=1,
        duration_label="1 Monat",
        legal_basis_label="§ 87 Abs. 1 SGG",
        guidance_notes=(
            "Die Klage wird beim zustaendigen Sozialgericht eingereicht - nicht beim Jobcenter.",
            "Das Sozialgericht ist im Widerspruchsbescheid angegeben.",
            "Das Verfahren vor dem Sozialgericht ist kostenfrei (§ 183 SGG).",
            "Du kannst Prozesskostenhilfe beantragen, wenn du dir keinen Anwalt leisten kannst.",
        ),
    ),
    DeadlineCategory.BERUFUNG: DeadlineRule(
        months=1,
        duration_label="1 Monat",
        legal_basis_label="§ 151 Abs. 1 SGG",
        guidance_notes=(
            "Die Berufung wird beim Landessozialgericht eingelegt.",
            "Die Berufung muss schriftlich eingelegt werden.",
            "Pruefe, ob die Berufung zugelassen wurde oder ob du eine Nichtzulassungsbeschwerde brauchst.",
            "Ziehe einen Anwalt hinzu - das Berufungsverfahren ist komplexer.",
        ),
    ),
    # The one-year back-payment cap is guidance only, never a second date.
    DeadlineCategory.UEBERPRUEFUNG: DeadlineRule(
        years=4,
        duration_label="4 Jahre (Rueckwirkung: 1 Jahr ab Antrag)",
        legal_basis_label="§ 44 SGB X",
        guidance_notes=(
            "Ein Ueberpruefungsantrag ist auch moeglich, wenn die Widerspruchsfrist bereits abgelaufen ist.",
            "Die Leistungen werden rueckwirkend fuer maximal 1 Jahr ab Antragstellung nachgezahlt (§ 44 Abs. 4 SGB X).",
            "Stelle den Antrag so frueh wie moeglich, um moeglichst viele Monate abzudecken.",
            "Begruende konkret, welcher Fehler im urspruenglichen Bescheid vorliegt.",
        ),
    ),
    DeadlineCategory.EILANTRAG: DeadlineRule(
        open_ended=True,
        duration_label="Keine starre Frist",
        legal_basis_label="§ 86b SGG",
        guidance_notes=(
            "Ein Eilantrag (einstweiliger Rechtsschutz) hat keine feste Frist, sollte aber so schnell wie moeglich gestellt werden.",
            "Voraussetzung ist ein Anordnungsanspruch und ein Anordnungsgrund (Eilbeduerftigkeit).",
            "Typischer Fall: Das Jobcenter hat Leistungen eingestellt und du kannst deine Miete nicht mehr zahlen.",
            "Der Eilantrag wird direkt beim Sozialgericht gestellt.",
        ),
    ),
    DeadlineCategory.ANHOERUNG: DeadlineRule(
        days=14,
        duration_label="2 Wochen",
        legal_basis_label="§ 24 SGB X",
        guidance_notes=(
            "Die Anhoerung gibt dir die Moeglichkeit, dich zu aeussern, bevor ein belastender Bescheid ergeht.",
            "Nutze die Anhoerung unbedingt! Deine Stellungnahme kann den Bescheid beeinflussen.",
            "Erklaere sachlich deine Sicht der Dinge und fuege Nachweise bei.",
            "Wenn du die Frist verpasst, kann der Bescheid trotzdem ergehen - du hast dann aber noch die Widerspruchsfrist.",
        ),
    ),
    # Typical default only; the agency sets the real period case by case.
    DeadlineCategory.MITWIRKUNG: DeadlineRule(
        days=14,
        duration_label="Meistens 1-2 Wochen (individuell festgelegt)",
        legal_basis_label="§§ 60-67 SGB I",
        guidance_notes=(
            "Die Frist fuer Mitwirkungspflichten wird individuell vom Jobcenter festgelegt.",
            "Wenn du die Unterlagen nicht rechtzeitig beschaffen kannst, bitte schriftlich um Fristverlaengerung.",
            "Bei Nichteinhaltung droht Versagung oder Entziehung der Leistungen (§ 66 SGB I).",
            "Bewahre Nachweise auf, dass du dich um die Mitwirkung bemueht hast.",
        ),
    ),
}

HANDOFF_CATEGORIES: dict[DeadlineCategory, ReminderCategory] = {
    DeadlineCategory.WIDERSPRUCH: ReminderCategory.WIDERSPRUCHSFRIST,
    DeadlineCategory.KLAGE: ReminderCategory.KLAGEFRIST,
    DeadlineCategory.BERUFUNG: ReminderCategory.KLAGEFRIST,
    DeadlineCategory.ANHOERUNG: ReminderCategory.ABGABEFRIST,
    DeadlineCategory.MITWIRKUNG: ReminderCategory.ABGABEFRIST,
    DeadlineCategory.UEBERPRUEFUNG: ReminderCategory.SONSTIGES,
}


@dataclass
class HandoffDefaults:
    """Pre-filled values for reminders created from a computed deadline."""

    lead_days: int = 14
    priority: Priority = Priority.HOCH


class DeadlineCalculator:
    """
    Computes statutory deadlines.

    Invalid input never produces a fabricated date: ``compute`` returns None
    and the caller shows nothing.
    """

    def __init__(
        self,
        clock: IClock,
        rules: dict[DeadlineCategory, DeadlineRule] | None = None,
        handoff: HandoffDefaults | None = None,
    ) -> None:
        self._clock = clock
        self._rules = rules or DEADLINE_RULES
        self._handoff = handoff or HandoffDefaults()

    def compute(
        self,
        reference_date: date | str | None,
        category: DeadlineCategory | str,
        delivered_by_mail: bool = True,
    ) -> DeadlineResult | None:
        """
        Compute the end of the period for a notice.

        Args:
            reference_date: Date printed on the notice (ISO string or date).
            category: Deadline category.
            delivered_by_mail: Apply the three-day delivery fiction.

        Returns:
            DeadlineResult, or None when the input is missing or invalid.
        """
        try:
            reference = parse_iso_date(reference_date, field="reference_date")
            category = DeadlineCategory(category)
        except InvalidDateError as exc:
            logger.warning("deadline_reference_invalid", value=exc.details.get("value"))
            return None
        except ValueError:
            logger.warning("deadline_category_unknown", category=str(category))
            return None

        rule = self._rules[category]
        try:
            deemed_received = (
                add_days(reference, POSTAL_DELIVERY_DAYS) if delivered_by_mail else reference
            )
            deadline_date = rule.apply(deemed_received)
        except (OverflowError, ValueError):
            logger.warning(
                "deadline_out_of_range",
                reference_date=reference.isoformat(),
                category=category.value,
            )
            return None

        days_remaining = None
        severity = None
        if deadline_date is not None:
            days_remaining = (deadline_date - self._clock.today()).days
            severity = classify_countdown(days_remaining)

        result = DeadlineResult(
            category=category,
            reference_date=reference,
            deemed_received_date=deemed_received,
            delivered_by_mail=delivered_by_mail,
            deadline_date=deadline_date,
            duration_label=rule.duration_label,
            legal_basis_label=rule.legal_basis_label,
            guidance_notes=list(rule.guidance_notes),
            is_open_ended=rule.open_ended,
            days_remaining=days_remaining,
            severity=severity,
        )

        logger.debug(
            "deadline_computed",
            category=category.value,
            reference_date=reference.isoformat(),
            deadline_date=deadline_date.isoformat() if deadline_date else None,
            delivered_by_mail=delivered_by_mail,
        )
        return result

    def to_reminder_draft(self, result: DeadlineResult) -> ReminderDraft | None:
        """
        Pre-fill a reminder from a computed deadline.

        Open-ended results have no date to remind about and yield None.
        """
        if result.is_open_ended or result.deadline_date is None:
            return None

        reminder_category = HANDOFF_CATEGORIES[result.category]
        description = (
            f"Bescheid vom {format_date_de(result.reference_date)}. "
            f"Zustellung am {format_date_de(result.deemed_received_date)}. "
            f"Fristende: {format_date_de(result.deadline_date)}."
        )

        return ReminderDraft(
            title=reminder_category.label,
            description=description,
            category=reminder_category,
            deadline_date=result.deadline_date,
            lead_days=self._handoff.lead_days,
            priority=self._handoff.priority,
        )
