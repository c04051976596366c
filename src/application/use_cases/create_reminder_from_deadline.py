"""
Create Reminder From Deadline Use Case.

Computes a statutory deadline, records it in the calculator history and
turns it into a pre-filled reminder.
"""

from dataclasses import dataclass
from datetime import date

from src.config import get_logger
from src.core.entities.deadline import DeadlineCategory, DeadlineResult
from src.core.entities.reminder import Priority, Reminder
from src.core.exceptions import ValidationError
from src.core.services import CalculationHistory, DeadlineCalculator, ReminderStore

logger = get_logger(__name__)


@dataclass
class DeadlineReminderResult:
    """Computed deadline plus the reminder created from it."""

    deadline: DeadlineResult
    reminder: Reminder


class CreateReminderFromDeadlineUseCase:
    """
    Use case for the calculator hand-off.

    Open-ended deadlines (Eilantrag) have no date and are rejected, as are
    inputs the calculator cannot compute.
    """

    def __init__(
        self,
        calculator: DeadlineCalculator | None = None,
        reminder_store: ReminderStore | None = None,
        history: CalculationHistory | None = None,
    ):
        self._calculator = calculator
        self._store = reminder_store
        self._history = history

    def _get_calculator(self) -> DeadlineCalculator:
        if self._calculator is None:
            from src.application.services import get_deadline_calculator
            self._calculator = get_deadline_calculator()
        return self._calculator

    def _get_store(self) -> ReminderStore:
        if self._store is None:
            from src.application.services import get_reminder_store
            self._store = get_reminder_store()
        return self._store

    def _get_history(self) -> CalculationHistory:
        if self._history is None:
            from src.application.services import get_calculation_history
            self._history = get_calculation_history()
        return self._history

    async def execute(
        self,
        reference_date: date | str,
        category: DeadlineCategory | str,
        delivered_by_mail: bool = True,
        case_reference: str | None = None,
        priority: Priority | None = None,
        lead_days: int | None = None,
    ) -> DeadlineReminderResult:
        """
        Compute the deadline and create the reminder.

        Raises:
            ValidationError: If no deadline can be computed or it has no date.
        """
        calculator = self._get_calculator()

        result = calculator.compute(reference_date, category, delivered_by_mail)
        if result is None:
            raise ValidationError(
                "reference_date", "no deadline could be computed", reference_date
            )

        await self._get_history().record(result)

        draft = calculator.to_reminder_draft(result)
        if draft is None:
            raise ValidationError(
                "category", "open-ended deadlines cannot become reminders", result.category.value
            )

        overrides = {
            key: value
            for key, value in {
                "case_reference": case_reference,
                "priority": priority,
                "lead_days": lead_days,
            }.items()
            if value is not None
        }
        if overrides:
            draft = draft.model_copy(update=overrides)

        reminder = await self._get_store().create(draft)

        logger.info(
            "deadline_reminder_created",
            reminder_id=reminder.id,
            category=result.category.value,
            deadline_date=reminder.deadline_date.isoformat(),
        )

        return DeadlineReminderResult(deadline=result, reminder=reminder)
