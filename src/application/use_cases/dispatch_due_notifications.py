"""
Dispatch Due Notifications Use Case.

Reconciles the reminder collection against today's date and notifies every
active reminder whose trigger date has arrived.
"""

from datetime import date

from src.config import get_logger
from src.core.entities.notification import DispatchReport
from src.core.interfaces.clock import IClock
from src.core.services import NotificationDispatcher, ReminderStore

logger = get_logger(__name__)


class DispatchDueNotificationsUseCase:
    """Use case for one notification run (app start or scheduled tick)."""

    def __init__(
        self,
        reminder_store: ReminderStore | None = None,
        dispatcher: NotificationDispatcher | None = None,
        clock: IClock | None = None,
    ):
        self._store = reminder_store
        self._dispatcher = dispatcher
        self._clock = clock

    def _get_store(self) -> ReminderStore:
        if self._store is None:
            from src.application.services import get_reminder_store
            self._store = get_reminder_store()
        return self._store

    def _get_dispatcher(self) -> NotificationDispatcher:
        if self._dispatcher is None:
            from src.application.services import get_notification_dispatcher
            self._dispatcher = get_notification_dispatcher()
        return self._dispatcher

    def _get_clock(self) -> IClock:
        if self._clock is None:
            from src.application.services import get_clock
            self._clock = get_clock()
        return self._clock

    async def execute(self, today: date | None = None) -> DispatchReport:
        """
        Run one dispatch pass.

        Args:
            today: Evaluation date; defaults to the clock's today.
        """
        today = today or self._get_clock().today()
        store = self._get_store()

        # Missed reminders must be settled before anything is announced
        await store.reconcile(today)
        reminders = await store.all()

        report = await self._get_dispatcher().notify_due(reminders, today)

        logger.info(
            "notification_run_complete",
            today=today.isoformat(),
            delivered=len(report.delivered),
            failed=len(report.failed),
            permission=report.permission.value,
        )
        return report
