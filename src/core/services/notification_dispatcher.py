"""
Due-reminder notification dispatch.

Takes an explicit set of reminders instead of reading the store itself, so
the repeat policy (once per session or once per day) is configuration, not
an accident of when the caller happens to run.
"""

from __future__ import annotations

from datetime import date

from src.config import get_logger
from src.core.entities.notification import (
    DispatchPolicy,
    DispatchReport,
    NotificationPermission,
)
from src.core.entities.reminder import Reminder, ReminderStatus
from src.core.interfaces.notifier import INotifier
from src.core.services.date_math import format_date_de

logger = get_logger(__name__)

DEFAULT_TITLE = "BescheidBoxer Erinnerung"


def is_due(reminder: Reminder, today: date) -> bool:
    """Active and past its trigger date."""
    return reminder.status == ReminderStatus.AKTIV and reminder.trigger_date <= today


def notification_body(reminder: Reminder) -> str:
    return f"{reminder.title} - Frist: {format_date_de(reminder.deadline_date)}"


class NotificationDispatcher:
    """
    Emits one platform notification per due reminder.

    Permission is checked (and requested once if still undecided) before any
    attempt. A failure for one reminder never stops the rest of the run.
    """

    def __init__(
        self,
        notifier: INotifier,
        policy: DispatchPolicy = DispatchPolicy.PER_DAY,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self._notifier = notifier
        self._policy = policy
        self._title = title
        self._notified: dict[str, date] = {}

    async def _resolve_permission(self) -> NotificationPermission:
        try:
            permission = await self._notifier.permission()
            if permission == NotificationPermission.DEFAULT:
                permission = await self._notifier.request_permission()
        except Exception:
            logger.warning(
                "notification_permission_failed",
                channel=self._notifier.channel,
                exc_info=True,
            )
            return NotificationPermission.DENIED
        return permission

    def _already_notified(self, reminder_id: str, today: date) -> bool:
        last = self._notified.get(reminder_id)
        if last is None:
            return False
        if self._policy == DispatchPolicy.PER_SESSION:
            return True
        return last == today

    async def notify_due(self, reminders: list[Reminder], today: date) -> DispatchReport:
        """Notify every active reminder whose trigger date has arrived."""
        due = [r for r in reminders if is_due(r, today)]
        permission = await self._resolve_permission()
        report = DispatchReport(permission=permission)

        if permission != NotificationPermission.GRANTED:
            logger.info(
                "notification_dispatch_skipped",
                channel=self._notifier.channel,
                permission=permission.value,
                due=len(due),
            )
            return report

        for reminder in due:
            if self._already_notified(reminder.id, today):
                report.skipped.append(reminder.id)
                continue

            report.attempted += 1
            try:
                await self._notifier.emit(self._title, notification_body(reminder))
            except Exception as e:
                report.failed.append(reminder.id)
                logger.warning(
                    "notification_emit_failed",
                    channel=self._notifier.channel,
                    reminder_id=reminder.id,
                    error=str(e),
                )
                continue

            self._notified[reminder.id] = today
            report.delivered.append(reminder.id)

        logger.info(
            "notification_dispatch_complete",
            channel=self._notifier.channel,
            attempted=report.attempted,
            delivered=len(report.delivered),
            failed=len(report.failed),
            skipped=len(report.skipped),
        )
        return report
