"""
Notification Dispatcher Implementation
Best-effort: notification loss never fails the status transition.
"""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from loguru import logger

from application.repositories.interfaces import INotificationRepository
from domain.entities import Notification
from domain.enums import NotificationKind, NOTIFICATION_MESSAGES, NOTIFICATION_TITLE
from .interfaces import INotificationDispatcher


class NotificationDispatcher(INotificationDispatcher):
    """Persists notification rows through the notification repository"""

    def __init__(self, notification_repository: INotificationRepository):
        self.notification_repo = notification_repository

    async def notify(self, recipient_user_id: UUID, kind: NotificationKind) -> Optional[Notification]:
        notification = Notification(
            id=uuid4(),
            recipient_user_id=recipient_user_id,
            kind=kind,
            title=NOTIFICATION_TITLE,
            message=NOTIFICATION_MESSAGES[kind],
            is_read=False,
            created_at=datetime.now(timezone.utc),
        )

        try:
            created = await self.notification_repo.create(notification)
        except Exception as e:
            logger.opt(exception=e).error(
                f"Failed to create '{kind.value}' notification for user {recipient_user_id}: {e}"
            )
            return None

        logger.debug(f"Created {created}")
        return created
