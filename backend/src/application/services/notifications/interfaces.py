"""
Notification Dispatcher Interface
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Notification
from domain.enums import NotificationKind


class INotificationDispatcher(ABC):
    """Creates notifications as a side effect of status transitions"""

    @abstractmethod
    async def notify(self, recipient_user_id: UUID, kind: NotificationKind) -> Optional[Notification]:
        """
        Create one notification for the recipient.

        Never raises: a failure is logged and None is returned, so the
        triggering transition is never affected.
        """
        pass


class NullNotificationDispatcher(INotificationDispatcher):
    """Dispatcher that creates nothing"""

    async def notify(self, recipient_user_id: UUID, kind: NotificationKind) -> Optional[Notification]:
        return None
