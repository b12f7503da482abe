"""
Notification Repository Implementation
"""
from typing import List
from uuid import UUID

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RepositoryException
from application.repositories.interfaces import INotificationRepository
from domain.entities import Notification
from domain.enums import NotificationKind
from infrastructure.persistence.models.notification import NotificationModel


class SQLAlchemyNotificationRepository(INotificationRepository):
    """SQLAlchemy implementation of notification repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        model = self._to_model(notification)
        try:
            # Savepoint: a failed insert leaves the enclosing transaction usable
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()

        except SQLAlchemyError as e:
            logger.error(f"Failed to create notification for {notification.recipient_user_id}: {str(e)}")
            raise RepositoryException(f"Failed to create notification: {str(e)}")

        return self._to_entity(model)

    async def list_for_recipient(self, recipient_user_id: UUID) -> List[Notification]:
        try:
            result = await self.session.execute(
                select(NotificationModel)
                .where(NotificationModel.recipient_user_id == recipient_user_id)
                .order_by(NotificationModel.created_at.desc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to list notifications of user {recipient_user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list notifications: {str(e)}")

    def _to_model(self, entity: Notification) -> NotificationModel:
        return NotificationModel(
            id=entity.id,
            recipient_user_id=entity.recipient_user_id,
            kind=entity.kind.value,
            title=entity.title,
            message=entity.message,
            is_read=entity.is_read,
            created_at=entity.created_at,
        )

    def _to_entity(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_user_id=model.recipient_user_id,
            kind=NotificationKind(model.kind),
            title=model.title,
            message=model.message,
            is_read=model.is_read,
            created_at=model.created_at,
        )
