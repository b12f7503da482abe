"""
SQLAlchemy Unit of Work
One AsyncSession (one transaction) per logical operation
"""
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.database import AsyncSessionLocal
from core.exceptions import RepositoryException
from application.unit_of_work import IUnitOfWork
from .repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyNotificationRepository,
    SQLAlchemyOwnershipRepository,
)


class SQLAlchemyUnitOfWork(IUnitOfWork):
    """
    Usage:
        async with SQLAlchemyUnitOfWork() as uow:
            await uow.applications.get_by_id(app_id)
    """

    def __init__(self, session_factory: async_sessionmaker = AsyncSessionLocal):
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self.session = self.session_factory()
        self.applications = SQLAlchemyApplicationRepository(self.session)
        self.ownership = SQLAlchemyOwnershipRepository(self.session)
        self.notifications = SQLAlchemyNotificationRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            session, self.session = self.session, None
            try:
                await session.close()
            except SQLAlchemyError as e:
                logger.error(f"Failed to close unit of work session: {str(e)}")
                raise RepositoryException(f"Failed to close session: {str(e)}")

    async def commit(self) -> None:
        try:
            await self.session.commit()

        except SQLAlchemyError as e:
            logger.error(f"Failed to commit unit of work: {str(e)}")
            raise RepositoryException(f"Failed to commit transaction: {str(e)}")

    async def rollback(self) -> None:
        try:
            await self.session.rollback()

        except SQLAlchemyError as e:
            logger.error(f"Failed to roll back unit of work: {str(e)}")
            raise RepositoryException(f"Failed to roll back transaction: {str(e)}")
