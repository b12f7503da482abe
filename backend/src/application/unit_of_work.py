"""
Unit of Work Interface
One storage transaction per logical operation
"""
from abc import ABC, abstractmethod

from application.repositories.interfaces import (
    IApplicationRepository,
    INotificationRepository,
    IOwnershipRepository,
)


class IUnitOfWork(ABC):
    """
    Transaction scope exposing the repositories bound to it.

    Usage:
        async with uow_factory() as uow:
            chain = await uow.ownership.resolve_application_chain(app_id)
            ...
    Leaving the block normally commits; an exception rolls back.
    """

    applications: IApplicationRepository
    ownership: IOwnershipRepository
    notifications: INotificationRepository

    async def __aenter__(self) -> "IUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
