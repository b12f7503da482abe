"""
Bulk Coordinator Interface
"""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Iterable, Union
from uuid import UUID

from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.value_objects import Actor, BulkTransitionResult


# Authorizes and transitions one application inside its own transaction
ItemTransition = Callable[[UUID, ApplicationStatus, Actor], Awaitable[Application]]


class IBulkCoordinator(ABC):
    """Applies one status transition to many applications"""

    @abstractmethod
    async def bulk_transition(
        self,
        application_ids: Iterable[UUID],
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> BulkTransitionResult:
        """
        Transition every application independently.

        Per-item failures are collected in ``failed``; nothing is raised for them.

        Raises:
            ValidationException: empty (or oversized) id set
            InvalidStatusException: new_status is not a transition target
        """
        pass
