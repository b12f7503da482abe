"""
Application Lifecycle Interface
"""
from abc import ABC, abstractmethod
from typing import Union

from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.value_objects import Actor


class IApplicationLifecycle(ABC):
    """Status state machine for applications"""

    @abstractmethod
    async def transition(
        self,
        application: Application,
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> Application:
        """
        Move an application to ``new_status`` and emit its notification.

        The actor must already be authorized for update-application-status
        on this application.

        Raises:
            InvalidStatusException: unknown status or not a transition target
            TerminalStateException: application is accepted or rejected
        """
        pass
