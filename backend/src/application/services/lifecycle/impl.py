"""
Application Lifecycle Implementation

    pending -> reviewed | interview | accepted | rejected
    reviewed, interview -> any non-initial status
    accepted, rejected -> (terminal)
"""
from datetime import datetime, timezone
from typing import Union

from loguru import logger

from core.exceptions import InvalidStatusException, TerminalStateException
from application.repositories.interfaces import IApplicationRepository
from application.services.notifications import INotificationDispatcher
from domain.entities import Application
from domain.enums import ApplicationStatus, get_notification_kind, is_transition_target
from domain.value_objects import Actor
from .interfaces import IApplicationLifecycle


def parse_transition_target(value: Union[ApplicationStatus, str]) -> ApplicationStatus:
    """
    Convert a requested status into a valid transition target

    Raises:
        InvalidStatusException: value is not a status, or is the initial status
    """
    try:
        status = ApplicationStatus(value)
    except ValueError:
        raise InvalidStatusException(value)

    if not is_transition_target(status):
        raise InvalidStatusException(value, "initial status cannot be a transition target")

    return status


class ApplicationLifecycle(IApplicationLifecycle):
    """Validates transitions, persists them and dispatches one notification each"""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        notification_dispatcher: INotificationDispatcher
    ):
        self.application_repo = application_repository
        self.notifier = notification_dispatcher

    async def transition(
        self,
        application: Application,
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> Application:
        status = parse_transition_target(new_status)

        if application.is_terminal():
            logger.info(
                f"Rejected transition of {application} to {status.value} by {actor}: terminal status"
            )
            raise TerminalStateException(application.id, application.status.value)

        updated = await self.application_repo.update_status(
            application.id,
            status,
            datetime.now(timezone.utc)
        )

        logger.info(
            f"Application {application.id}: {application.status.value} -> {status.value} by {actor}"
        )

        await self.notifier.notify(updated.applicant_user_id, get_notification_kind(status))

        return updated
