"""
Application Service Implementation
Wires authorization, uniqueness, lifecycle and notifications per unit of work.
"""
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Union
from uuid import UUID

from loguru import logger

from core.exceptions import (
    DuplicateResourceException,
    InvalidStatusException,
    ResourceNotFoundException,
    ValidationException,
)
from application.repositories.interfaces import INotificationRepository
from application.unit_of_work import IUnitOfWork
from application.services.authorization import (
    AuthorizationGuard,
    IAuthorizationGuard,
    OwnershipResolver,
)
from application.services.bulk import BulkCoordinator
from application.services.lifecycle import ApplicationLifecycle
from application.services.notifications import INotificationDispatcher, NotificationDispatcher
from application.services.uniqueness import UniquenessEnforcer
from domain.entities import Application, Notification
from domain.enums import ApplicationStatus, AuthorizationAction
from domain.value_objects import Actor, BulkTransitionResult
from .interfaces import IApplicationService


UnitOfWorkFactory = Callable[[], IUnitOfWork]
DispatcherFactory = Callable[[INotificationRepository], INotificationDispatcher]


def _summarize(counts: Dict[ApplicationStatus, int]) -> Dict[str, int]:
    """Every status with its count (zero when absent) plus the total"""
    stats = {status.value: counts.get(status, 0) for status in ApplicationStatus}
    stats["total"] = sum(counts.values())
    return stats


def _parse_status_filter(value: Optional[Union[ApplicationStatus, str]]) -> Optional[ApplicationStatus]:
    """Listing filter: any known status, pending included"""
    if value is None:
        return None
    try:
        return ApplicationStatus(value)
    except ValueError:
        raise InvalidStatusException(value)


class ApplicationService(IApplicationService):
    """Application operations, each scoped to one storage transaction"""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        guard: Optional[IAuthorizationGuard] = None,
        dispatcher_factory: DispatcherFactory = NotificationDispatcher,
        max_bulk_items: Optional[int] = None
    ):
        """
        Args:
            uow_factory: returns a fresh unit of work (one transaction)
            guard: authorization guard
            dispatcher_factory: builds the notification dispatcher for a
                unit of work; swap it to silence or observe notifications
            max_bulk_items: bulk update limit (defaults to settings)
        """
        self.uow_factory = uow_factory
        self.guard = guard or AuthorizationGuard()
        self.dispatcher_factory = dispatcher_factory
        # Every bulk item goes through the single-item path and its own transaction
        self.bulk = BulkCoordinator(self.update_application_status, max_bulk_items)

    async def create_application(
        self,
        job_offer_id: UUID,
        actor: Actor,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None
    ) -> Application:
        self.guard.ensure(actor, AuthorizationAction.CREATE_APPLICATION)

        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_job_offer(job_offer_id)
            if not chain.job_offer_is_active:
                raise ValidationException("job_offer_id", "job offer is not accepting applications")

            reservation = await UniquenessEnforcer(uow.applications).try_reserve(
                job_offer_id,
                actor.id,
                cover_letter=cover_letter,
                resume_url=resume_url,
            )

        if not reservation.reserved:
            raise DuplicateResourceException("Application", "job_offer_id", str(job_offer_id))

        logger.info(f"{actor} applied to job offer {job_offer_id}: {reservation.application}")
        return reservation.application

    async def update_application_status(
        self,
        application_id: UUID,
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> Application:
        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_application(application_id)
            self.guard.ensure(actor, AuthorizationAction.UPDATE_APPLICATION_STATUS, chain)

            application = await self._get_or_raise(uow, application_id)
            lifecycle = ApplicationLifecycle(
                uow.applications,
                self.dispatcher_factory(uow.notifications)
            )
            return await lifecycle.transition(application, new_status, actor)

    async def bulk_update_application_status(
        self,
        application_ids: Iterable[UUID],
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> BulkTransitionResult:
        return await self.bulk.bulk_transition(application_ids, new_status, actor)

    async def can_user_apply(self, job_offer_id: UUID, actor: Actor) -> bool:
        self.guard.ensure(actor, AuthorizationAction.CREATE_APPLICATION)

        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_job_offer(job_offer_id)
            if not chain.job_offer_is_active:
                return False
            return await UniquenessEnforcer(uow.applications).can_apply(job_offer_id, actor.id)

    async def delete_application(self, application_id: UUID, actor: Actor) -> bool:
        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_application(application_id)
            self.guard.ensure(actor, AuthorizationAction.DELETE_APPLICATION, chain)

            deleted = await uow.applications.delete(application_id, datetime.now(timezone.utc))

        logger.info(f"Application {application_id} deleted by {actor}")
        return deleted

    async def get_application(self, application_id: UUID, actor: Actor) -> Application:
        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_application(application_id)
            decision = self.guard.authorize(actor, AuthorizationAction.READ_OWN_APPLICATION, chain)
            if not decision.allowed:
                # Company reps of the owning company may read it too
                self.guard.ensure(actor, AuthorizationAction.READ_JOB_APPLICATIONS, chain)

            return await self._get_or_raise(uow, application_id)

    async def update_application_content(
        self,
        application_id: UUID,
        actor: Actor,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None
    ) -> Application:
        if cover_letter is None and resume_url is None:
            raise ValidationException("application", "no valid fields to update")

        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_application(application_id)
            self.guard.ensure(actor, AuthorizationAction.UPDATE_APPLICATION_CONTENT, chain)

            return await uow.applications.update_content(
                application_id,
                cover_letter,
                resume_url,
                datetime.now(timezone.utc)
            )

    async def list_my_applications(self, actor: Actor) -> List[Application]:
        async with self.uow_factory() as uow:
            return await uow.applications.list_for_applicant(actor.id)

    async def list_job_applications(self, job_offer_id: UUID, actor: Actor) -> List[Application]:
        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_job_offer(job_offer_id)
            self.guard.ensure(actor, AuthorizationAction.READ_JOB_APPLICATIONS, chain)

            return await uow.applications.list_for_job_offer(job_offer_id)

    async def job_application_stats(self, job_offer_id: UUID, actor: Actor) -> Dict[str, int]:
        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_job_offer(job_offer_id)
            self.guard.ensure(actor, AuthorizationAction.READ_JOB_APPLICATIONS, chain)

            counts = await uow.applications.count_by_status_for_job_offer(job_offer_id)

        return _summarize(counts)

    async def list_company_applications(
        self,
        company_id: UUID,
        actor: Actor,
        status: Optional[Union[ApplicationStatus, str]] = None
    ) -> List[Application]:
        status_filter = _parse_status_filter(status)

        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_company(company_id)
            self.guard.ensure(actor, AuthorizationAction.READ_COMPANY_APPLICATIONS, chain)

            return await uow.applications.list_for_company(company_id, status_filter)

    async def company_application_stats(self, company_id: UUID, actor: Actor) -> Dict[str, int]:
        async with self.uow_factory() as uow:
            chain = await OwnershipResolver(uow.ownership).resolve_company(company_id)
            self.guard.ensure(actor, AuthorizationAction.READ_COMPANY_APPLICATIONS, chain)

            counts = await uow.applications.count_by_status_for_company(company_id)

        return _summarize(counts)

    async def list_notifications(self, actor: Actor) -> List[Notification]:
        async with self.uow_factory() as uow:
            return await uow.notifications.list_for_recipient(actor.id)

    async def _get_or_raise(self, uow: IUnitOfWork, application_id: UUID) -> Application:
        application = await uow.applications.get_by_id(application_id)
        if application is None:
            raise ResourceNotFoundException("Application", str(application_id))
        return application
