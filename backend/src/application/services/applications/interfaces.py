"""
Application Service Interface
Operations exposed to the HTTP layer
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Union
from uuid import UUID

from domain.entities import Application, Notification
from domain.enums import ApplicationStatus
from domain.value_objects import Actor, BulkTransitionResult


class IApplicationService(ABC):
    """Authorization-gated application operations, one transaction each"""

    @abstractmethod
    async def create_application(
        self,
        job_offer_id: UUID,
        actor: Actor,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None
    ) -> Application:
        """
        Submit an application as the acting applicant

        Raises:
            AuthorizationException, ResourceNotFoundException,
            ValidationException (inactive job offer), DuplicateResourceException
        """
        pass

    @abstractmethod
    async def update_application_status(
        self,
        application_id: UUID,
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> Application:
        """
        Transition one application

        Raises:
            ResourceNotFoundException, AuthorizationException,
            InvalidStatusException, TerminalStateException
        """
        pass

    @abstractmethod
    async def bulk_update_application_status(
        self,
        application_ids: Iterable[UUID],
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> BulkTransitionResult:
        """Transition many applications; per-item failures are aggregated"""
        pass

    @abstractmethod
    async def can_user_apply(self, job_offer_id: UUID, actor: Actor) -> bool:
        """Advisory check whether the actor may still apply to the job offer"""
        pass

    @abstractmethod
    async def delete_application(self, application_id: UUID, actor: Actor) -> bool:
        """Remove an application; only its applicant may do so"""
        pass

    @abstractmethod
    async def get_application(self, application_id: UUID, actor: Actor) -> Application:
        """Read one application as its applicant, the owning company or admin"""
        pass

    @abstractmethod
    async def update_application_content(
        self,
        application_id: UUID,
        actor: Actor,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None
    ) -> Application:
        """Edit cover letter / resume url of an own application"""
        pass

    @abstractmethod
    async def list_my_applications(self, actor: Actor) -> List[Application]:
        """Applications submitted by the actor"""
        pass

    @abstractmethod
    async def list_job_applications(self, job_offer_id: UUID, actor: Actor) -> List[Application]:
        """Applications received by a job offer"""
        pass

    @abstractmethod
    async def job_application_stats(self, job_offer_id: UUID, actor: Actor) -> Dict[str, int]:
        """Per-status counts plus total for a job offer"""
        pass

    @abstractmethod
    async def list_company_applications(
        self,
        company_id: UUID,
        actor: Actor,
        status: Optional[Union[ApplicationStatus, str]] = None
    ) -> List[Application]:
        """
        Applications across all job offers of a company, optionally one status only

        Raises:
            ResourceNotFoundException: company does not exist
            AuthorizationException: actor does not own the company (admins excepted)
            InvalidStatusException: unknown status filter
        """
        pass

    @abstractmethod
    async def company_application_stats(self, company_id: UUID, actor: Actor) -> Dict[str, int]:
        """Per-status counts plus total across a company's job offers"""
        pass

    @abstractmethod
    async def list_notifications(self, actor: Actor) -> List[Notification]:
        """Notifications addressed to the actor"""
        pass
