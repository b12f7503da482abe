"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from domain.entities import Application, Notification
from domain.enums import ApplicationStatus
from domain.value_objects import OwnershipChain


class IApplicationRepository(ABC):
    """Application repository interface"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def add_unique(self, application: Application) -> Application:
        """
        Insert an application guarded by the (job_offer_id, applicant_user_id)
        unique constraint.

        Raises:
            DuplicateResourceException: the pair already has an application
        """
        pass

    @abstractmethod
    async def exists_for_job(self, job_offer_id: UUID, applicant_user_id: UUID) -> bool:
        """Check if the applicant ever applied to the job offer, deleted applications included"""
        pass

    @abstractmethod
    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus,
        updated_at: datetime
    ) -> Application:
        """Persist a new status"""
        pass

    @abstractmethod
    async def update_content(
        self,
        application_id: UUID,
        cover_letter: Optional[str],
        resume_url: Optional[str],
        updated_at: datetime
    ) -> Application:
        """Persist new submitted content; None leaves a field unchanged"""
        pass

    @abstractmethod
    async def delete(self, application_id: UUID, deleted_at: datetime) -> bool:
        """Soft-delete an application; its (job offer, applicant) slot stays taken"""
        pass

    @abstractmethod
    async def list_for_applicant(self, applicant_user_id: UUID) -> List[Application]:
        """Applications submitted by a user, newest first"""
        pass

    @abstractmethod
    async def list_for_job_offer(self, job_offer_id: UUID) -> List[Application]:
        """Applications received by a job offer, newest first"""
        pass

    @abstractmethod
    async def count_by_status_for_job_offer(self, job_offer_id: UUID) -> Dict[ApplicationStatus, int]:
        """Number of applications per status for a job offer"""
        pass

    @abstractmethod
    async def list_for_company(
        self,
        company_id: UUID,
        status: Optional[ApplicationStatus] = None
    ) -> List[Application]:
        """Applications received by all job offers of a company, newest first"""
        pass

    @abstractmethod
    async def count_by_status_for_company(self, company_id: UUID) -> Dict[ApplicationStatus, int]:
        """Number of applications per status across a company's job offers"""
        pass


class IOwnershipRepository(ABC):
    """Canonical ownership lookups (application -> job offer -> company -> owner)"""

    @abstractmethod
    async def resolve_application_chain(self, application_id: UUID) -> Optional[OwnershipChain]:
        """Resolve the full chain for an application in one query"""
        pass

    @abstractmethod
    async def resolve_job_offer_chain(self, job_offer_id: UUID) -> Optional[OwnershipChain]:
        """Resolve the company and owner of a job offer in one query"""
        pass

    @abstractmethod
    async def resolve_company_chain(self, company_id: UUID) -> Optional[OwnershipChain]:
        """Resolve the owner of a company"""
        pass


class INotificationRepository(ABC):
    """Notification repository interface"""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create new notification"""
        pass

    @abstractmethod
    async def list_for_recipient(self, recipient_user_id: UUID) -> List[Notification]:
        """Notifications of a user, newest first"""
        pass
