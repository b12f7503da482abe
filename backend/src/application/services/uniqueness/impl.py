"""
Uniqueness Enforcer Implementation
The store's unique constraint decides; a conflicting insert becomes AlreadyExists.
"""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from loguru import logger

from core.exceptions import DuplicateResourceException
from application.repositories.interfaces import IApplicationRepository
from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.value_objects import Reservation, ReservationStatus
from .interfaces import IUniquenessEnforcer


class UniquenessEnforcer(IUniquenessEnforcer):
    """Reserves through a single constrained insert, never check-then-insert"""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository

    async def try_reserve(
        self,
        job_offer_id: UUID,
        applicant_user_id: UUID,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None
    ) -> Reservation:
        now = datetime.now(timezone.utc)
        application = Application(
            id=uuid4(),
            job_offer_id=job_offer_id,
            applicant_user_id=applicant_user_id,
            status=ApplicationStatus.PENDING,
            cover_letter=cover_letter,
            resume_url=resume_url,
            created_at=now,
            updated_at=now,
        )

        try:
            created = await self.application_repo.add_unique(application)
        except DuplicateResourceException:
            logger.info(
                f"Applicant {applicant_user_id} already applied to job offer {job_offer_id}"
            )
            return Reservation.already_exists()

        return Reservation(status=ReservationStatus.RESERVED, application=created)

    async def can_apply(self, job_offer_id: UUID, applicant_user_id: UUID) -> bool:
        return not await self.application_repo.exists_for_job(job_offer_id, applicant_user_id)
