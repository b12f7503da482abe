"""
Uniqueness Enforcer Interface
One application per (job offer, applicant)
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.value_objects import Reservation


class IUniquenessEnforcer(ABC):
    """Atomic reservation of the (job offer, applicant) slot"""

    @abstractmethod
    async def try_reserve(
        self,
        job_offer_id: UUID,
        applicant_user_id: UUID,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None
    ) -> Reservation:
        """
        Create the application if the slot is free.

        Returns:
            Reservation.RESERVED with the new application, or ALREADY_EXISTS
        """
        pass

    @abstractmethod
    async def can_apply(self, job_offer_id: UUID, applicant_user_id: UUID) -> bool:
        """Advisory, non-mutating check; may be stale by the time of a create"""
        pass
