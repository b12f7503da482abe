"""
Ownership Chain Value Object
Application -> JobOffer -> Company -> owning User, resolved in one lookup
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class OwnershipChain:
    """Canonical ownership of a company and, optionally, one of its job offers and applications"""

    company_id: UUID
    owner_user_id: UUID

    # Set when the chain was resolved from a job offer or an application
    job_offer_id: Optional[UUID] = None
    job_offer_is_active: bool = True

    # Set only when the chain was resolved from an application
    application_id: Optional[UUID] = None
    applicant_user_id: Optional[UUID] = None

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check if ``user_id`` owns the company"""
        return self.owner_user_id == user_id

    def is_applicant(self, user_id: UUID) -> bool:
        """Check if ``user_id`` submitted the application"""
        return self.applicant_user_id is not None and self.applicant_user_id == user_id
