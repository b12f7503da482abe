"""
Application Domain Entity
Immutable job application business object
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..enums import ApplicationStatus, TERMINAL_STATUSES


@dataclass(frozen=True)
class Application:
    """Job application domain entity - immutable

    At most one application exists per (job_offer_id, applicant_user_id).
    """

    id: UUID
    job_offer_id: UUID
    applicant_user_id: UUID

    status: ApplicationStatus = ApplicationStatus.PENDING

    # Submitted content
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_pending(self) -> bool:
        """Check if application is pending"""
        return self.status == ApplicationStatus.PENDING

    def is_terminal(self) -> bool:
        """Check if application is in terminal state"""
        return self.status in TERMINAL_STATUSES

    def __str__(self) -> str:
        return f"Application({self.id}, status={self.status.value})"
