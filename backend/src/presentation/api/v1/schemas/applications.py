"""
Application Request/Response Schemas
Pydantic v2 models
"""
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities import Application, Notification


class ApplicationCreateRequest(BaseModel):
    """Submit an application to a job offer"""

    job_offer_id: UUID
    cover_letter: Optional[str] = Field(None, max_length=2000)
    resume_url: Optional[str] = Field(None, max_length=500)


class ApplicationUpdateRequest(BaseModel):
    """Edit the content of an own application"""

    cover_letter: Optional[str] = Field(None, max_length=2000)
    resume_url: Optional[str] = Field(None, max_length=500)


class StatusUpdateRequest(BaseModel):
    """Requested status; checked against the status enumeration by the service"""

    status: str = Field(..., min_length=1)


class BulkStatusUpdateRequest(BaseModel):
    """Requested status for a set of applications"""

    application_ids: List[UUID] = Field(..., min_length=1)
    status: str = Field(..., min_length=1)

    @field_validator("application_ids")
    @classmethod
    def dedupe_ids(cls, v: List[UUID]) -> List[UUID]:
        """Drop repeated ids, keep first-seen order"""
        return list(dict.fromkeys(v))


class ApplicationResponse(BaseModel):
    """Single application"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    job_offer_id: UUID
    applicant_user_id: UUID
    status: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=application.id,
            job_offer_id=application.job_offer_id,
            applicant_user_id=application.applicant_user_id,
            status=application.status.value,
            cover_letter=application.cover_letter,
            resume_url=application.resume_url,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )


class CanApplyResponse(BaseModel):
    can_apply: bool


class BulkStatusUpdateResponse(BaseModel):
    """Per-item outcome of a bulk status update"""

    succeeded: List[UUID]
    failed: Dict[UUID, str]


class NotificationResponse(BaseModel):
    id: UUID
    kind: str
    title: str
    message: str
    is_read: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            kind=notification.kind.value,
            title=notification.title,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )
