"""
Application ORM Model
SQLAlchemy model for job applications
"""
import uuid
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.sql import func

from core.database import Base
from domain.enums import ApplicationStatus


class ApplicationModel(Base):
    """Job application table ORM model"""

    __tablename__ = "applications"
    __table_args__ = (
        # One application per applicant and job offer; inserts rely on it
        UniqueConstraint("job_offer_id", "applicant_user_id", name="uq_applications_job_offer_applicant"),
    )

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Foreign Keys
    job_offer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("job_offers.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    applicant_user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Application Details
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value, index=True)
    cover_letter = Column(Text, nullable=True)
    resume_url = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Soft delete: the row keeps its (job_offer_id, applicant_user_id) slot
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<ApplicationModel {self.id} - {self.status}>"
