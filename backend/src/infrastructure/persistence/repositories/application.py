"""
Application Repository Implementation
SQLAlchemy-based application repository

Deleted applications stay in the table with ``deleted_at`` set; they are
hidden from every read but still occupy their unique slot.
"""
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import (
    DuplicateResourceException,
    RepositoryException,
    ResourceNotFoundException,
)
from application.repositories.interfaces import IApplicationRepository
from domain.entities import Application
from domain.enums import ApplicationStatus
from infrastructure.persistence.models.application import ApplicationModel
from infrastructure.persistence.models.job_offer import JobOfferModel


UNIQUE_CONSTRAINT_NAME = "uq_applications_job_offer_applicant"

NOT_DELETED = ApplicationModel.deleted_at.is_(None)


def _is_unique_violation(error: IntegrityError) -> bool:
    """Tell unique-key violations apart from other integrity errors (e.g. foreign keys)"""
    message = str(error.orig).lower()
    return UNIQUE_CONSTRAINT_NAME in message or "unique" in message or "duplicate key" in message


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """SQLAlchemy implementation of application repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        try:
            model = await self._get_model(application_id)
            return self._to_entity(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Failed to get application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to get application: {str(e)}")

    async def add_unique(self, application: Application) -> Application:
        model = self._to_model(application)
        try:
            # Savepoint: a conflict rolls back this insert only
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
            await self.session.refresh(model)

        except IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateResourceException(
                    "Application",
                    "job_offer_id/applicant_user_id",
                    f"{application.job_offer_id}/{application.applicant_user_id}"
                )
            logger.error(f"Integrity error creating application {application.id}: {str(e)}")
            raise RepositoryException(f"Failed to create application: {str(e)}")

        except SQLAlchemyError as e:
            logger.error(f"Failed to create application {application.id}: {str(e)}")
            raise RepositoryException(f"Failed to create application: {str(e)}")

        return self._to_entity(model)

    async def exists_for_job(self, job_offer_id: UUID, applicant_user_id: UUID) -> bool:
        # Deleted rows count: the slot is never released
        try:
            result = await self.session.execute(
                select(ApplicationModel.id).where(
                    and_(
                        ApplicationModel.job_offer_id == job_offer_id,
                        ApplicationModel.applicant_user_id == applicant_user_id
                    )
                )
            )
            return result.scalar_one_or_none() is not None

        except SQLAlchemyError as e:
            logger.error(f"Failed to check application existence for job {job_offer_id}: {str(e)}")
            raise RepositoryException(f"Failed to check application existence: {str(e)}")

    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus,
        updated_at: datetime
    ) -> Application:
        try:
            model = await self._get_model(application_id)
            if not model:
                raise ResourceNotFoundException("Application", str(application_id))

            model.status = status.value
            model.updated_at = updated_at

            await self.session.flush()
            return self._to_entity(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to update status of application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to update application status: {str(e)}")

    async def update_content(
        self,
        application_id: UUID,
        cover_letter: Optional[str],
        resume_url: Optional[str],
        updated_at: datetime
    ) -> Application:
        try:
            model = await self._get_model(application_id)
            if not model:
                raise ResourceNotFoundException("Application", str(application_id))

            if cover_letter is not None:
                model.cover_letter = cover_letter
            if resume_url is not None:
                model.resume_url = resume_url
            model.updated_at = updated_at

            await self.session.flush()
            return self._to_entity(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to update application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to update application: {str(e)}")

    async def delete(self, application_id: UUID, deleted_at: datetime) -> bool:
        try:
            model = await self._get_model(application_id)

            if model:
                model.deleted_at = deleted_at
                model.updated_at = deleted_at
                await self.session.flush()
                return True
            return False

        except SQLAlchemyError as e:
            logger.error(f"Failed to delete application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete application: {str(e)}")

    async def list_for_applicant(self, applicant_user_id: UUID) -> List[Application]:
        try:
            result = await self.session.execute(
                select(ApplicationModel)
                .where(ApplicationModel.applicant_user_id == applicant_user_id, NOT_DELETED)
                .order_by(ApplicationModel.created_at.desc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to list applications of user {applicant_user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    async def list_for_job_offer(self, job_offer_id: UUID) -> List[Application]:
        try:
            result = await self.session.execute(
                select(ApplicationModel)
                .where(ApplicationModel.job_offer_id == job_offer_id, NOT_DELETED)
                .order_by(ApplicationModel.created_at.desc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to list applications of job offer {job_offer_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    async def list_for_company(
        self,
        company_id: UUID,
        status: Optional[ApplicationStatus] = None
    ) -> List[Application]:
        try:
            query = (
                select(ApplicationModel)
                .join(JobOfferModel, JobOfferModel.id == ApplicationModel.job_offer_id)
                .where(JobOfferModel.company_id == company_id, NOT_DELETED)
            )
            if status is not None:
                query = query.where(ApplicationModel.status == status.value)

            result = await self.session.execute(query.order_by(ApplicationModel.created_at.desc()))
            return [self._to_entity(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to list applications of company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    async def count_by_status_for_job_offer(self, job_offer_id: UUID) -> Dict[ApplicationStatus, int]:
        try:
            result = await self.session.execute(
                select(ApplicationModel.status, func.count(ApplicationModel.id))
                .where(ApplicationModel.job_offer_id == job_offer_id, NOT_DELETED)
                .group_by(ApplicationModel.status)
            )
            return {ApplicationStatus(status): count for status, count in result.all()}

        except SQLAlchemyError as e:
            logger.error(f"Failed to count applications of job offer {job_offer_id}: {str(e)}")
            raise RepositoryException(f"Failed to count applications: {str(e)}")

    async def count_by_status_for_company(self, company_id: UUID) -> Dict[ApplicationStatus, int]:
        try:
            result = await self.session.execute(
                select(ApplicationModel.status, func.count(ApplicationModel.id))
                .join(JobOfferModel, JobOfferModel.id == ApplicationModel.job_offer_id)
                .where(JobOfferModel.company_id == company_id, NOT_DELETED)
                .group_by(ApplicationModel.status)
            )
            return {ApplicationStatus(status): count for status, count in result.all()}

        except SQLAlchemyError as e:
            logger.error(f"Failed to count applications of company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to count applications: {str(e)}")

    async def _get_model(self, application_id: UUID) -> Optional[ApplicationModel]:
        result = await self.session.execute(
            select(ApplicationModel).where(ApplicationModel.id == application_id, NOT_DELETED)
        )
        return result.scalar_one_or_none()

    def _to_model(self, entity: Application) -> ApplicationModel:
        model = ApplicationModel(
            id=entity.id,
            job_offer_id=entity.job_offer_id,
            applicant_user_id=entity.applicant_user_id,
            status=entity.status.value,
            cover_letter=entity.cover_letter,
            resume_url=entity.resume_url,
        )
        # Unset timestamps fall back to the server default
        if entity.created_at is not None:
            model.created_at = entity.created_at
        if entity.updated_at is not None:
            model.updated_at = entity.updated_at
        return model

    def _to_entity(self, model: ApplicationModel) -> Application:
        return Application(
            id=model.id,
            job_offer_id=model.job_offer_id,
            applicant_user_id=model.applicant_user_id,
            status=ApplicationStatus(model.status),
            cover_letter=model.cover_letter,
            resume_url=model.resume_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
