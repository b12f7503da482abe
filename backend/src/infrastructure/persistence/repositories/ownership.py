"""
Ownership Repository Implementation
Application -> JobOffer -> Company -> owner in a single joined query
"""
from typing import Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RepositoryException
from application.repositories.interfaces import IOwnershipRepository
from domain.value_objects import OwnershipChain
from infrastructure.persistence.models import ApplicationModel, CompanyModel, JobOfferModel


class SQLAlchemyOwnershipRepository(IOwnershipRepository):
    """SQLAlchemy implementation of ownership lookups"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def resolve_application_chain(self, application_id: UUID) -> Optional[OwnershipChain]:
        try:
            result = await self.session.execute(
                select(
                    ApplicationModel.id,
                    ApplicationModel.applicant_user_id,
                    JobOfferModel.id,
                    JobOfferModel.is_active,
                    CompanyModel.id,
                    CompanyModel.owner_user_id,
                )
                .select_from(ApplicationModel)
                .join(JobOfferModel, JobOfferModel.id == ApplicationModel.job_offer_id)
                .join(CompanyModel, CompanyModel.id == JobOfferModel.company_id)
                .where(ApplicationModel.id == application_id, ApplicationModel.deleted_at.is_(None))
            )
            row = result.one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Failed to resolve ownership of application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to resolve ownership: {str(e)}")

        if row is None:
            return None

        app_id, applicant_user_id, job_offer_id, is_active, company_id, owner_user_id = row
        return OwnershipChain(
            job_offer_id=job_offer_id,
            company_id=company_id,
            owner_user_id=owner_user_id,
            job_offer_is_active=bool(is_active),
            application_id=app_id,
            applicant_user_id=applicant_user_id,
        )

    async def resolve_job_offer_chain(self, job_offer_id: UUID) -> Optional[OwnershipChain]:
        try:
            result = await self.session.execute(
                select(
                    JobOfferModel.id,
                    JobOfferModel.is_active,
                    CompanyModel.id,
                    CompanyModel.owner_user_id,
                )
                .select_from(JobOfferModel)
                .join(CompanyModel, CompanyModel.id == JobOfferModel.company_id)
                .where(JobOfferModel.id == job_offer_id)
            )
            row = result.one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Failed to resolve ownership of job offer {job_offer_id}: {str(e)}")
            raise RepositoryException(f"Failed to resolve ownership: {str(e)}")

        if row is None:
            return None

        offer_id, is_active, company_id, owner_user_id = row
        return OwnershipChain(
            job_offer_id=offer_id,
            company_id=company_id,
            owner_user_id=owner_user_id,
            job_offer_is_active=bool(is_active),
        )

    async def resolve_company_chain(self, company_id: UUID) -> Optional[OwnershipChain]:
        try:
            result = await self.session.execute(
                select(CompanyModel.id, CompanyModel.owner_user_id)
                .where(CompanyModel.id == company_id)
            )
            row = result.one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Failed to resolve ownership of company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to resolve ownership: {str(e)}")

        if row is None:
            return None

        resolved_id, owner_user_id = row
        return OwnershipChain(company_id=resolved_id, owner_user_id=owner_user_id)
