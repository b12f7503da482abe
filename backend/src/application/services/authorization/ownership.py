"""
Ownership Resolver Implementation
Always re-derives ownership from the stored chain; caller-supplied owner ids are never used.
"""
from uuid import UUID

from core.exceptions import ResourceNotFoundException
from application.repositories.interfaces import IOwnershipRepository
from domain.value_objects import OwnershipChain
from .interfaces import IOwnershipResolver


class OwnershipResolver(IOwnershipResolver):
    """Ownership resolver backed by a single joined lookup"""

    def __init__(self, ownership_repository: IOwnershipRepository):
        self.ownership_repo = ownership_repository

    async def resolve_application(self, application_id: UUID) -> OwnershipChain:
        chain = await self.ownership_repo.resolve_application_chain(application_id)
        if chain is None:
            raise ResourceNotFoundException("Application", str(application_id))
        return chain

    async def resolve_job_offer(self, job_offer_id: UUID) -> OwnershipChain:
        chain = await self.ownership_repo.resolve_job_offer_chain(job_offer_id)
        if chain is None:
            raise ResourceNotFoundException("JobOffer", str(job_offer_id))
        return chain

    async def resolve_company(self, company_id: UUID) -> OwnershipChain:
        chain = await self.ownership_repo.resolve_company_chain(company_id)
        if chain is None:
            raise ResourceNotFoundException("Company", str(company_id))
        return chain
