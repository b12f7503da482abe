"""
Authorization Service Interfaces
Ownership resolution and access decisions
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.enums import AuthorizationAction
from domain.value_objects import Actor, AuthorizationDecision, OwnershipChain


class IOwnershipResolver(ABC):
    """Resolves who owns a job offer or application"""

    @abstractmethod
    async def resolve_application(self, application_id: UUID) -> OwnershipChain:
        """
        Resolve Application -> JobOffer -> Company -> owner

        Raises:
            ResourceNotFoundException: application (or its chain) does not exist
        """
        pass

    @abstractmethod
    async def resolve_job_offer(self, job_offer_id: UUID) -> OwnershipChain:
        """
        Resolve JobOffer -> Company -> owner

        Raises:
            ResourceNotFoundException: job offer does not exist
        """
        pass

    @abstractmethod
    async def resolve_company(self, company_id: UUID) -> OwnershipChain:
        """
        Resolve Company -> owner

        Raises:
            ResourceNotFoundException: company does not exist
        """
        pass


class IAuthorizationGuard(ABC):
    """Pure access decision: (actor, action, resource ownership) -> decision"""

    @abstractmethod
    def authorize(
        self,
        actor: Actor,
        action: AuthorizationAction,
        resource: Optional[OwnershipChain] = None
    ) -> AuthorizationDecision:
        """Decide whether ``actor`` may perform ``action`` on ``resource``"""
        pass

    @abstractmethod
    def ensure(
        self,
        actor: Actor,
        action: AuthorizationAction,
        resource: Optional[OwnershipChain] = None
    ) -> None:
        """
        Same as authorize() but raises on deny

        Raises:
            AuthorizationException: decision was Deny
        """
        pass
