"""
Authorization Guard Implementation
First matching rule wins:

1. admin may do everything
2. create-application: applicants only
3. read-own-application: the applicant of the application
4. update-application-status / read-job-applications /
   read-company-applications: company rep owning the company
5. update-application-content / delete-application: the applicant, acting
   as applicant
6. anything else is denied
"""
from typing import Optional

from loguru import logger

from core.exceptions import AuthorizationException
from domain.enums import AuthorizationAction, UserRole
from domain.value_objects import Actor, AuthorizationDecision, OwnershipChain
from .interfaces import IAuthorizationGuard


COMPANY_OWNER_ACTIONS = frozenset({
    AuthorizationAction.UPDATE_APPLICATION_STATUS,
    AuthorizationAction.READ_JOB_APPLICATIONS,
    AuthorizationAction.READ_COMPANY_APPLICATIONS,
})

APPLICANT_OWNER_ACTIONS = frozenset({
    AuthorizationAction.UPDATE_APPLICATION_CONTENT,
    AuthorizationAction.DELETE_APPLICATION,
})


class AuthorizationGuard(IAuthorizationGuard):
    """Role and ownership based authorization"""

    def authorize(
        self,
        actor: Actor,
        action: AuthorizationAction,
        resource: Optional[OwnershipChain] = None
    ) -> AuthorizationDecision:
        if actor.is_admin:
            return AuthorizationDecision.allow()

        if action == AuthorizationAction.CREATE_APPLICATION:
            if actor.role == UserRole.APPLICANT:
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(f"role {actor.role.value} cannot apply to job offers")

        if resource is None:
            return AuthorizationDecision.deny(f"no resource supplied for {action.value}")

        if action == AuthorizationAction.READ_OWN_APPLICATION:
            if resource.is_applicant(actor.id):
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny("not the applicant of this application")

        if action in COMPANY_OWNER_ACTIONS:
            if actor.role == UserRole.COMPANY_REP and resource.is_owned_by(actor.id):
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(
                f"user {actor.id} does not own company {resource.company_id}"
            )

        if action in APPLICANT_OWNER_ACTIONS:
            if actor.role == UserRole.APPLICANT and resource.is_applicant(actor.id):
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny("not the applicant of this application")

        return AuthorizationDecision.deny()

    def ensure(
        self,
        actor: Actor,
        action: AuthorizationAction,
        resource: Optional[OwnershipChain] = None
    ) -> None:
        decision = self.authorize(actor, action, resource)
        if not decision.allowed:
            logger.warning(f"Denied {action.value} for {actor}: {decision.reason}")
            raise AuthorizationException(decision.reason)
