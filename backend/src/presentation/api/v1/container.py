"""
Dependency Injection Container
Manages service instances
"""
from application.services.applications import IApplicationService, ApplicationService
from application.services.authorization import AuthorizationGuard, IAuthorizationGuard
from infrastructure.persistence.unit_of_work import SQLAlchemyUnitOfWork
from infrastructure.security.jwt_service import JwtService


# Singleton instances
_jwt_service: JwtService | None = None
_authorization_guard: IAuthorizationGuard | None = None
_application_service: IApplicationService | None = None


def get_jwt_service() -> JwtService:
    """Get JWT service instance (singleton)"""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JwtService()
    return _jwt_service


def get_authorization_guard() -> IAuthorizationGuard:
    """Get authorization guard instance (singleton, stateless)"""
    global _authorization_guard
    if _authorization_guard is None:
        _authorization_guard = AuthorizationGuard()
    return _authorization_guard


def get_application_service() -> IApplicationService:
    """Get application service instance (singleton; opens a unit of work per operation)"""
    global _application_service
    if _application_service is None:
        _application_service = ApplicationService(
            uow_factory=SQLAlchemyUnitOfWork,
            guard=get_authorization_guard(),
        )
    return _application_service
