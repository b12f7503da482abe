"""Authorization services"""

from .interfaces import IAuthorizationGuard, IOwnershipResolver
from .guard import AuthorizationGuard
from .ownership import OwnershipResolver
__all__ = ["IAuthorizationGuard", "IOwnershipResolver", "AuthorizationGuard", "OwnershipResolver"]
