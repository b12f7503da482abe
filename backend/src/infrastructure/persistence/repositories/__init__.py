"""Repository implementations"""

from .application import SQLAlchemyApplicationRepository
from .notification import SQLAlchemyNotificationRepository
from .ownership import SQLAlchemyOwnershipRepository
__all__ = [
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyNotificationRepository",
    "SQLAlchemyOwnershipRepository",
]
