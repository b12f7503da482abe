"""Application operations facade"""

from .interfaces import IApplicationService
from .impl import ApplicationService
__all__ = ["IApplicationService", "ApplicationService"]
