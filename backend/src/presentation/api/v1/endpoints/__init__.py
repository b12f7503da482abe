"""
API V1 Endpoints Package
Exports routers used by main app
"""
from .applications import router as applications_router
from .notifications import router as notifications_router

__all__ = [
    "applications_router",
    "notifications_router",
]
