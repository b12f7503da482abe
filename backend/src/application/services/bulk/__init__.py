"""Bulk status updates"""

from .interfaces import IBulkCoordinator, ItemTransition
from .impl import BulkCoordinator
__all__ = ["IBulkCoordinator", "ItemTransition", "BulkCoordinator"]
