"""Application uniqueness"""

from .interfaces import IUniquenessEnforcer
from .impl import UniquenessEnforcer
__all__ = ["IUniquenessEnforcer", "UniquenessEnforcer"]
