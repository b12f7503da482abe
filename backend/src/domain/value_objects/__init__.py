"""Value Objects - Immutable objects defined by their attributes"""

from .actor import Actor
from .authorization_decision import AuthorizationDecision
from .ownership import OwnershipChain
from .reservation import Reservation, ReservationStatus
from .bulk_result import BulkTransitionResult
__all__ = [
    "Actor",
    "AuthorizationDecision",
    "OwnershipChain",
    "Reservation",
    "ReservationStatus",
    "BulkTransitionResult",
]
