"""
Reservation Value Object
Outcome of claiming the (job offer, applicant) uniqueness slot
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.application import Application


class ReservationStatus(str, Enum):
    RESERVED = "reserved"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class Reservation:
    """Reserved (with the created application) or AlreadyExists"""

    status: ReservationStatus
    application: Optional["Application"] = None

    @property
    def reserved(self) -> bool:
        return self.status == ReservationStatus.RESERVED

    @classmethod
    def already_exists(cls) -> "Reservation":
        return cls(status=ReservationStatus.ALREADY_EXISTS)
