"""
Notification Domain Entity
Created only as a side effect of an application status transition
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..enums import NotificationKind


@dataclass(frozen=True)
class Notification:
    """Notification for a single recipient"""

    id: UUID
    recipient_user_id: UUID
    kind: NotificationKind
    title: str
    message: str
    is_read: bool = False

    created_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"Notification({self.recipient_user_id}, {self.kind.value})"
