"""
Actor Value Object
Who is performing an operation, as supplied by authentication
"""
from dataclasses import dataclass
from uuid import UUID

from ..enums import UserRole


@dataclass(frozen=True)
class Actor:
    """Authenticated subject (id + role) passed explicitly to every operation"""

    id: UUID
    role: UserRole

    def __post_init__(self):
        """Normalize role values coming from token claims"""
        if not isinstance(self.role, UserRole):
            object.__setattr__(self, "role", UserRole(self.role))

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __str__(self) -> str:
        return f"Actor({self.id}, role={self.role.value})"
