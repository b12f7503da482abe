"""
Authorization Decision Value Object
Result of an authorization check
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthorizationDecision:
    """Allow, or Deny with a reason kept for logs"""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str = "insufficient permissions") -> "AuthorizationDecision":
        return cls(allowed=False, reason=reason)
