"""
JWT Service Implementation
Turns bearer tokens into an explicit Actor (subject id + role)
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from uuid import UUID

from jose import jwt, JWTError
from loguru import logger

from core.config import settings
from core.exceptions import AuthenticationException
from domain.enums import UserRole
from domain.value_objects import Actor


class JwtService:
    """JWT service (HS256 by default)"""

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM

    def create_access_token(self, user_id: UUID, role: UserRole) -> str:
        """Create access token carrying the user's role"""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

        payload = {
            "sub": str(user_id),
            "role": UserRole(role).value,
            "exp": expire,
            "iat": now,
            "type": "access"
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict:
        """Verify and decode token"""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])

        except JWTError as e:
            logger.warning(f"JWT verification failed: {str(e)}")
            raise AuthenticationException("Invalid or expired token")

    def decode_actor(self, token: str) -> Actor:
        """Verify an access token and build the acting subject from its claims"""
        payload = self.verify_token(token)

        if payload.get("type") != "access":
            raise AuthenticationException("Invalid token type")

        try:
            return Actor(id=UUID(payload["sub"]), role=UserRole(payload["role"]))
        except (KeyError, ValueError) as e:
            logger.warning(f"JWT claims rejected: {str(e)}")
            raise AuthenticationException("Invalid token claims")
