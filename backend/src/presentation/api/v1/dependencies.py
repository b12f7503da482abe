"""
FastAPI Dependencies
Current actor resolved from the bearer token
"""
from typing import Optional

from fastapi import Depends, HTTPException, status, Header

from core.exceptions import AuthenticationException
from domain.value_objects import Actor
from infrastructure.security.jwt_service import JwtService
from .container import get_jwt_service


async def get_current_actor(
    authorization: Optional[str] = Header(None),
    jwt_service: JwtService = Depends(get_jwt_service)
) -> Actor:
    """
    Get the acting subject (id + role) from the JWT token

    Usage:
        @router.get("/protected")
        async def protected_route(actor: Actor = Depends(get_current_actor)):
            ...
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Extract token from "Bearer <token>"
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.decode_actor(parts[1])

    except AuthenticationException:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
