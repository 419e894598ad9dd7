"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from kontactshare.config import Settings
from kontactshare.core.exceptions import UnauthorizedException
from kontactshare.core.storage import PhotoStorage
from kontactshare.database import get_db
from kontactshare.schemas.auth import AdminClaims
from kontactshare.services.auth_service import AuthService

# Security
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings object the application was created with."""
    return request.app.state.settings


def get_photo_storage(request: Request) -> PhotoStorage:
    """Photo storage bound to the configured upload directory."""
    return request.app.state.photo_storage


def get_auth_service(settings: Annotated[Settings, Depends(get_app_settings)]) -> AuthService:
    """Auth service using the application's signing configuration."""
    return AuthService(settings)


async def require_admin(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AdminClaims:
    """
    Gate admin-only operations on a valid bearer token.

    Args:
        request: Incoming request, receives the decoded claims on success
        credentials: Parsed ``Authorization: Bearer`` header, if any
        auth_service: Service used to verify the token

    Returns:
        Decoded admin claims

    Raises:
        UnauthorizedException: If the header is missing, uses another scheme,
            or carries a token that fails verification
    """
    if credentials is None:
        raise UnauthorizedException("Missing or invalid Authorization header")

    claims = auth_service.validate_token(credentials.credentials)
    if claims is None:
        raise UnauthorizedException("Invalid token")

    request.state.admin = claims
    return claims


# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
PhotoStorageDep = Annotated[PhotoStorage, Depends(get_photo_storage)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentAdmin = Annotated[AdminClaims, Depends(require_admin)]
