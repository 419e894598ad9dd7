"""Admin authentication endpoints."""

from fastapi import APIRouter, status

from kontactshare.dependencies import AuthServiceDep, DatabaseSession
from kontactshare.schemas.auth import AdminLoginRequest, TokenResponse

router = APIRouter()


@router.post(
    "/admin/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Admin login",
)
async def admin_login(
    credentials: AdminLoginRequest,
    db: DatabaseSession,
    auth_service: AuthServiceDep,
) -> TokenResponse:
    """
    Exchange admin email and password for an 8 hour bearer token.

    There is no logout; the token simply expires.
    """
    return await auth_service.login(db, credentials)
