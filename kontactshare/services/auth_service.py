"""Authentication service for admin login and session tokens."""

from datetime import timedelta

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kontactshare.config import Settings
from kontactshare.core.exceptions import BadRequestException, InvalidCredentialsException
from kontactshare.core.security import create_access_token, decode_access_token, verify_password
from kontactshare.models.admins import admins
from kontactshare.schemas.auth import AdminClaims, AdminLoginRequest, TokenResponse

logger = structlog.get_logger()


class AuthService:
    """Authentication service for handling admin credentials and JWT operations."""

    def __init__(self, settings: Settings):
        """Initialize auth service with the signing configuration."""
        self.settings = settings

    @staticmethod
    async def get_admin_by_email(db: AsyncSession, email: str) -> dict | None:
        """Get admin account by email."""
        query = select(admins).where(admins.c.email == email)
        result = await db.execute(query)
        admin = result.mappings().first()
        return dict(admin) if admin else None

    async def login(self, db: AsyncSession, credentials: AdminLoginRequest) -> TokenResponse:
        """
        Check admin credentials and issue a session token.

        Unknown email and wrong password fail identically.

        Args:
            credentials: Email and password from the login form
            db: Database session

        Returns:
            Signed session token

        Raises:
            BadRequestException: If email or password is missing
            InvalidCredentialsException: If the credentials do not match an admin
        """
        if not credentials.email or not credentials.password:
            raise BadRequestException("Email and password are required")

        admin = await self.get_admin_by_email(db, credentials.email)
        if admin is None:
            logger.info("admin_login_failed", reason="unknown_email")
            raise InvalidCredentialsException()

        if not verify_password(credentials.password, admin["password_hash"]):
            logger.info("admin_login_failed", reason="bad_password", admin_id=str(admin["id"]))
            raise InvalidCredentialsException()

        token = self.create_token(admin)
        logger.info("admin_login_succeeded", admin_id=str(admin["id"]))
        return TokenResponse(token=token)

    def create_token(self, admin: dict, expires_delta: timedelta | None = None) -> str:
        """
        Create a session token for an admin row.

        Args:
            admin: Admin account row
            expires_delta: Optional lifetime override

        Returns:
            Encoded JWT
        """
        return create_access_token(
            self.settings,
            data={
                "sub": str(admin["id"]),
                "email": admin["email"],
                "role": admin.get("role") or "admin",
            },
            expires_delta=expires_delta,
        )

    def validate_token(self, token: str) -> AdminClaims | None:
        """
        Validate a session token and return its claims.

        Args:
            token: Bearer token to validate

        Returns:
            Claims if the token is valid, None otherwise
        """
        payload = decode_access_token(self.settings, token)
        if payload is None:
            return None

        return AdminClaims.model_validate(payload)
