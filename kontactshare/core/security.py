"""Security utilities for JWT and password handling."""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from kontactshare.config import Settings

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed or unrecognised hash in the admins table
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(
    settings: Settings,
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed admin session token.

    Args:
        settings: Settings carrying the signing secret and algorithm
        data: Claims to encode (``sub``, ``email``, ``role``)
        expires_delta: Optional lifetime, defaults to the admin session window

    Returns:
        Encoded JWT token
    """
    to_encode = data.copy()
    now = datetime.now(UTC)

    if expires_delta is None:
        expires_delta = timedelta(hours=settings.admin_token_expire_hours)

    to_encode.update(
        {
            "exp": now + expires_delta,
            "iat": now,
        }
    )

    return jwt.encode(
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(settings: Settings, token: str) -> dict[str, Any] | None:
    """
    Decode and validate a JWT access token.

    Signature, structure and expiry are all checked; any failure yields None.

    Args:
        settings: Settings carrying the signing secret and algorithm
        token: JWT token to decode

    Returns:
        Decoded payload or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    if not isinstance(payload.get("sub"), str):
        return None

    return payload
