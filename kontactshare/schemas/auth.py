"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field


class AdminLoginRequest(BaseModel):
    """Admin login request; presence is checked by the service."""

    email: str | None = None
    password: str | None = None


class TokenResponse(BaseModel):
    """Admin session token."""

    token: str


class AdminClaims(BaseModel):
    """Claims carried by a verified admin session token."""

    sub: str
    email: str | None = None
    role: str = "admin"
    exp: int | None = None
    iat: int | None = None


class AdminCreate(BaseModel):
    """Admin account seeding input."""

    email: EmailStr
    password: str = Field(..., min_length=8)
    role: str = "admin"
