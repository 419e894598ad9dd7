"""Tests for admin login and the bearer token guard."""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from kontactshare.config import Settings
from kontactshare.core.security import create_access_token, decode_access_token

ADMIN_EMAIL = "admin@kontactshare.com"
ADMIN_PASSWORD = "Admin@123"


@pytest.mark.asyncio
class TestAdminLogin:
    """Tests for POST /api/admin/login."""

    async def test_login_returns_token_accepted_by_guard(
        self,
        client: AsyncClient,
        test_admin: dict,
        test_settings: Settings,
    ):
        """A successful login yields a token that unlocks admin routes."""
        response = await client.post(
            "/api/admin/login",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        )

        assert response.status_code == 200
        token = response.json()["token"]

        payload = decode_access_token(test_settings, token)
        assert payload is not None
        assert payload["sub"] == str(test_admin["id"])
        assert payload["email"] == ADMIN_EMAIL
        assert payload["role"] == "admin"
        assert payload["exp"] - payload["iat"] == 8 * 3600

        stats = await client.get(
            "/api/admin/stats",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert stats.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, test_admin: dict):
        """Wrong password is rejected without a token."""
        response = await client.post(
            "/api/admin/login",
            json={"email": ADMIN_EMAIL, "password": "not-the-password"},
        )

        assert response.status_code == 401
        data = response.json()
        assert data["message"] == "Invalid credentials"
        assert "token" not in data

    async def test_login_unknown_email_matches_wrong_password(
        self, client: AsyncClient, test_admin: dict
    ):
        """Unknown email fails exactly like a wrong password."""
        response = await client.post(
            "/api/admin/login",
            json={"email": "nobody@example.com", "password": ADMIN_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    @pytest.mark.parametrize(
        "body",
        [
            {"email": ADMIN_EMAIL},
            {"password": ADMIN_PASSWORD},
            {"email": "", "password": ""},
        ],
    )
    async def test_login_missing_fields(self, client: AsyncClient, body: dict):
        """Missing email or password is a bad request."""
        response = await client.post("/api/admin/login", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Email and password are required"


@pytest.mark.asyncio
class TestAdminGuard:
    """Tests for the bearer token guard on admin routes."""

    async def test_missing_header(self, client: AsyncClient):
        """No Authorization header is rejected."""
        response = await client.get("/api/admin/stats")

        assert response.status_code == 401
        assert response.json()["message"] == "Missing or invalid Authorization header"

    async def test_wrong_scheme(self, client: AsyncClient, admin_token: str):
        """Non-Bearer schemes are rejected."""
        response = await client.get(
            "/api/admin/stats",
            headers={"Authorization": f"Basic {admin_token}"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Missing or invalid Authorization header"

    async def test_tampered_signature(self, client: AsyncClient, admin_token: str):
        """A token with an altered signature is rejected."""
        header, payload, signature = admin_token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
        response = await client.get(
            "/api/admin/stats",
            headers={"Authorization": f"Bearer {header}.{payload}.{flipped}"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    async def test_token_signed_with_other_secret(
        self, client: AsyncClient, test_admin: dict, test_settings: Settings
    ):
        """Tokens signed with a different secret are rejected."""
        other = test_settings.model_copy(update={"jwt_secret_key": "someone-else"})
        token = create_access_token(other, data={"sub": str(test_admin["id"])})

        response = await client.get(
            "/api/admin/stats",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    async def test_expired_token(self, client: AsyncClient, expired_token: str):
        """Expired tokens are rejected."""
        response = await client.get(
            "/api/admin/stats",
            headers={"Authorization": f"Bearer {expired_token}"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    async def test_malformed_token(self, client: AsyncClient):
        """Garbage tokens are rejected."""
        response = await client.get(
            "/api/admin/stats",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401


class TestTokenService:
    """Unit tests for token issuance and decoding."""

    def test_round_trip_keeps_subject_and_role(self, test_settings: Settings):
        token = create_access_token(
            test_settings,
            data={"sub": "admin-1", "email": "a@example.com", "role": "superadmin"},
        )

        payload = decode_access_token(test_settings, token)

        assert payload is not None
        assert payload["sub"] == "admin-1"
        assert payload["role"] == "superadmin"

    def test_expired_token_decodes_to_none(self, test_settings: Settings):
        token = create_access_token(
            test_settings,
            data={"sub": "admin-1"},
            expires_delta=timedelta(seconds=-1),
        )

        assert decode_access_token(test_settings, token) is None

    def test_token_without_subject_is_rejected(self, test_settings: Settings):
        token = create_access_token(test_settings, data={"email": "a@example.com"})

        assert decode_access_token(test_settings, token) is None
