"""Tests for admin auth dependencies: require_admin edge cases."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from jose import jwt

from boloflix.auth.dependencies import verify_admin_password
from boloflix.auth.jwt import create_admin_token
from boloflix.config import Settings

pytestmark = pytest.mark.asyncio


class TestRequireAdmin:
    """Test require_admin via the admin listing endpoint."""

    async def test_expired_token_rejected(self, client: AsyncClient, test_settings: Settings):
        token = create_admin_token(test_settings, expires_delta=timedelta(seconds=-1))
        response = await client.get("/subscriptions", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    async def test_token_signed_with_other_key_rejected(self, client: AsyncClient, test_settings: Settings):
        other = test_settings.model_copy(update={"jwt_secret_key": "someone-elses-key"})
        token = create_admin_token(other)
        response = await client.get("/subscriptions", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    async def test_non_admin_token_rejected(self, client: AsyncClient, test_settings: Settings):
        token = jwt.encode(
            {"sub": "ana@test.com", "type": "access"},
            test_settings.jwt_secret_key,
            algorithm=test_settings.jwt_algorithm,
        )
        response = await client.get("/subscriptions", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_valid_token_accepted(self, client: AsyncClient, admin_headers: dict):
        response = await client.get("/subscriptions", headers=admin_headers)
        assert response.status_code == 200


class TestVerifyAdminPassword:
    """Unit tests for the password comparison."""

    def test_match(self, test_settings: Settings):
        assert verify_admin_password(test_settings, test_settings.admin_password) is True

    def test_mismatch(self, test_settings: Settings):
        assert verify_admin_password(test_settings, "errada") is False

    def test_unconfigured(self, test_settings: Settings):
        test_settings.admin_password = ""
        assert verify_admin_password(test_settings, "") is False
