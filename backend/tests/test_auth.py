"""Tests for the static bearer credential check."""

import pytest
from brainmate.core.auth import is_valid_token
from brainmate.core.config import settings


@pytest.mark.unit
class TestBearerToken:
    """Test token comparison."""

    def test_configured_token_is_valid(self):
        assert is_valid_token(settings.API_BEARER_TOKEN) is True

    def test_wrong_token_is_invalid(self):
        assert is_valid_token("not-the-token") is False

    def test_missing_token_is_invalid(self):
        assert is_valid_token(None) is False
        assert is_valid_token("") is False


@pytest.mark.unit
class TestProtectedRoutes:
    """Test that routes require the credential."""

    def test_health_does_not_require_token(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_missing_authorization_header(self, client):
        response = client.get("/articles/feed", params={"userId": "u1"})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_wrong_bearer_token(self, client):
        response = client.post(
            "/reading/increment",
            json={"userId": "u1"},
            headers={"Authorization": "Bearer wrong"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_non_bearer_scheme_rejected(self, client):
        response = client.get(
            "/profile/u1", headers={"Authorization": f"Basic {settings.API_BEARER_TOKEN}"}
        )

        assert response.status_code == 401

    def test_valid_token_accepted(self, authenticated_client):
        response = authenticated_client.get("/profile/u1")

        assert response.status_code == 200
