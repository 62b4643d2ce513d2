# =============================================================================
# tests/test_auth.py - Authentication Tests
# =============================================================================

from types import SimpleNamespace
from uuid import UUID

import pytest

from app.auth.dependencies import decode_access_token
from app.exceptions import AuthenticationError
from tests.conftest import TEST_JWT_SECRET, TEST_USER_ID, make_query_mock, make_token


# =============================================================================
# Token decoding
# =============================================================================

class TestDecodeAccessToken:

    def test_valid_token(self):
        user = decode_access_token(make_token(), TEST_JWT_SECRET)

        assert user.id == UUID(TEST_USER_ID)
        assert user.email == "manager@example.com"
        assert user.role == "authenticated"

    def test_expired_token(self):
        with pytest.raises(AuthenticationError, match="expired"):
            decode_access_token(make_token(expires_in=-60), TEST_JWT_SECRET)

    def test_wrong_secret(self):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(make_token(secret="another-secret"), TEST_JWT_SECRET)

    def test_wrong_audience(self):
        with pytest.raises(AuthenticationError):
            decode_access_token(make_token(audience="anon"), TEST_JWT_SECRET)

    def test_missing_subject(self):
        with pytest.raises(AuthenticationError, match="missing user ID"):
            decode_access_token(make_token(sub=None), TEST_JWT_SECRET)

    def test_malformed_subject(self):
        with pytest.raises(AuthenticationError, match="malformed"):
            decode_access_token(make_token(sub="not-a-uuid"), TEST_JWT_SECRET)


# =============================================================================
# Routes
# =============================================================================

class TestVerify:

    def test_missing_token(self, client):
        response = client.get("/api/auth/verify")

        assert response.status_code == 401
        assert response.json() == {"message": "Missing bearer token"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_valid_token(self, client, auth_headers):
        response = client.get("/api/auth/verify", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "user_id": TEST_USER_ID,
            "email": "manager@example.com",
        }

    def test_expired_token(self, client):
        headers = {"Authorization": f"Bearer {make_token(expires_in=-60)}"}

        response = client.get("/api/auth/verify", headers=headers)

        assert response.status_code == 401
        assert response.json() == {"message": "Token has expired"}


class TestLogin:

    def test_login_success(self, client, mock_supabase):
        mock_supabase.auth.sign_in_with_password.return_value = SimpleNamespace(
            session=SimpleNamespace(access_token="access-123", refresh_token="refresh-456", expires_in=3600),
            user=SimpleNamespace(id=TEST_USER_ID, email="manager@example.com", role="authenticated"),
        )

        response = client.post(
            "/api/auth/login",
            json={"email": "manager@example.com", "password": "correct horse"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["access_token"] == "access-123"
        assert body["token_type"] == "bearer"
        assert body["user"]["id"] == TEST_USER_ID
        mock_supabase.auth.sign_in_with_password.assert_called_once_with(
            {"email": "manager@example.com", "password": "correct horse"}
        )

    def test_login_rejected(self, client, mock_supabase):
        mock_supabase.auth.sign_in_with_password.side_effect = Exception("Invalid login credentials")

        response = client.post(
            "/api/auth/login",
            json={"email": "manager@example.com", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid email or password"}

    def test_login_requires_password(self, client, mock_supabase):
        response = client.post("/api/auth/login", json={"email": "manager@example.com"})

        assert response.status_code == 422
        assert "password" in response.json()["message"]


class TestMe:

    def test_profile_row(self, client, auth_headers, mock_supabase):
        mock_supabase.table.return_value = make_query_mock(
            [{"id": TEST_USER_ID, "email": "manager@example.com", "full_name": "Tran Thi Binh", "role": "hr_manager"}]
        )

        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["full_name"] == "Tran Thi Binh"
        assert response.json()["role"] == "hr_manager"
        mock_supabase.table.assert_called_with("users")

    def test_falls_back_to_token_claims(self, client, auth_headers, mock_supabase):
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "id": TEST_USER_ID,
            "email": "manager@example.com",
            "full_name": None,
            "role": "authenticated",
        }
