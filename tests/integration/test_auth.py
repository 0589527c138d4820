"""Authentication endpoint tests: login, cookie/Bearer auth, password change."""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from src.poolsite.core.config import get_settings
from src.poolsite.core.security import create_access_token
from src.poolsite.models import User
from tests.factories import DEFAULT_TEST_PASSWORD, UserFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestLogin:
    async def test_login_returns_token_and_sets_cookie(
        self, client: AsyncClient, admin_user: User
    ):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_user.email, "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == admin_user.email
        assert data["token_type"] == "bearer"
        assert "hashed_password" not in data["user"]

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{get_settings().auth_cookie_name}=")
        assert "HttpOnly" in set_cookie
        assert "samesite=strict" in set_cookie.lower()

    async def test_wrong_password(self, client: AsyncClient, admin_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_user.email, "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    async def test_inactive_user_cannot_login(self, client: AsyncClient, db_session):
        user = UserFactory.inactive()
        db_session.add(user)
        await db_session.commit()

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": user.email, "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 401

    async def test_login_response_is_not_cached(self, client: AsyncClient, admin_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_user.email, "password": DEFAULT_TEST_PASSWORD},
        )

        assert "no-store" in response.headers["cache-control"]


class TestCurrentUser:
    async def test_me_with_bearer_token(
        self, client: AsyncClient, admin_user: User, admin_headers: dict
    ):
        response = await client.get("/api/v1/auth/me", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["user"]["id"] == str(admin_user.id)

    async def test_me_with_cookie(self, client: AsyncClient, admin_user: User):
        token = create_access_token(admin_user.id, admin_user.email, admin_user.role)
        cookie = f"{get_settings().auth_cookie_name}={token}"

        response = await client.get("/api/v1/auth/me", headers={"Cookie": cookie})

        assert response.status_code == 200
        assert response.json()["user"]["email"] == admin_user.email

    async def test_me_without_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    async def test_expired_token(self, client: AsyncClient, admin_user: User):
        token = create_access_token(
            admin_user.id, admin_user.email, admin_user.role, expires_delta=timedelta(seconds=-1)
        )

        response = await client.get(
            "/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    async def test_deactivated_user_token_rejected(
        self, client: AsyncClient, db_session, auth_headers
    ):
        user = UserFactory.inactive()
        db_session.add(user)
        await db_session.commit()

        response = await client.get("/api/v1/auth/me", headers=auth_headers(user))

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found or inactive"

    async def test_editor_cannot_reach_admin_routes(
        self, client: AsyncClient, editor_user: User, auth_headers
    ):
        response = await client.get("/api/v1/projects", headers=auth_headers(editor_user))

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin access required"


class TestLogoutAndPassword:
    async def test_logout_clears_cookie(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/logout")

        assert response.status_code == 200
        assert response.json()["message"] == "Logout successful"
        assert get_settings().auth_cookie_name in response.headers["set-cookie"]

    async def test_change_password(
        self, client: AsyncClient, admin_user: User, admin_headers: dict
    ):
        response = await client.post(
            "/api/v1/auth/change-password",
            headers=admin_headers,
            json={"current_password": DEFAULT_TEST_PASSWORD, "new_password": "new-secret-42"},
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password changed successfully"

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_user.email, "password": "new-secret-42"},
        )
        assert login.status_code == 200

    async def test_change_password_wrong_current(
        self, client: AsyncClient, admin_headers: dict
    ):
        response = await client.post(
            "/api/v1/auth/change-password",
            headers=admin_headers,
            json={"current_password": "not-it", "new_password": "new-secret-42"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Current password is incorrect"
