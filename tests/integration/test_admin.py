"""Dashboard statistics and back-office user management tests."""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.models import User
from tests.factories import ContactFactory, ProjectFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestDashboardStats:
    async def test_counts(
        self, client: AsyncClient, db_session: AsyncSession, admin_headers: dict
    ):
        db_session.add_all(
            [
                ProjectFactory.build(status="completed", pool_type="concrete", is_public=True),
                ProjectFactory.build(status="completed", pool_type="concrete", featured=True),
                ProjectFactory.build(status="in_progress", pool_type="fiberglass"),
                ContactFactory.build(),
                ContactFactory.build(status="converted"),
            ]
        )
        await db_session.commit()

        response = await client.get("/api/v1/admin/stats", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["projects"]["total"] == 3
        assert data["projects"]["completed"] == 2
        assert data["projects"]["in_progress"] == 1
        assert data["projects"]["pending"] == 0
        assert data["projects"]["public"] == 1
        assert data["projects"]["featured"] == 1
        assert data["contacts"] == {
            "total": 2,
            "new": 1,
            "contacted": 0,
            "qualified": 0,
            "converted": 1,
        }
        assert data["projects_by_type"][0] == {"pool_type": "concrete", "count": 2}
        assert len(data["recent_projects"]) == 3
        assert sum(m["count"] for m in data["monthly_stats"]) == 3

    async def test_admin_responses_are_not_cached(self, client: AsyncClient, admin_headers: dict):
        response = await client.get("/api/v1/admin/stats", headers=admin_headers)

        assert "no-store" in response.headers["cache-control"]


class TestUserManagement:
    async def test_create_and_list_users(
        self, client: AsyncClient, admin_user: User, admin_headers: dict
    ):
        created = await client.post(
            "/api/v1/admin/users",
            headers=admin_headers,
            json={
                "email": "editor@example.com",
                "password": "editor-pass",
                "name": "Site Editor",
                "role": "editor",
            },
        )
        assert created.status_code == 201
        assert created.json()["role"] == "editor"

        listed = await client.get("/api/v1/admin/users", headers=admin_headers)
        emails = {u["email"] for u in listed.json()}
        assert emails == {admin_user.email, "editor@example.com"}

    async def test_duplicate_email(
        self, client: AsyncClient, admin_user: User, admin_headers: dict
    ):
        response = await client.post(
            "/api/v1/admin/users",
            headers=admin_headers,
            json={"email": admin_user.email, "password": "another-pass", "name": "Dup"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "User with this email already exists"

    async def test_deactivate_user(
        self, client: AsyncClient, editor_user: User, admin_headers: dict, auth_headers
    ):
        response = await client.put(
            f"/api/v1/admin/users/{editor_user.id}",
            headers=admin_headers,
            json={"is_active": False},
        )
        assert response.status_code == 200
        assert response.json()["is_active"] is False

        me = await client.get("/api/v1/auth/me", headers=auth_headers(editor_user))
        assert me.status_code == 401

    async def test_update_unknown_user(self, client: AsyncClient, admin_headers: dict):
        response = await client.put(
            f"/api/v1/admin/users/{uuid4()}", headers=admin_headers, json={"name": "Ghost"}
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"
