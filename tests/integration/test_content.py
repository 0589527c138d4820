"""Professional info pages and content section tests."""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.models import ProfessionalInfoPage
from tests.factories import PageFactory, SectionFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def page(db_session: AsyncSession) -> ProfessionalInfoPage:
    page = PageFactory.build(slug="pool-safety")
    db_session.add(page)
    await db_session.commit()
    return page


class TestPages:
    async def test_create_page(self, client: AsyncClient, admin_headers: dict):
        response = await client.post(
            "/api/v1/professional-info",
            headers=admin_headers,
            json={"slug": "maintenance", "title": "תחזוקה", "title_en": "Maintenance"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["slug"] == "maintenance"
        assert body["data"]["is_active"] is True

    async def test_duplicate_slug(
        self, client: AsyncClient, page: ProfessionalInfoPage, admin_headers: dict
    ):
        response = await client.post(
            "/api/v1/professional-info",
            headers=admin_headers,
            json={"slug": page.slug, "title": "כפילות", "title_en": "Duplicate"},
        )

        assert response.status_code == 409

    async def test_public_list_hides_inactive(
        self, client: AsyncClient, db_session: AsyncSession, admin_headers: dict
    ):
        db_session.add_all(
            [
                PageFactory.build(slug="visible", sort_order=1),
                PageFactory.build(slug="hidden", is_active=False),
            ]
        )
        await db_session.commit()

        public = await client.get("/api/v1/professional-info")
        assert [p["slug"] for p in public.json()["data"]] == ["visible"]

        everything = await client.get("/api/v1/professional-info/admin/all", headers=admin_headers)
        assert {p["slug"] for p in everything.json()["data"]} == {"visible", "hidden"}

    async def test_page_by_slug_renders_active_sections(
        self, client: AsyncClient, db_session: AsyncSession, page: ProfessionalInfoPage
    ):
        db_session.add_all(
            [
                SectionFactory.build(page_id=page.id, title="Second", sort_order=2),
                SectionFactory.build(page_id=page.id, title="First", sort_order=1),
                SectionFactory.build(page_id=page.id, title="Draft", is_active=False),
            ]
        )
        await db_session.commit()

        response = await client.get("/api/v1/professional-info/pool-safety")

        assert response.status_code == 200
        assert [s["title"] for s in response.json()["data"]["content"]] == ["First", "Second"]

    async def test_delete_deactivates(
        self, client: AsyncClient, page: ProfessionalInfoPage, admin_headers: dict
    ):
        response = await client.delete(
            f"/api/v1/professional-info/{page.id}", headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["data"]["is_active"] is False

        missing = await client.get("/api/v1/professional-info/pool-safety")
        assert missing.status_code == 404
        assert missing.json()["detail"] == "Page not found"


class TestSections:
    async def test_create_section(
        self, client: AsyncClient, page: ProfessionalInfoPage, admin_headers: dict
    ):
        response = await client.post(
            "/api/v1/content-sections",
            headers=admin_headers,
            json={
                "page_id": str(page.id),
                "section_type": "hero",
                "title": "Swim safely",
                "content": {"image": "/hero.jpg"},
            },
        )

        assert response.status_code == 201
        assert response.json()["data"]["section_type"] == "hero"

    async def test_create_section_for_unknown_page(self, client: AsyncClient, admin_headers: dict):
        response = await client.post(
            "/api/v1/content-sections",
            headers=admin_headers,
            json={"page_id": str(uuid4()), "section_type": "text", "content": {}},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Page not found"

    async def test_reorder(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        page: ProfessionalInfoPage,
        admin_headers: dict,
    ):
        a = SectionFactory.build(page_id=page.id, title="A", sort_order=0)
        b = SectionFactory.build(page_id=page.id, title="B", sort_order=1)
        db_session.add_all([a, b])
        await db_session.commit()

        response = await client.put(
            f"/api/v1/content-sections/reorder/{page.id}",
            headers=admin_headers,
            json={"section_ids": [str(b.id), str(a.id), str(uuid4())]},
        )

        assert response.status_code == 200
        assert [s["title"] for s in response.json()["data"]] == ["B", "A"]

    async def test_update_and_soft_delete(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        page: ProfessionalInfoPage,
        admin_headers: dict,
    ):
        section = SectionFactory.build(page_id=page.id)
        db_session.add(section)
        await db_session.commit()

        updated = await client.put(
            f"/api/v1/content-sections/{section.id}",
            headers=admin_headers,
            json={"title": "Renamed"},
        )
        assert updated.json()["data"]["title"] == "Renamed"

        deleted = await client.delete(
            f"/api/v1/content-sections/{section.id}", headers=admin_headers
        )
        assert deleted.json()["data"]["is_active"] is False

        listed = await client.get(f"/api/v1/content-sections/page/{page.id}")
        assert listed.json()["data"] == []

    async def test_unknown_section(self, client: AsyncClient):
        response = await client.get(f"/api/v1/content-sections/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Section not found"
