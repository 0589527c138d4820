"""Project, contact and content factories."""

from uuid import uuid4

from polyfactory import Use

from src.poolsite.models import (
    Contact,
    ContentSection,
    ContactStatus,
    ProfessionalInfoPage,
    Project,
    ProjectStatus,
)
from tests.factories.base import BaseFactory, short_id, utc_now


class ProjectFactory(BaseFactory):
    """Project with empty JSON documents; tests seed the documents they need."""

    __model__ = Project

    id = Use(uuid4)
    title = Use(lambda: f"Pool project {short_id()}")
    description = "Backyard pool"
    client_name = "Dana Levi"
    client_email = Use(lambda: f"client_{short_id()}@example.com")
    client_phone = None
    status = ProjectStatus.PENDING.value
    pool_type = "concrete"
    pool_size = "8x4"
    budget = None
    location = "Tel Aviv"
    start_date = None
    completion_date = None
    specifications = None
    images = None
    documents = None
    notes = None
    slug = Use(lambda: f"pool-project-{short_id()}")
    is_public = False
    featured = False
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
    created_by = None


class ContactFactory(BaseFactory):
    __model__ = Contact

    id = Use(uuid4)
    name = "Noa Cohen"
    email = Use(lambda: f"lead_{short_id()}@example.com")
    phone = "050-0000000"
    pool_type = "infinity"
    message = "Interested in a pool for our garden"
    status = ContactStatus.NEW.value
    assigned_to = None
    notes = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class PageFactory(BaseFactory):
    __model__ = ProfessionalInfoPage

    id = Use(uuid4)
    slug = Use(lambda: f"page-{short_id()}")
    title = "מידע מקצועי"
    title_en = "Professional info"
    description = None
    description_en = None
    content = Use(list)
    meta_title = None
    meta_title_en = None
    meta_description = None
    meta_description_en = None
    is_active = True
    sort_order = 0
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class SectionFactory(BaseFactory):
    __model__ = ContentSection

    id = Use(uuid4)
    page_id = None
    section_type = "text"
    title = "Section"
    title_en = "Section"
    content = Use(lambda: {"text": "Body"})
    sort_order = 0
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
