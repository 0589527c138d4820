"""Initial migration

Revision ID: 001
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

JSONDocument = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _string(length: int) -> sqlmodel.sql.sqltypes.AutoString:
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def upgrade() -> None:
    # 1. Users
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("hashed_password", _string(255), nullable=False),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("role", _string(50), nullable=False, server_default="admin"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # 2. Projects (JSON documents: specifications, images, documents, notes)
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", _string(255), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("client_name", _string(255), nullable=True),
        sa.Column("client_email", _string(255), nullable=True),
        sa.Column("client_phone", _string(50), nullable=True),
        sa.Column("status", _string(50), nullable=False, server_default="pending"),
        sa.Column("pool_type", _string(100), nullable=True),
        sa.Column("pool_size", _string(100), nullable=True),
        sa.Column("budget", sa.Numeric(12, 2), nullable=True),
        sa.Column("location", _string(255), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=True),
        sa.Column("completion_date", sa.DateTime(), nullable=True),
        sa.Column("specifications", JSONDocument, nullable=True),
        sa.Column("images", JSONDocument, nullable=True),
        sa.Column("documents", JSONDocument, nullable=True),
        sa.Column("notes", JSONDocument, nullable=True),
        sa.Column("slug", _string(255), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_projects_title", "projects", ["title"], unique=False)
    op.create_index("ix_projects_status", "projects", ["status"], unique=False)
    op.create_index("ix_projects_created_at", "projects", ["created_at"], unique=False)

    # 3. Project timeline updates
    op.create_table(
        "project_updates",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("title", _string(255), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("status", _string(50), nullable=True),
        sa.Column("images", JSONDocument, nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_project_updates_project_id", "project_updates", ["project_id"], unique=False
    )

    # 4. Contacts (leads)
    op.create_table(
        "contacts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("pool_type", _string(100), nullable=True),
        sa.Column("message", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("status", _string(50), nullable=False, server_default="new"),
        sa.Column("assigned_to", sa.Uuid(), nullable=True),
        sa.Column("notes", JSONDocument, nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["assigned_to"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contacts_email", "contacts", ["email"], unique=False)
    op.create_index("ix_contacts_status", "contacts", ["status"], unique=False)
    op.create_index("ix_contacts_created_at", "contacts", ["created_at"], unique=False)

    # 5. Professional info pages and sections
    op.create_table(
        "professional_info_pages",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("slug", _string(255), nullable=False),
        sa.Column("title", _string(255), nullable=False),
        sa.Column("title_en", _string(255), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("description_en", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("content", JSONDocument, nullable=False),
        sa.Column("meta_title", _string(255), nullable=True),
        sa.Column("meta_title_en", _string(255), nullable=True),
        sa.Column("meta_description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("meta_description_en", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_professional_info_pages_slug", "professional_info_pages", ["slug"], unique=True
    )

    op.create_table(
        "content_sections",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("page_id", sa.Uuid(), nullable=False),
        sa.Column("section_type", _string(50), nullable=False),
        sa.Column("title", _string(255), nullable=True),
        sa.Column("title_en", _string(255), nullable=True),
        sa.Column("content", JSONDocument, nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["page_id"], ["professional_info_pages.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_content_sections_page_id", "content_sections", ["page_id"], unique=False)

    op.create_table(
        "content_media",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("section_id", sa.Uuid(), nullable=False),
        sa.Column("media_type", _string(50), nullable=False),
        sa.Column("file_name", _string(255), nullable=False),
        sa.Column("original_name", _string(255), nullable=False),
        sa.Column("file_path", _string(1024), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=True),
        sa.Column("mime_type", _string(100), nullable=False),
        sa.Column("alt_text", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("alt_text_en", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("caption", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("caption_en", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["section_id"], ["content_sections.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_content_media_section_id", "content_media", ["section_id"], unique=False)

    # 6. Taxonomy
    op.create_table(
        "content_categories",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("name_en", _string(255), nullable=False),
        sa.Column("slug", _string(255), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("description_en", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("icon", _string(255), nullable=True),
        sa.Column("color", _string(20), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    op.create_table(
        "content_tags",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("name_en", _string(255), nullable=False),
        sa.Column("slug", _string(255), nullable=False),
        sa.Column("color", _string(20), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    op.create_table(
        "page_tags",
        sa.Column("page_id", sa.Uuid(), nullable=False),
        sa.Column("tag_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["page_id"], ["professional_info_pages.id"]),
        sa.ForeignKeyConstraint(["tag_id"], ["content_tags.id"]),
        sa.PrimaryKeyConstraint("page_id", "tag_id"),
    )

    op.create_table(
        "page_categories",
        sa.Column("page_id", sa.Uuid(), nullable=False),
        sa.Column("category_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["page_id"], ["professional_info_pages.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["content_categories.id"]),
        sa.PrimaryKeyConstraint("page_id", "category_id"),
    )


def downgrade() -> None:
    op.drop_table("page_categories")
    op.drop_table("page_tags")
    op.drop_table("content_tags")
    op.drop_table("content_categories")
    op.drop_index("ix_content_media_section_id", table_name="content_media")
    op.drop_table("content_media")
    op.drop_index("ix_content_sections_page_id", table_name="content_sections")
    op.drop_table("content_sections")
    op.drop_index("ix_professional_info_pages_slug", table_name="professional_info_pages")
    op.drop_table("professional_info_pages")
    op.drop_index("ix_contacts_created_at", table_name="contacts")
    op.drop_index("ix_contacts_status", table_name="contacts")
    op.drop_index("ix_contacts_email", table_name="contacts")
    op.drop_table("contacts")
    op.drop_index("ix_project_updates_project_id", table_name="project_updates")
    op.drop_table("project_updates")
    op.drop_index("ix_projects_created_at", table_name="projects")
    op.drop_index("ix_projects_status", table_name="projects")
    op.drop_index("ix_projects_title", table_name="projects")
    op.drop_table("projects")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
