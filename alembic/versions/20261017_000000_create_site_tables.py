"""Create site layout, theme and playlist tables

Revision ID: create_site_tables
Revises:
Create Date: 2026-10-17

- site_layout_versions: append-only layout log
- site_layout_current: one pointer per page key
- site_theme_settings: singleton row of colour overrides
- site_video_playlist: singleton row of hero video URLs
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID


# revision identifiers, used by Alembic.
revision = "create_site_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "site_layout_versions",
        sa.Column("id", UUID(as_uuid=True), nullable=False, server_default=sa.text("gen_random_uuid()")),
        sa.Column("page_key", sa.String(50), nullable=False),
        sa.Column("layout", JSONB(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_site_layout_versions"),
    )

    # History is always read per page, newest first
    op.create_index(
        "ix_site_layout_versions_page_key_created_at",
        "site_layout_versions",
        ["page_key", "created_at"],
    )

    op.create_table(
        "site_layout_current",
        sa.Column("page_key", sa.String(50), nullable=False),
        sa.Column("version_id", UUID(as_uuid=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
        sa.PrimaryKeyConstraint("page_key", name="pk_site_layout_current"),
        sa.ForeignKeyConstraint(
            ["version_id"],
            ["site_layout_versions.id"],
            name="fk_site_layout_current_version_id_site_layout_versions",
        ),
    )

    op.create_table(
        "site_theme_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("overrides", JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
        sa.PrimaryKeyConstraint("id", name="pk_site_theme_settings"),
    )

    op.create_table(
        "site_video_playlist",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("video_urls", JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
        sa.PrimaryKeyConstraint("id", name="pk_site_video_playlist"),
    )


def downgrade() -> None:
    op.drop_table("site_video_playlist")
    op.drop_table("site_theme_settings")
    op.drop_table("site_layout_current")
    op.drop_index("ix_site_layout_versions_page_key_created_at", table_name="site_layout_versions")
    op.drop_table("site_layout_versions")
