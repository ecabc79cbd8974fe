"""Initial schema - team, app_user, collection, collection_user.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "team",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("team_id", sa.UUID(), sa.ForeignKey("team.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_app_user_team_id", "app_user", ["team_id"])

    op.create_table(
        "collection",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("team_id", sa.UUID(), sa.ForeignKey("team.id", ondelete="CASCADE"), nullable=False),
        sa.Column("creator_id", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(20), nullable=False, server_default="atlas"),
        sa.Column("private", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("type IN ('atlas', 'journal')", name="ck_collection_type"),
    )
    op.create_index("ix_collection_team_created", "collection", ["team_id", "created_at"])

    op.create_table(
        "collection_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("collection_id", sa.UUID(), sa.ForeignKey("collection.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("permission", sa.String(20), nullable=False),
        sa.Column("created_by", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("collection_id", "user_id", name="uq_collection_user_pair"),
        sa.CheckConstraint(
            "permission IN ('read', 'read_write', 'maintainer')",
            name="ck_collection_user_permission",
        ),
    )
    op.create_index("ix_collection_user_user_id", "collection_user", ["user_id"])


def downgrade() -> None:
    op.drop_table("collection_user")
    op.drop_table("collection")
    op.drop_table("app_user")
    op.drop_table("team")
