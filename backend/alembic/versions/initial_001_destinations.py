"""Create destinations table

Revision ID: initial_001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision = "initial_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "destinations",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("images", JSONB, nullable=False, server_default="[]"),
        sa.Column("climate", sa.String(20), nullable=False),
        sa.Column("budget_level", sa.String(20), nullable=False),
        sa.Column("activities", JSONB, nullable=False, server_default="[]"),
        sa.Column("best_time_to_visit", JSONB, nullable=False, server_default="[]"),
        sa.Column("accommodations", JSONB, nullable=False, server_default="[]"),
        sa.Column("rating_average", sa.Float, nullable=False, server_default="0"),
        sa.Column("rating_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_destinations_climate", "destinations", ["climate"])
    op.create_index("ix_destinations_budget_level", "destinations", ["budget_level"])


def downgrade() -> None:
    op.drop_index("ix_destinations_budget_level", table_name="destinations")
    op.drop_index("ix_destinations_climate", table_name="destinations")
    op.drop_table("destinations")
