"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "regions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("identifier", sa.String(64), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("center", sa.JSON, nullable=False),
        sa.Column("coordinates", sa.JSON, nullable=False),
        sa.Column("base_risk_score", sa.Float, nullable=False),
    )
    op.create_index("ix_regions_identifier", "regions", ["identifier"], unique=True)

    op.create_table(
        "parameter_sets",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("user_id", sa.Integer),
        sa.Column("parameters", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_parameter_sets_user_id", "parameter_sets", ["user_id"])

    op.create_table(
        "scenarios",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("user_id", sa.Integer),
        sa.Column("region_identifier", sa.String(64), nullable=False),
        sa.Column("parameters", sa.JSON, nullable=False),
        sa.Column("interventions", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_scenarios_user_id", "scenarios", ["user_id"])

    op.create_table(
        "kv_entries",
        sa.Column("key", sa.String(128), primary_key=True),
        sa.Column("value", sa.JSON),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

def downgrade():
    op.drop_table("kv_entries")

    op.drop_index("ix_scenarios_user_id", table_name="scenarios")
    op.drop_table("scenarios")

    op.drop_index("ix_parameter_sets_user_id", table_name="parameter_sets")
    op.drop_table("parameter_sets")

    op.drop_index("ix_regions_identifier", table_name="regions")
    op.drop_table("regions")
