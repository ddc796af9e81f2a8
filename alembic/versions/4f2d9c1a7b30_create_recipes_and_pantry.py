"""create recipes and pantry tables

Revision ID: 4f2d9c1a7b30
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2d9c1a7b30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("meal_type", sa.String(length=50), nullable=False),
        sa.Column("ingredients", sa.Text(), nullable=False),
        sa.Column("instructions", sa.Text(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_recipes_id"), "recipes", ["id"], unique=False)
    op.create_index(op.f("ix_recipes_meal_type"), "recipes", ["meal_type"], unique=False)

    # ingredient is unique so reconciliation can insert with ON CONFLICT DO NOTHING
    op.create_table(
        "pantry",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ingredient", sa.String(length=255), nullable=False),
        sa.Column("has_item", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("ingredient"),
    )
    op.create_index(op.f("ix_pantry_id"), "pantry", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_pantry_id"), table_name="pantry")
    op.drop_table("pantry")
    op.drop_index(op.f("ix_recipes_meal_type"), table_name="recipes")
    op.drop_index(op.f("ix_recipes_id"), table_name="recipes")
    op.drop_table("recipes")
