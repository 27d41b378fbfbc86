"""create_clinic_tables

Revision ID: 5d8e2f7a9c41
Revises:
Create Date: 2026-10-18 10:00:00.000000

보호자(holders), 동물 종류(types), 반려동물(pets), 진료 방문(visits) 테이블 생성.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "5d8e2f7a9c41"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(80), nullable=False, unique=True),
    )
    op.create_table(
        "holders",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(30), nullable=False),
        sa.Column("last_name", sa.String(30), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(80), nullable=False),
        sa.Column("telephone", sa.String(20), nullable=False),
    )
    op.create_index("ix_holders_last_name", "holders", ["last_name"])
    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("holder_id", sa.Integer(), sa.ForeignKey("holders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type_id", sa.Integer(), sa.ForeignKey("types.id"), nullable=False),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_pets_holder_id", "pets", ["holder_id"])
    op.create_table(
        "visits",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("pet_id", sa.Integer(), sa.ForeignKey("pets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
    )
    op.create_index("ix_visits_pet_id", "visits", ["pet_id"])


def downgrade() -> None:
    op.drop_index("ix_visits_pet_id", table_name="visits")
    op.drop_table("visits")
    op.drop_index("ix_pets_holder_id", table_name="pets")
    op.drop_table("pets")
    op.drop_index("ix_holders_last_name", table_name="holders")
    op.drop_table("holders")
    op.drop_table("types")
