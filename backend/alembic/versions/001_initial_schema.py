"""Initial schema - companies, invoices, industries, company_industries.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

All foreign keys cascade on delete: removing a company removes its
invoices and industry links.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("code", sa.Text, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "comp_code", sa.Text,
            sa.ForeignKey("companies.code", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("amt", sa.Float, nullable=False),
        sa.Column("paid", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("add_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("paid_date", sa.Date, nullable=True),
    )
    op.create_index("ix_invoices_comp_code", "invoices", ["comp_code"])

    op.create_table(
        "industries",
        sa.Column("code", sa.Text, primary_key=True),
        sa.Column("industry", sa.Text, nullable=False),
    )

    op.create_table(
        "company_industries",
        sa.Column(
            "comp_code", sa.Text,
            sa.ForeignKey("companies.code", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "industry_code", sa.Text,
            sa.ForeignKey("industries.code", ondelete="CASCADE"), primary_key=True,
        ),
    )


def downgrade() -> None:
    op.drop_table("company_industries")
    op.drop_table("industries")
    op.drop_index("ix_invoices_comp_code", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("companies")
