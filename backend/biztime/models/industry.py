"""Industry ORM - a labelled sector, linked to companies through company_industries.

Invariants:
    - code is the slug primary key
    - a (comp_code, industry_code) pair appears at most once (composite PK)
"""

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db.base import Base


class Industry(Base):
    """Industry entity - keyed by its slug code."""
    __tablename__ = "industries"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    industry: Mapped[str] = mapped_column(Text, nullable=False)

    companies: Mapped[list["Company"]] = relationship(
        "Company", secondary="company_industries",
        back_populates="industries", passive_deletes=True, lazy="raise",
    )


class CompanyIndustry(Base):
    """Association row - no payload beyond the two keys."""
    __tablename__ = "company_industries"

    comp_code: Mapped[str] = mapped_column(
        Text, ForeignKey("companies.code", ondelete="CASCADE"),
        primary_key=True,
    )
    industry_code: Mapped[str] = mapped_column(
        Text, ForeignKey("industries.code", ondelete="CASCADE"),
        primary_key=True,
    )
