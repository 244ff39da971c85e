"""Company ORM - the owner of invoices and member of industries.

Invariants:
    - code is the slug primary key, immutable after insert
    - name is non-nullable; description is nullable
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db.base import Base


class Company(Base):
    """Company entity - keyed by its slug code."""
    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships (rows removed by the database on delete)
    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="company",
        passive_deletes=True, lazy="selectin",
    )
    industries: Mapped[list["Industry"]] = relationship(
        "Industry", secondary="company_industries",
        back_populates="companies", passive_deletes=True, lazy="selectin",
    )
