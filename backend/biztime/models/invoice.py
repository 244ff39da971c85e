"""Invoice ORM - an amount billed to a company, with its payment state.

Invariants:
    - comp_code always references an existing company
    - paid defaults to false and paid_date to NULL on insert
    - add_date is set once at insert and never written again
    - paid_date is non-null iff paid is true (kept by core/invoice_state.py,
      not by a database constraint)
"""

from datetime import date, datetime, timezone

from sqlalchemy import (
    Boolean, Date, DateTime, Float, ForeignKey, Integer, Text, false, func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db.base import Base


class Invoice(Base):
    """Invoice entity - server-numbered, owned by one company."""
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comp_code: Mapped[str] = mapped_column(
        Text, ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    amt: Mapped[float] = mapped_column(Float, nullable=False)
    paid: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
    add_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
    paid_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    company: Mapped["Company"] = relationship(
        "Company", back_populates="invoices", lazy="raise",
    )
