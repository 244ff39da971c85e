"""ORM Models - SQLAlchemy declarative models for companies, invoices and industries.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every foreign key is ON DELETE CASCADE: deleting a company removes its
      invoices and industry associations

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from biztime.models.company import Company  # noqa: F401
from biztime.models.invoice import Invoice  # noqa: F401
from biztime.models.industry import Industry, CompanyIndustry  # noqa: F401
