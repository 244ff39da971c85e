"""Invoice Schemas - request bodies and response shapes for /invoices.

Invariants:
    - InvoiceCreate never carries paid/paid_date: new invoices start unpaid
    - InvoiceUpdate.paid omitted means "leave the paid flag as it is"
    - InvoiceDetail nests the owning company as an object, not a code
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from biztime.schemas.company import CompanyOut


class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float


class InvoiceUpdate(BaseModel):
    amt: float
    paid: bool | None = None


class InvoiceSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    comp_code: str


class InvoiceOut(BaseModel):
    """Full invoice row as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: datetime
    paid_date: date | None = None


class InvoiceDetail(BaseModel):
    """Invoice with its company joined in."""
    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: date | None = None
    company: CompanyOut


# --- Envelopes ----------------------------------------------------------------

class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
