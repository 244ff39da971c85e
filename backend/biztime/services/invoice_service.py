"""Invoice Service - CRUD for invoices, including the paid/paid_date transition.

Invariants:
    - New invoices start unpaid with paid_date NULL; id and add_date are server-assigned
    - Every edit computes paid_date through core/invoice_state.next_paid_date()
    - Unknown comp_code on create raises ConstraintViolationError (FK enforced)
    - Missing invoice on get/update/delete raises ResourceNotFoundError

Design Decisions:
    - update_invoice reads with SELECT ... FOR UPDATE inside the same transaction as
      the write, so concurrent edits of one invoice are serialized by the database
      (SQLite ignores the clause and serializes writers itself)
"""

import logging
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.core.errors import ResourceNotFoundError
from biztime.core.invoice_state import classify_transition, next_paid_date
from biztime.core.domain_types import PaymentTransition
from biztime.infrastructure.database import commit_or_raise
from biztime.models.company import Company
from biztime.models.invoice import Invoice
from biztime.schemas.company import CompanyOut
from biztime.schemas.invoice import (
    InvoiceCreate, InvoiceDetail, InvoiceOut, InvoiceSummary, InvoiceUpdate,
)

logger = logging.getLogger(__name__)


async def list_invoices(db: AsyncSession) -> list[InvoiceSummary]:
    result = await db.execute(
        select(Invoice.id, Invoice.comp_code).order_by(Invoice.id),
    )
    return [InvoiceSummary(id=row.id, comp_code=row.comp_code) for row in result]


async def get_invoice(invoice_id: int, db: AsyncSession) -> InvoiceDetail:
    """Invoice inner-joined with its company; the company is nested, not referenced."""
    result = await db.execute(
        select(Invoice, Company.code, Company.name, Company.description)
        .join(Company, Invoice.comp_code == Company.code)
        .where(Invoice.id == invoice_id),
    )
    row = result.one_or_none()
    if row is None:
        raise ResourceNotFoundError("Invoice", str(invoice_id))
    invoice, code, name, description = row
    return InvoiceDetail(
        id=invoice.id,
        amt=invoice.amt,
        paid=invoice.paid,
        add_date=invoice.add_date,
        paid_date=invoice.paid_date,
        company=CompanyOut(code=code, name=name, description=description),
    )


async def create_invoice(body: InvoiceCreate, db: AsyncSession) -> InvoiceOut:
    invoice = Invoice(comp_code=body.comp_code, amt=body.amt)
    db.add(invoice)
    await commit_or_raise(db, "Invoice", f"comp_code={body.comp_code}")
    # Reload server-side values so later reads serialize identically
    await db.refresh(invoice)
    logger.info(
        f"Invoice {invoice.id} created for {invoice.comp_code}",
        extra={"invoice_id": invoice.id, "comp_code": invoice.comp_code},
    )
    return InvoiceOut.model_validate(invoice)


async def update_invoice(
    invoice_id: int,
    body: InvoiceUpdate,
    db: AsyncSession,
    today: date | None = None,
) -> InvoiceOut:
    """Apply an edit, moving paid_date only when the paid flag flips.

    `paid` omitted from the body keeps the current flag. `today` is injectable
    for tests; defaults to the server's current date.
    """
    result = await db.execute(
        select(Invoice).where(Invoice.id == invoice_id).with_for_update(),
    )
    invoice = result.scalar_one_or_none()
    if invoice is None:
        raise ResourceNotFoundError("Invoice", str(invoice_id))

    requested_paid = invoice.paid if body.paid is None else body.paid
    transition = classify_transition(invoice.paid, requested_paid)
    invoice.paid_date = next_paid_date(
        invoice.paid, invoice.paid_date, requested_paid, today or date.today(),
    )
    invoice.amt = body.amt
    invoice.paid = requested_paid
    await commit_or_raise(db, "Invoice", str(invoice_id))

    if transition is not PaymentTransition.UNCHANGED:
        logger.info(
            f"Invoice {invoice_id} {transition.value}",
            extra={"invoice_id": invoice_id, "transition": transition.value},
        )
    return InvoiceOut.model_validate(invoice)


async def delete_invoice(invoice_id: int, db: AsyncSession) -> None:
    result = await db.execute(delete(Invoice).where(Invoice.id == invoice_id))
    if result.rowcount == 0:
        await db.rollback()
        raise ResourceNotFoundError("Invoice", str(invoice_id))
    await db.commit()
    logger.info(f"Invoice deleted: {invoice_id}", extra={"invoice_id": invoice_id})
