"""Invoice Routes - /invoices CRUD.

PUT is the only write path that touches paid/paid_date; see
services/invoice_service.update_invoice for the transition rule.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.infrastructure.database import get_db
from biztime.schemas.company import DeletedResponse
from biztime.schemas.invoice import (
    InvoiceCreate, InvoiceDetailResponse, InvoiceListResponse,
    InvoiceResponse, InvoiceUpdate,
)
from biztime.services import invoice_service

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(db: AsyncSession = Depends(get_db)):
    return {"invoices": await invoice_service.list_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
async def get_invoice(invoice_id: int, db: AsyncSession = Depends(get_db)):
    """Get an invoice with its company nested."""
    return {"invoice": await invoice_service.get_invoice(invoice_id, db)}


@router.post(
    "", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    body: InvoiceCreate, db: AsyncSession = Depends(get_db),
):
    return {"invoice": await invoice_service.create_invoice(body, db)}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: int, body: InvoiceUpdate, db: AsyncSession = Depends(get_db),
):
    """Update amt and paid; paid_date follows the paid flag."""
    return {"invoice": await invoice_service.update_invoice(invoice_id, body, db)}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
async def delete_invoice(invoice_id: int, db: AsyncSession = Depends(get_db)):
    await invoice_service.delete_invoice(invoice_id, db)
    return DeletedResponse()
