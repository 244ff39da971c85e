"""Company Routes - /companies CRUD and industry association."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.infrastructure.database import get_db
from biztime.schemas.company import (
    CompanyCreate, CompanyDetailResponse, CompanyIndustryCreate,
    CompanyIndustryResponse, CompanyListResponse, CompanyResponse,
    CompanyUpdate, DeletedResponse,
)
from biztime.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse)
async def list_companies(db: AsyncSession = Depends(get_db)):
    """List companies as {code, name}."""
    return {"companies": await company_service.list_companies(db)}


@router.get("/{code}", response_model=CompanyDetailResponse)
async def get_company(code: str, db: AsyncSession = Depends(get_db)):
    """Get a company with its invoice ids and industry labels."""
    return {"company": await company_service.get_company(code, db)}


@router.post(
    "", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED,
)
async def create_company(
    body: CompanyCreate, db: AsyncSession = Depends(get_db),
):
    """Create a company. The code is slugified ("Acme Corp!" -> "acmecorp")."""
    return {"company": await company_service.create_company(body, db)}


@router.put("/{code}", response_model=CompanyResponse)
async def update_company(
    code: str, body: CompanyUpdate, db: AsyncSession = Depends(get_db),
):
    return {"company": await company_service.update_company(code, body, db)}


@router.delete("/{code}", response_model=DeletedResponse)
async def delete_company(code: str, db: AsyncSession = Depends(get_db)):
    """Delete a company together with its invoices and industry links."""
    await company_service.delete_company(code, db)
    return DeletedResponse()


@router.post(
    "/{code}/industries",
    response_model=CompanyIndustryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_company_industry(
    code: str, body: CompanyIndustryCreate, db: AsyncSession = Depends(get_db),
):
    link = await company_service.add_company_industry(code, body, db)
    return {"company_industry": link}
