"""Industry Routes - /industries list, read and create."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.infrastructure.database import get_db
from biztime.schemas.industry import (
    IndustryCreate, IndustryDetailResponse, IndustryListResponse,
    IndustryResponse,
)
from biztime.services import industry_service

router = APIRouter(prefix="/industries", tags=["industries"])


@router.get("", response_model=IndustryListResponse)
async def list_industries(db: AsyncSession = Depends(get_db)):
    """List industries, each with the codes of its companies."""
    return {"industries": await industry_service.list_industries(db)}


@router.get("/{code}", response_model=IndustryDetailResponse)
async def get_industry(code: str, db: AsyncSession = Depends(get_db)):
    return {"industry": await industry_service.get_industry(code, db)}


@router.post(
    "", response_model=IndustryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_industry(
    body: IndustryCreate, db: AsyncSession = Depends(get_db),
):
    return {"industry": await industry_service.create_industry(body, db)}
