"""Industry Service - list, read and create industries.

Invariants:
    - Listing yields exactly one entry per industry, with an empty companies
      list when it has no associations
    - Industry codes are slugified before insert
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.core.errors import InvalidInputError, ResourceNotFoundError
from biztime.core.slugify import slugify_code
from biztime.infrastructure.database import commit_or_raise
from biztime.models.industry import CompanyIndustry, Industry
from biztime.schemas.industry import IndustryCreate, IndustryDetail, IndustryOut

logger = logging.getLogger(__name__)


def _industries_with_companies():
    return (
        select(Industry.code, Industry.industry, CompanyIndustry.comp_code)
        .outerjoin(CompanyIndustry, Industry.code == CompanyIndustry.industry_code)
        .order_by(Industry.code, CompanyIndustry.comp_code)
    )


def _group_rows(rows) -> list[IndustryDetail]:
    """Fold left-join rows into one IndustryDetail per industry code."""
    grouped: dict[str, IndustryDetail] = {}
    for code, label, comp_code in rows:
        detail = grouped.get(code)
        if detail is None:
            detail = IndustryDetail(code=code, industry=label, companies=[])
            grouped[code] = detail
        if comp_code is not None:
            detail.companies.append(comp_code)
    return list(grouped.values())


async def list_industries(db: AsyncSession) -> list[IndustryDetail]:
    result = await db.execute(_industries_with_companies())
    return _group_rows(result.all())


async def get_industry(code: str, db: AsyncSession) -> IndustryDetail:
    result = await db.execute(
        _industries_with_companies().where(Industry.code == code),
    )
    details = _group_rows(result.all())
    if not details:
        raise ResourceNotFoundError("Industry", code)
    return details[0]


async def create_industry(body: IndustryCreate, db: AsyncSession) -> IndustryOut:
    code = slugify_code(body.code)
    if not code:
        raise InvalidInputError(
            f"Industry code '{body.code}' has no letters or digits", "code",
        )
    industry = Industry(code=code, industry=body.industry)
    db.add(industry)
    await commit_or_raise(db, "Industry", code)
    logger.info(f"Industry created: {code}", extra={"industry_code": code})
    return IndustryOut.model_validate(industry)
