"""Company Service - CRUD and industry association for companies.

Invariants:
    - Caller-supplied codes are slugified before insert; never stored verbatim
    - Missing company on get/update/delete raises ResourceNotFoundError
    - Integrity violations (duplicate code, unknown industry) raise ConstraintViolationError
    - Deleting a company cascades to its invoices and associations (database FKs)
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.core.errors import InvalidInputError, ResourceNotFoundError
from biztime.core.slugify import slugify_code
from biztime.infrastructure.database import commit_or_raise
from biztime.models.company import Company
from biztime.models.industry import CompanyIndustry
from biztime.schemas.company import (
    CompanyCreate, CompanyDetail, CompanyIndustryCreate, CompanyIndustryOut,
    CompanyOut, CompanySummary, CompanyUpdate,
)

logger = logging.getLogger(__name__)


async def get_company_or_404(code: str, db: AsyncSession) -> Company:
    """Get company or raise 404. Shared with invoice and industry flows."""
    company = await db.get(Company, code)
    if company is None:
        raise ResourceNotFoundError("Company", code)
    return company


async def list_companies(db: AsyncSession) -> list[CompanySummary]:
    result = await db.execute(
        select(Company.code, Company.name).order_by(Company.code),
    )
    return [CompanySummary(code=row.code, name=row.name) for row in result]


async def get_company(code: str, db: AsyncSession) -> CompanyDetail:
    """Company row with its invoice ids and industry labels attached."""
    company = await get_company_or_404(code, db)
    return CompanyDetail(
        code=company.code,
        name=company.name,
        description=company.description,
        invoices=[invoice.id for invoice in company.invoices],
        industries=[industry.industry for industry in company.industries],
    )


async def create_company(body: CompanyCreate, db: AsyncSession) -> CompanyOut:
    code = slugify_code(body.code)
    if not code:
        raise InvalidInputError(
            f"Company code '{body.code}' has no letters or digits", "code",
        )
    company = Company(code=code, name=body.name, description=body.description)
    db.add(company)
    await commit_or_raise(db, "Company", code)
    logger.info(f"Company created: {code}", extra={"comp_code": code})
    return CompanyOut.model_validate(company)


async def update_company(
    code: str, body: CompanyUpdate, db: AsyncSession,
) -> CompanyOut:
    company = await get_company_or_404(code, db)
    company.name = body.name
    company.description = body.description
    await commit_or_raise(db, "Company", code)
    return CompanyOut.model_validate(company)


async def delete_company(code: str, db: AsyncSession) -> None:
    result = await db.execute(delete(Company).where(Company.code == code))
    if result.rowcount == 0:
        await db.rollback()
        raise ResourceNotFoundError("Company", code)
    await db.commit()
    logger.info(f"Company deleted: {code}", extra={"comp_code": code})


async def add_company_industry(
    code: str, body: CompanyIndustryCreate, db: AsyncSession,
) -> CompanyIndustryOut:
    """Link an industry to a company. Both keys must exist (FK enforced)."""
    link = CompanyIndustry(comp_code=code, industry_code=body.industry_code)
    db.add(link)
    await commit_or_raise(db, "CompanyIndustry", f"{code}/{body.industry_code}")
    logger.info(
        f"Industry {body.industry_code} linked to company {code}",
        extra={"comp_code": code, "industry_code": body.industry_code},
    )
    return CompanyIndustryOut.model_validate(link)
