"""Company Schemas - request bodies and response shapes for /companies.

Invariants:
    - CompanyCreate.code is free text; services slugify it before insert
    - CompanyUpdate carries no code: a company's key never changes
    - CompanyDetail nests invoice ids and industry labels, never full objects
"""

from pydantic import BaseModel, ConfigDict


class CompanyCreate(BaseModel):
    code: str
    name: str
    description: str | None = None


class CompanyUpdate(BaseModel):
    name: str
    description: str | None = None


class CompanyIndustryCreate(BaseModel):
    industry_code: str


class CompanySummary(BaseModel):
    """List projection."""
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str


class CompanyOut(BaseModel):
    """Full company row."""
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    description: str | None = None


class CompanyDetail(CompanyOut):
    """Company row plus related invoice ids and industry labels."""
    invoices: list[int]
    industries: list[str]


class CompanyIndustryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comp_code: str
    industry_code: str


# --- Envelopes ----------------------------------------------------------------

class CompanyListResponse(BaseModel):
    companies: list[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyIndustryResponse(BaseModel):
    company_industry: CompanyIndustryOut


class DeletedResponse(BaseModel):
    status: str = "Deleted"
