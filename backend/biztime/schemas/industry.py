"""Industry Schemas - request bodies and response shapes for /industries."""

from pydantic import BaseModel, ConfigDict


class IndustryCreate(BaseModel):
    code: str
    industry: str


class IndustryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    industry: str


class IndustryDetail(IndustryOut):
    """Industry plus the codes of every associated company (possibly empty)."""
    companies: list[str]


class IndustryListResponse(BaseModel):
    industries: list[IndustryDetail]


class IndustryResponse(BaseModel):
    industry: IndustryOut


class IndustryDetailResponse(BaseModel):
    industry: IndustryDetail
