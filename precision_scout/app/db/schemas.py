"""
Schemas Module

This module defines Pydantic models for request/response validation and serialization.
Includes schemas for companies, enrichment payloads, the signal engine output and
workspace entities (lists, saved searches, notes).

Key Features:
- Input validation
- camelCase wire format with snake_case attribute access
- Optional and required field definitions
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional

ThesisTag = Literal[
    "vertical_saas",
    "fintech_infra",
    "climate",
    "developer_tools",
    "ai_infrastructure",
    "applied_ai",
    "marketplaces",
    "future_of_work",
]

FundingStage = Literal["Pre-Seed", "Seed", "Series A", "Series B+", "Bootstrapped"]

TimelineItemType = Literal["funding", "hiring", "product", "press", "enrichment"]


class CamelModel(BaseModel):
    """Base schema: serialises with camelCase keys, accepts either spelling on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Fund thesis
class FundThesis(CamelModel):
    """Static investment thesis the signal engine scores against."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    focus_tags: tuple[ThesisTag, ...]
    description: str = ""
    preferred_stages: tuple[FundingStage, ...] = ()
    geography_bias: Optional[str] = None


# Enrichment schemas
class Source(CamelModel):
    """A page the enrichment was derived from."""
    url: str
    scraped_at: str


class EnrichmentPayload(CamelModel):
    """Structured company summary returned by the language model."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    summary: str
    what_they_do: List[str]
    keywords: List[str]
    signals: List[str]
    sources: List[Source] = Field(min_length=1)


class SignalEngineOutput(CamelModel):
    """Result of running the thesis-fit rules over an enrichment payload."""
    derived_signals: List[str]
    thesis_match_explanation: str
    score: int = Field(ge=0, le=100)


class EnrichmentResult(EnrichmentPayload, SignalEngineOutput):
    """Enrichment payload merged with its signal engine output."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EnrichRequest(CamelModel):
    """Body of POST /api/enrich. website and name are checked by the route."""
    company_id: Optional[str] = None
    website: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class EnrichResponse(CamelModel):
    enrichment: EnrichmentResult


# Company schemas
class FundingRound(CamelModel):
    """Most recent funding round known for a company."""
    stage: FundingStage
    amount_millions: Optional[float] = None
    date: Optional[str] = None
    lead_investor: Optional[str] = None


class Company(CamelModel):
    """A company in the sourcing universe."""
    id: str
    name: str
    website: str
    industry: str
    stage: FundingStage
    thesis_tags: List[ThesisTag] = []
    location: str
    description: str
    last_funding_round: Optional[FundingRound] = None
    employee_count_range: Optional[str] = None


class CompanyCreate(CamelModel):
    """Schema for adding a custom company by website."""
    name: str
    website: str
    description: Optional[str] = None

    @field_validator("name", "website")
    def validate_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class SignalTimelineItem(CamelModel):
    id: str
    type: TimelineItemType
    label: str
    date: str
    source: Optional[str] = None


class CompanyDetail(CamelModel):
    """Company with its signal timeline, cached enrichment and workspace context."""
    company: Company
    timeline: List[SignalTimelineItem]
    enrichment: Optional[EnrichmentResult] = None
    notes: str = ""
    list_ids: List[str] = []


class CompanyPage(CamelModel):
    """One page of a filtered, sorted company search."""
    items: List[Company]
    total: int
    page: int
    total_pages: int
    page_size: int
    industries: List[str]


# Workspace schemas
class CompanyList(CamelModel):
    id: str
    name: str
    created_at: str
    company_ids: List[str] = []


class CompanyListDetail(CompanyList):
    """List with its company ids resolved against the universe."""
    companies: List[Company] = []


class ListCreate(CamelModel):
    name: str

    @field_validator("name")
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("List name must not be blank")
        return v


class SavedSearch(CamelModel):
    id: str
    name: str
    query: str = ""
    industry: Optional[str] = None
    stage: Optional[FundingStage | Literal["Any"]] = "Any"
    tags: Optional[List[ThesisTag]] = None
    created_at: str


class SavedSearchCreate(CamelModel):
    name: str
    query: str = ""
    industry: Optional[str] = None
    stage: FundingStage | Literal["Any"] = "Any"
    tags: Optional[List[ThesisTag]] = None

    @field_validator("name")
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Saved search name must not be blank")
        return v


class NoteUpdate(CamelModel):
    notes: str


class Note(CamelModel):
    company_id: str
    notes: str
