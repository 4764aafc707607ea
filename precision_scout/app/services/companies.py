"""
Company Search Module

Filtering, free-text search, sorting and pagination over the company
universe, plus the per-company signal timeline.
"""

import math
from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from ..db.schemas import (
    Company,
    CompanyPage,
    EnrichmentResult,
    FundingStage,
    SignalTimelineItem,
    ThesisTag,
)

PAGE_SIZE = 10
ANY_STAGE = "Any"
ALL_INDUSTRIES = "All"

SortKey = Literal["name", "stage", "location"]


class CompanySearchParams(BaseModel):
    """Search state, mirroring the companies page query string."""
    q: str = ""
    stage: FundingStage | Literal["Any"] = ANY_STAGE
    industry: str = ALL_INDUSTRIES
    tags: List[ThesisTag] = []
    sort: SortKey = "name"
    page: int = Field(default=1)


def parse_tags(tags: Optional[str]) -> List[str]:
    """Split a comma-separated tag parameter, dropping empty entries."""
    if not tags:
        return []
    return [tag for tag in (t.strip() for t in tags.split(",")) if tag]


def _haystack(company: Company) -> str:
    return " ".join([
        company.name,
        company.industry,
        company.description,
        company.location,
        company.website,
        company.stage,
        " ".join(company.thesis_tags),
    ]).lower()


def matches(company: Company, params: CompanySearchParams) -> bool:
    if params.stage != ANY_STAGE and company.stage != params.stage:
        return False
    if params.industry != ALL_INDUSTRIES and company.industry != params.industry:
        return False
    if params.tags and not all(tag in company.thesis_tags for tag in params.tags):
        return False

    query = params.q.lower().strip()
    if not query:
        return True
    return query in _haystack(company)


def filter_companies(companies: Sequence[Company], params: CompanySearchParams) -> List[Company]:
    """Companies passing every filter, sorted case-insensitively on params.sort."""
    filtered = [company for company in companies if matches(company, params)]
    return sorted(filtered, key=lambda company: getattr(company, params.sort).casefold())


def list_industries(companies: Sequence[Company]) -> List[str]:
    return [ALL_INDUSTRIES] + sorted({company.industry for company in companies})


def search_companies(
    companies: Sequence[Company],
    params: CompanySearchParams,
    page_size: int = PAGE_SIZE,
) -> CompanyPage:
    """
    One page of search results.

    The requested page is clamped into [1, total_pages]; there is always at
    least one (possibly empty) page.
    """
    filtered = filter_companies(companies, params)
    total_pages = max(1, math.ceil(len(filtered) / page_size))
    current_page = min(max(params.page, 1), total_pages)
    start = (current_page - 1) * page_size

    return CompanyPage(
        items=filtered[start:start + page_size],
        total=len(filtered),
        page=current_page,
        total_pages=total_pages,
        page_size=page_size,
        industries=list_industries(companies),
    )


def build_timeline(company: Company, enrichment: Optional[EnrichmentResult] = None) -> List[SignalTimelineItem]:
    """Funding and enrichment events for a company, newest first."""
    items: List[SignalTimelineItem] = []

    funding = company.last_funding_round
    if funding and funding.date:
        label = f"{funding.stage} round"
        if funding.amount_millions:
            label += f" (${funding.amount_millions:g}M)"
        items.append(SignalTimelineItem(
            id=f"{company.id}-funding",
            type="funding",
            label=label,
            date=funding.date,
            source=funding.lead_investor,
        ))

    if enrichment:
        # sources is never empty on a validated enrichment
        first_source = enrichment.sources[0]
        items.append(SignalTimelineItem(
            id=f"{company.id}-enriched",
            type="enrichment",
            label="Thesis enrichment run",
            date=first_source.scraped_at,
            source=first_source.url,
        ))

    return sorted(items, key=lambda item: item.date, reverse=True)
