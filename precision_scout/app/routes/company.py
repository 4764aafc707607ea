"""
Company Routes Module

This module handles company-related API endpoints for browsing the
company universe, adding custom companies and keeping notes.

Key Features:
- Search, filter, sort and paginate companies
- Company detail with signal timeline
- Custom companies by website
- Per-company notes
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Literal, Optional

from ..db.schemas import Company, CompanyCreate, CompanyDetail, CompanyPage, FundingStage, Note, NoteUpdate
from ..dependencies import get_pipeline, get_workspace
from ..services.companies import CompanySearchParams, SortKey, build_timeline, parse_tags, search_companies
from ..services.enrichment import EnrichmentPipeline
from ..services.workspace import WorkspaceService
from ..utils.logger import api_logger as logger

router = APIRouter(tags=["Companies"])


def _get_company_or_404(workspace: WorkspaceService, company_id: str) -> Company:
    company = workspace.get_company(company_id)
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found in the current universe")
    return company


@router.get("", response_model=CompanyPage)
async def list_companies(
    q: str = Query("", description="Free-text search"),
    stage: FundingStage | Literal["Any"] = Query("Any"),
    industry: str = Query("All"),
    tags: Optional[str] = Query(None, description="Comma-separated thesis tags; all must match"),
    sort: SortKey = Query("name"),
    page: int = Query(1),
    workspace: WorkspaceService = Depends(get_workspace),
):
    """Search the mock universe plus custom companies."""
    params = CompanySearchParams(
        q=q,
        stage=stage,
        industry=industry,
        tags=parse_tags(tags),
        sort=sort,
        page=page,
    )
    return search_companies(workspace.all_companies(), params)


@router.post("", response_model=Company, status_code=status.HTTP_201_CREATED)
async def create_custom_company(
    body: CompanyCreate,
    workspace: WorkspaceService = Depends(get_workspace),
):
    """Add any startup website as a local-only company."""
    company = workspace.add_custom_company(body)
    logger.info(f"Custom company created: {company.id}")
    return company


@router.get("/{company_id}", response_model=CompanyDetail)
async def get_company(
    company_id: str,
    workspace: WorkspaceService = Depends(get_workspace),
    pipeline: EnrichmentPipeline = Depends(get_pipeline),
):
    """
    Company detail with its signal timeline and workspace context.

    Raises:
        HTTPException(404): If the company is unknown
    """
    company = _get_company_or_404(workspace, company_id)
    enrichment = await pipeline.get_cached(company_id)
    return CompanyDetail(
        company=company,
        timeline=build_timeline(company, enrichment),
        enrichment=enrichment,
        notes=workspace.get_notes(company_id),
        list_ids=workspace.lists_containing(company_id),
    )


@router.get("/{company_id}/notes", response_model=Note)
async def get_notes(
    company_id: str,
    workspace: WorkspaceService = Depends(get_workspace),
):
    _get_company_or_404(workspace, company_id)
    return Note(company_id=company_id, notes=workspace.get_notes(company_id))


@router.put("/{company_id}/notes", response_model=Note)
async def update_notes(
    company_id: str,
    body: NoteUpdate,
    workspace: WorkspaceService = Depends(get_workspace),
):
    _get_company_or_404(workspace, company_id)
    return Note(company_id=company_id, notes=workspace.set_notes(company_id, body.notes))
