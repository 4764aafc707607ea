"""
Saved Search Routes Module

Persisted company searches that can be re-run against the current universe.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List

from ..db.schemas import CompanyPage, SavedSearch, SavedSearchCreate
from ..dependencies import get_workspace
from ..services.companies import search_companies
from ..services.workspace import WorkspaceService
from ..utils.logger import api_logger as logger

router = APIRouter(tags=["Saved Searches"])


def _get_search_or_404(workspace: WorkspaceService, search_id: str) -> SavedSearch:
    search = workspace.get_saved_search(search_id)
    if search is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Saved search {search_id} not found")
    return search


@router.get("", response_model=List[SavedSearch])
async def get_saved_searches(workspace: WorkspaceService = Depends(get_workspace)):
    return workspace.get_saved_searches()


@router.post("", response_model=SavedSearch, status_code=status.HTTP_201_CREATED)
async def create_saved_search(body: SavedSearchCreate, workspace: WorkspaceService = Depends(get_workspace)):
    search = workspace.create_saved_search(body)
    logger.info(f"Saved search created: {search.id}")
    return search


@router.delete("/{search_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_saved_search(search_id: str, workspace: WorkspaceService = Depends(get_workspace)):
    if not workspace.delete_saved_search(search_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Saved search {search_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{search_id}/run", response_model=CompanyPage)
async def run_saved_search(
    search_id: str,
    page: int = Query(1),
    workspace: WorkspaceService = Depends(get_workspace),
):
    """Apply a saved search's filters to the current universe."""
    search = _get_search_or_404(workspace, search_id)
    params = WorkspaceService.to_search_params(search, page=page)
    return search_companies(workspace.all_companies(), params)
