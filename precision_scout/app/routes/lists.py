"""
List Routes Module

Named company lists for the sourcing workspace.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List

from ..db.schemas import CompanyList, CompanyListDetail, ListCreate
from ..dependencies import get_workspace
from ..services.workspace import WorkspaceService
from ..utils.logger import api_logger as logger

router = APIRouter(tags=["Lists"])


@router.get("", response_model=List[CompanyListDetail])
async def get_lists(workspace: WorkspaceService = Depends(get_workspace)):
    """All lists with their companies resolved."""
    return workspace.get_lists_with_companies()


@router.post("", response_model=CompanyList, status_code=status.HTTP_201_CREATED)
async def create_list(body: ListCreate, workspace: WorkspaceService = Depends(get_workspace)):
    company_list = workspace.create_list(body.name)
    logger.info(f"List created: {company_list.id}")
    return company_list


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_list(list_id: str, workspace: WorkspaceService = Depends(get_workspace)):
    if not workspace.delete_list(list_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"List {list_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{list_id}/companies/{company_id}", response_model=CompanyList)
async def toggle_company(
    list_id: str,
    company_id: str,
    workspace: WorkspaceService = Depends(get_workspace),
):
    """
    Add a company to a list, or remove it if it is already there.

    Raises:
        HTTPException(404): If the list or the company is unknown
    """
    if workspace.get_company(company_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found in the current universe")

    company_list = workspace.toggle_company_in_list(list_id, company_id)
    if company_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"List {list_id} not found")
    return company_list
