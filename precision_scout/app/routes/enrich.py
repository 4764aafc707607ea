"""
Enrichment Routes Module

Runs the enrichment pipeline for a company and serves cached results.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..db.schemas import EnrichmentResult, EnrichRequest, EnrichResponse
from ..dependencies import get_pipeline
from ..services.enrichment import EnrichmentPipeline
from ..utils.logger import api_logger as logger

router = APIRouter(tags=["Enrichment"])


@router.post("", response_model=EnrichResponse)
async def enrich_company(
    body: EnrichRequest,
    pipeline: EnrichmentPipeline = Depends(get_pipeline),
):
    """
    Fetch the company website, structure it with the LLM and score it
    against the fund thesis.

    Raises:
        HTTPException(400): If website or name is missing
        HTTPException(500): If the LLM step fails or returns a malformed payload
    """
    if not body.website or not body.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing website or name")

    result = await pipeline.run(
        name=body.name,
        website=body.website,
        description=body.description or "",
        company_id=body.company_id,
    )
    if "error" in result:
        logger.error(f"Enrichment error for {body.name}: {result['error']}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result["error"])

    return EnrichResponse(enrichment=result["enrichment"])


@router.get("/{company_id}", response_model=EnrichmentResult)
async def get_enrichment(
    company_id: str,
    pipeline: EnrichmentPipeline = Depends(get_pipeline),
):
    """Last enrichment run for a company."""
    enrichment = await pipeline.get_cached(company_id)
    if enrichment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No enrichment for {company_id}")
    return enrichment
