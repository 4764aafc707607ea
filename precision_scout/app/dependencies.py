"""
FastAPI dependency providers.

Routes receive their services through these functions so tests can swap
them with app.dependency_overrides.
"""
from functools import lru_cache

from .services.enrichment import EnrichmentPipeline
from .services.workspace import WorkspaceService


@lru_cache
def get_pipeline() -> EnrichmentPipeline:
    return EnrichmentPipeline()


@lru_cache
def get_workspace() -> WorkspaceService:
    return WorkspaceService()
