"""
Services package for Precision Scout.
Contains the enrichment pipeline and the sourcing workspace logic.
"""

from .enrichment import EnrichmentPipeline
from .nlp_processor import NLPProcessor
from .redis import redis_service
from .scraper import WebsiteScraper
from .signal_engine import run_signal_engine
from .thesis import DEFAULT_FUND_THESIS
from .workspace import WorkspaceService

__all__ = [
    'EnrichmentPipeline',   # Fetch -> LLM -> score orchestration
    'NLPProcessor',         # LLM structuring
    'redis_service',        # Enrichment cache
    'WebsiteScraper',       # Website text fetching
    'run_signal_engine',    # Thesis-fit scoring
    'DEFAULT_FUND_THESIS',  # Fund thesis
    'WorkspaceService',     # Lists, saved searches, notes
]
