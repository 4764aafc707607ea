"""
Root conftest file for pytest.

This file is automatically loaded by pytest and contains setup for making
imports work correctly in tests, plus shared fixtures: a temporary
workspace store, an in-memory enrichment cache, a scripted website
scraper and a TestClient wired to them.
"""
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from precision_scout.app.db.schemas import EnrichmentPayload, Source  # noqa: E402
from precision_scout.app.dependencies import get_pipeline, get_workspace  # noqa: E402
from precision_scout.app.main import app  # noqa: E402
from precision_scout.app.services.enrichment import EnrichmentPipeline  # noqa: E402
from precision_scout.app.services.nlp_processor import NLPProcessor  # noqa: E402
from precision_scout.app.services.redis import redis_service  # noqa: E402
from precision_scout.app.services.scraper import WebsiteFetchError  # noqa: E402
from precision_scout.app.services.workspace import WorkspaceService  # noqa: E402
from precision_scout.app.utils.storage import StorageService  # noqa: E402


class InMemoryCache:
    """Stands in for RedisService with a plain dict."""

    def __init__(self):
        self.data: Dict[str, Any] = {}
        self.expiries: Dict[str, int] = {}

    async def get(self, key: str) -> Optional[Any]:
        return self.data.get(key)

    async def set(self, key: str, value: Any, expire: int = 3600) -> bool:
        self.data[key] = value
        self.expiries[key] = expire
        return True


class ScriptedScraper:
    """WebsiteScraper replacement returning fixed text or raising WebsiteFetchError."""

    def __init__(self, text: str = "", error: Optional[str] = None):
        self.text = text
        self.error = error
        self.fetched = []

    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def fetch_text(self, url: str) -> str:
        self.fetched.append(url)
        if self.error:
            raise WebsiteFetchError(self.error)
        return self.text


def make_payload(summary: str = "", what_they_do=(), keywords=(), signals=()) -> EnrichmentPayload:
    """Build a well-formed payload from just the text fields the rules look at."""
    return EnrichmentPayload(
        summary=summary,
        what_they_do=list(what_they_do),
        keywords=list(keywords),
        signals=list(signals),
        sources=[Source(url="https://example.com", scraped_at="2024-01-01T00:00:00.000Z")],
    )


@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
def storage(tmp_path):
    """StorageService rooted in a temporary directory."""
    return StorageService(data_dir=str(tmp_path / "data"))


@pytest.fixture
def workspace(storage):
    return WorkspaceService(storage=storage)


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def scripted_scraper():
    """ScriptedScraper class, for tests that need a differently scripted site."""
    return ScriptedScraper


@pytest.fixture
def scraper():
    return ScriptedScraper(text="Vertical workflow software for clinics.")


@pytest.fixture
def mock_pipeline(cache, scraper):
    """Pipeline in mock LLM mode with no network or Redis."""
    return EnrichmentPipeline(
        nlp=NLPProcessor(api_key=""),
        scraper_factory=scraper,
        cache=cache,
    )


@pytest.fixture
def client(workspace, mock_pipeline, monkeypatch):
    """TestClient with workspace and pipeline dependencies overridden."""
    async def fake_ping():
        return True

    monkeypatch.setattr(redis_service, "ping", fake_ping)
    app.dependency_overrides[get_workspace] = lambda: workspace
    app.dependency_overrides[get_pipeline] = lambda: mock_pipeline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
