"""
Enrichment Pipeline Module

Runs the request/response enrichment flow for one company:

1. Fetch the website and strip it to text (failures fall back to no text)
2. Structure the company with the NLP processor (or its mock)
3. Repair and validate the payload
4. Score it with the signal engine
5. Cache the merged result per company id
"""

from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ..db.schemas import EnrichmentPayload, EnrichmentResult, FundThesis
from ..utils.config import settings
from ..utils.dates import utc_now_iso
from ..utils.logger import enrichment_logger as logger
from .nlp_processor import NLPProcessor, is_processor_error
from .redis import RedisService, enrichment_key, redis_service
from .scraper import WebsiteFetchError, WebsiteScraper, normalize_website
from .signal_engine import run_signal_engine
from .thesis import DEFAULT_FUND_THESIS

MALFORMED_PAYLOAD = "Malformed enrichment payload"

_LIST_FIELDS = ("whatTheyDo", "keywords", "signals")


def repair_payload(raw: Dict[str, Any], url: str) -> EnrichmentPayload:
    """
    Coerce a model response into a well-formed EnrichmentPayload.

    Missing or null list fields become empty lists, a missing summary becomes
    an empty string and an empty source list defaults to the fetched url.

    Raises:
        ValidationError: When the repaired payload still does not validate
    """
    data = dict(raw)
    if "whatTheyDo" not in data and "what_they_do" in data:
        data["whatTheyDo"] = data.pop("what_they_do")

    if data.get("summary") is None:
        data["summary"] = ""
    for field in _LIST_FIELDS:
        if data.get(field) is None:
            data[field] = []
    if not data.get("sources"):
        data["sources"] = [{"url": url, "scrapedAt": utc_now_iso()}]

    return EnrichmentPayload.model_validate(data)


class EnrichmentPipeline:
    """
    Orchestrates fetch -> LLM -> signal engine for a single company.
    """

    def __init__(
        self,
        nlp: Optional[NLPProcessor] = None,
        scraper_factory: Callable[[], WebsiteScraper] = WebsiteScraper,
        cache: Optional[RedisService] = None,
        thesis: FundThesis = DEFAULT_FUND_THESIS,
    ):
        self.nlp = nlp or NLPProcessor()
        self.scraper_factory = scraper_factory
        self.cache = cache or redis_service
        self.thesis = thesis

    async def fetch_website_text(self, url: str) -> str:
        """Website text, or an empty string when the site cannot be fetched."""
        try:
            async with self.scraper_factory() as scraper:
                return await scraper.fetch_text(url)
        except WebsiteFetchError as e:
            # The run continues on the description alone
            logger.warning(f"Website fetch failed for {url}; falling back to description only. ({e})")
            return ""

    async def run(
        self,
        name: str,
        website: str,
        description: str = "",
        company_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Enrich one company.

        Returns:
            {"enrichment": EnrichmentResult} on success, {"error": message} otherwise
        """
        url = normalize_website(website)
        logger.info(f"Starting enrichment for {name} ({url})")

        website_text = await self.fetch_website_text(url)

        raw = await self.nlp.structure_company(
            name=name,
            description=description or "",
            website_text=website_text,
            url=url,
        )
        if is_processor_error(raw):
            logger.error(f"Enrichment failed for {name}: {raw['error']}")
            return {"error": raw["error"]}

        try:
            payload = repair_payload(raw, url)
        except ValidationError as e:
            logger.error(f"Rejecting malformed enrichment payload for {name}: {e}")
            return {"error": MALFORMED_PAYLOAD}

        engine_output = run_signal_engine(payload, self.thesis)
        logger.info(
            f"Company {name}: score={engine_output.score}, "
            f"derived_signals={len(engine_output.derived_signals)}"
        )

        result = EnrichmentResult(
            **payload.model_dump(),
            **engine_output.model_dump(),
        )

        if company_id:
            await self.cache.set(
                enrichment_key(company_id),
                result.model_dump(by_alias=True),
                expire=settings.ENRICHMENT_CACHE_TTL,
            )

        return {"enrichment": result}

    async def get_cached(self, company_id: str) -> Optional[EnrichmentResult]:
        """Last enrichment stored for a company, if any."""
        cached = await self.cache.get(enrichment_key(company_id))
        if not cached:
            return None
        try:
            return EnrichmentResult.model_validate(cached)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cached enrichment for {company_id}: {e}")
            return None
