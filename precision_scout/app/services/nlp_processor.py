"""
NLP Processor Module

Natural Language Processing service that turns a company's name, description
and website text into a structured enrichment payload using OpenAI's
language models.

Key Features:
- Chat completion with retry on transient API failures
- Tolerant JSON extraction (markdown code fences are stripped)
- Deterministic mock payload when no API key is configured
"""

import json
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, APIConnectionError, APIError, RateLimitError
from tenacity import retry, stop_after_attempt, wait_fixed, retry_if_exception_type

from ..utils.config import settings
from ..utils.dates import utc_now_iso
from ..utils.logger import nlp_logger as logger
from .prompts import ENRICHMENT_SYSTEM_PROMPT, ENRICHMENT_USER_PROMPT

LLM_FAILED = "LLM enrichment failed"
UNEXPECTED_SHAPE = "Unexpected LLM response shape"
PARSE_FAILED = "Failed to parse LLM output"

PROCESSOR_ERRORS = (LLM_FAILED, UNEXPECTED_SHAPE, PARSE_FAILED)


def is_processor_error(raw: Dict[str, Any]) -> bool:
    """True for the {"error": ...} values structure_company returns, not for model JSON that has an error key."""
    return set(raw) == {"error"} and raw["error"] in PROCESSOR_ERRORS


def build_mock_payload(name: str, url: str) -> Dict[str, Any]:
    """Fixed enrichment used in development when no OpenAI key is set."""
    return {
        "summary": f"{name} operates in a thesis-aligned space, based on mock enrichment data.",
        "whatTheyDo": [
            "Mocked: workflow software for a thesis-relevant vertical",
            "Mocked: leverages AI to automate repetitive operations",
        ],
        "keywords": ["mock", "thesis-aligned", "vertical SaaS", "AI automation"],
        "signals": [
            "Mock signal: clear vertical focus",
            "Mock signal: workflow depth",
            "Mock signal: AI-native product surface",
        ],
        "sources": [{"url": url, "scrapedAt": utc_now_iso()}],
    }


def strip_code_fences(content: str) -> str:
    """Remove a surrounding ```json ... ``` block if the model added one."""
    content = content.strip()
    if content.startswith("```"):
        content = content[3:]
        if content.startswith("json"):
            content = content[4:]
        if content.endswith("```"):
            content = content[:-3]
    return content.strip()


class NLPProcessor:
    """
    Service for structuring company information with an LLM.
    Falls back to a mock payload when settings.OPENAI_API_KEY is empty.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 client: Optional[AsyncOpenAI] = None):
        self.openai_api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        self.openai_model = model or settings.OPENAI_MODEL
        self.client = client
        if self.client is None and self.openai_api_key:
            self.client = AsyncOpenAI(api_key=self.openai_api_key)

        mode = "live" if self.client else "mock"
        logger.info(f"NLPProcessor initialized with model: {self.openai_model} ({mode} mode)")

    @property
    def is_mock(self) -> bool:
        return self.client is None

    @retry(
        retry=retry_if_exception_type((APIConnectionError, RateLimitError)),
        stop=stop_after_attempt(3),
        wait=wait_fixed(2),
        reraise=True
    )
    async def _complete(self, messages: List[Dict[str, str]]) -> Any:
        """Send messages to the chat completions API"""
        response = await self.client.chat.completions.create(
            model=self.openai_model,
            messages=messages,
            temperature=settings.OPENAI_TEMPERATURE,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def structure_company(self, name: str, description: str, website_text: str, url: str) -> Dict[str, Any]:
        """
        Produce a raw enrichment payload for a company.

        Args:
            name: Company name
            description: Existing description, may be empty
            website_text: Plain text of the company website, may be empty
            url: The website that was fetched

        Returns:
            The parsed JSON object from the model (or the mock payload), or
            {"error": message} when the model call or parsing fails
        """
        if self.is_mock:
            logger.info(f"No OpenAI key configured; returning mock enrichment for {name}")
            return build_mock_payload(name, url)

        prompt = ENRICHMENT_USER_PROMPT.format(
            name=name,
            description=description,
            website_text=website_text[:settings.PROMPT_TEXT_LIMIT],
        )
        messages = [
            {"role": "system", "content": ENRICHMENT_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

        try:
            content = await self._complete(messages)
        except APIError as e:
            logger.error(f"OpenAI error: {e}")
            return {"error": LLM_FAILED}

        if not content or not isinstance(content, str):
            logger.error(f"Unexpected LLM response shape for {name}")
            return {"error": UNEXPECTED_SHAPE}

        try:
            parsed = json.loads(strip_code_fences(content))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse LLM JSON: {e} - {content[:500]}")
            return {"error": PARSE_FAILED}

        if not isinstance(parsed, dict):
            logger.error(f"LLM returned JSON that is not an object for {name}")
            return {"error": UNEXPECTED_SHAPE}

        return parsed
