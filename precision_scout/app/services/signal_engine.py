"""
Signal Engine Module

Scores an enrichment payload against a fund thesis with a fixed table of
keyword rules over the lower-cased payload text.

Score = 40 + sum(delta of every rule that fires), clamped to 0-100

Key Features:
- Declarative, ordered rule table
- One human-readable derived signal per rule that fires
- Pure and deterministic: no I/O, no shared state
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from ..db.schemas import EnrichmentPayload, FundThesis, SignalEngineOutput
from .thesis import DEFAULT_FUND_THESIS

BASE_SCORE = 40
MIN_SCORE = 0
MAX_SCORE = 100

VERTICAL_TERMS = ("vertical", "industry-specific", "specialty", "sector")
WORKFLOW_TERMS = ("workflow", "back-office", "ops", "operations", "playbook")
AI_TERMS = ("ai", "machine learning", "ml", "copilot", "model", "llm")
DEVELOPER_TERMS = ("api", "developer", "sdk")
GO_TO_MARKET_TERMS = ("self-serve", "bottoms-up", "usage-based", "product-led")
INCUMBENT_TERMS = ("on-prem", "legacy")

THESIS_MATCH_EXPLANATION = " ".join([
    "This score reflects simple, explainable rules:",
    "- Content overlap with the fund's focus areas (vertical SaaS, AI infra, applied AI).",
    "- Presence of workflow depth, developer/infra motion, and AI-native product signals.",
    "- Hints about go-to-market (self-serve, bottoms-up) and displacement of legacy systems.",
    "",
    "Use this as a directional thesis fit signal, not as an automated investment decision.",
])


@dataclass(frozen=True)
class SignalRule:
    """One row of the rule table: when `matches` holds, add `delta` and record `message`."""
    name: str
    delta: int
    message: str
    matches: Callable[[str, FundThesis], bool]


def contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)


def count_distinct_terms(text: str, terms: Iterable[str]) -> int:
    """Number of distinct terms present in text. Repeats of one term count once."""
    return sum(1 for term in terms if term in text)


def focus_tag_phrases(thesis: FundThesis) -> Tuple[str, ...]:
    """Thesis tags as they read in prose ("vertical_saas" -> "vertical saas")."""
    return tuple(tag.replace("_", " ") for tag in thesis.focus_tags)


SIGNAL_RULES: Tuple[SignalRule, ...] = (
    SignalRule(
        name="focus_tags",
        delta=15,
        message="Direct match to fund focus tags in content.",
        matches=lambda text, thesis: contains_any(text, focus_tag_phrases(thesis)),
    ),
    SignalRule(
        name="vertical_depth",
        delta=10,
        message="Language suggests strong vertical / workflow depth.",
        matches=lambda text, thesis: contains_any(text, VERTICAL_TERMS),
    ),
    SignalRule(
        name="workflow_embedded",
        delta=10,
        message="Product appears embedded in an operational workflow.",
        matches=lambda text, thesis: contains_any(text, WORKFLOW_TERMS),
    ),
    # The two AI tiers are mutually exclusive, so at most one of them fires.
    SignalRule(
        name="ai_native",
        delta=10,
        message="Multiple references to AI-native product surface.",
        matches=lambda text, thesis: count_distinct_terms(text, AI_TERMS) >= 2,
    ),
    SignalRule(
        name="ai_usage",
        delta=5,
        message="Some evidence of AI usage in the product.",
        matches=lambda text, thesis: count_distinct_terms(text, AI_TERMS) == 1,
    ),
    SignalRule(
        name="developer_motion",
        delta=10,
        message="Developer-first or infra-like motion inferred.",
        matches=lambda text, thesis: contains_any(text, DEVELOPER_TERMS),
    ),
    SignalRule(
        name="product_led_gtm",
        delta=10,
        message="Signals of bottoms-up or product-led go-to-market.",
        matches=lambda text, thesis: contains_any(text, GO_TO_MARKET_TERMS),
    ),
    SignalRule(
        name="legacy_displacement",
        delta=5,
        message="Opportunity framed against legacy or on-prem incumbents.",
        matches=lambda text, thesis: contains_any(text, INCUMBENT_TERMS),
    ),
)


def build_search_text(payload: EnrichmentPayload) -> str:
    """Lower-cased blob of everything the rules look at."""
    return " ".join([
        payload.summary,
        " ".join(payload.what_they_do),
        " ".join(payload.keywords),
        " ".join(payload.signals),
    ]).lower().strip()


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def run_signal_engine(
    payload: EnrichmentPayload,
    thesis: FundThesis = DEFAULT_FUND_THESIS,
    rules: Tuple[SignalRule, ...] = SIGNAL_RULES,
) -> SignalEngineOutput:
    """
    Score a payload against a thesis.

    Args:
        payload: Well-formed enrichment payload
        thesis: Thesis whose focus tags feed the first rule
        rules: Ordered rule table, evaluated in full

    Returns:
        SignalEngineOutput with one derived signal per fired rule, in rule order
    """
    text = build_search_text(payload)

    score = BASE_SCORE
    derived_signals: List[str] = []
    for rule in rules:
        if rule.matches(text, thesis):
            score += rule.delta
            derived_signals.append(rule.message)

    return SignalEngineOutput(
        derived_signals=derived_signals,
        thesis_match_explanation=THESIS_MATCH_EXPLANATION,
        score=clamp_score(score),
    )
