"""
Fund Thesis Module

The single, hard-coded investment thesis that drives the signal engine.
"""

from ..db.schemas import FundThesis

DEFAULT_FUND_THESIS = FundThesis(
    id="core-fund-thesis",
    name="AI-Enabled Vertical SaaS & Infra",
    focus_tags=("vertical_saas", "developer_tools", "ai_infrastructure", "applied_ai"),
    preferred_stages=("Pre-Seed", "Seed", "Series A"),
    geography_bias="North America + Western Europe",
    description=(
        "We invest in thesis-driven, AI-enabled vertical SaaS and infrastructure companies "
        "at pre-seed to Series A, with a bias for workflow depth, clear ROI, and strong "
        "bottoms-up adoption."
    ),
)
