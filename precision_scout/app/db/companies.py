"""
Mock company universe.

A fixed set of thesis-relevant companies used for browsing, search and
enrichment. Custom companies added through the API live in the workspace
store, not here.
"""
from typing import Dict, List, Optional

from .schemas import Company, FundingRound

COMPANIES: List[Company] = [
    Company(
        id="ledgerline",
        name="Ledgerline",
        website="https://ledgerline.example.com",
        industry="Fintech",
        stage="Seed",
        thesis_tags=["fintech_infra", "developer_tools"],
        location="New York, NY",
        description="Ledger and reconciliation APIs for vertical software platforms embedding payments.",
        last_funding_round=FundingRound(stage="Seed", amount_millions=6, date="2024-03-12", lead_investor="Foundry Lane"),
        employee_count_range="11-50",
    ),
    Company(
        id="clinicflow",
        name="ClinicFlow",
        website="https://clinicflow.example.com",
        industry="Healthcare",
        stage="Series A",
        thesis_tags=["vertical_saas", "applied_ai"],
        location="Boston, MA",
        description="Front-desk and billing workflow automation for independent specialty clinics.",
        last_funding_round=FundingRound(stage="Series A", amount_millions=18, date="2024-06-02", lead_investor="Harbor Peak"),
        employee_count_range="51-200",
    ),
    Company(
        id="gridmind",
        name="GridMind",
        website="https://gridmind.example.com",
        industry="Climate",
        stage="Pre-Seed",
        thesis_tags=["climate", "ai_infrastructure"],
        location="Berlin, Germany",
        description="Forecasting models for distributed energy resources and utility grid operators.",
        last_funding_round=FundingRound(stage="Pre-Seed", amount_millions=1.5, date="2023-11-20"),
        employee_count_range="1-10",
    ),
    Company(
        id="tracecraft",
        name="TraceCraft",
        website="https://tracecraft.example.com",
        industry="Developer Tools",
        stage="Seed",
        thesis_tags=["developer_tools", "ai_infrastructure"],
        location="San Francisco, CA",
        description="Open-source observability and evaluation SDK for LLM applications.",
        last_funding_round=FundingRound(stage="Seed", amount_millions=4.2, date="2024-01-18", lead_investor="Signal Fire Works"),
        employee_count_range="11-50",
    ),
    Company(
        id="fieldcrew",
        name="FieldCrew",
        website="https://fieldcrew.example.com",
        industry="Construction",
        stage="Seed",
        thesis_tags=["vertical_saas", "future_of_work"],
        location="Austin, TX",
        description="Scheduling and job-costing software for specialty trade contractors.",
        last_funding_round=FundingRound(stage="Seed", amount_millions=5, date="2023-09-07", lead_investor="Longhorn Ventures"),
        employee_count_range="11-50",
    ),
    Company(
        id="stackbay",
        name="Stackbay",
        website="https://stackbay.example.com",
        industry="Marketplaces",
        stage="Series B+",
        thesis_tags=["marketplaces"],
        location="London, UK",
        description="B2B marketplace for refurbished data-center hardware.",
        last_funding_round=FundingRound(stage="Series B+", amount_millions=42, date="2022-10-15", lead_investor="Northgate Capital"),
        employee_count_range="201-500",
    ),
    Company(
        id="lexpilot",
        name="LexPilot",
        website="https://lexpilot.example.com",
        industry="Legal",
        stage="Series A",
        thesis_tags=["vertical_saas", "applied_ai"],
        location="Toronto, Canada",
        description="AI copilot for contract review inside mid-market legal operations teams.",
        last_funding_round=FundingRound(stage="Series A", amount_millions=14, date="2024-04-25", lead_investor="Maple Row"),
        employee_count_range="51-200",
    ),
    Company(
        id="vectorly",
        name="Vectorly",
        website="https://vectorly.example.com",
        industry="Developer Tools",
        stage="Pre-Seed",
        thesis_tags=["ai_infrastructure", "developer_tools"],
        location="Paris, France",
        description="Managed vector search with usage-based pricing for retrieval-heavy apps.",
        employee_count_range="1-10",
    ),
    Company(
        id="shiftwise",
        name="Shiftwise",
        website="https://shiftwise.example.com",
        industry="HR Tech",
        stage="Bootstrapped",
        thesis_tags=["future_of_work"],
        location="Chicago, IL",
        description="Self-serve shift scheduling for hourly workforces in hospitality.",
        employee_count_range="11-50",
    ),
    Company(
        id="carbonbook",
        name="CarbonBook",
        website="https://carbonbook.example.com",
        industry="Climate",
        stage="Seed",
        thesis_tags=["climate", "vertical_saas"],
        location="Amsterdam, Netherlands",
        description="Carbon accounting for food and beverage manufacturers replacing spreadsheets and legacy ERP modules.",
        last_funding_round=FundingRound(stage="Seed", amount_millions=3.8, date="2024-02-09", lead_investor="Tulip Partners"),
        employee_count_range="11-50",
    ),
    Company(
        id="claimcraft",
        name="ClaimCraft",
        website="https://claimcraft.example.com",
        industry="Insurance",
        stage="Series A",
        thesis_tags=["fintech_infra", "applied_ai"],
        location="Hartford, CT",
        description="Claims intake and triage automation for regional property and casualty carriers.",
        last_funding_round=FundingRound(stage="Series A", amount_millions=21, date="2023-12-01", lead_investor="Charter Oak Capital"),
        employee_count_range="51-200",
    ),
    Company(
        id="quarrydata",
        name="QuarryData",
        website="https://quarrydata.example.com",
        industry="Data Infrastructure",
        stage="Seed",
        thesis_tags=["ai_infrastructure", "developer_tools"],
        location="Seattle, WA",
        description="Data labeling pipelines and synthetic data generation for computer vision teams.",
        last_funding_round=FundingRound(stage="Seed", amount_millions=7.5, date="2024-05-14"),
        employee_count_range="11-50",
    ),
]

_COMPANIES_BY_ID: Dict[str, Company] = {company.id: company for company in COMPANIES}


def get_mock_company(company_id: str) -> Optional[Company]:
    return _COMPANIES_BY_ID.get(company_id)
