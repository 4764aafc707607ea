"""
Tests for company filtering, sorting, pagination and signal timelines.
"""
import pytest

from precision_scout.app.db.companies import COMPANIES, get_mock_company
from precision_scout.app.db.schemas import EnrichmentResult
from precision_scout.app.services.companies import (
    CompanySearchParams,
    filter_companies,
    list_industries,
    build_timeline,
    parse_tags,
    search_companies,
)


def ids(companies):
    return [company.id for company in companies]


def test_universe_has_unique_ids():
    assert len(COMPANIES) == 12
    assert len({company.id for company in COMPANIES}) == 12


def test_default_search_sorts_by_name_and_pages():
    page = search_companies(COMPANIES, CompanySearchParams())
    assert page.total == 12
    assert page.total_pages == 2
    assert page.page == 1
    assert len(page.items) == 10
    assert ids(page.items)[:3] == ["carbonbook", "claimcraft", "clinicflow"]

    second = search_companies(COMPANIES, CompanySearchParams(page=2))
    assert ids(second.items) == ["tracecraft", "vectorly"]


@pytest.mark.parametrize("requested,expected", [(0, 1), (-3, 1), (2, 2), (99, 2)])
def test_page_is_clamped(requested, expected):
    assert search_companies(COMPANIES, CompanySearchParams(page=requested)).page == expected


def test_empty_result_still_has_one_page():
    page = search_companies(COMPANIES, CompanySearchParams(q="no such company anywhere"))
    assert page.total == 0
    assert page.total_pages == 1
    assert page.page == 1
    assert page.items == []


def test_stage_filter():
    seed = filter_companies(COMPANIES, CompanySearchParams(stage="Seed"))
    assert sorted(ids(seed)) == ["carbonbook", "fieldcrew", "ledgerline", "quarrydata", "tracecraft"]


def test_industry_filter():
    climate = filter_companies(COMPANIES, CompanySearchParams(industry="Climate"))
    assert ids(climate) == ["carbonbook", "gridmind"]


def test_tags_require_all():
    dev_tools = filter_companies(COMPANIES, CompanySearchParams(tags=["developer_tools"]))
    assert len(dev_tools) == 4

    both = filter_companies(COMPANIES, CompanySearchParams(tags=["developer_tools", "ai_infrastructure"]))
    assert ids(both) == ["quarrydata", "tracecraft", "vectorly"]


@pytest.mark.parametrize(
    "query,expected",
    [
        ("COPILOT", ["lexpilot"]),
        ("seattle", ["quarrydata"]),
        ("series b", ["stackbay"]),
        ("  gridmind ", ["gridmind"]),
    ],
)
def test_free_text_query(query, expected):
    assert ids(filter_companies(COMPANIES, CompanySearchParams(q=query))) == expected


def test_sort_by_location():
    result = filter_companies(COMPANIES, CompanySearchParams(sort="location"))
    locations = [company.location.casefold() for company in result]
    assert locations == sorted(locations)
    assert result[0].id == "carbonbook"


def test_list_industries():
    industries = list_industries(COMPANIES)
    assert industries[0] == "All"
    assert industries[1:] == sorted(set(industries[1:]))
    assert "Climate" in industries


def test_parse_tags():
    assert parse_tags(None) == []
    assert parse_tags("") == []
    assert parse_tags("climate, applied_ai,,") == ["climate", "applied_ai"]


def test_timeline_funding_label():
    timeline = build_timeline(get_mock_company("clinicflow"))
    assert len(timeline) == 1
    item = timeline[0]
    assert item.type == "funding"
    assert item.label == "Series A round ($18M)"
    assert item.date == "2024-06-02"
    assert item.source == "Harbor Peak"


def test_timeline_fractional_amount():
    timeline = build_timeline(get_mock_company("gridmind"))
    assert timeline[0].label == "Pre-Seed round ($1.5M)"
    assert timeline[0].source is None


def test_timeline_without_funding_is_empty():
    assert build_timeline(get_mock_company("vectorly")) == []


def test_timeline_includes_enrichment_newest_first(payload_factory):
    payload = payload_factory(summary="Ledger APIs")
    enrichment = EnrichmentResult(
        **payload.model_dump(),
        derived_signals=[],
        thesis_match_explanation="",
        score=40,
    )
    timeline = build_timeline(get_mock_company("ledgerline"), enrichment)
    assert [item.type for item in timeline] == ["funding", "enrichment"]
    assert timeline[1].id == "ledgerline-enriched"
    assert timeline[1].date == "2024-01-01T00:00:00.000Z"
    assert timeline[1].source == "https://example.com"
