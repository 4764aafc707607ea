"""
API tests through FastAPI's TestClient.

Workspace storage points at a temporary directory and the pipeline runs in
mock LLM mode with an in-memory cache (see conftest.py).
"""
import pytest


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Precision Scout"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["components"]["redis"]["status"] == "connected"


# Enrichment
def test_enrich_requires_website_and_name(client):
    response = client.post("/api/enrich", json={"name": "Acme"})
    assert response.status_code == 400
    assert response.json() == {
        "error": {"code": 400, "message": "Missing website or name", "type": "http_error"}
    }


def test_enrich_mock_mode(client):
    response = client.post(
        "/api/enrich",
        json={"companyId": "clinicflow", "name": "ClinicFlow", "website": "clinicflow.example.com"},
    )
    assert response.status_code == 200
    enrichment = response.json()["enrichment"]
    assert enrichment["score"] == 80
    assert len(enrichment["derivedSignals"]) == 4
    assert enrichment["whatTheyDo"]
    assert enrichment["sources"][0]["url"] == "https://clinicflow.example.com"
    assert "scrapedAt" in enrichment["sources"][0]
    assert enrichment["thesisMatchExplanation"].startswith("This score reflects")

    cached = client.get("/api/enrich/clinicflow")
    assert cached.status_code == 200
    assert cached.json()["score"] == 80


def test_enrich_pipeline_error_is_500(client, mock_pipeline, monkeypatch):
    async def failing_structure(**kwargs):
        return {"error": "Failed to parse LLM output"}

    monkeypatch.setattr(mock_pipeline.nlp, "structure_company", failing_structure)
    response = client.post("/api/enrich", json={"name": "Acme", "website": "acme.com"})
    assert response.status_code == 500
    assert response.json()["error"]["message"] == "Failed to parse LLM output"


def test_cached_enrichment_missing(client):
    response = client.get("/api/enrich/never-enriched")
    assert response.status_code == 404
    assert response.json()["error"]["type"] == "http_error"


# Companies
def test_list_companies_default_page(client):
    response = client.get("/api/companies")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 12
    assert body["totalPages"] == 2
    assert body["pageSize"] == 10
    assert body["industries"][0] == "All"
    assert body["items"][0]["id"] == "carbonbook"
    assert "thesisTags" in body["items"][0]


def test_list_companies_with_filters(client):
    response = client.get(
        "/api/companies",
        params={"tags": "developer_tools,ai_infrastructure", "stage": "Seed", "sort": "name"},
    )
    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == ["quarrydata", "tracecraft"]


def test_list_companies_rejects_unknown_tag(client):
    response = client.get("/api/companies", params={"tags": "crypto"})
    assert response.status_code == 422
    assert response.json()["error"]["type"] == "validation_error"


def test_list_companies_rejects_unknown_stage(client):
    response = client.get("/api/companies", params={"stage": "Series Z"})
    assert response.status_code == 422


def test_company_detail(client):
    response = client.get("/api/companies/clinicflow")
    assert response.status_code == 200
    body = response.json()
    assert body["company"]["name"] == "ClinicFlow"
    assert body["timeline"][0]["label"] == "Series A round ($18M)"
    assert body["enrichment"] is None
    assert body["notes"] == ""
    assert body["listIds"] == []


def test_company_detail_includes_enrichment(client):
    client.post("/api/enrich", json={"companyId": "vectorly", "name": "Vectorly", "website": "vectorly.example.com"})
    body = client.get("/api/companies/vectorly").json()
    assert body["enrichment"]["score"] == 80
    assert [item["type"] for item in body["timeline"]] == ["enrichment"]


def test_company_detail_not_found(client):
    response = client.get("/api/companies/nope")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Company not found in the current universe"


def test_create_custom_company(client):
    response = client.post("/api/companies", json={"name": "Acme Robotics", "website": "acme.io"})
    assert response.status_code == 201
    company = response.json()
    assert company["id"].startswith("custom-acme-robotics-")
    assert company["website"] == "https://acme.io"

    detail = client.get(f"/api/companies/{company['id']}")
    assert detail.status_code == 200
    assert detail.json()["timeline"] == []

    assert client.get("/api/companies", params={"q": "acme robotics"}).json()["total"] == 1


def test_create_custom_company_requires_website(client):
    response = client.post("/api/companies", json={"name": "Acme", "website": "   "})
    assert response.status_code == 422


def test_notes(client):
    assert client.get("/api/companies/gridmind/notes").json() == {"companyId": "gridmind", "notes": ""}

    response = client.put("/api/companies/gridmind/notes", json={"notes": "Grid partners intro"})
    assert response.status_code == 200
    assert client.get("/api/companies/gridmind/notes").json()["notes"] == "Grid partners intro"
    assert client.get("/api/companies/gridmind").json()["notes"] == "Grid partners intro"


def test_notes_unknown_company(client):
    assert client.put("/api/companies/nope/notes", json={"notes": "x"}).status_code == 404


# Lists
def test_list_lifecycle(client):
    created = client.post("/api/lists", json={"name": "Top picks"})
    assert created.status_code == 201
    list_id = created.json()["id"]

    toggled = client.post(f"/api/lists/{list_id}/companies/lexpilot")
    assert toggled.status_code == 200
    assert toggled.json()["companyIds"] == ["lexpilot"]

    lists = client.get("/api/lists").json()
    assert lists[0]["companies"][0]["id"] == "lexpilot"
    assert client.get("/api/companies/lexpilot").json()["listIds"] == [list_id]

    assert client.post(f"/api/lists/{list_id}/companies/lexpilot").json()["companyIds"] == []

    assert client.delete(f"/api/lists/{list_id}").status_code == 204
    assert client.get("/api/lists").json() == []
    assert client.delete(f"/api/lists/{list_id}").status_code == 404


def test_list_blank_name_rejected(client):
    assert client.post("/api/lists", json={"name": "  "}).status_code == 422


@pytest.mark.parametrize("list_exists,company_id", [(False, "lexpilot"), (True, "nope")])
def test_toggle_not_found(client, list_exists, company_id):
    list_id = client.post("/api/lists", json={"name": "L"}).json()["id"] if list_exists else "list-missing"
    response = client.post(f"/api/lists/{list_id}/companies/{company_id}")
    assert response.status_code == 404


# Saved searches
def test_saved_search_lifecycle(client):
    created = client.post(
        "/api/saved-searches",
        json={"name": "Climate", "query": "", "industry": "Climate", "stage": "Any"},
    )
    assert created.status_code == 201
    search = created.json()
    assert search["createdAt"].endswith("Z")

    assert [s["id"] for s in client.get("/api/saved-searches").json()] == [search["id"]]

    run = client.get(f"/api/saved-searches/{search['id']}/run")
    assert run.status_code == 200
    assert [item["id"] for item in run.json()["items"]] == ["carbonbook", "gridmind"]

    assert client.delete(f"/api/saved-searches/{search['id']}").status_code == 204
    assert client.get(f"/api/saved-searches/{search['id']}/run").status_code == 404


def test_saved_search_with_tags(client):
    search = client.post(
        "/api/saved-searches",
        json={"name": "Applied AI", "tags": ["applied_ai"]},
    ).json()
    run = client.get(f"/api/saved-searches/{search['id']}/run").json()
    assert sorted(item["id"] for item in run["items"]) == ["claimcraft", "clinicflow", "lexpilot"]
