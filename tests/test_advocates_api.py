from fastapi.testclient import TestClient

from main import app
from records import RecordSourceError, get_advocate_records
from schemas import HealthCheck


def test_search_without_parameters_returns_first_page(client):
    response = client.get("/api/advocates")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 15
    assert body["page"] == 1
    assert body["limit"] == 20
    assert body["totalPages"] == 1
    assert len(body["data"]) == 15
    assert body["filters"]["query"] is None


def test_city_filter(client):
    body = client.get("/api/advocates", params={"city": "Pho"}).json()

    assert body["total"] == 1
    assert body["data"][0]["city"] == "Phoenix"


def test_search_parameter_takes_precedence_over_query(client):
    body = client.get("/api/advocates", params={"search": "Chicago", "query": "Houston"}).json()

    assert [a["city"] for a in body["data"]] == ["Chicago"]
    assert body["filters"]["query"] == "Chicago"


def test_experience_range(client):
    body = client.get(
        "/api/advocates",
        params={"minExperience": "5", "maxExperience": "10"},
    ).json()

    assert body["total"] > 0
    assert all(5 <= a["yearsOfExperience"] <= 10 for a in body["data"])


def test_malformed_parameters_never_error(client):
    response = client.get(
        "/api/advocates",
        params={"minExperience": "abc", "page": "x", "limit": "0", "sort": "bogus", "direction": "up"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 15
    assert body["page"] == 1
    assert body["limit"] == 20
    assert body["filters"]["minExperience"] is None
    assert body["filters"]["sort"] is None
    assert body["filters"]["direction"] == "asc"


def test_sorted_and_paginated(client):
    body = client.get(
        "/api/advocates",
        params={"sort": "yearsOfExperience", "direction": "desc", "page": "1", "limit": "2"},
    ).json()

    assert [a["yearsOfExperience"] for a in body["data"]] == [14, 13]
    assert body["totalPages"] == 8


def test_out_of_range_page_is_empty(client):
    body = client.get("/api/advocates", params={"page": "99", "limit": "20"}).json()

    assert body["data"] == []
    assert body["total"] == 15


def test_degree_filter_echo(client):
    body = client.get("/api/advocates", params={"degree": "MSW"}).json()

    assert body["filters"]["degree"] == "MSW"
    assert all(a["degree"] == "MSW" for a in body["data"])
    assert body["total"] == 5


def test_record_source_failure_returns_error_body(client):
    def unavailable():
        raise RecordSourceError("connection refused")

    app.dependency_overrides[get_advocate_records] = unavailable

    response = client.get("/api/advocates", params={"city": "Pho"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch advocates"}


def test_requests_carry_process_time_header(client):
    response = client.get("/api/advocates")

    assert "x-process-time" in response.headers


def test_root_and_health(client):
    root = client.get("/").json()
    assert root["health"] == "/health"

    response = client.get("/health")
    assert response.status_code == 200
    health = response.json()
    assert health["status"] == "healthy"
    assert health["checks"]["records"] == {"status": "healthy", "source": "seed", "count": 15}
    assert "database" not in health["checks"]


def test_oversized_numeric_parameters_are_ignored(client):
    response = client.get(
        "/api/advocates",
        params={"minExperience": "9" * 5000, "maxExperience": "8" * 5000, "page": "7" * 4400, "limit": "1" * 4400},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 15
    assert body["page"] == 1
    assert body["limit"] == 20
    assert body["filters"]["minExperience"] is None
    assert body["filters"]["maxExperience"] is None


def test_unexpected_error_returns_generic_error_body():
    def broken():
        raise RuntimeError("boom")

    app.dependency_overrides[get_advocate_records] = broken
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/api/advocates")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_health_reports_unavailable_record_source(client, monkeypatch):
    def unavailable():
        raise RecordSourceError("seed data is invalid")

    monkeypatch.setattr("routers.health.load_advocates", unavailable)

    response = client.get("/health")

    assert response.status_code == 503
    health = HealthCheck.model_validate(response.json())
    assert health.status == "unhealthy"
    assert health.checks["records"]["status"] == "unhealthy"
    assert health.checks["records"]["error"] == "seed data is invalid"


def test_openapi_documents_search_example():
    operation = app.openapi()["paths"]["/api/advocates"]["get"]

    example = operation["responses"]["200"]["content"]["application/json"]["example"]
    assert example["totalPages"] == 1
    assert example["data"][0]["firstName"] == "John"
