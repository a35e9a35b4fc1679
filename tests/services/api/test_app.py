"""HTTP-level tests for the API routes."""
import httpx
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, Mock, patch

from services.api.src.app import (
    app,
    get_congress_client,
    get_http_client,
    get_legiscan_client,
    get_summarizer,
)
from services.api.src.errors import UpstreamError
from shared.utils.config import Settings, get_settings


@pytest.fixture
def congress_client():
    client = Mock()
    client.list_bills = AsyncMock(return_value={"bills": []})
    return client


@pytest.fixture
def api(upstream, congress_client):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_settings] = lambda: Settings(current_congress=119)
    app.dependency_overrides[get_congress_client] = lambda: congress_client
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestBillsRoute:

    def test_ok(self, api, congress_client):
        response = api.get("/bills", params={"limit": "5"})
        assert response.status_code == 200
        assert response.json() == {"bills": [], "source": "congress.gov"}
        congress_client.list_bills.assert_awaited_once_with(119, limit=5, offset=0)

    def test_bad_limit(self, api):
        response = api.get("/bills", params={"limit": "many"})
        assert response.status_code == 400
        assert "limit" in response.json()["error"]

    def test_upstream_error(self, api, congress_client):
        congress_client.list_bills.side_effect = UpstreamError("Congress.gov API error: 500 for bill")
        response = api.get("/bills")
        assert response.status_code == 500
        assert response.json() == {"error": "Congress.gov API error: 500 for bill"}

    def test_unexpected_error(self, api, congress_client):
        congress_client.list_bills.side_effect = KeyError("bills")
        response = api.get("/bills")
        assert response.status_code == 500
        assert "error" in response.json()

    def test_missing_api_key(self, api):
        del app.dependency_overrides[get_congress_client]
        with patch("services.api.src.congress_client.get_settings") as m:
            m.return_value = Mock(congress_api_key=None, congress_base_url="https://api.congress.gov/v3")
            response = api.get("/bills")
        assert response.status_code == 500
        assert response.json() == {"error": "Missing CONGRESS_API_KEY env var."}


class TestStateBillsRoute:

    def test_missing_state(self, api):
        app.dependency_overrides[get_legiscan_client] = lambda: Mock()
        response = api.get("/state-bills")
        assert response.status_code == 400
        assert response.json()["usage"].startswith("?state=")

    def test_missing_api_key(self, api):
        with patch("services.api.src.legiscan_client.get_settings") as m:
            m.return_value = Mock(legiscan_api_key=None, legiscan_base_url="https://api.legiscan.com")
            response = api.get("/state-bills", params={"state": "AZ"})
        assert response.status_code == 500
        assert response.json() == {"error": "Missing LEGISCAN_API_KEY env var."}


class TestBillDetailRoute:

    def test_type_query_param(self, api, congress_client):
        congress_client.get_bill = AsyncMock(return_value={"bill": {"title": "Rural Water Act", "latestAction": {}}})
        congress_client.get_bill_actions = AsyncMock(return_value={})
        congress_client.get_bill_summaries = AsyncMock(return_value={})
        congress_client.get_bill_cosponsors = AsyncMock(return_value={})
        app.dependency_overrides[get_summarizer] = lambda: Mock(enabled=False)

        response = api.get("/bill-detail", params={"congress": "119", "type": "hr", "number": "187"})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Rural Water Act"
        assert body["publicUrl"] == "https://www.congress.gov/bill/119th-congress/house-bill/187"
        assert body["stage"] == "In Progress"

    def test_missing_number(self, api):
        app.dependency_overrides[get_summarizer] = lambda: Mock(enabled=False)
        response = api.get("/bill-detail", params={"type": "hr"})
        assert response.status_code == 400
        assert response.json()["usage"] == "?congress=119&type=hr&number=187"


class TestCityCouncilRoute:

    def test_preflight(self, api):
        response = api.options("/city-council")
        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_cities_with_cors(self, api):
        response = api.get("/city-council", params={"type": "cities"})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.json()["coverage"] == "Arizona"

    def test_errors_carry_cors(self, api):
        response = api.get("/city-council", params={"type": "members", "city": "Nowhere, AZ"})
        assert response.status_code == 404
        assert response.headers["access-control-allow-origin"] == "*"
        assert "availableCities" in response.json()

    def test_upstream_failure_body(self, api, upstream):
        upstream.add("/v1/phoenix/Persons/42/Votes", httpx.Response(503))
        with patch("services.api.src.legistar_client.get_settings") as m:
            m.return_value = Mock(legistar_base_url="https://webapi.legistar.com/v1")
            response = api.get("/city-council", params={"city": "Phoenix, AZ", "type": "votes", "personId": "42"})

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == "*"
        body = response.json()
        assert body["error"] == "Failed to fetch city council data"
        assert "503" in body["message"]
        assert body["city"] == "Phoenix, AZ"
        assert body["source"] == "https://phoenix.legistar.com"
        assert "tip" in body
