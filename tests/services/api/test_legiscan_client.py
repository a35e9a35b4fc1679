"""Unit tests for LegiScanClient."""
import httpx
import pytest
from unittest.mock import Mock, patch

from services.api.src.errors import ConfigurationError, UpstreamError
from services.api.src.legiscan_client import LegiScanClient


@pytest.fixture
def mock_api_key():
    return "test_api_key_12345"


@pytest.fixture
def client(http_client, mock_api_key):
    return LegiScanClient(http_client, api_key=mock_api_key, base_url="https://api.legiscan.com")


@pytest.fixture
def sample_master_list():
    return {
        "status": "OK",
        "masterlist": {
            "session": {"session_id": 2100, "session_name": "2025 Regular Session"},
            "0": {"bill_id": 1, "number": "HB2001", "title": "Water Act", "last_action_date": "2025-03-01"},
        },
    }


class TestLegiScanClient:
    """Tests for LegiScanClient."""

    def test_init_with_api_key(self, http_client, mock_api_key):
        with patch("services.api.src.legiscan_client.get_settings") as m:
            m.return_value = Mock(legiscan_api_key=None, legiscan_base_url="https://api.legiscan.com")
            c = LegiScanClient(http_client, api_key=mock_api_key)
            assert c.api_key == mock_api_key
            assert c.base_url == "https://api.legiscan.com"

    def test_init_without_api_key_fails(self, http_client):
        with patch("services.api.src.legiscan_client.get_settings") as m:
            m.return_value = Mock(legiscan_api_key=None, legiscan_base_url="https://api.legiscan.com")
            with pytest.raises(ConfigurationError, match="Missing LEGISCAN_API_KEY"):
                LegiScanClient(http_client)

    def test_get_master_list(self, client, upstream, run, sample_master_list, mock_api_key):
        upstream.add("/", sample_master_list)

        result = run(client.get_master_list("AZ"))

        assert result == sample_master_list["masterlist"]
        params = upstream.requests[0].url.params
        assert params["op"] == "getMasterList"
        assert params["state"] == "AZ"
        assert params["key"] == mock_api_key

    def test_api_error_status(self, client, upstream, run):
        upstream.add("/", {"status": "ERROR", "alert": {"message": "Invalid API key"}})
        with pytest.raises(UpstreamError, match="Invalid API key"):
            run(client.get_master_list("AZ"))

    def test_http_error(self, client, upstream, run):
        upstream.add("/", httpx.Response(500, text="oops"))
        with pytest.raises(UpstreamError, match="HTTP Error 500"):
            run(client.get_master_list("AZ"))

    def test_json_decode_error(self, client, upstream, run):
        upstream.add("/", httpx.Response(200, text="not json"))
        with pytest.raises(UpstreamError, match="JSON decode error"):
            run(client.get_master_list("AZ"))

    def test_missing_masterlist(self, client, upstream, run):
        upstream.add("/", {"status": "OK"})
        assert run(client.get_master_list("AZ")) == {}
