"""Unit tests for the federal and state bill list handlers."""
import pytest
from unittest.mock import AsyncMock, Mock

from services.api.src.errors import BadRequestError, UpstreamError
from services.api.src.handlers.bills import list_federal_bills
from services.api.src.handlers.state_bills import list_state_bills


@pytest.fixture
def congress_client():
    client = Mock()
    client.list_bills = AsyncMock(return_value={"bills": [
        {
            "congress": 119, "type": "S", "number": "5", "title": "Laken Riley Act",
            "url": "https://api.congress.gov/v3/bill/119/s/5?format=json",
            "latestAction": {"actionDate": "2025-01-29", "text": "Became Public Law No: 119-1."},
        },
        {
            "congress": 119, "type": "HR", "number": "187", "title": "Rural Water Act",
            "latestAction": {"actionDate": "2025-01-09", "text": "Introduced in House"},
        },
    ]})
    return client


@pytest.fixture
def legiscan_client():
    entries = {
        str(i): {
            "bill_id": 100 + i,
            "number": f"HB{2000 + i}",
            "title": f"Bill {i}",
            "last_action_date": f"2025-02-{i + 1:02d}",
            "last_action": "Passed House",
        }
        for i in range(5)
    }
    entries["session"] = {"session_id": 2100}
    client = Mock()
    client.get_master_list = AsyncMock(return_value=entries)
    return client


class TestListFederalBills:

    def test_normalizes_bills(self, congress_client, run):
        result = run(list_federal_bills(congress_client, 119, "2", "10"))

        congress_client.list_bills.assert_awaited_once_with(119, limit=2, offset=10)
        assert result["source"] == "congress.gov"
        first, second = result["bills"]
        assert first["statusDisplay"] == "Signed Into Law"
        assert first["statusPriority"] == 10
        assert first["url"] == "https://www.congress.gov/bill/119th-congress/senate-bill/5"
        assert second["statusDisplay"] == "Introduced"
        assert second["url"] == "https://www.congress.gov/bill/119th-congress/house-bill/187"

    def test_defaults(self, congress_client, run):
        run(list_federal_bills(congress_client, 119))
        congress_client.list_bills.assert_awaited_once_with(119, limit=50, offset=0)

    @pytest.mark.parametrize("limit,offset", [("abc", None), ("0", None), ("251", None), (None, "-1")])
    def test_bad_paging(self, congress_client, run, limit, offset):
        with pytest.raises(BadRequestError):
            run(list_federal_bills(congress_client, 119, limit, offset))
        congress_client.list_bills.assert_not_awaited()

    def test_empty_upstream(self, congress_client, run):
        congress_client.list_bills.return_value = {}
        assert run(list_federal_bills(congress_client, 119)) == {"bills": [], "source": "congress.gov"}

    def test_upstream_error_propagates(self, congress_client, run):
        congress_client.list_bills.side_effect = UpstreamError("Congress.gov API error: 500")
        with pytest.raises(UpstreamError):
            run(list_federal_bills(congress_client, 119))


class TestListStateBills:

    def test_pages_newest_first(self, legiscan_client, run):
        result = run(list_state_bills(legiscan_client, "arizona", "2", "1"))

        legiscan_client.get_master_list.assert_awaited_once_with("AZ")
        assert result["state"] == "AZ"
        assert result["source"] == "legiscan.com"
        assert [b["number"] for b in result["bills"]] == ["HB2003", "HB2002"]
        assert result["pagination"] == {"limit": 2, "offset": 1, "returned": 2, "total_estimate": 5}
        assert result["bills"][0]["statusDisplay"] == "Passed Chamber"

    def test_offset_past_end(self, legiscan_client, run):
        result = run(list_state_bills(legiscan_client, "AZ", None, "50"))
        assert result["bills"] == []
        assert result["pagination"]["returned"] == 0

    @pytest.mark.parametrize("state", [None, "", "   "])
    def test_missing_state(self, legiscan_client, run, state):
        with pytest.raises(BadRequestError, match="Missing state"):
            run(list_state_bills(legiscan_client, state))

    def test_unknown_state(self, legiscan_client, run):
        with pytest.raises(BadRequestError, match="Unrecognized state"):
            run(list_state_bills(legiscan_client, "Atlantis"))
        legiscan_client.get_master_list.assert_not_awaited()
