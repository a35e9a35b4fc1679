"""Unit tests for bill identity normalization and public URLs."""
import pytest

from shared.normalization.bill_identity import (
    BillIdentity,
    CONGRESS_GOV_ROOT,
    bill_item_id,
    bill_public_url,
    normalize_bill_url,
    parse_bill_url,
)


class TestNormalizeBillUrl:

    def test_from_fields(self):
        url = normalize_bill_url(119, "hr", "H.R.187")
        assert url == "https://www.congress.gov/bill/119th-congress/house-bill/187"

    def test_type_is_case_insensitive(self):
        url = normalize_bill_url(118, "SJRES", "12")
        assert url == "https://www.congress.gov/bill/118th-congress/senate-joint-resolution/12"

    @pytest.mark.parametrize("code,slug", [
        ("s", "senate-bill"),
        ("hjres", "house-joint-resolution"),
        ("hconres", "house-concurrent-resolution"),
        ("sconres", "senate-concurrent-resolution"),
        ("hres", "house-resolution"),
        ("sres", "senate-resolution"),
    ])
    def test_all_known_types(self, code, slug):
        assert normalize_bill_url(119, code, "5").endswith(f"/119th-congress/{slug}/5")

    def test_falls_back_to_api_url(self):
        url = normalize_bill_url(
            None, None, None,
            "https://api.congress.gov/v3/bill/117/s/2938?format=json",
        )
        assert url == "https://www.congress.gov/bill/117th-congress/senate-bill/2938"

    def test_unknown_type_uses_generic_slug(self):
        url = normalize_bill_url(source_url="https://api.congress.gov/v3/bill/119/xyz/4?format=json")
        assert url == "https://www.congress.gov/bill/119th-congress/xyz-bill/4"

    def test_unknown_type_in_fields_uses_url(self):
        url = normalize_bill_url(119, "xyz", "4", "https://api.congress.gov/v3/bill/119/xyz/4")
        assert url == "https://www.congress.gov/bill/119th-congress/xyz-bill/4"

    def test_number_without_digits_uses_url(self):
        url = normalize_bill_url(119, "hr", "H.R.", "https://api.congress.gov/v3/bill/119/hr/55")
        assert url.endswith("/house-bill/55")

    def test_all_missing_returns_root(self):
        assert normalize_bill_url() == CONGRESS_GOV_ROOT
        assert normalize_bill_url(None, None, None, None) == "https://www.congress.gov/"

    @pytest.mark.parametrize("source_url", [
        "not a url",
        "https://api.congress.gov/v3/member/A000001",
        "https://api.congress.gov/v3/bill/119/hr",
        "https://api.congress.gov/v3/bill/abc/hr/1",
        "http://[::1",
    ])
    def test_malformed_url_returns_root(self, source_url):
        assert normalize_bill_url(source_url=source_url) == CONGRESS_GOV_ROOT

    def test_idempotent(self):
        args = (119, "hr", "H.R.187", "https://api.congress.gov/v3/bill/119/hr/187")
        assert normalize_bill_url(*args) == normalize_bill_url(*args)


class TestParseBillUrl:

    def test_api_locator(self):
        assert parse_bill_url("https://api.congress.gov/v3/bill/119/HR/187?format=json") == BillIdentity(119, "hr", "187")

    def test_public_url(self):
        identity = parse_bill_url("https://www.congress.gov/bill/118th-congress/senate-concurrent-resolution/9")
        assert identity == BillIdentity(118, "sconres", "9")

    def test_public_generic_slug(self):
        assert parse_bill_url("https://www.congress.gov/bill/119th-congress/xyz-bill/4") == BillIdentity(119, "xyz", "4")

    def test_empty(self):
        assert parse_bill_url(None) is None
        assert parse_bill_url("") is None

    @pytest.mark.parametrize("congress,code,number", [
        (119, "hr", "187"),
        (101, "s", "1"),
        (112, "hjres", "44"),
        (113, "sres", "300"),
    ])
    def test_round_trip(self, congress, code, number):
        url = normalize_bill_url(congress, code, number)
        assert parse_bill_url(url) == BillIdentity(congress, code, number)


class TestHelpers:

    def test_bill_public_url_generic(self):
        assert bill_public_url("119", "hr", "187") == "https://www.congress.gov/bill/119th-congress/house-bill/187"
        assert bill_public_url("119", "abc", "7") == "https://www.congress.gov/bill/119th-congress/abc-bill/7"

    def test_bill_item_id(self):
        assert bill_item_id(119, "HR", "187") == "119-hr-187"
        assert bill_item_id(119, "HR", "H.R. 187") == "119-hr-hr187"


class TestNonStringTypeCodes:

    def test_int_type_falls_back_to_url(self):
        url = normalize_bill_url(119, 5, "1", "https://api.congress.gov/v3/bill/119/hr/1")
        assert url == "https://www.congress.gov/bill/119th-congress/house-bill/1"

    def test_int_type_without_url_returns_root(self):
        assert normalize_bill_url(119, 5, "1", None) == CONGRESS_GOV_ROOT

    def test_public_url_with_int_type(self):
        assert bill_public_url(119, 5, "1") == "https://www.congress.gov/bill/119th-congress/5-bill/1"
