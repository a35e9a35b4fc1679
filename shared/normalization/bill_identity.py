"""
Canonical identity and public Congress.gov URLs for federal bills.

Upstream records identify a bill either by its fields (congress, type code,
number) or only by an API resource locator. Both are reduced to the public
page URL here, degrading through a fallback chain instead of raising.
"""
import logging
import re
from typing import Any, NamedTuple, Optional
from urllib.parse import urlparse

from .ordinal import ordinal

logger = logging.getLogger(__name__)

CONGRESS_GOV_HOST = "https://www.congress.gov"
CONGRESS_GOV_ROOT = f"{CONGRESS_GOV_HOST}/"

# API bill type code -> Congress.gov URL slug
BILL_TYPE_SLUGS = {
    "hr": "house-bill",
    "s": "senate-bill",
    "hjres": "house-joint-resolution",
    "sjres": "senate-joint-resolution",
    "hconres": "house-concurrent-resolution",
    "sconres": "senate-concurrent-resolution",
    "hres": "house-resolution",
    "sres": "senate-resolution",
}
SLUG_BILL_TYPES = {slug: code for code, slug in BILL_TYPE_SLUGS.items()}

_CONGRESS_SEGMENT = re.compile(r"^(\d+)(?:st|nd|rd|th)?(?:-congress)?$", re.IGNORECASE)
_NON_DIGITS = re.compile(r"[^0-9]")


class BillIdentity(NamedTuple):
    congress: int
    bill_type: str
    number: str


def bill_type_slug(bill_type: str) -> Optional[str]:
    """Known slug for a type code (case-insensitive), or None."""
    return BILL_TYPE_SLUGS.get(str(bill_type or "").strip().lower())


def generic_slug(bill_type: str) -> str:
    code = str(bill_type or "").strip().lower()
    return BILL_TYPE_SLUGS.get(code) or f"{code}-bill"


def extract_digits(number: Any) -> str:
    """'H.R.187' -> '187'"""
    if number is None:
        return ""
    return _NON_DIGITS.sub("", str(number))


def _build_url(congress: Any, slug: str, digits: str) -> str:
    return f"{CONGRESS_GOV_HOST}/bill/{ordinal(congress)}-congress/{slug}/{digits}"


def parse_bill_url(url: Optional[str]) -> Optional[BillIdentity]:
    """
    Read (congress, type, number) from a bill locator.

    Handles API locators (".../v3/bill/119/hr/187?format=json") and public
    pages (".../bill/119th-congress/house-bill/187").

    Returns:
        BillIdentity, or None when the URL has no usable bill path
    """
    if not url:
        return None
    try:
        path = urlparse(str(url)).path
    except ValueError:
        return None

    parts = [p for p in path.split("/") if p]
    if "bill" not in parts:
        return None
    i = parts.index("bill")
    if len(parts) < i + 4:
        return None

    congress_seg, type_seg, number_seg = parts[i + 1], parts[i + 2].lower(), parts[i + 3]

    match = _CONGRESS_SEGMENT.match(congress_seg)
    if not match:
        return None

    if type_seg in SLUG_BILL_TYPES:
        bill_type = SLUG_BILL_TYPES[type_seg]
    elif type_seg.endswith("-bill"):
        bill_type = type_seg[: -len("-bill")]
    else:
        bill_type = type_seg

    digits = extract_digits(number_seg)
    if not bill_type or not digits:
        return None

    return BillIdentity(int(match.group(1)), bill_type, digits)


def normalize_bill_url(
    congress: Any = None,
    bill_type: Optional[str] = None,
    number: Any = None,
    source_url: Optional[str] = None,
) -> str:
    """
    Public Congress.gov URL for a bill.

    Tries, in order:
      1. the bill's own fields, when all three are present and the type is known
      2. the upstream resource URL, with a generic "<type>-bill" slug for unknown types
      3. the Congress.gov root
    """
    if congress and bill_type and number:
        slug = bill_type_slug(bill_type)
        digits = extract_digits(number)
        if slug and digits:
            return _build_url(congress, slug, digits)

    identity = parse_bill_url(source_url)
    if identity:
        return _build_url(identity.congress, generic_slug(identity.bill_type), identity.number)

    logger.debug(
        f"No usable bill identity (congress={congress!r}, type={bill_type!r}, "
        f"number={number!r}, url={source_url!r}), using site root"
    )
    return CONGRESS_GOV_ROOT


def bill_public_url(congress: Any, bill_type: str, number: Any) -> str:
    """Direct URL from known request fields; unknown types get a generic slug."""
    return _build_url(congress, generic_slug(bill_type), extract_digits(number))


def bill_item_id(congress: Any, bill_type: Any, number: Any) -> str:
    """Stable list id, e.g. '119-hr-187'."""
    raw = f"{congress}-{bill_type}-{number}".lower()
    return re.sub(r"[^a-z0-9-]", "", raw)
