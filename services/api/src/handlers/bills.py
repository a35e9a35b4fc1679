"""GET /bills: most recently updated federal bills of the current Congress."""
import logging
from typing import Any, Dict, Optional

from ..congress_client import CongressClient
from ..congress_parser import extract_bills, parse_bill_item
from .params import parse_int_param

logger = logging.getLogger(__name__)

USAGE = "?limit=50&offset=0"
MAX_LIMIT = 250  # Congress.gov page size cap


async def list_federal_bills(
    client: CongressClient,
    congress: int,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Fetch and normalize one page of bills.

    Returns:
        {"bills": [LegislativeItem...], "source": "congress.gov"}
    """
    page_limit = parse_int_param(limit, "limit", 50, minimum=1, maximum=MAX_LIMIT, usage=USAGE)
    page_offset = parse_int_param(offset, "offset", 0, usage=USAGE)

    data = await client.list_bills(congress, limit=page_limit, offset=page_offset)
    raw_bills = extract_bills(data)
    logger.info(f"Fetched {len(raw_bills)} bills (congress={congress}, offset={page_offset})")

    bills = [parse_bill_item(raw, congress).to_response() for raw in raw_bills]
    return {"bills": bills, "source": "congress.gov"}
