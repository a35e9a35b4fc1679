"""GET /state-bills: a state's current-session bills from LegiScan, paged."""
import logging
from typing import Any, Dict, Optional

from shared.models.bill import Pagination
from shared.reference.states import resolve_state

from ..errors import BadRequestError
from ..legiscan_client import LegiScanClient
from ..legiscan_parser import extract_master_list_bills, parse_state_bill
from .params import parse_int_param

logger = logging.getLogger(__name__)

USAGE = "?state=Arizona&limit=50&offset=0"
MAX_LIMIT = 500


async def list_state_bills(
    client: LegiScanClient,
    state: Optional[str],
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Fetch a state's master list and return one page of it, newest action first.

    Args:
        client: LegiScan client
        state: Full state name or two-letter code, case-insensitive

    Returns:
        {"bills", "pagination": {limit, offset, returned, total_estimate}, "source", "state"}
    """
    if not state or not state.strip():
        raise BadRequestError("Missing state parameter.", usage=USAGE)

    code = resolve_state(state)
    if not code:
        raise BadRequestError(
            f"Unrecognized state {state!r}. Use a full state name or two-letter code.",
            usage=USAGE,
        )

    page_limit = parse_int_param(limit, "limit", 50, minimum=1, maximum=MAX_LIMIT, usage=USAGE)
    page_offset = parse_int_param(offset, "offset", 0, usage=USAGE)

    master_list = await client.get_master_list(code)
    entries = extract_master_list_bills(master_list)
    page = entries[page_offset:page_offset + page_limit]
    logger.info(f"{code}: {len(entries)} bills in master list, returning {len(page)}")

    return {
        "bills": [parse_state_bill(entry, code).to_response() for entry in page],
        "pagination": Pagination(
            limit=page_limit,
            offset=page_offset,
            returned=len(page),
            total_estimate=len(entries),
        ).model_dump(),
        "source": "legiscan.com",
        "state": code,
    }
