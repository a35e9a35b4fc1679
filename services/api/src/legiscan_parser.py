"""
Parse LegiScan master list data into our LegislativeItem model.
"""
import logging
import re
from typing import Any, Dict, List

from shared.models.bill import LegislativeItem
from shared.normalization.stages import classify_stage

logger = logging.getLogger(__name__)


def extract_master_list_bills(master_list: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Bill entries of a getMasterList response, newest action first.

    The master list is keyed "0", "1", ... with one extra "session" entry.
    """
    bills = [
        entry for key, entry in master_list.items()
        if key != "session" and isinstance(entry, dict) and entry.get("bill_id")
    ]
    return sorted(bills, key=lambda b: b.get("last_action_date") or "", reverse=True)


def parse_state_bill(entry: Dict[str, Any], state: str) -> LegislativeItem:
    """
    Parse one master list entry into a LegislativeItem.

    Args:
        entry: Master list entry from LegiScan
        state: Two-letter state code the list was fetched for

    Returns:
        LegislativeItem with stage derived from the last action
    """
    state = state.upper()
    number = entry.get("number") or ""
    bill_id = entry.get("bill_id")
    action_text = entry.get("last_action") or ""
    stage = classify_stage(action_text)

    url = entry.get("url") or entry.get("state_link") or f"https://legiscan.com/{state}/bill/{bill_id}"
    title = entry.get("title") or ""

    return LegislativeItem(
        id=re.sub(r"[^a-z0-9-]", "", f"{state}-{number}".lower()),
        number=number,
        title=title,
        how_it_affects_you=entry.get("description") or title,
        date=entry.get("last_action_date") or entry.get("status_date") or "",
        status=action_text,
        status_display=stage.label,
        status_priority=stage.priority,
        url=url,
        public_url=url,
        state=state,
    )
