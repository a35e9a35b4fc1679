"""
Parse Congress.gov API payloads into our bill models.

Congress.gov shapes vary between endpoints and API revisions (list under
"bills" or "results", committees inline or behind a link, subjects as
objects or plain strings); every variant is resolved here.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from shared.models.bill import (
    BillAction,
    BillSummary,
    Committee,
    Cosponsor,
    LegislativeItem,
    Sponsor,
)
from shared.normalization.bill_identity import bill_item_id, normalize_bill_url
from shared.normalization.stages import classify_stage

logger = logging.getLogger(__name__)


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _person_name(raw: Dict[str, Any]) -> str:
    return raw.get("fullName") or f"{raw.get('firstName') or ''} {raw.get('lastName') or ''}".strip()


def extract_bills(data: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Bill list from a /bill response ("bills" in v3, "results" in older payloads)"""
    if not data:
        return []
    return _list(data.get("bills")) or _list(data.get("results"))


def parse_bill_item(raw: Dict[str, Any], default_congress: int) -> LegislativeItem:
    """
    Parse one entry of a bill list into a LegislativeItem.

    Args:
        raw: Bill entry from Congress.gov
        default_congress: Congress used when the entry omits it

    Returns:
        LegislativeItem with public URL and stage derived
    """
    latest_action = raw.get("latestAction") or {}
    action_text = latest_action.get("text") or ""
    action_date = latest_action.get("actionDate") or raw.get("updateDate") or ""
    stage = classify_stage(action_text)

    public_url = normalize_bill_url(
        raw.get("congress"),
        raw.get("type"),
        raw.get("number"),
        raw.get("url") or raw.get("apiUrl"),
    )
    title = raw.get("title") or ""

    return LegislativeItem(
        id=bill_item_id(raw.get("congress"), raw.get("type"), raw.get("number")),
        number=str(raw.get("number") or ""),
        title=title,
        how_it_affects_you=title,
        date=action_date,
        status=action_text,
        status_display=stage.label,
        status_priority=stage.priority,
        url=public_url,
        public_url=public_url,
        api_url=raw.get("url") or "",
        bill_type=str(raw.get("type") or ""),
        congress=raw.get("congress") or default_congress,
    )


def parse_sponsors(bill: Dict[str, Any]) -> List[Sponsor]:
    return [
        Sponsor(
            name=_person_name(s),
            party=s.get("party") or "",
            state=s.get("state") or "",
            district=s.get("district") or None,
            is_by_request=s.get("isByRequest") == "Y" or s.get("isByRequest") is True,
        )
        for s in _list(bill.get("sponsors"))
    ]


def parse_cosponsors(data: Optional[Dict[str, Any]]) -> List[Cosponsor]:
    return [
        Cosponsor(
            name=_person_name(c),
            party=c.get("party") or "",
            state=c.get("state") or "",
            district=c.get("district") or None,
            date=c.get("sponsorshipDate") or "",
        )
        for c in _list((data or {}).get("cosponsors"))
    ]


def parse_actions(data: Optional[Dict[str, Any]]) -> List[BillAction]:
    actions = []
    for a in _list((data or {}).get("actions")):
        chamber = a.get("chamber")
        if not chamber and isinstance(a.get("sourceSystem"), dict):
            chamber = a["sourceSystem"].get("name")
        actions.append(BillAction(
            date=a.get("actionDate") or "",
            chamber=chamber or "",
            text=a.get("text") or "",
            action_type=a.get("type") or "",
        ))
    return actions


def parse_summaries(data: Optional[Dict[str, Any]]) -> List[BillSummary]:
    """Summaries in upstream order (assumed oldest first)"""
    return [
        BillSummary(
            text=s.get("text") or "",
            date=s.get("actionDate") or s.get("updateDate") or "",
            version_code=s.get("versionCode") or "",
            action_desc=s.get("actionDesc") or "",
        )
        for s in _list((data or {}).get("summaries"))
    ]


def best_summary(summaries: List[BillSummary]) -> str:
    """The last summary returned upstream, taken as the most recent"""
    return summaries[-1].text if summaries else ""


def _committee(raw: Dict[str, Any]) -> Committee:
    return Committee(
        name=raw.get("name") or "",
        chamber=raw.get("chamber") or "",
        committee_type=raw.get("type") or "",
    )


def committees_source(bill: Dict[str, Any]) -> Union[List[Committee], str, None]:
    """
    Committees from the bill record.

    Returns:
        A list when committees are inline (list or {"item": ...}), the link
        to fetch when the record only carries {"url": ..., "count": N},
        otherwise None
    """
    raw = bill.get("committees")
    if isinstance(raw, list):
        return [_committee(c) for c in raw if isinstance(c, dict)]
    if isinstance(raw, dict):
        if raw.get("url"):
            return raw["url"]
        if raw.get("item"):
            items = raw["item"] if isinstance(raw["item"], list) else [raw["item"]]
            return [_committee(c) for c in items if isinstance(c, dict)]
    return None


def parse_committees(data: Optional[Dict[str, Any]]) -> List[Committee]:
    return [_committee(c) for c in _list((data or {}).get("committees")) if isinstance(c, dict)]


def parse_subjects(bill: Dict[str, Any]) -> List[str]:
    subjects = bill.get("subjects")
    if not isinstance(subjects, dict):
        return []
    result = []
    for s in _list(subjects.get("legislativeSubjects")):
        name = s.get("name") if isinstance(s, dict) else s
        if name:
            result.append(str(name))
    return result


def parse_policy_area(bill: Dict[str, Any]) -> str:
    policy_area = bill.get("policyArea")
    if isinstance(policy_area, dict):
        return policy_area.get("name") or ""
    return ""
