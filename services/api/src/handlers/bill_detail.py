"""
GET /bill-detail: sponsors, cosponsors, actions, summaries, committees and
subjects for one federal bill, plus an optional plain-language summary.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from shared.models.bill import BillDetail, Committee
from shared.normalization.bill_identity import bill_public_url
from shared.normalization.stages import classify_stage

from ..congress_client import CongressClient
from ..congress_parser import (
    best_summary,
    committees_source,
    parse_actions,
    parse_committees,
    parse_cosponsors,
    parse_policy_area,
    parse_sponsors,
    parse_subjects,
    parse_summaries,
)
from ..errors import BadRequestError, UpstreamError
from ..resilience import best_effort
from ..summarizer import PlainLanguageSummarizer

logger = logging.getLogger(__name__)

USAGE = "?congress=119&type=hr&number=187"


async def _load_committees(client: CongressClient, bill: Dict[str, Any]) -> List[Committee]:
    source = committees_source(bill)
    if isinstance(source, str):
        data = await best_effort(client.get_resource(source), {}, "Committee fetch")
        return parse_committees(data)
    return source or []


async def _plain_english(
    summarizer: PlainLanguageSummarizer, title: str, summary: str, congress: Any
) -> str:
    if not summarizer.enabled or not (summary or title):
        return ""
    text = await best_effort(summarizer.summarize(title, summary, congress), None, "AI summary generation")
    return text or ""


async def get_bill_detail(
    client: CongressClient,
    summarizer: PlainLanguageSummarizer,
    congress: Optional[str],
    bill_type: Optional[str],
    number: Optional[str],
    default_congress: int,
) -> Dict[str, Any]:
    """
    Assemble the BillDetail payload.

    The bill record itself is essential; actions, summaries, cosponsors,
    committees and the plain-language rewrite degrade to empty values.
    """
    congress = (congress or "").strip() or str(default_congress)
    bill_type = (bill_type or "").strip().lower()
    number = (number or "").strip()

    if not bill_type or not number:
        raise BadRequestError("Missing type or number.", usage=USAGE)

    bill_data, actions_data, summaries_data, cosponsors_data = await asyncio.gather(
        client.get_bill(congress, bill_type, number),
        best_effort(client.get_bill_actions(congress, bill_type, number), {}, "Actions fetch"),
        best_effort(client.get_bill_summaries(congress, bill_type, number), {}, "Summaries fetch"),
        best_effort(client.get_bill_cosponsors(congress, bill_type, number), {}, "Cosponsors fetch"),
    )

    bill = bill_data.get("bill") if isinstance(bill_data, dict) else None
    if not isinstance(bill, dict):
        raise UpstreamError(f"Congress.gov returned no bill for {congress}/{bill_type}/{number}")

    title = bill.get("title") or ""
    summaries = parse_summaries(summaries_data)
    summary = best_summary(summaries)

    committees, plain_english = await asyncio.gather(
        _load_committees(client, bill),
        _plain_english(summarizer, title, summary, congress),
    )

    cosponsors = parse_cosponsors(cosponsors_data)
    latest_action = bill.get("latestAction") if isinstance(bill.get("latestAction"), dict) else {}
    stage = classify_stage(latest_action.get("text"))

    detail = BillDetail(
        congress=bill.get("congress") or congress,
        bill_type=bill.get("type") or bill_type,
        number=str(bill.get("number") or number),
        title=title,
        introduced_date=bill.get("introducedDate") or "",
        origin_chamber=bill.get("originChamber") or "",
        sponsors=parse_sponsors(bill),
        cosponsors=cosponsors,
        cosponsors_count=len(cosponsors),
        actions=parse_actions(actions_data),
        summary=summary,
        plain_english_summary=plain_english,
        summaries=summaries,
        committees=committees,
        policy_area=parse_policy_area(bill),
        subjects=parse_subjects(bill),
        public_url=bill_public_url(congress, bill_type, number),
        latest_action=latest_action,
        stage=stage.label,
        status_priority=stage.priority,
    )
    logger.info(
        f"Bill {congress}/{bill_type}/{number}: {len(detail.actions)} actions, "
        f"{len(summaries)} summaries, {len(cosponsors)} cosponsors, {len(committees)} committees"
    )
    return detail.to_response()
