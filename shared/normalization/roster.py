"""
Pick the sitting elected members of a city's primary governing body.

Legistar portals list every staff contact (clerks, attorneys, view-only
accounts) as a Person next to the handful of elected officials, so the
roster is derived from office records in the council body instead, with
looser fallbacks when a portal lacks body or office-record data.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

from shared.models.council import CouncilBody, CouncilMember, OfficeRecord, Person

logger = logging.getLogger(__name__)

PRIMARY_BODY_KEYWORDS = (
    "city council",
    "town council",
    "mayor and council",
    "mayor & council",
    "board of supervisors",
    "common council",
)
BROAD_BODY_KEYWORDS = ("council", "mayor", "aldermen")
EXCLUDED_BODY_KEYWORDS = (
    "advisory",
    "committee",
    "commission",
    "subcommittee",
    "task force",
    "authority",
    "board of adjustment",
    "planning",
    "zoning",
)
STAFF_NAME_KEYWORDS = (
    "system",
    "monitor",
    "view only",
    "test",
    "admin",
    "clerk",
    "secretary",
    "attorney",
    "manager",
    "director",
    "coordinator",
    "analyst",
    "assistant",
    "staff",
)


class RosterResult(NamedTuple):
    members: List[CouncilMember]
    council_body_ids: List[int]


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _naive_utc(now: datetime) -> datetime:
    if now.tzinfo is not None:
        return now.astimezone(timezone.utc).replace(tzinfo=None)
    return now


def select_council_bodies(bodies: Sequence[CouncilBody]) -> List[CouncilBody]:
    """
    Active bodies that look like the primary governing body.

    Falls back to a broader keyword set (minus boards, commissions and
    committees) when no body matches the primary keywords.
    """
    active = [b for b in bodies if b.active]

    primary = [b for b in active if _contains_any(b.name.lower(), PRIMARY_BODY_KEYWORDS)]
    if primary:
        return primary

    return [
        b for b in active
        if _contains_any(b.name.lower(), BROAD_BODY_KEYWORDS)
        and not _contains_any(b.name.lower(), EXCLUDED_BODY_KEYWORDS)
    ]


def is_office_active(record: OfficeRecord, now: datetime) -> bool:
    """No end date, or an end date strictly after now. Unparseable end dates count as ended."""
    if not record.end_date:
        return True
    end = _parse_timestamp(record.end_date)
    if end is None:
        return False
    return end > _naive_utc(now)


def active_council_offices(
    office_records: Sequence[OfficeRecord],
    council_body_ids: Sequence[int],
    now: datetime,
) -> List[OfficeRecord]:
    """Currently active records in the council bodies (any body when none was identified)."""
    body_ids = set(council_body_ids)
    return [
        record for record in office_records
        if (not body_ids or record.body_id in body_ids) and is_office_active(record, now)
    ]


def looks_like_staff(person: Person) -> bool:
    return _contains_any((person.full_name or "").lower(), STAFF_NAME_KEYWORDS)


def _enrich(person: Person, office: Optional[OfficeRecord]) -> CouncilMember:
    return CouncilMember(
        id=person.id,
        first_name=person.first_name,
        last_name=person.last_name,
        full_name=person.full_name,
        email=person.email,
        phone=person.phone,
        website=person.website,
        address=person.address,
        title=office.title if office else None,
        body_name=office.body_name if office else None,
        start_date=office.start_date if office else None,
        end_date=office.end_date if office else None,
        active=True,
    )


def select_council_members(
    bodies: Sequence[CouncilBody],
    office_records: Sequence[OfficeRecord],
    persons: Sequence[Person],
    now: Optional[datetime] = None,
) -> RosterResult:
    """
    Persons currently holding elected office in the primary governing body.

    Args:
        bodies: All bodies of the jurisdiction (may be empty if unavailable)
        office_records: All office records (may be empty if unavailable)
        persons: Persons as returned by the source
        now: Reference time for "currently active"; defaults to UTC now

    Returns:
        RosterResult with the members, in person order, and the ids of the
        bodies treated as the council
    """
    now = now or datetime.now(timezone.utc)

    council_bodies = select_council_bodies(bodies)
    council_body_ids = [b.id for b in council_bodies]
    logger.debug(f"Council bodies: {[b.name for b in council_bodies]}")

    offices = active_council_offices(office_records, council_body_ids, now)

    # First active office per person, in record order
    primary_office: Dict[int, OfficeRecord] = {}
    for record in offices:
        if record.person_id is not None and record.person_id not in primary_office:
            primary_office[record.person_id] = record

    if primary_office:
        selected = [p for p in persons if p.id in primary_office and p.active]
    else:
        logger.info("No active council office records, falling back to name filtering")
        selected = [p for p in persons if p.active and not looks_like_staff(p)]

    members = [_enrich(p, primary_office.get(p.id)) for p in selected]
    return RosterResult(members=members, council_body_ids=council_body_ids)
