"""
GET /city-council: council members, legislation, meetings, votes and agendas
for verified cities, from each city's Legistar portal.
"""
import asyncio
import calendar
import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

import httpx
from pydantic import ValidationError

from shared.models.council import VerificationCheck
from shared.normalization.roster import select_council_members
from shared.normalization.votes import summarize_votes
from shared.reference.cities import COVERAGE, lookup_city, verified_cities, verified_city_names

from ..errors import BadRequestError, CivicAPIError, NotFoundError, UpstreamError
from ..legistar_client import LegistarClient
from ..legistar_parser import (
    parse_agenda_item,
    parse_body,
    parse_matter,
    parse_matter_history,
    parse_matter_sponsor,
    parse_meeting,
    parse_office_record,
    parse_person,
    parse_vote,
)
from ..resilience import best_effort, first_non_empty

logger = logging.getLogger(__name__)

T = TypeVar("T")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}

VALID_TYPES = ["cities", "verify", "members", "legislation", "meetings", "votes", "matter-detail", "agenda"]
TYPE_ALIASES = {"persons": "members", "matters": "legislation", "events": "meetings"}

USAGE = {
    "List verified cities": "?type=cities",
    "Verify a new city": "?type=verify&client=glendale-az",
    "Council members": "?city=Phoenix, AZ&type=members",
    "Recent legislation": "?city=Phoenix, AZ&type=legislation",
    "Upcoming meetings": "?city=Phoenix, AZ&type=meetings",
    "Person vote history": "?city=Phoenix, AZ&type=votes&personId=123",
    "Bill details": "?city=Phoenix, AZ&type=matter-detail&matterId=456",
    "Meeting agenda": "?city=Phoenix, AZ&type=agenda&eventId=789",
}

LEGISLATION_MONTHS = 6
VERIFY_MONTHS = 12


def months_before(day: date, months: int) -> date:
    """Same day of month `months` earlier, clamped to the month's length."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def _parse_records(records: List[Dict[str, Any]], parse: Callable[[Dict[str, Any]], T], what: str) -> List[T]:
    """Parse each record, skipping (and logging) the ones that do not validate"""
    parsed = []
    for raw in records:
        try:
            parsed.append(parse(raw))
        except ValidationError as e:
            logger.warning(f"Skipping unparseable {what} record: {e}")
    return parsed


def _odata_date(day: date) -> str:
    return f"datetime'{day.isoformat()}'"


def list_cities() -> Dict[str, Any]:
    cities = verified_cities()
    return {
        "cities": cities,
        "totalCities": len(cities),
        "coverage": COVERAGE,
        "note": "Only cities with verified, active Legistar data are listed. More cities added as they are verified.",
    }


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------

async def _check(name: str, fetch, sample) -> VerificationCheck:
    try:
        records = await fetch()
    except Exception as e:
        logger.info(f"Verification check '{name}' failed: {e}")
        return VerificationCheck(passed=False, count=0, error=str(e))
    return VerificationCheck(passed=len(records) > 0, count=len(records), sample=[sample(r) for r in records[:3]])


async def _real_persons(legistar: LegistarClient) -> List[Dict[str, Any]]:
    persons = await legistar.get_persons({"$top": 10, "$filter": "PersonActiveFlag eq 1"})
    return [
        p for p in persons
        if p.get("PersonActiveFlag") == 1
        and p.get("PersonFullName")
        and "System" not in p["PersonFullName"]
        and "View Only" not in p["PersonFullName"]
    ]


async def verify_city(legistar: LegistarClient, today: date) -> Dict[str, Any]:
    """
    Probe a portal for usable data: active persons, matters from the last
    12 months, and any events. Passes with persons or legislation.
    """
    recent = months_before(today, VERIFY_MONTHS)
    persons, legislation, events = await asyncio.gather(
        _check("persons", lambda: _real_persons(legistar), lambda p: p["PersonFullName"]),
        _check(
            "legislation",
            lambda: legistar.get_matters({
                "$top": 10,
                "$filter": f"MatterIntroDate ge {_odata_date(recent)}",
                "$orderby": "MatterIntroDate desc",
            }),
            lambda m: m.get("MatterFile") or m.get("MatterName") or "Untitled",
        ),
        _check(
            "events",
            lambda: legistar.get_events({"$top": 10, "$orderby": "EventDate desc"}),
            lambda e: f"{e.get('EventBodyName')} - {e.get('EventDate')}",
        ),
    )
    overall = persons.passed or legislation.passed
    return {
        "type": "verification-report",
        "client": legistar.client,
        "portal": legistar.portal_url,
        "checks": {
            "persons": persons.to_response(),
            "legislation": legislation.to_response(),
            "events": events.to_response(),
        },
        "overallPass": overall,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "recommendation": (
            "✅ This city has active data. Safe to add to CITY_DATABASE."
            if overall
            else "❌ This city has no usable data. Do NOT add yet."
        ),
    }


# ---------------------------------------------------------------------------
# Per-city data
# ---------------------------------------------------------------------------

async def get_members(legistar: LegistarClient, now: datetime) -> Dict[str, Any]:
    """Elected members only, derived from council office records"""
    raw_bodies, raw_offices, raw_persons = await asyncio.gather(
        best_effort(legistar.get_bodies(), [], f"Bodies fetch for {legistar.client}"),
        best_effort(legistar.get_office_records(), [], f"Office records fetch for {legistar.client}"),
        first_non_empty([
            ("active persons", lambda: legistar.get_persons({
                "$filter": "PersonActiveFlag eq 1", "$orderby": "PersonLastName",
            })),
            ("persons by last name", lambda: legistar.get_persons({"$orderby": "PersonLastName", "$top": 500})),
            ("all persons", lambda: legistar.get_persons()),
        ]),
    )

    roster = select_council_members(
        _parse_records(raw_bodies, parse_body, "body"),
        _parse_records(raw_offices, parse_office_record, "office"),
        _parse_records(raw_persons, parse_person, "person"),
        now,
    )
    logger.info(
        f"Found {len(roster.members)} council members in {len(roster.council_body_ids)} "
        f"council bodies for {legistar.client}"
    )
    return {
        "type": "members",
        "members": [m.to_response() for m in roster.members],
        "totalMembers": len(roster.members),
        "councilBodiesFound": len(roster.council_body_ids),
    }


async def get_legislation(legistar: LegistarClient, today: date) -> Dict[str, Any]:
    recent = months_before(today, LEGISLATION_MONTHS)
    matters = await first_non_empty([
        ("introduced since", lambda: legistar.get_matters({
            "$filter": f"MatterIntroDate ge {_odata_date(recent)}",
            "$orderby": "MatterIntroDate desc",
            "$top": 50,
        })),
        ("last modified", lambda: legistar.get_matters({"$orderby": "MatterLastModifiedUtc desc", "$top": 50})),
        ("unfiltered", lambda: legistar.get_matters({"$top": 50})),
    ])
    legislation = [parse_matter(m, legistar.client).to_response() for m in matters]
    return {
        "type": "legislation",
        "legislation": legislation,
        "totalItems": len(legislation),
        "dateRange": f"Last {LEGISLATION_MONTHS} months (since {recent.isoformat()})",
    }


async def get_meetings(legistar: LegistarClient, today: date) -> Dict[str, Any]:
    events = await first_non_empty([
        ("upcoming", lambda: legistar.get_events({
            "$filter": f"EventDate ge {_odata_date(today)}",
            "$orderby": "EventDate",
            "$top": 20,
        })),
        ("most recent", lambda: legistar.get_events({"$orderby": "EventDate desc", "$top": 20})),
        ("unfiltered", lambda: legistar.get_events({"$top": 20})),
    ])
    meetings = [parse_meeting(e).to_response() for e in events]
    return {"type": "meetings", "meetings": meetings, "totalMeetings": len(meetings)}


async def get_votes(legistar: LegistarClient, person_id: Optional[str]) -> Dict[str, Any]:
    if not person_id:
        raise BadRequestError("personId parameter required")

    votes = [parse_vote(v) for v in await legistar.get_person_votes(person_id)]
    return {
        "type": "votes",
        "personId": person_id,
        "summary": summarize_votes(votes).to_response(),
        "votes": [v.to_response() for v in votes],
        "totalVotes": len(votes),
    }


async def get_matter_detail(legistar: LegistarClient, matter_id: Optional[str]) -> Dict[str, Any]:
    if not matter_id:
        raise BadRequestError("matterId parameter required")

    matter, sponsors, histories = await asyncio.gather(
        legistar.get_matter(matter_id),
        best_effort(legistar.get_matter_sponsors(matter_id), [], f"Sponsors fetch for matter {matter_id}"),
        best_effort(legistar.get_matter_histories(matter_id), [], f"History fetch for matter {matter_id}"),
    )
    return {
        "type": "matter-detail",
        "matter": parse_matter(matter, legistar.client).model_dump(
            by_alias=True,
            include={"id", "file", "name", "title", "matter_type", "status", "introduced",
                     "passed_date", "body_name", "text", "url"},
        ),
        "sponsors": [parse_matter_sponsor(s).to_response() for s in sponsors],
        "history": [parse_matter_history(h).to_response() for h in histories],
    }


async def get_agenda(legistar: LegistarClient, event_id: Optional[str]) -> Dict[str, Any]:
    if not event_id:
        raise BadRequestError("eventId parameter required")

    items = [parse_agenda_item(i).to_response() for i in await legistar.get_event_items(event_id)]
    return {"type": "agenda", "eventId": event_id, "items": items, "totalItems": len(items)}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

async def handle_city_council(
    params: Mapping[str, str],
    http_client: httpx.AsyncClient,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Route a city-council request by its `type` parameter.

    Raises:
        BadRequestError: missing city/ids or unknown type
        NotFoundError: city unknown or not verified
        UpstreamError: the city's portal failed
    """
    now = now or datetime.now(timezone.utc)
    today = now.date()
    request_type = params.get("type") or ""
    city = params.get("city") or ""

    if request_type == "cities":
        return list_cities()

    if request_type == "verify":
        client = params.get("client")
        if not client:
            raise BadRequestError(
                "client parameter required for verification",
                usage="?type=verify&client=phoenix",
                tip="The client is the subdomain from [client].legistar.com",
            )
        return await verify_city(LegistarClient(http_client, client), today)

    if not city:
        raise BadRequestError(
            "City parameter required.",
            usage="?city=Phoenix, AZ&type=members",
            availableCities=verified_city_names(),
        )

    city_info = lookup_city(city)
    if city_info is None:
        raise NotFoundError(
            f'"{city}" is not available yet.',
            availableCities=verified_city_names(),
            tip="We are expanding coverage across Arizona. Check back soon.",
        )
    if not city_info.verified:
        raise NotFoundError(
            f'"{city}" has a Legistar portal but no active data yet.',
            portal=city_info.portal_url,
            availableCities=verified_city_names(),
            tip=(
                "This city has installed Legistar but has not populated it with data. "
                "We monitor this and will enable it when data becomes available."
            ),
        )

    request_type = TYPE_ALIASES.get(request_type, request_type)
    legistar = LegistarClient(http_client, city_info.client)

    try:
        if request_type == "members":
            payload = await get_members(legistar, now)
        elif request_type == "legislation":
            payload = await get_legislation(legistar, today)
        elif request_type == "meetings":
            payload = await get_meetings(legistar, today)
        elif request_type == "votes":
            payload = await get_votes(legistar, params.get("personId"))
        elif request_type == "matter-detail":
            payload = await get_matter_detail(legistar, params.get("matterId"))
        elif request_type == "agenda":
            payload = await get_agenda(legistar, params.get("eventId"))
        else:
            raise BadRequestError("Invalid type parameter", validTypes=VALID_TYPES, usage=USAGE)
    except (BadRequestError, NotFoundError):
        raise
    except (CivicAPIError, httpx.HTTPError, ValidationError) as e:
        logger.error(f"City council request failed for {city}: {e}", exc_info=True)
        message = e.message if isinstance(e, CivicAPIError) else str(e)
        raise UpstreamError(
            "Failed to fetch city council data",
            message=message,
            city=city,
            source=legistar.portal_url,
            tip="The Legistar API may be temporarily unavailable. Try again in a moment.",
        ) from e

    return {"city": city, **payload, "source": legistar.portal_url}
