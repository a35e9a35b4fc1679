"""
Parse Legistar Web API records (PascalCase, Legistar-prefixed fields) into
our council models.
"""
from typing import Any, Dict

from shared.models.council import (
    AgendaItem,
    CouncilBody,
    Matter,
    MatterHistory,
    MatterSponsor,
    Meeting,
    OfficeRecord,
    Person,
    VoteRecord,
)


def matter_url(client: str, raw: Dict[str, Any]) -> str:
    return (
        f"https://{client}.legistar.com/LegislationDetail.aspx"
        f"?ID={raw.get('MatterId')}&GUID={raw.get('MatterGuid')}"
    )


def parse_body(raw: Dict[str, Any]) -> CouncilBody:
    return CouncilBody(
        id=raw.get("BodyId"),
        name=raw.get("BodyName") or "",
        active=raw.get("BodyActiveFlag") == 1,
    )


def parse_office_record(raw: Dict[str, Any]) -> OfficeRecord:
    return OfficeRecord(
        id=raw.get("OfficeRecordId"),
        person_id=raw.get("OfficeRecordPersonId"),
        body_id=raw.get("OfficeRecordBodyId"),
        body_name=raw.get("OfficeRecordBodyName"),
        title=raw.get("OfficeRecordTitle"),
        start_date=raw.get("OfficeRecordStartDate"),
        end_date=raw.get("OfficeRecordEndDate"),
    )


def parse_person(raw: Dict[str, Any]) -> Person:
    address_parts = [raw.get(k) for k in ("PersonAddress1", "PersonCity1", "PersonState1", "PersonZip1")]
    return Person(
        id=raw.get("PersonId"),
        first_name=raw.get("PersonFirstName"),
        last_name=raw.get("PersonLastName"),
        full_name=raw.get("PersonFullName"),
        email=raw.get("PersonEmail") or None,
        phone=raw.get("PersonPhone") or None,
        website=raw.get("PersonWWW") or None,
        address=", ".join(str(p) for p in address_parts if p) or None,
        active=raw.get("PersonActiveFlag") == 1,
    )


def parse_matter(raw: Dict[str, Any], client: str) -> Matter:
    return Matter(
        id=raw.get("MatterId"),
        file=raw.get("MatterFile") or str(raw.get("MatterId")),
        name=raw.get("MatterName"),
        title=raw.get("MatterTitle") or raw.get("MatterName"),
        matter_type=raw.get("MatterTypeName"),
        status=raw.get("MatterStatusName"),
        introduced=raw.get("MatterIntroDate"),
        agenda_date=raw.get("MatterAgendaDate"),
        passed_date=raw.get("MatterPassedDate"),
        enactment_date=raw.get("MatterEnactmentDate"),
        enactment_number=raw.get("MatterEnactmentNumber"),
        body_name=raw.get("MatterBodyName"),
        sponsor=raw.get("MatterSponsorName") or None,
        last_modified=raw.get("MatterLastModifiedUtc"),
        text=raw.get("MatterText") or None,
        url=matter_url(client, raw),
    )


def parse_matter_sponsor(raw: Dict[str, Any]) -> MatterSponsor:
    return MatterSponsor(
        id=raw.get("MatterSponsorNameId"),
        name=raw.get("MatterSponsorName"),
        sequence=raw.get("MatterSponsorSequence"),
    )


def parse_matter_history(raw: Dict[str, Any]) -> MatterHistory:
    return MatterHistory(
        id=raw.get("MatterHistoryId"),
        date=raw.get("MatterHistoryActionDate"),
        action=raw.get("MatterHistoryActionName"),
        body=raw.get("MatterHistoryActionBodyName"),
        description=raw.get("MatterHistoryActionText"),
        passed=raw.get("MatterHistoryPassedFlag"),
        tally=raw.get("MatterHistoryTally"),
    )


def parse_meeting(raw: Dict[str, Any]) -> Meeting:
    return Meeting(
        id=raw.get("EventId"),
        date=raw.get("EventDate"),
        time=raw.get("EventTime"),
        body_name=raw.get("EventBodyName"),
        location=raw.get("EventLocation"),
        agenda_status=raw.get("EventAgendaStatusName"),
        minutes_status=raw.get("EventMinutesStatusName"),
        in_site_url=raw.get("EventInSiteURL"),
        agenda_url=raw.get("EventAgendaFile"),
        minutes_url=raw.get("EventMinutesFile"),
        video_url=raw.get("EventVideoPath") or None,
    )


def parse_vote(raw: Dict[str, Any]) -> VoteRecord:
    return VoteRecord(
        id=raw.get("VoteId"),
        person_name=raw.get("VotePersonName"),
        value=raw.get("VoteValueId"),
        value_name=raw.get("VoteValueName"),
        result=raw.get("VoteResult"),
        event_item_id=raw.get("VoteEventItemId"),
        last_modified=raw.get("VoteLastModifiedUtc"),
    )


def parse_agenda_item(raw: Dict[str, Any]) -> AgendaItem:
    return AgendaItem(
        id=raw.get("EventItemId"),
        title=raw.get("EventItemTitle"),
        matter_id=raw.get("EventItemMatterId"),
        matter_file=raw.get("EventItemMatterFile"),
        matter_name=raw.get("EventItemMatterName"),
        matter_type=raw.get("EventItemMatterType"),
        matter_status=raw.get("EventItemMatterStatus"),
        action_name=raw.get("EventItemActionName"),
        action_text=raw.get("EventItemActionText"),
        passed_flag=raw.get("EventItemPassedFlag"),
        tally=raw.get("EventItemTally"),
        agenda_note=raw.get("EventItemAgendaNote"),
        minutes_note=raw.get("EventItemMinutesNote"),
        roll_call_flag=raw.get("EventItemRollCallFlag"),
    )
