"""City council records decoded from the municipal legislative records API."""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from shared.models.base import ApiModel


class CouncilBody(ApiModel):
    """Organizational unit such as "City Council" or "Planning Commission" """
    id: int
    name: str = ""
    active: bool = False


class OfficeRecord(ApiModel):
    """A person's role in a body, bounded by start and optional end date"""
    id: Optional[int] = None
    person_id: Optional[int] = None
    body_id: Optional[int] = None
    body_name: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class Person(ApiModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    active: bool = False


class CouncilMember(ApiModel):
    """A person selected as a sitting elected member, with their primary office"""
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    title: Optional[str] = None
    body_name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    active: bool = True


class VoteCategory(str, Enum):
    YES = "yes"
    NO = "no"
    ABSENT = "absent"
    ABSTAIN = "abstain"
    UNCLASSIFIED = "unclassified"


class VoteRecord(ApiModel):
    id: Optional[int] = None
    person_name: Optional[str] = None
    value: Optional[int] = None
    value_name: Optional[str] = None
    result: Optional[int] = None
    event_item_id: Optional[int] = None
    last_modified: Optional[str] = None


class VoteSummary(ApiModel):
    total: int = 0
    yes: int = 0
    no: int = 0
    absent: int = 0
    abstain: int = 0
    attendance_rate: Optional[int] = Field(None, description="Only set when total > 0")

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Matter(ApiModel):
    id: int
    file: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    matter_type: Optional[str] = Field(None, alias="type")
    status: Optional[str] = None
    introduced: Optional[str] = None
    agenda_date: Optional[str] = None
    passed_date: Optional[str] = None
    enactment_date: Optional[str] = None
    enactment_number: Optional[str] = None
    body_name: Optional[str] = None
    sponsor: Optional[str] = None
    last_modified: Optional[str] = None
    text: Optional[str] = None
    url: str


class MatterSponsor(ApiModel):
    id: Optional[int] = None
    name: Optional[str] = None
    sequence: Optional[int] = None


class MatterHistory(ApiModel):
    id: Optional[int] = None
    date: Optional[str] = None
    action: Optional[str] = None
    body: Optional[str] = None
    description: Optional[str] = None
    passed: Optional[int] = None
    tally: Optional[str] = None


class Meeting(ApiModel):
    id: int
    date: Optional[str] = None
    time: Optional[str] = None
    body_name: Optional[str] = None
    location: Optional[str] = None
    agenda_status: Optional[str] = None
    minutes_status: Optional[str] = None
    in_site_url: Optional[str] = Field(None, alias="inSiteURL")
    agenda_url: Optional[str] = Field(None, alias="agendaURL")
    minutes_url: Optional[str] = Field(None, alias="minutesURL")
    video_url: Optional[str] = Field(None, alias="videoURL")


class AgendaItem(ApiModel):
    id: Optional[int] = None
    title: Optional[str] = None
    matter_id: Optional[int] = None
    matter_file: Optional[str] = None
    matter_name: Optional[str] = None
    matter_type: Optional[str] = None
    matter_status: Optional[str] = None
    action_name: Optional[str] = None
    action_text: Optional[str] = None
    passed_flag: Optional[int] = None
    tally: Optional[str] = None
    agenda_note: Optional[str] = None
    minutes_note: Optional[str] = None
    roll_call_flag: Optional[int] = None


class VerificationCheck(ApiModel):
    passed: bool = Field(False, alias="pass")
    count: int = 0
    sample: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
