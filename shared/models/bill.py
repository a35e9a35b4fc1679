from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from shared.models.base import ApiModel
from shared.normalization.stages import STAGE_PRIORITIES


class LegislativeItem(ApiModel):
    """One bill or resolution in a list response"""
    id: str
    number: str = ""
    title: str = ""
    how_it_affects_you: str = ""
    date: str = Field("", description="Latest action date")
    status: str = Field("", description="Latest action text")
    status_display: str = Field(..., description="Stage label derived from the latest action")
    status_priority: int = Field(..., description="Stage priority, higher is further along")
    url: str
    public_url: str
    api_url: str = ""
    bill_type: str = Field("", alias="type")
    congress: Optional[int] = None
    state: Optional[str] = None

    @field_validator("status_priority")
    @classmethod
    def _known_priority(cls, value: int) -> int:
        if value not in STAGE_PRIORITIES:
            raise ValueError(f"status_priority must be one of {sorted(STAGE_PRIORITIES)}")
        return value


class Sponsor(ApiModel):
    name: str
    party: str = ""
    state: str = ""
    district: Optional[int] = None
    is_by_request: bool = False


class Cosponsor(ApiModel):
    name: str
    party: str = ""
    state: str = ""
    district: Optional[int] = None
    date: str = Field("", description="Date the cosponsor joined")


class BillAction(ApiModel):
    date: str = ""
    chamber: str = ""
    text: str = ""
    action_type: str = Field("", alias="type")


class BillSummary(ApiModel):
    text: str = ""
    date: str = ""
    version_code: str = ""
    action_desc: str = ""


class Committee(ApiModel):
    name: str = ""
    chamber: str = ""
    committee_type: str = Field("", alias="type")


class BillDetail(ApiModel):
    """Full record for a single federal bill"""
    congress: Any
    bill_type: str = Field(..., alias="type")
    number: str
    title: str = ""
    introduced_date: str = ""
    origin_chamber: str = ""
    sponsors: List[Sponsor] = Field(default_factory=list)
    cosponsors: List[Cosponsor] = Field(default_factory=list)
    cosponsors_count: int = 0
    actions: List[BillAction] = Field(default_factory=list)
    summary: str = Field("", description="Best available summary: the last one upstream returned")
    plain_english_summary: str = ""
    summaries: List[BillSummary] = Field(default_factory=list)
    committees: List[Committee] = Field(default_factory=list)
    policy_area: str = ""
    subjects: List[str] = Field(default_factory=list)
    public_url: str
    latest_action: Dict[str, Any] = Field(default_factory=dict)
    stage: str = ""
    status_priority: int = 3

    @field_validator("actions")
    @classmethod
    def _newest_first(cls, actions: List[BillAction]) -> List[BillAction]:
        # Undated actions sort last; ties keep upstream order
        dated = sorted((a for a in actions if a.date), key=lambda a: a.date, reverse=True)
        return dated + [a for a in actions if not a.date]


class Pagination(BaseModel):
    limit: int
    offset: int
    returned: int
    total_estimate: int
