"""
Coarse legislative stage inferred from a free-text action description.
"""
from typing import NamedTuple, Optional, Tuple


class LegislativeStage(NamedTuple):
    label: str
    priority: int


# Ordered: the first group with a keyword contained in the text wins.
STAGE_RULES: Tuple[Tuple[Tuple[str, ...], LegislativeStage], ...] = (
    (("became public law", "signed by president", "enacted"), LegislativeStage("Signed Into Law", 10)),
    (("vetoed",), LegislativeStage("Vetoed", 9)),
    (("passed house", "passed senate", "agreed to in"), LegislativeStage("Passed Chamber", 8)),
    (("cloture", "floor consideration", "placed on calendar"), LegislativeStage("Floor Vote Pending", 7)),
    (("reported by", "ordered to be reported"), LegislativeStage("Reported by Committee", 6)),
    (("hearing", "markup"), LegislativeStage("Committee Hearing", 5)),
    (("referred to", "subcommittee"), LegislativeStage("In Committee", 4)),
    (("introduced", "read twice", "sponsor introductory"), LegislativeStage("Introduced", 3)),
)

DEFAULT_STAGE = LegislativeStage("In Progress", 3)

STAGE_PRIORITIES = frozenset({stage.priority for _, stage in STAGE_RULES} | {DEFAULT_STAGE.priority})


def classify_stage(action_text: Optional[str]) -> LegislativeStage:
    """
    Map an action description to a stage label and priority.

    Higher priority means further along. A description that matches several
    groups ("Signed by President ... referred to ...") takes the earliest one.
    """
    text = (action_text or "").lower()
    if not text:
        return DEFAULT_STAGE
    for keywords, stage in STAGE_RULES:
        if any(keyword in text for keyword in keywords):
            return stage
    return DEFAULT_STAGE
