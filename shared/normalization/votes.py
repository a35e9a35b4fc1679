"""Classify recorded council votes and summarize a member's voting record."""
import math
from typing import Iterable, Optional

from shared.models.council import VoteCategory, VoteRecord, VoteSummary

# Checked in order; a label lands in the first category that matches.
VOTE_KEYWORDS = (
    (VoteCategory.YES, ("aye", "yes", "affirmative")),
    (VoteCategory.NO, ("nay", "no")),
    (VoteCategory.ABSENT, ("absent", "excused")),
    (VoteCategory.ABSTAIN, ("abstain", "present")),
)


def classify_vote(value_name: Optional[str]) -> VoteCategory:
    label = (value_name or "").lower()
    if not label:
        return VoteCategory.UNCLASSIFIED
    for category, keywords in VOTE_KEYWORDS:
        if any(keyword in label for keyword in keywords):
            return category
    return VoteCategory.UNCLASSIFIED


def summarize_votes(votes: Iterable[VoteRecord]) -> VoteSummary:
    """
    Count votes by category and compute the attendance rate.

    Unclassified votes count toward the total only. The attendance rate is
    100 * (total - absent) / total rounded half up, and left unset when there
    are no votes.
    """
    summary = VoteSummary()
    for vote in votes:
        summary.total += 1
        category = classify_vote(vote.value_name)
        if category is not VoteCategory.UNCLASSIFIED:
            setattr(summary, category.value, getattr(summary, category.value) + 1)

    if summary.total > 0:
        rate = 100 * (summary.total - summary.absent) / summary.total
        summary.attendance_rate = int(math.floor(rate + 0.5))
    return summary
