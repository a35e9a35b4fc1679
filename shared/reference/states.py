"""US state names and postal codes (50 states + DC)."""
from types import MappingProxyType
from typing import Optional

STATE_CODES = MappingProxyType({
    "alabama": "AL", "alaska": "AK", "arizona": "AZ", "arkansas": "AR",
    "california": "CA", "colorado": "CO", "connecticut": "CT", "delaware": "DE",
    "district of columbia": "DC", "florida": "FL", "georgia": "GA", "hawaii": "HI",
    "idaho": "ID", "illinois": "IL", "indiana": "IN", "iowa": "IA",
    "kansas": "KS", "kentucky": "KY", "louisiana": "LA", "maine": "ME",
    "maryland": "MD", "massachusetts": "MA", "michigan": "MI", "minnesota": "MN",
    "mississippi": "MS", "missouri": "MO", "montana": "MT", "nebraska": "NE",
    "nevada": "NV", "new hampshire": "NH", "new jersey": "NJ", "new mexico": "NM",
    "new york": "NY", "north carolina": "NC", "north dakota": "ND", "ohio": "OH",
    "oklahoma": "OK", "oregon": "OR", "pennsylvania": "PA", "rhode island": "RI",
    "south carolina": "SC", "south dakota": "SD", "tennessee": "TN", "texas": "TX",
    "utah": "UT", "vermont": "VT", "virginia": "VA", "washington": "WA",
    "west virginia": "WV", "wisconsin": "WI", "wyoming": "WY",
})

VALID_CODES = frozenset(STATE_CODES.values())


def resolve_state(value: Optional[str]) -> Optional[str]:
    """
    Two-letter code for a state given as a code ("az", "AZ") or a full name
    ("Arizona", "new york"). None when unrecognized.
    """
    text = " ".join((value or "").split()).lower()
    if not text:
        return None
    if len(text) == 2 and text.upper() in VALID_CODES:
        return text.upper()
    return STATE_CODES.get(text)
