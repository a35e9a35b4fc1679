"""
Municipalities with a verified Legistar portal.

A city is listed as verified only after the verify report confirmed that
its portal has active members, legislation and meetings. Portals that
exist but are empty stay listed with verified=False so requests get a
specific 404 instead of an empty roster.
"""
from types import MappingProxyType
from typing import List, NamedTuple, Optional


class CityRecord(NamedTuple):
    client: str
    state: str
    population: int
    verified: bool
    verified_date: str
    notes: str

    @property
    def portal_url(self) -> str:
        return f"https://{self.client}.legistar.com"


CITY_DATABASE = MappingProxyType({
    "Phoenix, AZ": CityRecord(
        "phoenix", "AZ", 1680992, True, "2026-02-23",
        "Full data: members, legislation, meetings, votes",
    ),
    "Mesa, AZ": CityRecord(
        "mesa", "AZ", 504258, True, "2026-02-23",
        "Active portal with agendas and legislation",
    ),
    "Apache Junction, AZ": CityRecord(
        "apachejunction", "AZ", 44632, True, "2026-02-23",
        "Active meeting records from 2016 to present",
    ),
    "Goodyear, AZ": CityRecord("goodyear", "AZ", 101399, True, "2026-02-27", "Legistar portal active"),
    "Lake Havasu City, AZ": CityRecord("lakehavasucity", "AZ", 57761, True, "2026-02-27", "Legistar portal active"),
    "Maricopa, AZ": CityRecord("maricopa", "AZ", 58722, True, "2026-02-27", "Legistar portal active"),
    "Yuma, AZ": CityRecord("yuma-az", "AZ", 100000, True, "2026-02-27", "Legistar portal active"),
    "Glendale, AZ": CityRecord(
        "glendale-az", "AZ", 252381, False, "2026-02-23",
        "Legistar installed but Members(0), Legislation(0), Calendar(0)",
    ),
})

COVERAGE = "Arizona"


def lookup_city(name: Optional[str]) -> Optional[CityRecord]:
    return CITY_DATABASE.get(name or "")


def verified_city_names() -> List[str]:
    return [name for name, city in CITY_DATABASE.items() if city.verified]


def verified_cities() -> List[dict]:
    """Verified cities for the picker, largest first."""
    cities = [
        {
            "name": name,
            "state": city.state,
            "population": city.population,
            "verifiedDate": city.verified_date,
            "portalUrl": city.portal_url,
        }
        for name, city in CITY_DATABASE.items()
        if city.verified
    ]
    return sorted(cities, key=lambda c: c["population"], reverse=True)
