"""
Legistar Web API client (Granicus). One instance per city portal.

Endpoints take OData query options ($filter, $orderby, $top); no key needed.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from shared.utils.config import get_settings

from .errors import UpstreamError

logger = logging.getLogger(__name__)


class LegistarClient:

    def __init__(self, http_client: httpx.AsyncClient, client: str, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (base_url or get_settings().legistar_base_url).rstrip("/")
        self.http = http_client

    @property
    def portal_url(self) -> str:
        return f"https://{self.client}.legistar.com"

    async def fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/{self.client}/{endpoint}"
        logger.info(f"Fetching: {url} {params or ''}")
        try:
            response = await self.http.get(url, params=params, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise UpstreamError(f"Legistar request failed for {self.client}/{endpoint}: {e}") from e

        if not response.is_success:
            raise UpstreamError(f"Legistar API error: {response.status_code} for {url}")

        try:
            return response.json()
        except ValueError as e:
            logger.warning(
                f"JSON parse failed for {self.client}/{endpoint}. First 200 chars: {response.text[:200]}"
            )
            raise UpstreamError(f"Legistar API returned non-JSON for {self.client}/{endpoint}") from e

    async def fetch_list(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        data = await self.fetch(endpoint, params)
        if not isinstance(data, list):
            raise UpstreamError(f"Legistar returned {type(data).__name__} instead of a list for {self.client}/{endpoint}")
        return data

    async def get_bodies(self) -> List[Dict[str, Any]]:
        return await self.fetch_list("Bodies")

    async def get_office_records(self) -> List[Dict[str, Any]]:
        return await self.fetch_list("OfficeRecords", {"$orderby": "OfficeRecordTitle"})

    async def get_persons(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self.fetch_list("Persons", params)

    async def get_matters(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self.fetch_list("Matters", params)

    async def get_events(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self.fetch_list("Events", params)

    async def get_person_votes(self, person_id: str) -> List[Dict[str, Any]]:
        return await self.fetch_list(
            f"Persons/{person_id}/Votes",
            {"$top": 200, "$orderby": "VoteLastModifiedUtc desc"},
        )

    async def get_matter(self, matter_id: str) -> Dict[str, Any]:
        data = await self.fetch(f"Matters/{matter_id}")
        if not isinstance(data, dict):
            raise UpstreamError(f"Legistar returned no matter {matter_id} for {self.client}")
        return data

    async def get_matter_sponsors(self, matter_id: str) -> List[Dict[str, Any]]:
        return await self.fetch_list(f"Matters/{matter_id}/Sponsors")

    async def get_matter_histories(self, matter_id: str) -> List[Dict[str, Any]]:
        return await self.fetch_list(f"Matters/{matter_id}/Histories")

    async def get_event_items(self, event_id: str) -> List[Dict[str, Any]]:
        return await self.fetch_list(
            f"Events/{event_id}/EventItems",
            {"AgendaNote": 1, "MinutesNote": 1},
        )
