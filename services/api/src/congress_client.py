import logging
from typing import Any, Dict, Optional

import httpx

from shared.utils.config import get_settings

from .errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class CongressClient:
    """Client for the Congress.gov v3 API"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """Initialize Congress.gov client"""
        settings = get_settings()
        self.api_key = api_key or settings.congress_api_key
        if not self.api_key:
            raise ConfigurationError("Missing CONGRESS_API_KEY env var.")

        self.base_url = (base_url or settings.congress_base_url).rstrip("/")
        self.http = http_client

    async def _make_request(self, path: str, **params) -> Dict[str, Any]:
        """
        Make a GET request to Congress.gov

        Args:
            path: Path below the API base (e.g., 'bill/119/hr/187')
            **params: Additional query parameters

        Returns:
            API response as dictionary
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        query = {"format": "json", **params, "api_key": self.api_key}

        logger.debug(f"Congress.gov request: {path} with params: {params}")
        try:
            response = await self.http.get(url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Congress.gov request failed for {path}: {e}")
            raise UpstreamError(f"Congress.gov request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Congress.gov HTTP {response.status_code} for {path}")
            raise UpstreamError(f"Congress.gov API error: {response.status_code} for {path}")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"JSON decode error for {path}: {e}")
            raise UpstreamError(f"Congress.gov returned non-JSON for {path}") from e

    async def list_bills(self, congress: int, limit: int = 50, offset: int = 0) -> Dict[str, Any]:
        """Most recently updated bills of a Congress"""
        return await self._make_request(
            "bill",
            congress=congress,
            sort="updateDate desc",
            limit=limit,
            offset=offset,
        )

    def _bill_path(self, congress: Any, bill_type: str, number: Any) -> str:
        return f"bill/{congress}/{bill_type}/{number}"

    async def get_bill(self, congress: Any, bill_type: str, number: Any) -> Dict[str, Any]:
        return await self._make_request(self._bill_path(congress, bill_type, number))

    async def get_bill_actions(self, congress: Any, bill_type: str, number: Any) -> Dict[str, Any]:
        return await self._make_request(f"{self._bill_path(congress, bill_type, number)}/actions")

    async def get_bill_summaries(self, congress: Any, bill_type: str, number: Any) -> Dict[str, Any]:
        return await self._make_request(f"{self._bill_path(congress, bill_type, number)}/summaries")

    async def get_bill_cosponsors(self, congress: Any, bill_type: str, number: Any) -> Dict[str, Any]:
        return await self._make_request(f"{self._bill_path(congress, bill_type, number)}/cosponsors")

    async def get_resource(self, url: str) -> Dict[str, Any]:
        """
        Follow a resource link embedded in a response
        (e.g. {"committees": {"url": "https://api.congress.gov/v3/bill/119/hr/187/committees?format=json"}})
        """
        resource_path = httpx.URL(url).path
        base_path = httpx.URL(self.base_url).path.rstrip("/")
        if base_path and resource_path.startswith(base_path + "/"):
            resource_path = resource_path[len(base_path):]
        return await self._make_request(resource_path)
