import logging
from typing import Any, Dict, Optional

import httpx

from shared.utils.config import get_settings

from .errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class LegiScanClient:
    """Client for interacting with LegiScan API"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """Initialize LegiScan client"""
        settings = get_settings()
        self.api_key = api_key or settings.legiscan_api_key
        if not self.api_key:
            raise ConfigurationError("Missing LEGISCAN_API_KEY env var.")

        self.base_url = (base_url or settings.legiscan_base_url).rstrip("/")
        self.http = http_client

    async def _make_request(self, operation: str, **params) -> Dict[str, Any]:
        """
        Make a request to LegiScan API

        Args:
            operation: API operation name (e.g., 'getMasterList', 'getBill')
            **params: Additional query parameters

        Returns:
            API response as dictionary
        """
        params_dict = {
            "key": self.api_key,
            "op": operation,
            **params
        }

        logger.debug(f"Making API request: {operation} with params: {params}")
        try:
            response = await self.http.get(f"{self.base_url}/", params=params_dict)
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {e}")
            raise UpstreamError(f"LegiScan request failed: {e}") from e

        if not response.is_success:
            logger.error(f"HTTP Error {response.status_code}: {response.reason_phrase}")
            raise UpstreamError(f"HTTP Error {response.status_code}: {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"JSON decode error: {e}")
            raise UpstreamError(f"JSON decode error: {e}") from e

        # Check for API errors
        if data.get("status") != "OK":
            error_msg = data.get("alert", {}).get("message", "Unknown error")
            logger.error(f"LegiScan API error: {error_msg}")
            raise UpstreamError(f"LegiScan API error: {error_msg}")

        return data

    async def get_master_list(self, state: str) -> Dict[str, Any]:
        """
        Get the master list of bills for a state's current session

        Args:
            state: Two-letter state code (e.g., "CA", "NY")

        Returns:
            Master list dictionary: a "session" entry plus one entry per bill
        """
        logger.debug(f"Fetching master list for {state}...")
        data = await self._make_request("getMasterList", state=state)
        return data.get("masterlist", {})
