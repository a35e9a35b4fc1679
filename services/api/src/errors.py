"""
Errors raised by handlers and upstream clients.

Each carries the HTTP status it maps to and the extra JSON fields sent
alongside the "error" message.
"""
from typing import Any, Dict


class CivicAPIError(Exception):
    """Base error with an HTTP status and a JSON body"""

    status_code = 500

    def __init__(self, message: str, /, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.details}


class ConfigurationError(CivicAPIError):
    """A required credential is not configured; no upstream call is made"""
    status_code = 500


class BadRequestError(CivicAPIError):
    """Missing or malformed request parameter"""
    status_code = 400


class NotFoundError(CivicAPIError):
    """Referenced city or state is not in the known set"""
    status_code = 404


class UpstreamError(CivicAPIError):
    """Third-party source returned a non-OK status or an unusable payload"""
    status_code = 500
