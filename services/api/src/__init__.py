"""Civic data API: federal, state and city legislative data normalized for the client app."""

from .app import app
from .congress_client import CongressClient
from .legiscan_client import LegiScanClient
from .legistar_client import LegistarClient

__all__ = ["app", "CongressClient", "LegiScanClient", "LegistarClient"]
