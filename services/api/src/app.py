"""
HTTP surface: one route per handler, JSON in and out.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Awaitable, Dict, Optional

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from shared.utils.config import Settings, get_settings

from .congress_client import CongressClient
from .errors import CivicAPIError
from .handlers.bill_detail import get_bill_detail
from .handlers.bills import list_federal_bills
from .handlers.city_council import CORS_HEADERS, handle_city_council
from .handlers.state_bills import list_state_bills
from .legiscan_client import LegiScanClient
from .summarizer import PlainLanguageSummarizer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        app.state.http_client = client
        logger.info(f"Civic data API started ({settings.environment})")
        yield


app = FastAPI(title="Civic Data API", lifespan=lifespan)


@app.exception_handler(CivicAPIError)
async def civic_api_error_handler(request: Request, exc: CivicAPIError) -> JSONResponse:
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_congress_client(http_client: httpx.AsyncClient = Depends(get_http_client)) -> CongressClient:
    return CongressClient(http_client)


def get_legiscan_client(http_client: httpx.AsyncClient = Depends(get_http_client)) -> LegiScanClient:
    return LegiScanClient(http_client)


def get_summarizer(http_client: httpx.AsyncClient = Depends(get_http_client)) -> PlainLanguageSummarizer:
    return PlainLanguageSummarizer(http_client)


async def respond(call: Awaitable[Dict[str, Any]], headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Await a handler and turn its payload or error into a JSON response."""
    try:
        payload = await call
    except CivicAPIError as e:
        if e.status_code >= 500:
            logger.error(f"{type(e).__name__}: {e.message}")
        return JSONResponse(e.to_dict(), status_code=e.status_code, headers=headers)
    except Exception as e:
        logger.error(f"Unhandled error: {e}", exc_info=True)
        return JSONResponse({"error": str(e)}, status_code=500, headers=headers)
    return JSONResponse(payload, headers=headers)


@app.get("/bills")
async def bills(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    client: CongressClient = Depends(get_congress_client),
    settings: Settings = Depends(get_settings),
):
    return await respond(list_federal_bills(client, settings.current_congress, limit, offset))


@app.get("/state-bills")
async def state_bills(
    state: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    client: LegiScanClient = Depends(get_legiscan_client),
):
    return await respond(list_state_bills(client, state, limit, offset))


@app.get("/bill-detail")
async def bill_detail(
    congress: Optional[str] = None,
    bill_type: Optional[str] = Query(None, alias="type"),
    number: Optional[str] = None,
    client: CongressClient = Depends(get_congress_client),
    summarizer: PlainLanguageSummarizer = Depends(get_summarizer),
    settings: Settings = Depends(get_settings),
):
    return await respond(
        get_bill_detail(client, summarizer, congress, bill_type, number, settings.current_congress)
    )


@app.options("/city-council")
async def city_council_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@app.get("/city-council")
async def city_council(request: Request, http_client: httpx.AsyncClient = Depends(get_http_client)):
    return await respond(handle_city_council(request.query_params, http_client), headers=CORS_HEADERS)
