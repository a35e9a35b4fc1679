"""
Fixtures for the API service tests: an httpx client backed by a routing
MockTransport so no test reaches a real upstream.
"""
import asyncio
from typing import Callable, Dict, List

import httpx
import pytest


class FakeUpstream:
    """
    Routes requests by URL path to canned responses and records every call.

    A route value may be a JSON-able object, an httpx.Response, an exception
    instance (raised as-is) or a callable taking the request.
    """

    def __init__(self):
        self.routes: Dict[str, object] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, value) -> None:
        self.routes[path] = value

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        value = self.routes.get(request.url.path)
        if value is None:
            return httpx.Response(404, json={"message": f"no route for {request.url.path}"})
        if callable(value) and not isinstance(value, httpx.Response):
            value = value(request)
        if isinstance(value, Exception):
            raise value
        if isinstance(value, httpx.Response):
            return value
        return httpx.Response(200, json=value)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def run() -> Callable:
    return asyncio.run
