from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, Dict, List

import httpx
import pytest
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from circonus_api.client import ApiClient
from circonus_api.config import ClientConfig

TEST_TOKEN = "abc123"
TEST_APP = "test"

SEARCH_QUERY = "search=%28host%3D%22somehost.example.com%22%29"
FILTER_QUERY = "f__cleared_on=null"
WRONG_SHAPE_QUERY = "f__check_name=wrong-shape"

KNOWN_ALERT_QUERIES = {
    "",
    SEARCH_QUERY,
    FILTER_QUERY,
    f"{FILTER_QUERY}&{SEARCH_QUERY}",
}


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def alert_payload() -> Dict[str, Any]:
    """One alert in wire format (underscore-prefixed keys)."""
    return {
        "_cid": "/alert/1234",
        "_acknowledgement": "/acknowledgement/1234",
        "_alert_url": "https://example.circonus.com/fault-detection?alert_id=1234",
        "_broker": "/broker/1234",
        "_check": "/check/1234",
        "_check_name": "foo bar",
        "_cleared_on": 1483033602,
        "_cleared_value": "1234",
        "_maintenance": [],
        "_metric_link": "http://example.com/docs/what_to_do_when/foo_bar_failure.html",
        "_metric_name": "baz",
        "_metric_notes": "blah blah blah",
        "_occurred_on": 1483033102,
        "_rule_set": "/rule_set/1234_baz",
        "_severity": 2,
        "_tags": ["cat:tag"],
        "_value": "5678",
    }


def _not_found(request: Request) -> PlainTextResponse:
    target = request.url.path + (f"?{request.url.query}" if request.url.query else "")
    return PlainTextResponse(f"not found: {request.method} {target}", status_code=404)


@pytest.fixture
def fake_api(alert_payload: Dict[str, Any]) -> FastAPI:
    """
    In-process stand-in for the Circonus API mounted under /v2.

    - /alert/1234 returns the test alert; /alert/5000 fails with 500; /alert/7000 returns non-JSON.
    - /alert/8000 and /alert?f__check_name=wrong-shape return JSON of the wrong shape.
    - /alert returns [alert] only for the query strings in KNOWN_ALERT_QUERIES, otherwise 404.
    - Request headers of the last call are kept in app.state.last_headers.
    """
    app = FastAPI()
    app.state.last_headers = {}
    app.state.last_query = None
    router = APIRouter(prefix="/v2")

    @router.get("/alert/{alert_id}")
    def get_alert(request: Request, alert_id: str):
        app.state.last_headers = dict(request.headers)
        if request.headers.get("x-circonus-auth-token") != TEST_TOKEN:
            return PlainTextResponse("forbidden", status_code=403)
        if alert_id == "1234":
            return JSONResponse(alert_payload)
        if alert_id == "5000":
            return PlainTextResponse("internal error", status_code=500)
        if alert_id == "7000":
            return PlainTextResponse("<html>maintenance</html>", status_code=200)
        if alert_id == "8000":
            return JSONResponse({"_cid": "/alert/8000", "_severity": "high"})
        return _not_found(request)

    @router.get("/alert")
    def list_alerts(request: Request):
        app.state.last_headers = dict(request.headers)
        app.state.last_query = request.url.query
        if request.url.query == WRONG_SHAPE_QUERY:
            return JSONResponse({"_cid": "/alert/1234"})
        if request.url.query not in KNOWN_ALERT_QUERIES:
            return _not_found(request)
        items: List[Dict[str, Any]] = [alert_payload]
        return JSONResponse(items)

    app.include_router(router)
    return app


@pytest.fixture
def api_config() -> ClientConfig:
    return ClientConfig(token_key=TEST_TOKEN, token_app=TEST_APP, url="http://test/v2")


@pytest.fixture
async def api(fake_api: FastAPI, api_config: ClientConfig) -> AsyncIterator[ApiClient]:
    """ApiClient bound to the fake API through httpx's ASGI transport."""
    async with ApiClient(api_config, transport=httpx.ASGITransport(app=fake_api)) as client:
        yield client
