from __future__ import annotations

import logging
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from circonus_api.client import ApiClient
from circonus_api.errors import ApiDecodeError
from circonus_api.schemas.alerts import Alert
from circonus_api.schemas.common import (
    ALERT_PREFIX,
    SearchFilter,
    SearchQuery,
    encode_query,
    normalize_alert_cid,
)

logger = logging.getLogger(__name__)

_alert_list = TypeAdapter(List[Alert])


def _to_alert(data: Any, path: str) -> Alert:
    try:
        return Alert.model_validate(data)
    except ValidationError as err:
        raise ApiDecodeError(f"GET {path} returned an unexpected alert payload: {err}") from err


def _to_alert_list(data: Any, path: str) -> List[Alert]:
    try:
        return _alert_list.validate_python(data)
    except ValidationError as err:
        raise ApiDecodeError(f"GET {path} returned an unexpected alert list payload: {err}") from err


# PUBLIC_INTERFACE
async def fetch_alert(api: ApiClient, cid: Optional[str]) -> Alert:
    """Fetch a single alert by short ("1234") or long ("/alert/1234") CID."""
    alert_cid = normalize_alert_cid(cid)
    data = await api.get(alert_cid)
    return _to_alert(data, alert_cid)


# PUBLIC_INTERFACE
async def fetch_alerts(api: ApiClient) -> List[Alert]:
    """Fetch all alerts."""
    data = await api.get(ALERT_PREFIX)
    return _to_alert_list(data, ALERT_PREFIX)


# PUBLIC_INTERFACE
async def search_alerts(
    api: ApiClient,
    search: Optional[SearchQuery] = None,
    filters: Optional[SearchFilter] = None,
) -> List[Alert]:
    """
    Search alerts with a search expression and/or filters.

    With neither, this is the same request as fetch_alerts().
    """
    query = encode_query(search, filters)
    if not query:
        return await fetch_alerts(api)

    path = f"{ALERT_PREFIX}?{query}"
    data = await api.get(path)
    alerts = _to_alert_list(data, path)
    logger.debug("Alert search query=%s matched=%d", query, len(alerts))
    return alerts
