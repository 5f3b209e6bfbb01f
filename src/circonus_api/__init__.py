"""Async client for the Circonus REST API alert resource."""

from circonus_api.client import ApiClient
from circonus_api.config import ClientConfig, load_config
from circonus_api.errors import (
    ApiDecodeError,
    ApiError,
    ApiRequestError,
    ApiResponseError,
    ConfigError,
    InvalidCIDError,
)
from circonus_api.schemas.alerts import Alert, new_alert
from circonus_api.services.alerts_service import fetch_alert, fetch_alerts, search_alerts

__all__ = [
    "Alert",
    "ApiClient",
    "ApiDecodeError",
    "ApiError",
    "ApiRequestError",
    "ApiResponseError",
    "ClientConfig",
    "ConfigError",
    "InvalidCIDError",
    "fetch_alert",
    "fetch_alerts",
    "load_config",
    "new_alert",
    "search_alerts",
]
