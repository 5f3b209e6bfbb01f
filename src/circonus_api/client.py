from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from circonus_api.config import ClientConfig
from circonus_api.errors import ApiDecodeError, ApiRequestError, ApiResponseError

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin async handle over the Circonus REST API.

    - Holds one httpx.AsyncClient, created on first use, with auth headers preset.
    - Resource accessors in circonus_api.services call get() with paths relative to config.url.
    """

    def __init__(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ApiClient":
        self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "X-Circonus-Auth-Token": self.config.token_key,
            "X-Circonus-App-Name": self.config.token_app,
            "Accept": "application/json",
        }
        if self.config.token_account_id:
            headers["X-Circonus-Account-ID"] = self.config.token_account_id
        return headers

    def connect(self) -> httpx.AsyncClient:
        """Initialize the underlying httpx client if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.url,
                headers=self._headers(),
                timeout=float(self.config.timeout_sec),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # PUBLIC_INTERFACE
    async def get(self, path: str) -> Any:
        """
        GET a path below the configured API URL and return the decoded JSON body.

        Raises:
          ApiRequestError on transport failures,
          ApiResponseError on any status >= 300,
          ApiDecodeError when the body is not JSON.
        """
        client = self.connect()
        logger.debug("GET %s%s", self.config.url, path)
        try:
            res = await client.get(path)
        except httpx.HTTPError as err:
            logger.warning("Request failed GET %s: %s", path, err)
            raise ApiRequestError(f"GET {path} failed: {err}") from err

        if res.status_code < 200 or res.status_code >= 300:
            logger.warning("API returned status=%s for GET %s", res.status_code, path)
            raise ApiResponseError(res.status_code, res.text, path=path)

        try:
            data = res.json()
        except ValueError as err:
            raise ApiDecodeError(f"GET {path} returned a non-JSON body") from err

        if self.config.debug:
            logger.debug("GET %s received JSON: %s", path, res.text.strip())
        return data
