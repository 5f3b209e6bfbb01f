from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

from circonus_api.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_API_URL = "https://api.circonus.com/v2"
DEFAULT_TOKEN_APP = "circonus-gometrics"
DEFAULT_TIMEOUT_SEC = 10


def _env_int(name: str, default: int) -> int:
    """Parse an int env var with a default."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return int(default)


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a bool env var (true/false/1/0/yes/no/on/off)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    val = raw.strip().lower()
    if val in ("1", "true", "yes", "y", "on"):
        return True
    if val in ("0", "false", "no", "n", "off"):
        return False
    return bool(default)


def _clamp_int(v: int, lo: int, hi: int) -> int:
    """Clamp integer to [lo, hi]."""
    return max(lo, min(hi, int(v)))


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the Circonus API."""

    token_key: str
    token_app: str
    url: str
    token_account_id: Optional[str] = None
    debug: bool = False
    timeout_sec: int = DEFAULT_TIMEOUT_SEC


def mask_token(token: str) -> str:
    """Keep only the last four characters of an API token for logs."""
    if len(token) <= 4:
        return "***"
    return "***" + token[-4:]


def _normalize_url(url: str) -> str:
    url = url.strip().rstrip("/")
    if not re.match(r"^https?://[^/]+", url):
        raise ConfigError(f"API URL appears invalid (must start with http:// or https://): {url!r}")
    return url


# PUBLIC_INTERFACE
def load_config(
    token_key: Optional[str] = None,
    token_app: Optional[str] = None,
    url: Optional[str] = None,
    token_account_id: Optional[str] = None,
    debug: Optional[bool] = None,
    timeout_sec: Optional[int] = None,
) -> ClientConfig:
    """Build a ClientConfig from explicit arguments, falling back to CIRCONUS_* env vars."""
    token_key = token_key or os.getenv("CIRCONUS_API_TOKEN")
    if not token_key:
        raise ConfigError("API Token is required")

    token_app = token_app or os.getenv("CIRCONUS_API_APP") or DEFAULT_TOKEN_APP
    token_account_id = token_account_id or os.getenv("CIRCONUS_ACCOUNT_ID") or None
    url = _normalize_url(url or os.getenv("CIRCONUS_API_URL") or DEFAULT_API_URL)

    if debug is None:
        debug = _env_bool("CIRCONUS_API_DEBUG", False)
    if timeout_sec is None:
        timeout_sec = _env_int("CIRCONUS_API_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)
    timeout_sec = _clamp_int(timeout_sec, 1, 300)

    logger.info(
        "Resolved Circonus API config url=%s app=%s account=%s token=%s",
        url,
        token_app,
        token_account_id,
        mask_token(token_key),
    )

    return ClientConfig(
        token_key=token_key,
        token_app=token_app,
        url=url,
        token_account_id=token_account_id,
        debug=bool(debug),
        timeout_sec=timeout_sec,
    )
