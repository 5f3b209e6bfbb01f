from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import urlencode

from circonus_api.errors import InvalidCIDError

ALERT_PREFIX = "/alert"
ALERT_CID_REGEX = re.compile(r"^/alert/[0-9]+$")

# Free-text search expression, e.g. '(host="somehost.example.com")'.
SearchQuery = str

# Filter name -> values, e.g. {"f__cleared_on": ["null"]}.
SearchFilter = Mapping[str, Sequence[str]]


# PUBLIC_INTERFACE
def normalize_alert_cid(cid: Optional[str]) -> str:
    """
    Turn a short ("1234") or long ("/alert/1234") alert id into a validated CID.

    Raises InvalidCIDError for empty ids and anything not of the form /alert/<digits>.
    """
    if not cid:
        raise InvalidCIDError("invalid alert CID (none)")

    alert_cid = cid if cid.startswith(ALERT_PREFIX) else ALERT_PREFIX + "/" + cid

    if not ALERT_CID_REGEX.match(alert_cid):
        raise InvalidCIDError(f"invalid alert CID ({alert_cid})")
    return alert_cid


# PUBLIC_INTERFACE
def encode_query(search: Optional[SearchQuery] = None, filters: Optional[SearchFilter] = None) -> str:
    """
    Encode a search expression and filters as a form-style query string.

    Keys are sorted, repeated values keep their order. Returns "" when there is nothing to send.
    """
    params: Dict[str, List[str]] = {}
    if search:
        params["search"] = [search]
    for name, values in (filters or {}).items():
        # A bare string is a single value, not a sequence of characters.
        if isinstance(values, str):
            values = [values]
        params.setdefault(name, []).extend(values)

    pairs: List[Tuple[str, str]] = [(k, v) for k in sorted(params) for v in params[k]]
    return urlencode(pairs)


def epoch_to_utc(ts: Optional[int]) -> Optional[datetime]:
    """Convert epoch seconds to a timezone-aware UTC datetime."""
    if ts is None:
        return None
    return datetime.fromtimestamp(int(ts), tz=timezone.utc)
