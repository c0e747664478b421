"""
Utility functions for the GMO Coin client.

Pure helpers for URL, query string, body and header construction.
"""

import json
import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Union
from urllib.parse import urlencode, urlsplit

# Visible ASCII plus space and tab; anything else (CR, LF, NUL, non-ASCII)
# cannot be sent as a header value.
_HEADER_VALUE_RE = re.compile(r"^[\x20-\x7e\t]*$")
_DATE_RE = re.compile(r"^\d{8}$")


def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not url or not isinstance(url, str):
        return False
    parts = urlsplit(url)
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def is_valid_header_value(value: str) -> bool:
    """Check that a string can be used verbatim as an HTTP header value."""
    return isinstance(value, str) and bool(_HEADER_VALUE_RE.match(value))


def render_param(value: Any) -> Optional[str]:
    """Render one query parameter; lists are comma-joined, None is dropped."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def build_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """Build a literal query string, preserving parameter order."""
    if not params:
        return ""
    pairs = []
    for key, value in params.items():
        rendered = render_param(value)
        if rendered is not None:
            pairs.append((key, rendered))
    return urlencode(pairs, safe=",")


def build_url(base_url: str, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Join base URL, path and query string."""
    query = build_query_string(params)
    url = f"{base_url}{path}"
    return f"{url}?{query}" if query else url


def serialize_body(payload: Optional[Dict[str, Any]]) -> str:
    """
    Serialize a POST payload to the exact text that is signed and sent.

    Compact separators, insertion order; an absent payload is ``""``.
    """
    if payload is None:
        return ""
    return json.dumps(payload, separators=(",", ":"))


def format_date(value: Union[date, datetime, str]) -> str:
    """Format a kline date as ``YYYYMMDD``."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y%m%d")
    if isinstance(value, str) and _DATE_RE.match(value):
        return value
    raise ValueError(f"Invalid date {value!r}; expected datetime.date or 'YYYYMMDD'")


def join_ids(ids: Union[int, str, Iterable[int]]) -> str:
    """Render one id, or any iterable of ids comma-separated."""
    if isinstance(ids, (int, str)):
        return str(ids)
    return ",".join(str(item) for item in ids)
