"""Request dispatch over a shared httpx transport.

Sends a single request and returns the raw response. Header entries that are
not valid HTTP are dropped unless strict validation is requested.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from httpx import URL, AsyncClient, RequestError, Response

from fortnite_api.exceptions import (
    FortniteInvalidHeaderError,
    FortniteTransportError,
)

logger = logging.getLogger(__name__)

# RFC 7230 token, used for both method and header names
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# Visible ASCII, space and horizontal tab
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")

DEFAULT_METHOD = "GET"


def is_valid_header_name(name: str) -> bool:
    return _TOKEN_RE.fullmatch(name) is not None


def is_valid_header_value(value: str) -> bool:
    return _HEADER_VALUE_RE.fullmatch(value) is not None


def normalize_method(method: str) -> str:
    """Return ``method`` unchanged, or GET if it is not a valid token."""
    if _TOKEN_RE.fullmatch(method) is None:
        logger.debug("Invalid HTTP method %r, using %s", method, DEFAULT_METHOD)
        return DEFAULT_METHOD
    return method


def build_headers(
    headers: Mapping[str, str],
    *,
    strict: bool = False,
) -> dict[str, str]:
    """Build the outgoing header set.

    Args:
        headers: Header name to value mapping supplied by the endpoint.
        strict: Raise instead of dropping malformed entries.

    Returns:
        The headers that are valid HTTP.

    Raises:
        FortniteInvalidHeaderError: If ``strict`` and an entry is malformed.
    """
    valid: dict[str, str] = {}
    for name, value in headers.items():
        if is_valid_header_name(name) and is_valid_header_value(value):
            valid[name] = value
            continue

        # Never log the value, it may be an API key
        if strict:
            raise FortniteInvalidHeaderError(
                f"Invalid header {name!r}", header_name=name
            )
        logger.warning("Dropping invalid header %r", name)
    return valid


async def dispatch(
    http_client: AsyncClient,
    url: URL,
    method: str = DEFAULT_METHOD,
    body: str = "",
    headers: Mapping[str, str] | None = None,
    *,
    strict_headers: bool = False,
) -> Response:
    """Send one request and return the raw response.

    Args:
        http_client: Shared transport; connection reuse is its concern.
        url: Fully built request URL.
        method: HTTP method, GET for every current endpoint.
        body: Request payload, sent verbatim when non-empty.
        headers: Extra request headers.
        strict_headers: Raise on malformed headers instead of dropping them.

    Returns:
        The response with its body already read.

    Raises:
        FortniteTransportError: If the request fails at the network layer.
        FortniteInvalidHeaderError: If ``strict_headers`` and a header is malformed.
    """
    method = normalize_method(method)
    request_headers = build_headers(headers or {}, strict=strict_headers)

    logger.debug("Request %s %s", method, url)
    try:
        response = await http_client.request(
            method,
            url,
            content=body or None,
            headers=request_headers,
        )
    except RequestError as e:
        logger.warning("Request %s %s failed: %s", method, url, e)
        raise FortniteTransportError(f"Request failed: {e}") from e

    logger.debug("Response %d for %s %s", response.status_code, method, url)
    return response
