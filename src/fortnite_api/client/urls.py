"""Request URL construction.

Builds absolute request URLs from the configured host, an endpoint path
template and an ordered list of optional query parameters.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from httpx import URL, InvalidURL

from fortnite_api.exceptions import FortniteInvalidURLError
from fortnite_api.models import (
    AesKeyFormat,
    StatsAccountType,
    StatsImage,
    StatsTimeWindow,
)

QueryValue = str | Enum
QueryParam = tuple[str, QueryValue | None]

# Wire token for every enum accepted as a query parameter
QUERY_TOKENS: dict[Enum, str] = {
    AesKeyFormat.HEX: "hex",
    AesKeyFormat.BASE64: "base64",
    StatsAccountType.EPIC: "epic",
    StatsAccountType.PSN: "psn",
    StatsAccountType.XBL: "xbl",
    StatsTimeWindow.SEASON: "season",
    StatsTimeWindow.LIFETIME: "lifetime",
    StatsImage.ALL: "all",
    StatsImage.KEYBOARD_MOUSE: "keyboardmouse",
    StatsImage.GAMEPAD: "gamepad",
    StatsImage.TOUCH: "touch",
    StatsImage.NONE: "none",
}


def query_value(value: QueryValue) -> str:
    """Return the canonical query-string form of a parameter value.

    Args:
        value: A free-form string or one of the query enums.

    Returns:
        The string sent on the wire.

    Raises:
        ValueError: If ``value`` is an enum member with no wire token.
    """
    if isinstance(value, Enum):
        try:
            return QUERY_TOKENS[value]
        except KeyError:
            raise ValueError(f"No query token for {value!r}") from None
    return value


def render_path(template: str, **path_params: str) -> str:
    """Substitute identifiers into a path template.

    Identifiers are inserted verbatim; callers are responsible for making
    them safe to embed in a URL path.
    """
    return template.format(**path_params)


def build_url(base_url: str, params: Sequence[QueryParam] = ()) -> URL:
    """Build a request URL, appending only the parameters that are present.

    Args:
        base_url: Absolute URL including the endpoint path.
        params: Ordered ``(name, value)`` pairs; ``None`` values are skipped.

    Returns:
        The parsed URL with the query string applied.

    Raises:
        FortniteInvalidURLError: If ``base_url`` is not a valid absolute URL.
    """
    try:
        url = URL(base_url)
    except InvalidURL as e:
        raise FortniteInvalidURLError(f"Invalid URL {base_url!r}: {e}", url=base_url) from e

    if not url.is_absolute_url or not url.host:
        raise FortniteInvalidURLError(
            f"URL must be absolute with a host: {base_url!r}", url=base_url
        )

    for name, value in params:
        if value is None:
            continue
        url = url.copy_add_param(name, query_value(value))
    return url
