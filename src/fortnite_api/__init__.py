"""Typed async client for the Fortnite API (https://fortnite-api.com).

Usage:
    from fortnite_api import FortniteAPIClient, StatsAccountType

    async with FortniteAPIClient() as client:
        news = await client.get_news_v2()
        stats = await client.get_stats_v2(
            "Test", api_key="...", account_type=StatsAccountType.EPIC
        )
"""

from fortnite_api.client import APIResponse, FortniteAPIClient
from fortnite_api.config import ClientConfig
from fortnite_api.exceptions import (
    FortniteAPIClientError,
    FortniteAPIStatusError,
    FortniteClientNotConnectedError,
    FortniteDecodeError,
    FortniteInvalidHeaderError,
    FortniteInvalidURLError,
    FortniteTransportError,
)
from fortnite_api.models import (
    AesKeyFormat,
    AesV2,
    BannerColorV1,
    BannerV1,
    CosmeticsNewV2,
    CosmeticV2,
    CreatorCodeV2,
    MapV1,
    News,
    NewsV2,
    PlaylistV1,
    ShopV2,
    StatsAccountType,
    StatsImage,
    StatsTimeWindow,
    StatsV2,
)

__version__ = "0.1.0"

__all__ = [
    "FortniteAPIClient",
    "APIResponse",
    "ClientConfig",
    # Exceptions
    "FortniteAPIClientError",
    "FortniteAPIStatusError",
    "FortniteClientNotConnectedError",
    "FortniteDecodeError",
    "FortniteInvalidHeaderError",
    "FortniteInvalidURLError",
    "FortniteTransportError",
    # Query enums
    "AesKeyFormat",
    "StatsAccountType",
    "StatsImage",
    "StatsTimeWindow",
    # Payloads
    "AesV2",
    "BannerColorV1",
    "BannerV1",
    "CosmeticsNewV2",
    "CosmeticV2",
    "CreatorCodeV2",
    "MapV1",
    "News",
    "NewsV2",
    "PlaylistV1",
    "ShopV2",
    "StatsV2",
]
