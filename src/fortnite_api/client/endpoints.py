"""Endpoint catalog for the Fortnite API.

Each route is described once: its path template, HTTP method, payload type
and whether it needs the ``Authorization`` header. The client reads these
descriptors instead of repeating the request pipeline per route.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fortnite_api.models import (
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
    StatsV2,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """A single API route and its response contract."""

    name: str
    path: str
    response_type: Any
    method: str = "GET"
    requires_auth: bool = False


# AES
AES_V2: Endpoint[AesV2] = Endpoint("aes_v2", "/v2/aes", AesV2)

# Banners
BANNERS_V1: Endpoint[list[BannerV1]] = Endpoint(
    "banners_v1", "/v1/banners", list[BannerV1]
)
BANNERS_COLORS_V1: Endpoint[list[BannerColorV1]] = Endpoint(
    "banners_colors_v1", "/v1/banners/colors", list[BannerColorV1]
)

# Cosmetics
COSMETICS_V2: Endpoint[list[CosmeticV2]] = Endpoint(
    "cosmetics_v2", "/v2/cosmetics/br", list[CosmeticV2]
)
COSMETICS_NEW_V2: Endpoint[CosmeticsNewV2] = Endpoint(
    "cosmetics_new_v2", "/v2/cosmetics/br/new", CosmeticsNewV2
)
COSMETIC_BY_ID_V2: Endpoint[CosmeticV2] = Endpoint(
    "cosmetic_by_id_v2", "/v2/cosmetics/br/{cosmetic_id}", CosmeticV2
)

# Creator code
CREATORCODE_V2: Endpoint[CreatorCodeV2] = Endpoint(
    "creatorcode_v2", "/v2/creatorcode", CreatorCodeV2
)

# Map
MAP_V1: Endpoint[MapV1] = Endpoint("map_v1", "/v1/map", MapV1)

# News
NEWS_V2: Endpoint[NewsV2] = Endpoint("news_v2", "/v2/news", NewsV2)
NEWS_BR_V2: Endpoint[News] = Endpoint("news_br_v2", "/v2/news/br", News)
NEWS_STW_V2: Endpoint[News] = Endpoint("news_stw_v2", "/v2/news/stw", News)
NEWS_CREATIVE_V2: Endpoint[News] = Endpoint(
    "news_creative_v2", "/v2/news/creative", News
)

# Playlists
PLAYLISTS_V1: Endpoint[list[PlaylistV1]] = Endpoint(
    "playlists_v1", "/v1/playlists", list[PlaylistV1]
)
PLAYLIST_BY_ID_V1: Endpoint[PlaylistV1] = Endpoint(
    "playlist_by_id_v1", "/v1/playlists/{playlist_id}", PlaylistV1
)

# Shop
SHOP_BR_V2: Endpoint[ShopV2] = Endpoint("shop_br_v2", "/v2/shop/br", ShopV2)
SHOP_COMBINED_V2: Endpoint[ShopV2] = Endpoint(
    "shop_combined_v2", "/v2/shop/br/combined", ShopV2
)

# Stats
STATS_V2: Endpoint[StatsV2] = Endpoint(
    "stats_v2", "/v2/stats/br/v2", StatsV2, requires_auth=True
)
STATS_BY_ACCOUNT_ID_V2: Endpoint[StatsV2] = Endpoint(
    "stats_by_account_id_v2",
    "/v2/stats/br/v2/{account_id}",
    StatsV2,
    requires_auth=True,
)

ENDPOINTS: tuple[Endpoint[Any], ...] = (
    AES_V2,
    BANNERS_V1,
    BANNERS_COLORS_V1,
    COSMETICS_V2,
    COSMETICS_NEW_V2,
    COSMETIC_BY_ID_V2,
    CREATORCODE_V2,
    MAP_V1,
    NEWS_V2,
    NEWS_BR_V2,
    NEWS_STW_V2,
    NEWS_CREATIVE_V2,
    PLAYLISTS_V1,
    PLAYLIST_BY_ID_V1,
    SHOP_BR_V2,
    SHOP_COMBINED_V2,
    STATS_V2,
    STATS_BY_ACCOUNT_ID_V2,
)
