"""Pydantic models for Fortnite API payloads.

Each module mirrors one resource family of the remote API. Payload models
use snake_case attributes with camelCase aliases matching the wire format.

Usage:
    from fortnite_api.models import CosmeticV2, ShopV2, StatsV2
    from fortnite_api.models import AesKeyFormat, StatsAccountType
"""

from fortnite_api.models.aes import AesKeyFormat, AesV2, DynamicKey
from fortnite_api.models.banners import (
    BannerCategory,
    BannerColorV1,
    BannerImages,
    BannerV1,
)
from fortnite_api.models.base import FortniteModel
from fortnite_api.models.cosmetics import (
    CosmeticImages,
    CosmeticImagesLego,
    CosmeticImagesOther,
    CosmeticIntroduction,
    CosmeticSearchTag,
    CosmeticSeries,
    CosmeticSet,
    CosmeticsNewV2,
    CosmeticV2,
    CosmeticValue,
    CosmeticVariant,
    CosmeticVariantOption,
)
from fortnite_api.models.creatorcode import (
    CreatorCodeAccount,
    CreatorCodeStatus,
    CreatorCodeV2,
)
from fortnite_api.models.map import MapImages, MapPoi, MapPoiLocation, MapV1
from fortnite_api.models.news import News, NewsMessage, NewsMotd, NewsV2
from fortnite_api.models.playlists import (
    PlaylistGameType,
    PlaylistImages,
    PlaylistRatingType,
    PlaylistV1,
)
from fortnite_api.models.shop import (
    MaterialInstance,
    MaterialInstanceColors,
    MaterialInstanceImages,
    ShopEntry,
    ShopEntryBanner,
    ShopEntryBundle,
    ShopEntryDisplayAsset,
    ShopEntryLayout,
    ShopFeatured,
    ShopV2,
)
from fortnite_api.models.stats import (
    StatsAccount,
    StatsAccountType,
    StatsBattlePass,
    StatsBreakdown,
    StatsImage,
    StatsInput,
    StatsMode,
    StatsOverall,
    StatsTimeWindow,
    StatsV2,
)

__all__ = [
    # Base
    "FortniteModel",
    # AES
    "AesKeyFormat",
    "AesV2",
    "DynamicKey",
    # Banners
    "BannerCategory",
    "BannerColorV1",
    "BannerImages",
    "BannerV1",
    # Cosmetics
    "CosmeticImages",
    "CosmeticImagesLego",
    "CosmeticImagesOther",
    "CosmeticIntroduction",
    "CosmeticSearchTag",
    "CosmeticSeries",
    "CosmeticSet",
    "CosmeticsNewV2",
    "CosmeticV2",
    "CosmeticValue",
    "CosmeticVariant",
    "CosmeticVariantOption",
    # Creator code
    "CreatorCodeAccount",
    "CreatorCodeStatus",
    "CreatorCodeV2",
    # Map
    "MapImages",
    "MapPoi",
    "MapPoiLocation",
    "MapV1",
    # News
    "News",
    "NewsMessage",
    "NewsMotd",
    "NewsV2",
    # Playlists
    "PlaylistGameType",
    "PlaylistImages",
    "PlaylistRatingType",
    "PlaylistV1",
    # Shop
    "MaterialInstance",
    "MaterialInstanceColors",
    "MaterialInstanceImages",
    "ShopEntry",
    "ShopEntryBanner",
    "ShopEntryBundle",
    "ShopEntryDisplayAsset",
    "ShopEntryLayout",
    "ShopFeatured",
    "ShopV2",
    # Stats
    "StatsAccount",
    "StatsAccountType",
    "StatsBattlePass",
    "StatsBreakdown",
    "StatsImage",
    "StatsInput",
    "StatsMode",
    "StatsOverall",
    "StatsTimeWindow",
    "StatsV2",
]
