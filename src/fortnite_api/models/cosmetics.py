"""Cosmetic item models for the ``/v2/cosmetics/br`` endpoints."""

from datetime import datetime
from enum import Enum

from fortnite_api.models.base import FortniteModel, UInt8


class CosmeticSearchTag(str, Enum):
    """Search tags the API attaches to cosmetics."""

    BEAR = "Bear"
    FOOD = "Food"
    HAZE = "Haze"
    PINK = "Pink"
    SUMMER = "Summer"
    SUPERMAN = "Superman"
    UMBRELLA = "Umbrella"
    WESTERN = "Western"
    WINTER = "Winter"
    YELLOW = "Yellow"


class CosmeticValue(FortniteModel):
    """A value with its localized display text and backend identifier.

    Used for both the ``type`` and ``rarity`` of a cosmetic.
    """

    value: str
    display_value: str
    backend_value: str


class CosmeticSeries(FortniteModel):
    value: str
    image: str | None = None
    colors: list[str]
    backend_value: str


class CosmeticSet(FortniteModel):
    value: str | None = None
    text: str | None = None
    backend_value: str


class CosmeticIntroduction(FortniteModel):
    chapter: str
    season: str
    text: str
    backend_value: UInt8 | None = None


class CosmeticImagesLego(FortniteModel):
    small: str
    large: str
    wide: str | None = None


class CosmeticImagesOther(FortniteModel):
    background: str | None = None
    coverart: str | None = None


class CosmeticImages(FortniteModel):
    small_icon: str | None = None
    icon: str | None = None
    featured: str | None = None
    lego: CosmeticImagesLego | None = None
    other: CosmeticImagesOther | None = None


class CosmeticVariantOption(FortniteModel):
    tag: str
    name: str | None = None
    image: str


class CosmeticVariant(FortniteModel):
    channel: str
    type: str | None = None
    options: list[CosmeticVariantOption]


class CosmeticV2(FortniteModel):
    """A Battle Royale cosmetic item."""

    id: str
    name: str
    description: str
    type: CosmeticValue
    rarity: CosmeticValue
    series: CosmeticSeries | None = None
    set: CosmeticSet | None = None
    introduction: CosmeticIntroduction | None = None
    images: CosmeticImages
    variants: list[CosmeticVariant] | None = None
    built_in_emote_ids: list[str] | None = None
    search_tags: list[CosmeticSearchTag] | None = None
    gameplay_tags: list[str] | None = None
    meta_tags: list[str] | None = None
    showcase_video: str | None = None
    dynamic_pak_id: str | None = None
    display_asset_path: str | None = None
    definition_path: str | None = None
    path: str | None = None
    added: datetime
    shop_history: list[datetime] | None = None


class CosmeticsNewV2(FortniteModel):
    """Cosmetics added in the latest build."""

    build: str
    previous_build: str
    hash: str
    date: datetime
    last_addition: datetime
    items: list[CosmeticV2]
