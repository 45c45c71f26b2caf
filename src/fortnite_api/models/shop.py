"""Item shop models for the ``/v2/shop/br`` endpoints."""

from datetime import datetime

from pydantic import Field

from fortnite_api.models.base import FortniteModel, UInt64
from fortnite_api.models.cosmetics import CosmeticV2


class ShopEntryBundle(FortniteModel):
    name: str
    info: str
    image: str


class ShopEntryBanner(FortniteModel):
    value: str
    intensity: str
    backend_value: str


class ShopEntryLayout(FortniteModel):
    id: str
    name: str
    category: str | None = None
    index: int
    show_ineligible_offers: str
    background: str | None = None


class MaterialInstanceImages(FortniteModel):
    # PascalCase on the wire
    offer_image: str = Field(alias="OfferImage")
    background: str = Field(alias="Background")


class MaterialInstanceColors(FortniteModel):
    fall_off_color: str | None = Field(default=None, alias="FallOff_Color")
    background_color_a: str | None = Field(default=None, alias="Background_Color_A")
    background_color_b: str | None = Field(default=None, alias="Background_Color_B")


class MaterialInstance(FortniteModel):
    id: str
    primary_mode: str
    images: MaterialInstanceImages
    colors: MaterialInstanceColors
    scalings: dict[str, float]


class ShopEntryDisplayAsset(FortniteModel):
    id: str
    cosmetic_id: str | None = None
    material_instances: list[MaterialInstance]


class ShopEntry(FortniteModel):
    """A purchasable offer in the featured section."""

    regular_price: UInt64
    final_price: UInt64
    bundle: ShopEntryBundle | None = None
    banner: ShopEntryBanner | None = None
    giftable: bool
    refundable: bool
    sort_priority: int
    section_id: str
    layout: ShopEntryLayout
    dev_name: str
    offer_id: str
    display_asset_path: str | None = None
    tile_size: str
    new_display_asset_path: str
    new_display_asset: ShopEntryDisplayAsset
    items: list[CosmeticV2]


class ShopFeatured(FortniteModel):
    name: str
    entries: list[ShopEntry]


class ShopV2(FortniteModel):
    """Current item shop rotation.

    The daily, votes and vote winners sections are not modelled and are
    ignored when present.
    """

    hash: str
    date: datetime
    vbuck_icon: str
    featured: ShopFeatured
