"""Banner models for the ``/v1/banners`` endpoints."""

from enum import Enum

from fortnite_api.models.base import FortniteModel, UInt8


class BannerCategory(str, Enum):
    """Category a banner icon belongs to."""

    BATTLE_ROYALE = "BattleRoyale"
    FOUNDER = "Founder"
    OTHER = "Other"
    SPECIAL = "Special"
    STANDARD = "Standard"


class BannerImages(FortniteModel):
    small_icon: str
    icon: str


class BannerV1(FortniteModel):
    """A banner icon."""

    id: str
    dev_name: str
    description: str
    category: BannerCategory
    full_usage_rights: bool
    images: BannerImages


class BannerColorV1(FortniteModel):
    """A banner color entry from the palette."""

    id: str
    color: str
    category: str
    sub_category_group: UInt8
