"""Map models for the ``/v1/map`` endpoint."""

from fortnite_api.models.base import FortniteModel


class MapImages(FortniteModel):
    blank: str
    pois: str


class MapPoiLocation(FortniteModel):
    """World-space coordinates of a point of interest."""

    x: float
    y: float
    z: float


class MapPoi(FortniteModel):
    id: str
    name: str | None = None
    location: MapPoiLocation


class MapV1(FortniteModel):
    """Current island map images and its points of interest."""

    images: MapImages
    pois: list[MapPoi]
