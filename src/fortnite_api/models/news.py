"""News models for the ``/v2/news`` endpoints."""

from datetime import datetime

from fortnite_api.models.base import FortniteModel


class NewsMotd(FortniteModel):
    """A "message of the day" tile."""

    id: str
    title: str
    tab_title: str | None = None
    body: str
    image: str
    tile_image: str | None = None
    sorting_priority: int
    hidden: bool
    website_url: str | None = None
    video_string: str | None = None
    video_id: str | None = None


class NewsMessage(FortniteModel):
    title: str
    body: str
    image: str
    adspace: str | None = None


class News(FortniteModel):
    """News feed for a single game mode."""

    hash: str
    date: datetime
    image: str | None = None
    motds: list[NewsMotd] | None = None
    messages: list[NewsMessage] | None = None


class NewsV2(FortniteModel):
    """News feeds for every game mode; a mode without news is ``None``."""

    br: News | None = None
    stw: News | None = None
    creative: News | None = None
