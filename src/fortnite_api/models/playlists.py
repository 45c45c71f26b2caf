"""Playlist models for the ``/v1/playlists`` endpoints."""

from datetime import datetime
from enum import Enum

from fortnite_api.models.base import FortniteModel


class PlaylistGameType(str, Enum):
    BR = "EFortGameType::BR"
    BR_ARENA = "EFortGameType::BRArena"
    BR_LTM = "EFortGameType::BRLTM"
    CREATIVE = "EFortGameType::Creative"
    CREATIVE_LTM = "EFortGameType::CreativeLTM"
    DEL_MAR = "EFortGameType::DelMar"
    FESTIVAL = "EFortGameType::Festival"
    PLAYGROUND = "EFortGameType::Playground"
    SOCIAL = "EFortGameType::Social"
    VK_EDIT = "EFortGameType::VKEdit"
    VK_PLAY = "EFortGameType::VKPlay"
    ZERO_BUILD = "EFortGameType::ZeroBuild"


class PlaylistRatingType(str, Enum):
    DELMAR_CHALLENGE = "delmar-challenge"
    DELMAR_COMPETITIVE = "delmar-competitive"
    FUN = "fun"
    LARGE_TEAM = "largeTeam"
    NO_BUILD = "nobuild"
    RANKED_BR = "ranked-br"
    RANKED_ZB = "ranked-zb"
    RESPAWN = "respawn"
    SOLO = "solo"
    TEAM = "team"


class PlaylistImages(FortniteModel):
    showcase: str | None = None
    mission_icon: str | None = None


class PlaylistV1(FortniteModel):
    """A matchmaking playlist and its team layout."""

    id: str
    name: str
    sub_name: str | None = None
    description: str | None = None
    game_type: PlaylistGameType | None = None
    rating_type: PlaylistRatingType | None = None
    min_players: int
    max_players: int
    max_teams: int
    max_team_size: int
    max_squads: int
    max_squad_size: int
    is_default: bool
    is_tournament: bool
    is_limited_time_mode: bool
    is_large_team_game: bool
    accumulate_to_profile_stats: bool
    images: PlaylistImages
    gameplay_tags: list[str]
    path: str
    added: datetime
