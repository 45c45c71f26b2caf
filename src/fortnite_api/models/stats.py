"""Player statistics models for the ``/v2/stats/br/v2`` endpoints."""

from datetime import datetime
from enum import Enum

from fortnite_api.models.base import FortniteModel, UInt32, UInt64


class StatsAccountType(str, Enum):
    """Platform the player name is looked up on."""

    EPIC = "epic"
    PSN = "psn"
    XBL = "xbl"


class StatsTimeWindow(str, Enum):
    SEASON = "season"
    LIFETIME = "lifetime"


class StatsImage(str, Enum):
    """Input type to render a stats image for."""

    ALL = "all"
    KEYBOARD_MOUSE = "keyboardmouse"
    GAMEPAD = "gamepad"
    TOUCH = "touch"
    NONE = "none"


class StatsAccount(FortniteModel):
    id: str
    name: str


class StatsBattlePass(FortniteModel):
    level: UInt32
    progress: UInt32


class StatsOverall(FortniteModel):
    """Aggregated statistics across every mode for one input type."""

    score: UInt64
    score_per_min: float
    score_per_match: float
    wins: UInt32
    top3: UInt32
    top5: UInt32
    top6: UInt32
    top10: UInt32
    top12: UInt32
    top25: UInt32
    kills: UInt32
    kills_per_min: float
    kills_per_match: float
    deaths: UInt32
    kd: float
    matches: UInt32
    win_rate: float
    minutes_played: UInt64
    players_outlived: UInt32
    last_modified: datetime


class StatsMode(FortniteModel):
    """Statistics for a single mode; placement counters depend on team size."""

    score: UInt64
    score_per_min: float
    score_per_match: float
    wins: UInt32
    top3: UInt32 | None = None
    top5: UInt32 | None = None
    top6: UInt32 | None = None
    top10: UInt32 | None = None
    top12: UInt32 | None = None
    top25: UInt32 | None = None
    kills: UInt32
    kills_per_min: float
    kills_per_match: float
    deaths: UInt32
    kd: float
    matches: UInt32
    win_rate: float
    minutes_played: UInt64
    players_outlived: UInt32
    last_modified: datetime


class StatsInput(FortniteModel):
    overall: StatsOverall
    solo: StatsMode | None = None
    duo: StatsMode | None = None
    trio: StatsMode | None = None
    squad: StatsMode | None = None
    ltm: StatsMode | None = None


class StatsBreakdown(FortniteModel):
    all: StatsInput | None = None
    keyboard_mouse: StatsInput | None = None
    gamepad: StatsInput | None = None
    touch: StatsInput | None = None


class StatsV2(FortniteModel):
    """Battle Royale statistics for one account."""

    account: StatsAccount
    battle_pass: StatsBattlePass
    image: str | None = None
    stats: StatsBreakdown
