"""Shared fixtures and utilities for fortnite-api tests.

This module provides:
- Sample payloads matching the live API's JSON shapes
- An envelope helper and a mock-transport client factory for unit tests
- The `requires_live_api` decorator to skip tests that hit the real API
"""

import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from fortnite_api import ClientConfig, FortniteAPIClient


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests that call the live Fortnite API"
    )


LIVE_API_ENABLED = os.environ.get("FORTNITE_API_LIVE") == "1"
LIVE_API_KEY = os.environ.get("FORTNITE_API_KEY")

# Skip decorator for integration tests that require network access
requires_live_api = pytest.mark.skipif(
    not LIVE_API_ENABLED,
    reason="Integration test requires FORTNITE_API_LIVE=1",
)

requires_api_key = pytest.mark.skipif(
    not (LIVE_API_ENABLED and LIVE_API_KEY),
    reason="Stats integration test requires FORTNITE_API_LIVE=1 and FORTNITE_API_KEY",
)


def envelope(data: Any, status: int = 200, error: str | None = None) -> dict:
    """Wrap a payload the way the API does."""
    return {"status": status, "data": data, "error": error}


# =============================================================================
# Sample payloads
# =============================================================================


@pytest.fixture
def aes_json() -> dict:
    return {
        "build": "++Fortnite+Release-30.00-CL-34890909-Windows",
        "mainKey": "0x3A1F0C2B9D8E7F6A5B4C3D2E1F0A9B8C7D6E5F4A3B2C1D0E9F8A7B6C5D4E3F2A",
        "dynamicKeys": [
            {
                "pakFilename": "pakchunk1001-WindowsClient.pak",
                "pakGuid": "0F4AE1B9A8C1D7F2E9B3C6D5A4F3E2D1",
                "key": "0x5D3F1A2B4C6E8D0F1A3B5C7D9E0F2A4B6C8D0E2F4A6B8C0D2E4F6A8B0C2D4E6F",
            }
        ],
        "updated": "2024-05-24T14:00:00Z",
    }


@pytest.fixture
def banner_json() -> dict:
    return {
        "id": "BRSeason01",
        "devName": "BRSeason01",
        "description": "Earned in Season 1.",
        "category": "BattleRoyale",
        "fullUsageRights": False,
        "images": {
            "smallIcon": "https://fortnite-api.com/images/banners/brseason01/smallicon.png",
            "icon": "https://fortnite-api.com/images/banners/brseason01/icon.png",
        },
    }


@pytest.fixture
def banner_color_json() -> dict:
    return {
        "id": "DefaultColor1",
        "color": "e13a3a",
        "category": "Standard",
        "subCategoryGroup": 1,
    }


@pytest.fixture
def cosmetic_json() -> dict:
    return {
        "id": "CID_028_Athena_Commando_F",
        "name": "Renegade Raider",
        "description": "Rare renegade raider outfit.",
        "type": {
            "value": "outfit",
            "displayValue": "Outfit",
            "backendValue": "AthenaCharacter",
        },
        "rarity": {
            "value": "rare",
            "displayValue": "Rare",
            "backendValue": "EFortRarity::Rare",
        },
        "series": None,
        "set": None,
        "introduction": {
            "chapter": "1",
            "season": "1",
            "text": "Introduced in Chapter 1, Season 1.",
            "backendValue": 1,
        },
        "images": {
            "smallIcon": "https://fortnite-api.com/images/cosmetics/br/cid_028_athena_commando_f/smallicon.png",
            "icon": "https://fortnite-api.com/images/cosmetics/br/cid_028_athena_commando_f/icon.png",
            "featured": None,
            "lego": None,
            "other": None,
        },
        "variants": [
            {
                "channel": "Material",
                "type": "Style",
                "options": [
                    {
                        "tag": "Mat1",
                        "name": "Classic",
                        "image": "https://fortnite-api.com/images/cosmetics/br/cid_028_athena_commando_f/variants/material/mat1.png",
                    }
                ],
            }
        ],
        "searchTags": ["Pink"],
        "gameplayTags": ["Cosmetics.Source.ItemShop"],
        "path": "Athena/Items/Cosmetics/Characters/CID_028_Athena_Commando_F",
        "added": "2019-05-08T10:11:12Z",
        "shopHistory": ["2017-11-01T00:00:00Z", "2017-12-05T00:00:00Z"],
    }


@pytest.fixture
def cosmetics_new_json(cosmetic_json: dict) -> dict:
    return {
        "build": "++Fortnite+Release-30.00",
        "previousBuild": "++Fortnite+Release-29.40",
        "hash": "a1b2c3",
        "date": "2024-05-24T14:00:00Z",
        "lastAddition": "2024-05-24T13:55:00Z",
        "items": [cosmetic_json],
    }


@pytest.fixture
def creatorcode_json() -> dict:
    return {
        "code": "trymacs",
        "account": {"id": "a0b1c2d3e4f5a6b7c8d9e0f1a2b3c4d5", "name": "Trymacs"},
        "status": "ACTIVE",
        "verified": False,
    }


@pytest.fixture
def map_json() -> dict:
    return {
        "images": {
            "blank": "https://fortnite-api.com/images/map.png",
            "pois": "https://fortnite-api.com/images/map_en.png",
        },
        "pois": [
            {
                "id": "Athena.Location.POI.TiltedTowers",
                "name": "Tilted Towers",
                "location": {"x": -5000.5, "y": 1200, "z": 0},
            },
            {
                "id": "Athena.Location.UnNamedPOI.Gas",
                "name": None,
                "location": {"x": 0.0, "y": 0.0, "z": 1024.25},
            },
        ],
    }


@pytest.fixture
def news_json() -> dict:
    return {
        "hash": "d41d8cd9",
        "date": "2024-05-24T14:00:00Z",
        "image": None,
        "motds": [
            {
                "id": "motd-1",
                "title": "New Season",
                "tabTitle": "Season",
                "body": "Drop in now.",
                "image": "https://fortnite-api.com/images/news/motd-1.png",
                "tileImage": "https://fortnite-api.com/images/news/motd-1-tile.png",
                "sortingPriority": 90,
                "hidden": False,
            }
        ],
        "messages": None,
    }


@pytest.fixture
def playlist_json() -> dict:
    return {
        "id": "Playlist_DefaultSolo",
        "name": "Solo",
        "subName": None,
        "description": "Go it alone.",
        "gameType": "EFortGameType::BR",
        "ratingType": "solo",
        "minPlayers": 2,
        "maxPlayers": 100,
        "maxTeams": 100,
        "maxTeamSize": 1,
        "maxSquads": 100,
        "maxSquadSize": 1,
        "isDefault": True,
        "isTournament": False,
        "isLimitedTimeMode": False,
        "isLargeTeamGame": False,
        "accumulateToProfileStats": True,
        "images": {
            "showcase": "https://fortnite-api.com/images/playlists/playlist_defaultsolo/showcase.png",
            "missionIcon": None,
        },
        "gameplayTags": ["Athena.Playlist.Solo"],
        "path": "FortniteGame/Content/Athena/Playlists/Playlist_DefaultSolo",
        "added": "2019-05-08T10:11:12Z",
    }


@pytest.fixture
def shop_json(cosmetic_json: dict) -> dict:
    return {
        "hash": "5f4dcc3b",
        "date": "2024-05-24T00:00:00Z",
        "vbuckIcon": "https://fortnite-api.com/images/vbuck.png",
        "featured": {
            "name": "Featured",
            "entries": [
                {
                    "regularPrice": 1200,
                    "finalPrice": 800,
                    "bundle": None,
                    "banner": {
                        "value": "Sale",
                        "intensity": "High",
                        "backendValue": "Sale",
                    },
                    "giftable": True,
                    "refundable": True,
                    "sortPriority": -1,
                    "sectionId": "Featured",
                    "layout": {
                        "id": "Featured.1",
                        "name": "Featured",
                        "category": None,
                        "index": 0,
                        "showIneligibleOffers": "always",
                        "background": None,
                    },
                    "devName": "[VIRTUAL]1 x Renegade Raider for 800 MtxCurrency",
                    "offerId": "v2:/a1b2c3d4",
                    "displayAssetPath": None,
                    "tileSize": "Size_1_x_1",
                    "newDisplayAssetPath": "/OfferCatalog/NewDisplayAssets/NDA_CID_028",
                    "newDisplayAsset": {
                        "id": "NDA_CID_028",
                        "cosmeticId": "CID_028_Athena_Commando_F",
                        "materialInstances": [
                            {
                                "id": "MI_CID_028",
                                "primaryMode": "OnlyOnce",
                                "images": {
                                    "OfferImage": "https://fortnite-api.com/images/display-assets/mi_cid_028/offerimage.png",
                                    "Background": "https://fortnite-api.com/images/display-assets/mi_cid_028/background.png",
                                },
                                "colors": {
                                    "FallOff_Color": "ff00ffff",
                                    "Background_Color_A": None,
                                },
                                "scalings": {"ZoomImage_Percent": 0, "OffsetImage_Y": 7.5},
                            }
                        ],
                    },
                    "items": [cosmetic_json],
                }
            ],
        },
    }


def _stats_mode(**overrides: Any) -> dict:
    mode = {
        "score": 1520,
        "scorePerMin": 12.5,
        "scorePerMatch": 152.0,
        "wins": 1,
        "top10": 3,
        "top25": 6,
        "kills": 14,
        "killsPerMin": 0.115,
        "killsPerMatch": 1.4,
        "deaths": 9,
        "kd": 1.556,
        "matches": 10,
        "winRate": 10.0,
        "minutesPlayed": 122,
        "playersOutlived": 512,
        "lastModified": "2024-05-20T18:30:00Z",
    }
    mode.update(overrides)
    return mode


@pytest.fixture
def stats_json() -> dict:
    overall = _stats_mode(
        top3=2, top5=2, top6=2, top10=3, top12=4, top25=6, kd=2
    )
    return {
        "account": {"id": "3f20d6f579db4e7ba71d80fc18576db2", "name": "Test"},
        "battlePass": {"level": 42, "progress": 63},
        "image": None,
        "stats": {
            "all": {"overall": overall, "solo": _stats_mode(), "duo": None},
            "keyboardMouse": None,
            "gamepad": None,
            "touch": None,
        },
    }


# =============================================================================
# Client fixtures
# =============================================================================


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def mock_client(
    recorded_requests: list[httpx.Request],
) -> Callable[..., FortniteAPIClient]:
    """Factory for a client backed by an in-memory transport.

    The transport records every request and answers with an envelope around
    ``data``, or with ``body`` verbatim when given.
    """

    def _factory(
        data: Any = None,
        *,
        status: int = 200,
        error: str | None = None,
        http_status: int = 200,
        body: bytes | None = None,
        config: ClientConfig | None = None,
    ) -> FortniteAPIClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if body is not None:
                return httpx.Response(http_status, content=body)
            return httpx.Response(http_status, json=envelope(data, status, error))

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return FortniteAPIClient(config=config, http_client=http_client)

    return _factory
