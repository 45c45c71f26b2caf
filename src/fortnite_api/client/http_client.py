"""Async HTTP client for the Fortnite API.

This module provides a typed interface for every Fortnite API endpoint. Each
call is a single request/response cycle: build the URL, dispatch it over a
shared httpx transport and unwrap the response envelope into Pydantic models.
There are no retries, caching or pagination.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TypeVar

from httpx import AsyncClient

from fortnite_api.client import endpoints
from fortnite_api.client.dispatch import dispatch
from fortnite_api.client.endpoints import Endpoint
from fortnite_api.client.envelope import decode_envelope
from fortnite_api.client.urls import QueryParam, build_url, render_path
from fortnite_api.config import ClientConfig
from fortnite_api.exceptions import FortniteClientNotConnectedError
from fortnite_api.models import (
    AesKeyFormat,
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
    StatsAccountType,
    StatsImage,
    StatsTimeWindow,
    StatsV2,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FortniteAPIClient:
    """Async client for Fortnite API endpoints.

    The transport is either injected and shared (the caller owns it and
    closes it) or created on ``connect()`` and closed by ``close()``.

    Example:
        async with FortniteAPIClient() as client:
            news = await client.get_news_v2(language="en")
            shop = await client.get_shop_br_v2()

        shared = httpx.AsyncClient(timeout=10.0)
        client = FortniteAPIClient(http_client=shared)
        stats = await client.get_stats_v2("Test", api_key="...")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client settings (default: ClientConfig()).
            http_client: Optional shared transport. When given, the client
                never closes it and ignores the timeout and user agent
                settings.
        """
        self.config = config or ClientConfig()
        self._client: AsyncClient | None = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> FortniteAPIClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create an owned transport if none is available yet."""
        if self._client is None:
            self._client = AsyncClient(
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_client = True
            logger.debug("HTTP client created for %s", self.config.base_url)

    async def close(self) -> None:
        """Close an owned transport. A shared transport is left open."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # AES
    # =========================================================================

    async def get_aes_keys_v2(self, key_format: AesKeyFormat | None = None) -> AesV2:
        """Get the current AES keys.

        Args:
            key_format: Encoding of the returned keys (server default if None).

        Returns:
            The main key and dynamic keys of the current build.
        """
        return await self._call(endpoints.AES_V2, params=[("keyFormat", key_format)])

    # =========================================================================
    # Banners
    # =========================================================================

    async def get_banners_v1(self, language: str | None = None) -> list[BannerV1]:
        """Get all banner icons."""
        return await self._call(
            endpoints.BANNERS_V1, params=[self._language_param(language)]
        )

    async def get_banners_colors_v1(self) -> list[BannerColorV1]:
        """Get the banner color palette."""
        return await self._call(endpoints.BANNERS_COLORS_V1)

    # =========================================================================
    # Cosmetics
    # =========================================================================

    async def get_cosmetics_v2(self, language: str | None = None) -> list[CosmeticV2]:
        """Get every Battle Royale cosmetic."""
        return await self._call(
            endpoints.COSMETICS_V2, params=[self._language_param(language)]
        )

    async def get_cosmetics_new_v2(self, language: str | None = None) -> CosmeticsNewV2:
        """Get the cosmetics added in the latest build."""
        return await self._call(
            endpoints.COSMETICS_NEW_V2, params=[self._language_param(language)]
        )

    async def get_cosmetic_by_id_v2(
        self,
        cosmetic_id: str,
        language: str | None = None,
    ) -> CosmeticV2:
        """Get a single cosmetic.

        Args:
            cosmetic_id: Cosmetic ID (e.g. "CID_028_Athena_Commando_F"),
                inserted into the path as given.
            language: Language code for localized fields.

        Returns:
            The cosmetic.
        """
        return await self._call(
            endpoints.COSMETIC_BY_ID_V2,
            path_params={"cosmetic_id": cosmetic_id},
            params=[self._language_param(language)],
        )

    # =========================================================================
    # Creator code
    # =========================================================================

    async def get_creatorcode_v2(self, name: str) -> CreatorCodeV2:
        """Look up a support-a-creator code.

        Args:
            name: The creator code to look up.
        """
        return await self._call(endpoints.CREATORCODE_V2, params=[("name", name)])

    # =========================================================================
    # Map
    # =========================================================================

    async def get_map_v1(self, language: str | None = None) -> MapV1:
        """Get the current map images and points of interest."""
        return await self._call(
            endpoints.MAP_V1, params=[self._language_param(language)]
        )

    # =========================================================================
    # News
    # =========================================================================

    async def get_news_v2(self, language: str | None = None) -> NewsV2:
        """Get the news feeds of every game mode."""
        return await self._call(
            endpoints.NEWS_V2, params=[self._language_param(language)]
        )

    async def get_news_br_v2(self, language: str | None = None) -> News:
        """Get the Battle Royale news feed."""
        return await self._call(
            endpoints.NEWS_BR_V2, params=[self._language_param(language)]
        )

    async def get_news_stw_v2(self, language: str | None = None) -> News:
        """Get the Save the World news feed."""
        return await self._call(
            endpoints.NEWS_STW_V2, params=[self._language_param(language)]
        )

    async def get_news_creative_v2(self, language: str | None = None) -> News:
        """Get the Creative news feed."""
        return await self._call(
            endpoints.NEWS_CREATIVE_V2, params=[self._language_param(language)]
        )

    # =========================================================================
    # Playlists
    # =========================================================================

    async def get_playlists_v1(self, language: str | None = None) -> list[PlaylistV1]:
        """Get every playlist."""
        return await self._call(
            endpoints.PLAYLISTS_V1, params=[self._language_param(language)]
        )

    async def get_playlist_by_id_v1(
        self,
        playlist_id: str,
        language: str | None = None,
    ) -> PlaylistV1:
        """Get a single playlist.

        Args:
            playlist_id: Playlist ID (e.g. "playlist_defaultsolo"), inserted
                into the path as given.
            language: Language code for localized fields.
        """
        return await self._call(
            endpoints.PLAYLIST_BY_ID_V1,
            path_params={"playlist_id": playlist_id},
            params=[self._language_param(language)],
        )

    # =========================================================================
    # Shop
    # =========================================================================

    async def get_shop_br_v2(self, language: str | None = None) -> ShopV2:
        """Get the Battle Royale item shop."""
        return await self._call(
            endpoints.SHOP_BR_V2, params=[self._language_param(language)]
        )

    async def get_shop_combined_v2(self, language: str | None = None) -> ShopV2:
        """Get the combined item shop."""
        return await self._call(
            endpoints.SHOP_COMBINED_V2, params=[self._language_param(language)]
        )

    # =========================================================================
    # Stats
    # =========================================================================

    async def get_stats_v2(
        self,
        name: str,
        *,
        api_key: str | None = None,
        account_type: StatsAccountType | None = None,
        time_window: StatsTimeWindow | None = None,
        image: StatsImage | None = None,
    ) -> StatsV2:
        """Get Battle Royale stats by display name.

        Args:
            name: Display name of the player.
            api_key: API key for the Authorization header (default: config.api_key).
            account_type: Platform the name belongs to.
            time_window: Season or lifetime stats.
            image: Input type to render a stats image for.

        Returns:
            The player's stats.
        """
        return await self._call(
            endpoints.STATS_V2,
            params=[
                ("name", name),
                ("accountType", account_type),
                ("timeWindow", time_window),
                ("image", image),
            ],
            headers=self._auth_headers(api_key),
        )

    async def get_stats_by_account_id_v2(
        self,
        account_id: str,
        *,
        api_key: str | None = None,
        time_window: StatsTimeWindow | None = None,
        image: StatsImage | None = None,
    ) -> StatsV2:
        """Get Battle Royale stats by account ID.

        Args:
            account_id: Epic account ID, inserted into the path as given.
            api_key: API key for the Authorization header (default: config.api_key).
            time_window: Season or lifetime stats.
            image: Input type to render a stats image for.

        Returns:
            The player's stats.
        """
        return await self._call(
            endpoints.STATS_BY_ACCOUNT_ID_V2,
            path_params={"account_id": account_id},
            params=[("timeWindow", time_window), ("image", image)],
            headers=self._auth_headers(api_key),
        )

    # =========================================================================
    # Internal Methods
    # =========================================================================

    def _language_param(self, language: str | None) -> QueryParam:
        return ("language", language if language is not None else self.config.language)

    def _auth_headers(self, api_key: str | None) -> dict[str, str]:
        key = api_key if api_key is not None else self.config.api_key
        if key is None:
            logger.warning("No API key configured, sending request without Authorization")
            return {}
        return {"Authorization": key}

    async def _call(
        self,
        endpoint: Endpoint[T],
        *,
        params: Sequence[QueryParam] = (),
        path_params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> T:
        """Run the request pipeline for one endpoint.

        Args:
            endpoint: Descriptor of the route to call.
            params: Ordered query parameters; ``None`` values are omitted.
            path_params: Identifiers substituted into the path template.
            headers: Extra request headers.

        Returns:
            The decoded payload of the endpoint's response type.

        Raises:
            FortniteClientNotConnectedError: If no transport is available.
            FortniteInvalidURLError: If the configured base URL is invalid.
            FortniteTransportError: If the request fails at the network layer.
            FortniteDecodeError: If the response does not match the payload type.
            FortniteAPIStatusError: If strict_envelope and the API reports failure.
        """
        if self._client is None:
            raise FortniteClientNotConnectedError(
                "Client not connected. Call connect() first or pass http_client."
            )

        path = render_path(endpoint.path, **(path_params or {}))
        url = build_url(f"{self.config.base_url}{path}", params)

        response = await dispatch(
            self._client,
            url,
            endpoint.method,
            "",
            headers or {},
            strict_headers=self.config.strict_headers,
        )

        return decode_envelope(
            response.content,
            endpoint.response_type,
            path=path,
            status_code=response.status_code,
            strict=self.config.strict_envelope,
        )
