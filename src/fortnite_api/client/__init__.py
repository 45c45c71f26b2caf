"""HTTP client module for the Fortnite API.

This module provides the async client plus the pipeline pieces it is built
from: URL building, request dispatch, envelope decoding and the endpoint
catalog.

Usage:
    from fortnite_api.client import FortniteAPIClient

    async with FortniteAPIClient() as client:
        cosmetic = await client.get_cosmetic_by_id_v2("CID_028_Athena_Commando_F")
"""

from fortnite_api.client.dispatch import build_headers, dispatch
from fortnite_api.client.endpoints import ENDPOINTS, Endpoint
from fortnite_api.client.envelope import APIResponse, decode_envelope
from fortnite_api.client.http_client import FortniteAPIClient
from fortnite_api.client.urls import build_url, query_value, render_path

__all__ = [
    "FortniteAPIClient",
    "APIResponse",
    "Endpoint",
    "ENDPOINTS",
    "build_headers",
    "build_url",
    "decode_envelope",
    "dispatch",
    "query_value",
    "render_path",
]
