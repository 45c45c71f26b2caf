"""Configuration module for the Fortnite API client.

This module provides a Pydantic-based configuration class with support for
YAML file loading and validation.
"""

from fortnite_api.config.client_config import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ClientConfig,
)

__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
]
