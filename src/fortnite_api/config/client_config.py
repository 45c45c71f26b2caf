"""Client configuration with Pydantic validation.

This module provides the settings that shape how ``FortniteAPIClient`` builds
requests and interprets responses, with support for YAML file loading.
"""

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://fortnite-api.com"
DEFAULT_USER_AGENT = "fortnite-api-python/0.1.0"


class ClientConfig(BaseModel):
    """Settings for a Fortnite API client.

    Can be:
    - Created with defaults: `ClientConfig()`
    - Loaded from YAML: `ClientConfig.from_yaml("fortnite.yaml")`
    - Saved to YAML: `config.to_yaml("fortnite.yaml")`

    The timeout and user agent only apply when the client creates its own
    transport. An injected ``httpx.AsyncClient`` is used as configured by
    the caller.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        DEFAULT_BASE_URL,
        min_length=1,
        description="Scheme and host of the API, without a version prefix",
    )
    timeout: float | None = Field(
        30.0,
        gt=0,
        description="Request timeout in seconds for an owned transport (None = no timeout)",
    )
    api_key: str | None = Field(
        None,
        description="Default key sent in the Authorization header of stats requests",
    )
    language: str | None = Field(
        None,
        description="Default language code for endpoints that accept one",
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT,
        description="User-Agent header for an owned transport",
    )
    strict_headers: bool = Field(
        False,
        description="Raise on malformed headers instead of dropping them",
    )
    strict_envelope: bool = Field(
        False,
        description="Raise when the envelope reports a non-2xx status or an error",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated ClientConfig instance.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValidationError: If the configuration is invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
