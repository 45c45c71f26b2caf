"""AES key models for the ``/v2/aes`` endpoint."""

from datetime import datetime
from enum import Enum

from fortnite_api.models.base import FortniteModel


class AesKeyFormat(str, Enum):
    """Encoding requested for the returned AES keys."""

    HEX = "hex"
    BASE64 = "base64"


class DynamicKey(FortniteModel):
    """Key for a dynamically loaded pak file."""

    pak_filename: str
    pak_guid: str
    key: str


class AesV2(FortniteModel):
    """Current build's main AES key and its dynamic keys."""

    build: str
    main_key: str
    dynamic_keys: list[DynamicKey]
    updated: datetime
