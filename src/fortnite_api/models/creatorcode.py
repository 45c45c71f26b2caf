"""Creator code models for the ``/v2/creatorcode`` endpoint."""

from enum import Enum

from fortnite_api.models.base import FortniteModel


class CreatorCodeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class CreatorCodeAccount(FortniteModel):
    id: str
    name: str


class CreatorCodeV2(FortniteModel):
    """A support-a-creator code and the account it belongs to."""

    code: str
    account: CreatorCodeAccount
    status: CreatorCodeStatus
    verified: bool
