"""Base model shared by all Fortnite API response schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Unsigned integer widths used by the remote schema
UInt8 = Annotated[int, Field(ge=0, le=255)]
UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
UInt64 = Annotated[int, Field(ge=0)]


class FortniteModel(BaseModel):
    """Base model for API payloads.

    Attributes are snake_case in Python and camelCase on the wire. Unknown
    fields in a payload are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
