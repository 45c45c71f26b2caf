"""Response envelope decoding.

Every API response wraps its payload in ``{"status", "data", "error"}``.
This module validates that envelope and returns the typed ``data`` field.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from fortnite_api.exceptions import FortniteAPIStatusError, FortniteDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """The envelope around every payload."""

    status: int
    data: T
    error: str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300 and self.error is None


def _envelope_error(body: bytes | str) -> str | None:
    """Best-effort read of the envelope ``error`` field for diagnostics."""
    try:
        raw = json.loads(body)
    except ValueError:
        return None
    if isinstance(raw, dict) and isinstance(raw.get("error"), str):
        return raw["error"]
    return None


def decode_envelope(
    body: bytes | str,
    payload_type: Any,
    *,
    path: str | None = None,
    status_code: int | None = None,
    strict: bool = False,
) -> Any:
    """Decode an envelope and return its payload.

    Validation is strict: numbers are not coerced from strings, enum values
    must be known, and required fields must be present. The whole body is
    rejected on any mismatch.

    Args:
        body: Raw response body.
        payload_type: Expected type of ``data`` (a model or ``list[Model]``).
        path: Request path, for error context.
        status_code: HTTP status of the raw response, for error context.
        strict: Also fail when the envelope reports a non-2xx status or a
            non-null error, even if ``data`` decoded.

    Returns:
        The validated ``data`` value.

    Raises:
        FortniteDecodeError: If the body does not match the envelope and payload type.
        FortniteAPIStatusError: If ``strict`` and the envelope reports failure.
    """
    try:
        envelope = APIResponse[payload_type].model_validate_json(body, strict=True)
    except ValidationError as e:
        logger.warning(
            "Failed to decode response for %s (HTTP %s): %d validation errors",
            path,
            status_code,
            e.error_count(),
        )
        message = f"Response validation error for {path} (HTTP {status_code}): {e}"
        api_error = _envelope_error(body)
        if api_error:
            message = f"{message}\nAPI error: {api_error}"
        raise FortniteDecodeError(message, path=path, status_code=status_code) from e

    if strict and not envelope.is_success:
        logger.warning(
            "API reported failure for %s: status=%d error=%s",
            path,
            envelope.status,
            envelope.error,
        )
        raise FortniteAPIStatusError(
            f"API error {envelope.status}: {envelope.error or 'Unknown error'}",
            status=envelope.status,
            error=envelope.error,
        )

    return envelope.data
