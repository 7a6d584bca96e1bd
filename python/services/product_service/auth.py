"""Shared-secret API key check for write endpoints."""

from __future__ import annotations

import hmac

from fastapi import Depends, Header

from product_service.config import Settings, get_settings
from product_service.errors import UnauthorizedError

API_KEY_HEADER = "x-api-key"


def authenticate(provided: str | None, expected: str) -> bool:
    if not provided:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


def require_api_key(
    x_api_key: str | None = Header(default=None, alias=API_KEY_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    if not authenticate(x_api_key, settings.api_key):
        raise UnauthorizedError()
