"""Payload validation shared by product create and full update."""

from __future__ import annotations

import math
from typing import Any

from fastapi import Body

from common.models import ProductBase

from product_service.errors import ValidationError

MISSING_FIELDS = "Validation Error: Missing required fields"
INVALID_TYPES = "Validation Error: Invalid data types"

# Missing when absent, null or "".
TEXT_FIELDS = ("name", "description", "category")
# Missing only when absent or null; 0 and false are valid values.
VALUE_FIELDS = ("price", "inStock")


def _is_number(value: Any) -> bool:
    """A finite JSON number that fits in a float; bools, NaN and Infinity are not."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def validate_product(payload: Any) -> ProductBase:
    if not isinstance(payload, dict):
        raise ValidationError(MISSING_FIELDS)

    if any(not payload.get(field) for field in TEXT_FIELDS):
        raise ValidationError(MISSING_FIELDS)
    if any(payload.get(field) is None for field in VALUE_FIELDS):
        raise ValidationError(MISSING_FIELDS)

    if not _is_number(payload["price"]) or not isinstance(payload["inStock"], bool):
        raise ValidationError(INVALID_TYPES)
    if any(not isinstance(payload[field], str) for field in TEXT_FIELDS):
        raise ValidationError(INVALID_TYPES)

    return ProductBase(
        name=payload["name"],
        description=payload["description"],
        price=payload["price"],
        category=payload["category"],
        in_stock=payload["inStock"],
    )


def validated_product(payload: Any = Body(...)) -> ProductBase:
    """FastAPI dependency: the request body as a validated ProductBase."""
    return validate_product(payload)
