"""Shared Pydantic models used across Python services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBase(CamelModel):
    name: str
    description: str
    price: float
    category: str
    in_stock: bool


class Product(ProductBase):
    id: str


class ProductPage(CamelModel):
    total: int
    page: int
    limit: int
    data: list[Product]


class ProductStats(CamelModel):
    total_products: int
    count_by_category: dict[str, int]


class DeleteResponse(CamelModel):
    message: str
    deleted: list[Product]


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
