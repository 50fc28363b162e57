from datetime import datetime
from typing import Any

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProductResponseDTO(BaseModel):
    """External representation of a product. Field order is part of the contract."""

    id: str
    name: str
    price: float
    category: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Wireless Mouse",
                "price": 24.99,
                "category": "Electronics",
                "createdAt": "2026-01-15T10:30:00Z",
                "updatedAt": "2026-01-15T10:30:00Z",
            }
        },
    )


class ProductListResponseDTO(BaseModel):
    data: list[ProductResponseDTO]
    total: int
    page: int
    pages: int


class ProductCreateDTO(BaseModel):
    """
    Request payload for creating a product.

    Fields are deliberately untyped here: type, emptiness and range checks
    happen in the domain so that every violation is reported together.
    """

    name: Any = Field(
        default=None,
        description="Product name, 1-200 characters after trimming",
        examples=["Wireless Mouse"],
    )
    price: Any = Field(
        default=None,
        description="Price, a number greater than 0 with at most 2 decimal places",
        examples=[24.99],
    )
    category: Any = Field(
        default=None,
        description="Category, 1-100 characters after trimming",
        examples=["Electronics"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Wireless Mouse",
                "price": 24.99,
                "category": "Electronics",
            }
        }
    )


class ProductUpdateDTO(ProductCreateDTO):
    """
    Request payload for a partial update.

    Any subset of fields may be sent. "" for name/category and 0 for price
    mean "leave unchanged".
    """

    model_config = ConfigDict(json_schema_extra={"example": {"price": 19.99}})


class ProductListQueryDTO(BaseModel):
    """Raw query parameters for listing products. Parsed by the domain normalizer."""

    page: str | None = None
    limit: str | None = None
    category: str | None = None
    min_price: str | None = None
    max_price: str | None = None

    @classmethod
    def from_query(
        cls,
        page: str | None = Query(
            default=None, description="Page number (default 1, values below 1 become 1)"
        ),
        limit: str | None = Query(
            default=None, description="Page size (default 10, clamped to 1-100)"
        ),
        category: str | None = Query(
            default=None, description="Exact category match", examples=["Electronics"]
        ),
        min_price: str | None = Query(
            default=None,
            alias="minPrice",
            description="Minimum price (inclusive)",
            examples=["10"],
        ),
        max_price: str | None = Query(
            default=None,
            alias="maxPrice",
            description="Maximum price (inclusive)",
            examples=["100"],
        ),
    ) -> "ProductListQueryDTO":
        return cls(
            page=page,
            limit=limit,
            category=category,
            min_price=min_price,
            max_price=max_price,
        )
