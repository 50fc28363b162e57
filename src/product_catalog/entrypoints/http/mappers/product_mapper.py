from __future__ import annotations

from pydantic import BaseModel

from product_catalog.domain.mutations import FIELDS, MISSING, ProductInput
from product_catalog.domain.pagination import ProductPage
from product_catalog.domain.product import Product
from product_catalog.domain.query import normalize_query
from product_catalog.entrypoints.http.dtos.products import (
    ProductListQueryDTO,
    ProductListResponseDTO,
    ProductResponseDTO,
)
from product_catalog.use_cases.list_products import ListProductsRequest


class ProductMapper:
    """Maps between REST DTOs and domain models for products."""

    @staticmethod
    def to_list_request(dto: ProductListQueryDTO) -> ListProductsRequest:
        """
        Builds a normalized list request from raw query parameters.

        Raises:
            ValidationError: If a price bound is malformed
        """
        return ListProductsRequest(
            query=normalize_query(
                page=dto.page,
                limit=dto.limit,
                category=dto.category,
                min_price=dto.min_price,
                max_price=dto.max_price,
            )
        )

    @staticmethod
    def to_product_input(dto: BaseModel) -> ProductInput:
        """
        Converts a write payload to raw domain input.

        Fields absent from the JSON body become MISSING; fields sent
        (even as null) keep their value.
        """
        return ProductInput(
            **{
                name: getattr(dto, name) if name in dto.model_fields_set else MISSING
                for name in FIELDS
            }
        )

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product to REST response DTO.

        Handles Decimal → float conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            price=float(product.price),
            category=product.category,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    @staticmethod
    def to_list_response(page: ProductPage) -> ProductListResponseDTO:
        return ProductListResponseDTO(
            data=[ProductMapper.to_product_response(p) for p in page.products],
            total=page.total,
            page=page.page,
            pages=page.pages,
        )
