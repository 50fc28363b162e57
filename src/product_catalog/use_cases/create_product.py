"""Create product use case."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from product_catalog.domain.mutations import ProductInput, validate_create
from product_catalog.domain.product import Product, utc_now
from product_catalog.ports.product_repository import ProductRepository


@dataclass(frozen=True, slots=True)
class CreateProductRequest:
    data: ProductInput


@dataclass(frozen=True, slots=True)
class CreateProductResponse:
    product: Product


class CreateProduct:
    """
    Use case for creating a product.

    Responsibilities:
    - Validate and trim all required fields before any write
    - Stamp created_at and updated_at with the same instant
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = product_repository
        self._clock = clock

    def execute(self, request: CreateProductRequest) -> CreateProductResponse:
        """
        Raises:
            ValidationError: If any field is missing or invalid (all violations listed)
        """
        fields = validate_create(request.data)
        product = self._repository.insert(fields, timestamp=self._clock())
        return CreateProductResponse(product=product)
