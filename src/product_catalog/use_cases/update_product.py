"""Partial update use case."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from product_catalog.domain.errors import NotFoundError
from product_catalog.domain.identifiers import parse_product_id
from product_catalog.domain.mutations import ProductInput, validate_update
from product_catalog.domain.product import Product, utc_now
from product_catalog.ports.product_repository import ProductRepository


@dataclass(frozen=True, slots=True)
class UpdateProductRequest:
    product_id: str
    data: ProductInput


@dataclass(frozen=True, slots=True)
class UpdateProductResponse:
    product: Product


class UpdateProduct:
    """
    Use case for partially updating a product.

    The identifier is checked first, then the body. Only the fields that
    survive validation are written; the rest keep their stored values.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = product_repository
        self._clock = clock

    def execute(self, request: UpdateProductRequest) -> UpdateProductResponse:
        """
        Raises:
            ValidationError: If the id is malformed, a field is invalid, or no field remains
            NotFoundError: If no product has the given id
        """
        product_id = parse_product_id(request.product_id)
        fields = validate_update(request.data)

        product = self._repository.update_by_id(product_id, fields, timestamp=self._clock())

        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)

        return UpdateProductResponse(product=product)
