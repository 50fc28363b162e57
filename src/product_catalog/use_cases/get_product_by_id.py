"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.errors import NotFoundError
from product_catalog.domain.identifiers import parse_product_id
from product_catalog.domain.product import Product
from product_catalog.ports.product_repository import ProductRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product by ID.

    Responsibilities:
    - Validate product_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if product doesn't exist
    """

    def __init__(self, product_repository: ProductRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            product_repository: Repository for product data access
        """
        self._repository = product_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Execute the get product by ID use case.

        Args:
            request: Request containing product_id

        Returns:
            GetProductByIdResponse with the product

        Raises:
            ValidationError: If product_id is not a valid UUID format
            NotFoundError: If product with given ID doesn't exist
        """
        product_id = parse_product_id(request.product_id)

        product = self._repository.get_by_id(product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)

        return GetProductByIdResponse(product=product)
