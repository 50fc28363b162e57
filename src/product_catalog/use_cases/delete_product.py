from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.errors import NotFoundError
from product_catalog.domain.identifiers import parse_product_id
from product_catalog.ports.product_repository import ProductRepository


@dataclass(frozen=True, slots=True)
class DeleteProductRequest:
    product_id: str


class DeleteProduct:
    """Hard delete by id. No soft-delete, no history."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    def execute(self, request: DeleteProductRequest) -> None:
        """
        Raises:
            ValidationError: If product_id is not a valid UUID format
            NotFoundError: If no product has the given id
        """
        product_id = parse_product_id(request.product_id)

        if not self._repository.delete_by_id(product_id):
            raise NotFoundError(resource="Product", identifier=product_id)
