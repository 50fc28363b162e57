from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from product_catalog.domain.filters import ProductFilters
from product_catalog.domain.mutations import ProductFields
from product_catalog.domain.product import Product


class ProductRepository(ABC):
    """
    Port for product storage.

    Contract (Preconditions):
        - filters, paging values, identifiers and fields are pre-validated by the
          caller (UseCase); implementations do not re-validate
        - identifiers are canonical UUID strings
        - count() and find() are independent reads; no snapshot is shared between them

    Implementations return domain Product entities with string identifiers.
    """

    @abstractmethod
    def count(self, filters: ProductFilters) -> int:
        """Number of products matching the predicate."""
        ...

    @abstractmethod
    def find(self, filters: ProductFilters, skip: int, limit: int) -> list[Product]:
        """
        Products matching the predicate, newest first.

        Args:
            filters: Predicate (AND semantics) - pre-validated
            skip: Number of matches to skip
            limit: Maximum number of products to return

        Returns:
            At most `limit` products ordered by created_at descending
        """
        ...

    @abstractmethod
    def insert(self, fields: ProductFields, timestamp: datetime) -> Product:
        """Store a new product; created_at and updated_at are both set to timestamp."""
        ...

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None: ...

    @abstractmethod
    def update_by_id(
        self, product_id: str, fields: ProductFields, timestamp: datetime
    ) -> Product | None:
        """Apply only the fields that are set and refresh updated_at. None if absent."""
        ...

    @abstractmethod
    def delete_by_id(self, product_id: str) -> bool:
        """True if a product was deleted, False if none matched."""
        ...
