from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime

from product_catalog.domain.filters import ProductFilters
from product_catalog.domain.mutations import ProductFields
from product_catalog.domain.product import Product
from product_catalog.ports.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """
    Canonical contract implementation for tests.

    - Applies AND-semantics filtering
    - Orders newest first, ties broken by id descending
    - Applies skip/limit AFTER filtering and ordering
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[str, Product] = {p.id: p for p in products or []}

    def count(self, filters: ProductFilters) -> int:
        return sum(1 for product in self._products.values() if filters.matches(product))

    def find(self, filters: ProductFilters, skip: int, limit: int) -> list[Product]:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [p for p in self._products.values() if filters.matches(p)]
        matches.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return matches[skip : skip + limit]

    def insert(self, fields: ProductFields, timestamp: datetime) -> Product:
        product = Product(
            id=str(uuid.uuid4()),
            name=fields.name,
            price=fields.price,
            category=fields.category,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._products[product.id] = product
        return product

    def get_by_id(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def update_by_id(
        self, product_id: str, fields: ProductFields, timestamp: datetime
    ) -> Product | None:
        current = self._products.get(product_id)
        if current is None:
            return None

        updated = replace(current, **fields.as_dict(), updated_at=timestamp)
        self._products[product_id] = updated
        return updated

    def delete_by_id(self, product_id: str) -> bool:
        return self._products.pop(product_id, None) is not None
