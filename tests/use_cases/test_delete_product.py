"""Test suite for DeleteProduct use case."""

from __future__ import annotations

from typing import Callable
from unittest.mock import Mock

import pytest

from product_catalog.adapters.in_memory_product_repository import InMemoryProductRepository
from product_catalog.domain.errors import NotFoundError, ValidationError
from product_catalog.domain.product import Product
from product_catalog.ports.product_repository import ProductRepository
from product_catalog.use_cases.delete_product import DeleteProduct, DeleteProductRequest
from product_catalog.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest

PRODUCT_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def repository(make_product: Callable[..., Product]) -> InMemoryProductRepository:
    return InMemoryProductRepository([make_product(product_id=PRODUCT_ID)])


def test_get_after_delete_is_not_found(repository: InMemoryProductRepository) -> None:
    DeleteProduct(repository).execute(DeleteProductRequest(product_id=PRODUCT_ID))

    with pytest.raises(NotFoundError):
        GetProductById(repository).execute(GetProductByIdRequest(product_id=PRODUCT_ID))


def test_second_delete_is_not_found(repository: InMemoryProductRepository) -> None:
    use_case = DeleteProduct(repository)
    use_case.execute(DeleteProductRequest(product_id=PRODUCT_ID))

    with pytest.raises(NotFoundError):
        use_case.execute(DeleteProductRequest(product_id=PRODUCT_ID))


def test_malformed_id_is_rejected_without_storage_call() -> None:
    repository = Mock(spec=ProductRepository)

    with pytest.raises(ValidationError):
        DeleteProduct(repository).execute(DeleteProductRequest(product_id="42"))

    repository.delete_by_id.assert_not_called()
