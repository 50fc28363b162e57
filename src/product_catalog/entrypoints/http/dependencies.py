"""
Dependency injection for FastAPI routes.

Database sessions are per request, never cached. The session dependency is
function-scoped: its commit runs when the endpoint returns, before the
response is sent. Use cases and repositories are built fresh for every request.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from product_catalog.adapters.postgres_product_repository import PostgresProductRepository
from product_catalog.infra.db.session import unit_of_work
from product_catalog.ports.product_repository import ProductRepository
from product_catalog.use_cases.create_product import CreateProduct
from product_catalog.use_cases.delete_product import DeleteProduct
from product_catalog.use_cases.get_product_by_id import GetProductById
from product_catalog.use_cases.list_products import ListProducts
from product_catalog.use_cases.update_product import UpdateProduct


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    Wraps unit_of_work(): commit when the endpoint returns normally,
    rollback when it raises. A failing commit propagates to the exception
    handlers like any other storage error.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with unit_of_work() as session:
        yield session


def get_product_repository(
    db: Session = Depends(get_db, scope="function"),
) -> ProductRepository:
    """Repository bound to the request's session."""
    return PostgresProductRepository(session=db)


def get_list_products_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> ListProducts:
    return ListProducts(product_repository=repository)


def get_create_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> CreateProduct:
    return CreateProduct(product_repository=repository)


def get_get_product_by_id_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> GetProductById:
    return GetProductById(product_repository=repository)


def get_update_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> UpdateProduct:
    return UpdateProduct(product_repository=repository)


def get_delete_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> DeleteProduct:
    return DeleteProduct(product_repository=repository)
