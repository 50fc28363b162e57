"""PostgreSQL implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import false, func, select
from sqlalchemy.orm import Session

from product_catalog.domain.filters import ProductFilters
from product_catalog.domain.mutations import ProductFields
from product_catalog.domain.product import Product
from product_catalog.infra.db.models.product import ProductRow
from product_catalog.ports.product_repository import ProductRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresProductRepository(ProductRepository):
    """
    PostgreSQL implementation of ProductRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses
    - count() is a COUNT(*) over the filtered query; find() a separate SELECT
    - Writes are flushed, not committed; the session owner commits
    - Converts ProductRow (infrastructure) to Product (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def count(self, filters: ProductFilters) -> int:
        query = self._build_query(filters)
        count_query = select(func.count()).select_from(query.subquery())
        return self._session.execute(count_query).scalar() or 0

    def find(self, filters: ProductFilters, skip: int, limit: int) -> list[Product]:
        # Trust that UseCase has validated inputs (contract programming)
        query = (
            self._build_query(filters)
            .order_by(ProductRow.created_at.desc(), ProductRow.id.desc())
            .offset(skip)
            .limit(limit)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def insert(self, fields: ProductFields, timestamp: datetime) -> Product:
        row = ProductRow(
            name=fields.name,
            price=fields.price,
            category=fields.category,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def get_by_id(self, product_id: str) -> Product | None:
        row = self._get_row(product_id)
        return self._to_domain(row) if row else None

    def update_by_id(
        self, product_id: str, fields: ProductFields, timestamp: datetime
    ) -> Product | None:
        row = self._get_row(product_id)
        if row is None:
            return None

        for name, value in fields.as_dict().items():
            setattr(row, name, value)
        row.updated_at = timestamp
        self._session.flush()
        return self._to_domain(row)

    def delete_by_id(self, product_id: str) -> bool:
        row = self._get_row(product_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.flush()
        return True

    def _get_row(self, product_id: str) -> ProductRow | None:
        query = select(ProductRow).where(ProductRow.id == UUID(product_id))
        return self._session.execute(query).scalar_one_or_none()

    def _build_query(self, filters: ProductFilters) -> Select[tuple[ProductRow]]:
        """
        Build SQLAlchemy query with filters applied.

        Args:
            filters: Predicate to translate

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(ProductRow)

        # Exact match on the trimmed category
        if filters.category is not None:
            query = query.where(ProductRow.category == filters.category)

        # Price range (inclusive)
        if filters.price is not None:
            if filters.price.is_empty:
                return query.where(false())
            if filters.price.gte is not None:
                query = query.where(ProductRow.price >= filters.price.gte)
            if filters.price.lte is not None:
                query = query.where(ProductRow.price <= filters.price.lte)

        return query

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Args:
            row: SQLAlchemy ProductRow model

        Returns:
            Product domain entity
        """
        return Product(
            id=str(row.id),  # Convert UUID to string
            name=row.name,
            price=row.price,  # Already Decimal from NUMERIC column
            category=row.category,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
