"""
Test suite for PostgresProductRepository.

Runs the SQLAlchemy adapter against an in-memory SQLite database built from
the ORM metadata. Verifies:
- WHERE clauses for category and inclusive price range
- COUNT(*) uses the same predicate as the SELECT
- ORDER BY created_at DESC with OFFSET/LIMIT
- Partial updates, deletes and UUID → string conversion
- Table CHECK constraints reject invalid rows
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from product_catalog.adapters.postgres_product_repository import PostgresProductRepository
from product_catalog.domain.filters import ProductFilters, build_filters
from product_catalog.domain.mutations import ProductFields
from product_catalog.infra.db.models import Base

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture()
def repo(session: Session) -> PostgresProductRepository:
    return PostgresProductRepository(session)


def _seed(repo: PostgresProductRepository) -> list[str]:
    """Insert A, B, C at increasing times; returns ids in insertion order."""
    rows = [
        ("A", "100.00", "X"),
        ("B", "200.00", "X"),
        ("C", "150.00", "Y"),
    ]
    ids = []
    for minute, (name, price, category) in enumerate(rows):
        product = repo.insert(
            ProductFields(name=name, price=Decimal(price), category=category),
            timestamp=T0 + timedelta(minutes=minute),
        )
        ids.append(product.id)
    return ids


# ==============================================================================
# Writes
# ==============================================================================


def test_insert_returns_domain_product_with_string_id(repo: PostgresProductRepository) -> None:
    product = repo.insert(
        ProductFields(name="Pen", price=Decimal("1.50"), category="Office"), timestamp=T0
    )

    assert isinstance(product.id, str)
    assert uuid.UUID(product.id)
    assert product.name == "Pen"
    assert product.price == Decimal("1.50")
    assert product.created_at == product.updated_at == T0


def test_update_by_id_applies_only_set_fields(repo: PostgresProductRepository) -> None:
    ids = _seed(repo)
    later = T0 + timedelta(hours=1)

    updated = repo.update_by_id(ids[0], ProductFields(price=Decimal("110.00")), timestamp=later)

    assert updated is not None
    assert updated.price == Decimal("110.00")
    assert updated.name == "A"
    assert updated.category == "X"
    assert updated.updated_at == later
    assert updated.created_at == T0


def test_update_by_id_unknown_returns_none(repo: PostgresProductRepository) -> None:
    assert repo.update_by_id(str(uuid.uuid4()), ProductFields(name="x"), timestamp=T0) is None


def test_delete_by_id(repo: PostgresProductRepository) -> None:
    ids = _seed(repo)

    assert repo.delete_by_id(ids[1]) is True
    assert repo.delete_by_id(ids[1]) is False
    assert repo.get_by_id(ids[1]) is None
    assert repo.count(ProductFilters()) == 2


def test_get_by_id(repo: PostgresProductRepository) -> None:
    ids = _seed(repo)

    product = repo.get_by_id(ids[2])

    assert product is not None
    assert product.id == ids[2]
    assert product.name == "C"
    assert repo.get_by_id(str(uuid.uuid4())) is None


def test_check_constraint_rejects_non_positive_price(repo: PostgresProductRepository) -> None:
    with pytest.raises(IntegrityError):
        repo.insert(
            ProductFields(name="Free", price=Decimal("0"), category="Promo"), timestamp=T0
        )


# ==============================================================================
# Reads
# ==============================================================================


def test_find_orders_newest_first(repo: PostgresProductRepository) -> None:
    _seed(repo)

    assert [p.name for p in repo.find(ProductFilters(), skip=0, limit=10)] == ["C", "B", "A"]


def test_find_applies_offset_and_limit(repo: PostgresProductRepository) -> None:
    _seed(repo)

    assert [p.name for p in repo.find(ProductFilters(), skip=1, limit=1)] == ["B"]
    assert repo.find(ProductFilters(), skip=3, limit=10) == []


def test_category_and_price_filters_are_combined(repo: PostgresProductRepository) -> None:
    _seed(repo)
    filters = build_filters(category="X", price_min=Decimal("150"))

    assert repo.count(filters) == 1
    assert [p.name for p in repo.find(filters, skip=0, limit=10)] == ["B"]


def test_price_bounds_are_inclusive(repo: PostgresProductRepository) -> None:
    _seed(repo)
    filters = build_filters(price_min=Decimal("100.00"), price_max=Decimal("150.00"))

    assert sorted(p.name for p in repo.find(filters, skip=0, limit=10)) == ["A", "C"]


def test_crossed_price_bounds_match_nothing(repo: PostgresProductRepository) -> None:
    _seed(repo)
    filters = build_filters(price_min=Decimal("300"), price_max=Decimal("100"))

    assert repo.count(filters) == 0
    assert repo.find(filters, skip=0, limit=10) == []


def test_count_on_empty_table(repo: PostgresProductRepository) -> None:
    assert repo.count(ProductFilters()) == 0
