"""Shared fixtures for the test suite."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable

import pytest

from product_catalog.domain.product import Product

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TickingClock:
    """Deterministic clock: every call returns a strictly later instant."""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(seconds=1)):
        self._now = start
        self._step = step

    def __call__(self) -> datetime:
        self._now += self._step
        return self._now


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock(start=BASE_TIME + timedelta(days=1))


@pytest.fixture()
def make_product() -> Callable[..., Product]:
    """Factory for Product entities; `minute` orders them in time."""

    def _make(
        name: str = "Wireless Mouse",
        price: str = "24.99",
        category: str = "Electronics",
        minute: int = 0,
        product_id: str | None = None,
    ) -> Product:
        timestamp = BASE_TIME + timedelta(minutes=minute)
        return Product(
            id=product_id or str(uuid.uuid4()),
            name=name,
            price=Decimal(price),
            category=category,
            created_at=timestamp,
            updated_at=timestamp,
        )

    return _make
