from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

NAME_MAX_LENGTH = 200
CATEGORY_MAX_LENGTH = 100

# NUMERIC(12, 2)
PRICE_MAX = Decimal("9999999999.99")
PRICE_SCALE = 2


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    price: Decimal
    category: str
    created_at: datetime
    updated_at: datetime


def utc_now() -> datetime:
    """Default clock for write timestamps."""
    return datetime.now(timezone.utc)
