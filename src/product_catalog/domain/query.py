"""Normalization of raw list query parameters.

page/limit are parsed tolerantly (bad input falls back to defaults and
out-of-range values are clamped). Price bounds are parsed strictly: a
bound that is present but malformed is a validation error. Both accept
plain ASCII decimal notation only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal

from product_catalog.domain.errors import ValidationError
from product_catalog.domain.filters import ProductFilters, build_filters

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Plain ASCII decimal notation only; no digit separators, exponents or words
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass(frozen=True, slots=True)
class ProductQuery:
    filters: ProductFilters = field(default_factory=ProductFilters)
    paging: Paging = field(default_factory=Paging)


def _parse_int(raw: str | None) -> int | None:
    if raw is None or not _INTEGER.fullmatch(raw.strip()):
        return None
    return int(raw.strip())


def normalize_page(raw: str | None) -> int:
    page = _parse_int(raw)
    if page is None:
        return DEFAULT_PAGE
    return max(1, page)


def normalize_limit(raw: str | None) -> int:
    limit = _parse_int(raw)
    if limit is None:
        return DEFAULT_LIMIT
    return min(MAX_LIMIT, max(1, limit))


def normalize_category(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip() or None


def _parse_price_bound(raw: str | None) -> Decimal | None:
    """Returns the parsed bound, None when absent. Raises ValueError when malformed."""
    if raw is None or not raw.strip():
        return None
    if not _DECIMAL.fullmatch(raw.strip()):
        raise ValueError(raw)
    return Decimal(raw.strip())


def normalize_query(
    page: str | None = None,
    limit: str | None = None,
    category: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
) -> ProductQuery:
    """
    Turn raw query-string values into a bounded, typed product query.

    Args:
        page: Raw page number (default 1, floored at 1)
        limit: Raw page size (default 10, clamped to [1, 100])
        category: Raw category, trimmed; blank means no filter
        min_price: Raw inclusive lower price bound
        max_price: Raw inclusive upper price bound

    Returns:
        ProductQuery with filters and paging

    Raises:
        ValidationError: If a price bound is present but is not a finite number >= 0
    """
    errors = []
    bounds: dict[str, Decimal | None] = {}

    for name, raw in (("minPrice", min_price), ("maxPrice", max_price)):
        try:
            bounds[name] = _parse_price_bound(raw)
        except ValueError:
            bounds[name] = None
            errors.append(
                {
                    "field": name,
                    "message": f"{name} must be a valid positive number",
                    "code": "INVALID_PRICE_BOUND",
                }
            )

    if errors:
        raise ValidationError(
            message=", ".join(error["message"] for error in errors),
            errors=errors,
        )

    return ProductQuery(
        filters=build_filters(
            category=normalize_category(category),
            price_min=bounds["minPrice"],
            price_max=bounds["maxPrice"],
        ),
        paging=Paging(page=normalize_page(page), limit=normalize_limit(limit)),
    )
