from __future__ import annotations

import math
from dataclasses import dataclass

from product_catalog.domain.product import Product


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Effective page after reconciling the requested page with the match count."""

    page: int
    pages: int
    skip: int
    limit: int


@dataclass(frozen=True, slots=True)
class ProductPage:
    """Pagination envelope."""

    products: list[Product]
    total: int
    page: int
    pages: int


def resolve_window(total: int, requested_page: int, limit: int) -> PageWindow:
    """
    Compute the page window for a query.

    - pages is at least 1, so an empty result is page 1 of 1
    - a page past the end is clamped down to the last page
    - a page below 1 is raised to 1

    Args:
        total: Number of records matching the predicate
        requested_page: Page number from the normalized query
        limit: Page size from the normalized query (>= 1)

    Returns:
        PageWindow with the effective page, page count and offset
    """
    pages = max(1, math.ceil(total / limit))
    page = min(max(1, requested_page), pages)
    return PageWindow(page=page, pages=pages, skip=(page - 1) * limit, limit=limit)
