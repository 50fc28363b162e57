from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from product_catalog.domain.product import Product


@dataclass(frozen=True, slots=True)
class PriceRange:
    """Inclusive price range. Either bound may be open."""

    gte: Decimal | None = None
    lte: Decimal | None = None

    @property
    def is_empty(self) -> bool:
        """True when the bounds cross, i.e. no price can satisfy the range."""
        return self.gte is not None and self.lte is not None and self.gte > self.lte

    def contains(self, price: Decimal) -> bool:
        if self.gte is not None and price < self.gte:
            return False
        if self.lte is not None and price > self.lte:
            return False
        return True


@dataclass(frozen=True, slots=True)
class ProductFilters:
    """
    Storage-agnostic predicate over products.

    A conjunction of an optional exact category match and an optional
    inclusive price range. No constraints means "match all".
    Adapters translate this into their native query form.
    """

    category: str | None = None
    price: PriceRange | None = None

    @property
    def matches_all(self) -> bool:
        return self.category is None and self.price is None

    def matches(self, product: Product) -> bool:
        if self.category is not None and product.category != self.category:
            return False
        if self.price is not None and not self.price.contains(product.price):
            return False
        return True


def build_filters(
    category: str | None = None,
    price_min: Decimal | None = None,
    price_max: Decimal | None = None,
) -> ProductFilters:
    """
    Build the product predicate from normalized query values.

    Crossed bounds (price_min > price_max) are kept as-is and yield a
    predicate that matches nothing; they are not rejected.

    Args:
        category: Trimmed, non-empty category or None
        price_min: Inclusive lower bound or None
        price_max: Inclusive upper bound or None

    Returns:
        ProductFilters predicate
    """
    price = None
    if price_min is not None or price_max is not None:
        price = PriceRange(gte=price_min, lte=price_max)

    return ProductFilters(category=category, price=price)
