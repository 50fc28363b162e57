from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.pagination import ProductPage, resolve_window
from product_catalog.domain.query import ProductQuery
from product_catalog.ports.product_repository import ProductRepository


@dataclass(frozen=True, slots=True)
class ListProductsRequest:
    query: ProductQuery


@dataclass(frozen=True, slots=True)
class ListProductsResponse:
    page: ProductPage


class ListProducts:
    """
    Filtered, paginated product listing, newest first.

    The requested page is reconciled against the match count before
    fetching, so the count must be read first. The two reads are not
    atomic: under concurrent writes `total` and the fetched slice may
    reflect slightly different states.
    """

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    def execute(self, request: ListProductsRequest) -> ListProductsResponse:
        """
        Execute product listing.

        Args:
            request: Normalized query (filters and paging)

        Returns:
            Response wrapping the pagination envelope
        """
        filters = request.query.filters
        paging = request.query.paging

        total = self._repository.count(filters)
        window = resolve_window(total=total, requested_page=paging.page, limit=paging.limit)

        products = self._repository.find(filters, skip=window.skip, limit=window.limit)

        return ListProductsResponse(
            page=ProductPage(
                products=products,
                total=total,
                page=window.page,
                pages=window.pages,
            )
        )
