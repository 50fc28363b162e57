"""Tests for page window resolution."""

from __future__ import annotations

import pytest

from product_catalog.domain.pagination import PageWindow, resolve_window


def test_empty_result_is_page_one_of_one() -> None:
    assert resolve_window(total=0, requested_page=1, limit=10) == PageWindow(
        page=1, pages=1, skip=0, limit=10
    )


def test_empty_result_clamps_any_requested_page() -> None:
    window = resolve_window(total=0, requested_page=7, limit=10)

    assert (window.page, window.pages, window.skip) == (1, 1, 0)


@pytest.mark.parametrize(
    ("total", "limit", "pages"),
    [(1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (100, 100, 1), (101, 100, 2), (5, 1, 5)],
)
def test_page_count_is_ceiling(total: int, limit: int, pages: int) -> None:
    assert resolve_window(total=total, requested_page=1, limit=limit).pages == pages


def test_skip_is_derived_from_effective_page() -> None:
    window = resolve_window(total=25, requested_page=2, limit=10)

    assert window.page == 2
    assert window.skip == 10


def test_page_past_the_end_is_clamped_to_last_page() -> None:
    last = resolve_window(total=25, requested_page=3, limit=10)
    beyond = resolve_window(total=25, requested_page=8, limit=10)

    assert beyond == last
    assert beyond.page == 3
    assert beyond.skip == 20


@pytest.mark.parametrize("requested", [0, -3])
def test_page_below_one_is_raised_to_one(requested: int) -> None:
    assert resolve_window(total=25, requested_page=requested, limit=10).page == 1


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 99, 1000])
@pytest.mark.parametrize("requested", [-1, 1, 2, 50])
def test_page_is_always_within_bounds(total: int, requested: int) -> None:
    window = resolve_window(total=total, requested_page=requested, limit=10)

    assert 1 <= window.page <= window.pages
    assert window.skip >= 0
