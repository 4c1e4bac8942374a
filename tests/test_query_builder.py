"""Tests for the catalog query builder."""

import pytest
from pymongo import ASCENDING, DESCENDING

from clean_co_api.app.services.query_builder import ServiceQuery, build_service_query


def test_no_parameters_matches_everything() -> None:
    query = build_service_query()
    assert query == ServiceQuery()
    assert query.filter == {}
    assert query.sort == {}
    assert query.skip == 0
    assert query.limit is None
    assert query.sort_spec() is None


def test_category_becomes_exact_filter() -> None:
    assert build_service_query(category="home").filter == {"category": "home"}


def test_empty_category_is_ignored() -> None:
    assert build_service_query(category="").filter == {}


@pytest.mark.parametrize(
    "token, direction",
    [("asc", ASCENDING), ("ASC", ASCENDING), ("ascending", ASCENDING), ("1", ASCENDING),
     ("desc", DESCENDING), ("Descending", DESCENDING), ("-1", DESCENDING)],
)
def test_sort_order_tokens(token: str, direction: int) -> None:
    query = build_service_query(sort_field="price", sort_order=token)
    assert query.sort == {"price": direction}
    assert query.sort_spec() == [("price", direction)]


@pytest.mark.parametrize("field, order", [("price", None), (None, "asc"), ("", "asc")])
def test_sort_needs_both_parameters(field, order) -> None:
    assert build_service_query(sort_field=field, sort_order=order).sort == {}


def test_unknown_sort_order_rejected() -> None:
    with pytest.raises(ValueError, match="sort order"):
        build_service_query(sort_field="price", sort_order="sideways")


def test_skip_derived_from_page_and_limit() -> None:
    query = build_service_query(page="2", limit="10")
    assert (query.page, query.limit, query.skip) == (2, 10, 10)


def test_page_without_limit_does_not_skip() -> None:
    assert build_service_query(page=3).skip == 0


def test_limit_without_page_starts_at_first_page() -> None:
    query = build_service_query(limit=5)
    assert (query.page, query.skip) == (1, 0)


@pytest.mark.parametrize("name", ["page", "limit"])
@pytest.mark.parametrize("value", ["0", "-2", "abc", "1.5", 0])
def test_invalid_pagination_rejected(name: str, value) -> None:
    with pytest.raises(ValueError, match=name):
        build_service_query(**{name: value})
