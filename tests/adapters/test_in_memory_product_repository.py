"""
Contract test suite for InMemoryProductRepository.

The in-memory repository is the canonical implementation of the
ProductRepository contract:
- Unapproved products are never returned
- Filters combine with AND semantics
- A model filter takes precedence over a brand filter
- Store-native order per sort mode, ties by created_at DESC then id
- total_count is counted before paging
"""

from __future__ import annotations

from typing import Callable

import pytest

from parts_market.adapters.in_memory_product_repository import InMemoryProductRepository
from parts_market.domain.product import (
    CompatibleModel,
    Paging,
    Product,
    ProductCondition,
    SearchCriteria,
    SortMode,
)

ProductFactory = Callable[..., Product]

TOYOTA_ID = "10000000-0000-0000-0000-000000000001"
NISSAN_ID = "10000000-0000-0000-0000-000000000002"

COROLLA = CompatibleModel(
    model_id="20000000-0000-0000-0000-000000000001",
    model_name="Corolla",
    brand_id=TOYOTA_ID,
    brand_name="Toyota",
)
CAMRY = CompatibleModel(
    model_id="20000000-0000-0000-0000-000000000002",
    model_name="Camry",
    brand_id=TOYOTA_ID,
    brand_name="Toyota",
)
ALTIMA = CompatibleModel(
    model_id="20000000-0000-0000-0000-000000000003",
    model_name="Altima",
    brand_id=NISSAN_ID,
    brand_name="Nissan",
)


def _ids(products: list[Product]) -> list[str]:
    return [product.id for product in products]


@pytest.fixture
def catalog(make_product: ProductFactory) -> list[Product]:
    return [
        make_product(
            "corolla-filter",
            name="Toyota Corolla Air Filter",
            description="Genuine air filter",
            part_number="17801-0T030",
            oem_number="OEM-178010",
            price=15000,
            age_hours=1,
            rating=4.5,
            category_id="filters",
            compatibility=(COROLLA,),
        ),
        make_product(
            "camry-pads",
            name="Toyota Camry Brake Pads",
            price=85000,
            age_hours=2,
            rating=4.8,
            category_id="brakes",
            condition=ProductCondition.USED,
            compatibility=(CAMRY,),
        ),
        make_product(
            "altima-alternator",
            name="Nissan Altima Alternator",
            price=200000,
            age_hours=3,
            category_id="electrical",
            compatibility=(ALTIMA,),
        ),
        make_product(
            "pending-filter",
            name="Toyota Corolla Oil Filter",
            price=10000,
            age_hours=0,
            is_approved=False,
            category_id="filters",
            compatibility=(COROLLA,),
        ),
    ]


@pytest.fixture
def repo(catalog: list[Product]) -> InMemoryProductRepository:
    return InMemoryProductRepository(catalog)


# ==============================================================================
# Approval
# ==============================================================================


def test_unapproved_products_are_never_returned(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(), Paging(page=1, limit=100))

    assert "pending-filter" not in _ids(result.products)
    assert result.total_count == 3


def test_get_by_id_skips_unapproved(repo: InMemoryProductRepository) -> None:
    assert repo.get_by_id("pending-filter") is None
    assert repo.get_by_id("camry-pads") is not None
    assert repo.get_by_id("missing") is None


# ==============================================================================
# Filters
# ==============================================================================


def test_price_window_is_inclusive_and_filters_out_of_range(
    repo: InMemoryProductRepository,
) -> None:
    """15000, 85000, 200000 with 20000..100000 -> only 85000."""
    criteria = SearchCriteria(min_price=20000, max_price=100000)

    result = repo.search(criteria, Paging())

    assert _ids(result.products) == ["camry-pads"]
    assert result.total_count == 1


def test_price_bounds_are_inclusive(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(min_price=15000, max_price=85000), Paging())

    assert set(_ids(result.products)) == {"corolla-filter", "camry-pads"}


def test_inverted_price_range_matches_nothing(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(min_price=100000, max_price=20000), Paging())

    assert result.products == []
    assert result.total_count == 0


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("corolla", ["corolla-filter"]),  # name, case-insensitive
        ("GENUINE", ["corolla-filter"]),  # description
        ("0T030", ["corolla-filter"]),  # part number
        ("oem-178", ["corolla-filter"]),  # OEM number
        ("brake", ["camry-pads"]),
        ("toyota", ["corolla-filter", "camry-pads"]),
        ("turbocharger", []),
    ],
)
def test_text_search(repo: InMemoryProductRepository, term: str, expected: list[str]) -> None:
    result = repo.search(SearchCriteria(search=term, sort_by=SortMode.NEWEST), Paging())

    assert _ids(result.products) == expected


def test_category_and_condition_filters(repo: InMemoryProductRepository) -> None:
    assert _ids(repo.search(SearchCriteria(category_id="brakes"), Paging()).products) == [
        "camry-pads"
    ]
    assert _ids(
        repo.search(SearchCriteria(condition=ProductCondition.USED), Paging()).products
    ) == ["camry-pads"]


def test_brand_filter_matches_any_model_of_brand(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(brand_id=TOYOTA_ID, sort_by=SortMode.NEWEST), Paging())

    assert _ids(result.products) == ["corolla-filter", "camry-pads"]


def test_model_filter_takes_precedence_over_brand(repo: InMemoryProductRepository) -> None:
    """A model from another brand still wins: brand is ignored when model is set."""
    criteria = SearchCriteria(brand_id=TOYOTA_ID, model_id=ALTIMA.model_id)

    result = repo.search(criteria, Paging())

    assert _ids(result.products) == ["altima-alternator"]


def test_identifiers_match_regardless_of_hex_case(make_product: ProductFactory) -> None:
    sonata = CompatibleModel(
        model_id="2000000a-0000-0000-0000-00000000abcd",
        model_name="Sonata",
        brand_id="1000000a-0000-0000-0000-0000000000ef",
        brand_name="Hyundai",
    )
    product = make_product(
        "3000000a-0000-0000-0000-0000000000aa",
        category_id="4000000a-0000-0000-0000-0000000000bb",
        compatibility=(sonata,),
    )
    repo = InMemoryProductRepository([product])

    by_model = SearchCriteria(model_id=sonata.model_id.upper())
    by_brand = SearchCriteria(brand_id=sonata.brand_id.upper())
    by_category = SearchCriteria(category_id=product.category_id.upper())

    assert repo.search(by_model, Paging()).total_count == 1
    assert repo.search(by_brand, Paging()).total_count == 1
    assert repo.search(by_category, Paging()).total_count == 1
    assert repo.get_by_id(product.id.upper()) == product


def test_model_with_no_products_returns_empty_page(repo: InMemoryProductRepository) -> None:
    result = repo.search(
        SearchCriteria(model_id="20000000-0000-0000-0000-0000000000ff"), Paging()
    )

    assert result.products == []
    assert result.total_count == 0


def test_unknown_identifiers_match_nothing(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(category_id="not-a-category"), Paging())

    assert result.total_count == 0


def test_filters_combine_with_and(repo: InMemoryProductRepository) -> None:
    criteria = SearchCriteria(brand_id=TOYOTA_ID, max_price=20000)

    assert _ids(repo.search(criteria, Paging()).products) == ["corolla-filter"]


def test_requester_location_never_filters(repo: InMemoryProductRepository) -> None:
    criteria = SearchCriteria(customer_province="Basra", customer_city="Basra")

    assert repo.search(criteria, Paging()).total_count == 3


# ==============================================================================
# Ordering
# ==============================================================================


def test_location_and_newest_use_recency(repo: InMemoryProductRepository) -> None:
    expected = ["corolla-filter", "camry-pads", "altima-alternator"]

    for sort_by in (SortMode.LOCATION, SortMode.NEWEST):
        result = repo.search(SearchCriteria(sort_by=sort_by), Paging())
        assert _ids(result.products) == expected


def test_price_sort_is_ascending(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(sort_by=SortMode.PRICE), Paging())

    assert [product.price for product in result.products] == [15000, 85000, 200000]


def test_rating_sort_puts_unrated_last(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(sort_by=SortMode.RATING), Paging())

    assert _ids(result.products) == ["camry-pads", "corolla-filter", "altima-alternator"]


def test_ties_break_on_recency_then_id(make_product: ProductFactory) -> None:
    repo = InMemoryProductRepository(
        [
            make_product("b", price=1000, age_hours=5),
            make_product("a", price=1000, age_hours=5),
            make_product("c", price=1000, age_hours=1),
        ]
    )

    result = repo.search(SearchCriteria(sort_by=SortMode.PRICE), Paging())

    assert _ids(result.products) == ["c", "a", "b"]


# ==============================================================================
# Paging
# ==============================================================================


def test_paging_after_ordering(make_product: ProductFactory) -> None:
    repo = InMemoryProductRepository(
        [make_product(f"p{i}", price=1000 * (i + 1), age_hours=i) for i in range(5)]
    )

    first = repo.search(SearchCriteria(sort_by=SortMode.PRICE), Paging(page=1, limit=2))
    second = repo.search(SearchCriteria(sort_by=SortMode.PRICE), Paging(page=2, limit=2))
    last = repo.search(SearchCriteria(sort_by=SortMode.PRICE), Paging(page=3, limit=2))

    assert _ids(first.products) == ["p0", "p1"]
    assert _ids(second.products) == ["p2", "p3"]
    assert _ids(last.products) == ["p4"]
    assert first.total_count == second.total_count == last.total_count == 5


def test_page_beyond_last_is_empty_with_total(repo: InMemoryProductRepository) -> None:
    result = repo.search(SearchCriteria(), Paging(page=10, limit=20))

    assert result.products == []
    assert result.total_count == 3


def test_total_independent_of_sort_mode(repo: InMemoryProductRepository) -> None:
    totals = {
        repo.search(SearchCriteria(sort_by=sort_by), Paging(limit=1)).total_count
        for sort_by in SortMode
    }

    assert totals == {3}
