"""Tests for sorting, paging and projection of search results."""

from __future__ import annotations

from typing import Callable

import pytest

from rental_offers.domain.offer import Offer, OfferSummary, Paging, SortOrder
from rental_offers.domain.results import paginate, sort_offers, to_summaries


@pytest.fixture()
def ten_offers(make_offer: Callable[..., Offer]) -> list[Offer]:
    return [make_offer(f"o{i}", price=100 + i) for i in range(10)]


# ==============================================================================
# Sorting
# ==============================================================================


def test_sort_ascending_by_price(make_offer: Callable[..., Offer]) -> None:
    offers = [make_offer("x", price=300), make_offer("y", price=100), make_offer("z", price=200)]

    assert [o.id for o in sort_offers(offers, SortOrder.PRICE_ASC)] == ["y", "z", "x"]


def test_sort_descending_by_price(make_offer: Callable[..., Offer]) -> None:
    offers = [make_offer("x", price=300), make_offer("y", price=100), make_offer("z", price=200)]

    assert [o.id for o in sort_offers(offers, SortOrder.PRICE_DESC)] == ["x", "z", "y"]


def test_equal_prices_order_by_id_ascending(make_offer: Callable[..., Offer]) -> None:
    offers = [make_offer("C", price=500), make_offer("B", price=100), make_offer("A", price=100)]

    assert [o.id for o in sort_offers(offers, SortOrder.PRICE_ASC)] == ["A", "B", "C"]


def test_equal_prices_order_by_id_ascending_when_descending(
    make_offer: Callable[..., Offer],
) -> None:
    offers = [make_offer("B", price=100), make_offer("C", price=500), make_offer("A", price=100)]

    assert [o.id for o in sort_offers(offers, SortOrder.PRICE_DESC)] == ["C", "A", "B"]


def test_sort_does_not_mutate_input(make_offer: Callable[..., Offer]) -> None:
    offers = [make_offer("b", price=2), make_offer("a", price=1)]

    sort_offers(offers, SortOrder.PRICE_ASC)

    assert [o.id for o in offers] == ["b", "a"]


# ==============================================================================
# Paging
# ==============================================================================


def test_first_page(ten_offers: list[Offer]) -> None:
    assert paginate(ten_offers, Paging(page=0, page_size=3)) == ten_offers[0:3]


def test_last_partial_page(ten_offers: list[Offer]) -> None:
    assert paginate(ten_offers, Paging(page=3, page_size=3)) == ten_offers[9:10]


def test_page_past_the_end_is_empty(ten_offers: list[Offer]) -> None:
    assert list(paginate(ten_offers, Paging(page=4, page_size=3))) == []


def test_page_of_empty_sequence_is_empty() -> None:
    assert list(paginate([], Paging(page=0, page_size=3))) == []


def test_page_larger_than_total(ten_offers: list[Offer]) -> None:
    assert paginate(ten_offers, Paging(page=0, page_size=50)) == ten_offers


# ==============================================================================
# Projection
# ==============================================================================


def test_summaries_carry_only_id_and_payload(make_offer: Callable[..., Offer]) -> None:
    offers = [make_offer("a", data="blob-a"), make_offer("b", data="blob-b")]

    assert to_summaries(offers) == [
        OfferSummary(id="a", data="blob-a"),
        OfferSummary(id="b", data="blob-b"),
    ]
