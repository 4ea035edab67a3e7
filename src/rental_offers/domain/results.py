from __future__ import annotations

from collections.abc import Sequence

from rental_offers.domain.offer import Offer, OfferSummary, Paging, SortOrder


def sort_offers(offers: Sequence[Offer], sort_order: SortOrder) -> list[Offer]:
    """
    Order by price in the requested direction, then by id ascending.

    The id tie-break is ascending for both directions, so repeated identical
    requests page through the same sequence.
    """
    if sort_order is SortOrder.PRICE_DESC:
        return sorted(offers, key=lambda o: (-o.price, o.id))
    return sorted(offers, key=lambda o: (o.price, o.id))


def paginate(offers: Sequence[Offer], paging: Paging) -> Sequence[Offer]:
    """Zero-based page slice; a page starting past the end is empty."""
    total = len(offers)
    start = paging.offset
    if start >= total:
        return []

    end = min(start + paging.page_size, total)
    return offers[start:end]


def to_summaries(offers: Sequence[Offer]) -> list[OfferSummary]:
    return [OfferSummary(id=offer.id, data=offer.data) for offer in offers]
