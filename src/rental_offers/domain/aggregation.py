"""Facet aggregation.

Each facet is computed over the base filtered set with every optional filter
applied except the one for its own dimension (leave-one-out), so a facet shows
what is still selectable on that dimension under the rest of the query.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from rental_offers.domain.filters import FilterDimension, Predicate, apply, combine
from rental_offers.domain.offer import CarType, Offer, OfferSearchRequest


@dataclass(frozen=True, slots=True)
class Bucket:
    start: int
    end: int  # exclusive
    count: int


@dataclass(frozen=True, slots=True)
class CarTypeCounts:
    small: int = 0
    sports: int = 0
    luxury: int = 0
    family: int = 0

    @property
    def total(self) -> int:
        return self.small + self.sports + self.luxury + self.family


@dataclass(frozen=True, slots=True)
class SeatsCount:
    number_seats: int
    count: int


@dataclass(frozen=True, slots=True)
class VollkaskoCount:
    true_count: int = 0
    false_count: int = 0

    @property
    def total(self) -> int:
        return self.true_count + self.false_count


@dataclass(frozen=True, slots=True)
class Facets:
    price_ranges: list[Bucket] = field(default_factory=list)
    car_type_counts: CarTypeCounts = field(default_factory=CarTypeCounts)
    seats_count: list[SeatsCount] = field(default_factory=list)
    free_kilometer_ranges: list[Bucket] = field(default_factory=list)
    vollkasko_count: VollkaskoCount = field(default_factory=VollkaskoCount)


# ==============================================================================
# Counting Primitives
# ==============================================================================


def histogram(values: Iterable[int], width: int) -> list[Bucket]:
    """
    Bucket values into [start, start + width) intervals aligned to width.

    Only non-empty buckets are returned, in ascending order. Scanning from the
    minimum rounded down to the maximum rounded up and dropping empty buckets
    yields exactly the aligned buckets that hold at least one value.
    """
    counts = Counter((value // width) * width for value in values)
    return [Bucket(start=start, end=start + width, count=counts[start]) for start in sorted(counts)]


def count_car_types(offers: Iterable[Offer]) -> CarTypeCounts:
    counts = Counter(offer.car_type for offer in offers)
    return CarTypeCounts(
        small=counts[CarType.SMALL],
        sports=counts[CarType.SPORTS],
        luxury=counts[CarType.LUXURY],
        family=counts[CarType.FAMILY],
    )


def count_seats(offers: Iterable[Offer]) -> list[SeatsCount]:
    counts = Counter(offer.number_seats for offer in offers)
    return [SeatsCount(number_seats=seats, count=counts[seats]) for seats in sorted(counts)]


def count_vollkasko(offers: Iterable[Offer]) -> VollkaskoCount:
    true_count = 0
    false_count = 0
    for offer in offers:
        if offer.has_vollkasko:
            true_count += 1
        else:
            false_count += 1
    return VollkaskoCount(true_count=true_count, false_count=false_count)


# ==============================================================================
# Facet Computation
# ==============================================================================


def compute_facets(
    base: Sequence[Offer],
    predicates: Mapping[FilterDimension, Predicate],
    request: OfferSearchRequest,
) -> Facets:
    """
    Compute all five facets for a search.

    Args:
        base: Base filtered set (required filters only)
        predicates: Active optional predicates keyed by dimension
        request: Search request (bucket widths)

    Returns:
        Facets with leave-one-out counts for every dimension
    """

    def without(dimension: FilterDimension) -> list[Offer]:
        return apply(base, combine(predicates, exclude=dimension))

    return Facets(
        price_ranges=histogram(
            (offer.price for offer in without(FilterDimension.PRICE)),
            request.price_range_width,
        ),
        car_type_counts=count_car_types(without(FilterDimension.CAR_TYPE)),
        seats_count=count_seats(without(FilterDimension.SEATS)),
        free_kilometer_ranges=histogram(
            (offer.free_kilometers for offer in without(FilterDimension.FREE_KILOMETERS)),
            request.min_free_kilometer_width,
        ),
        vollkasko_count=count_vollkasko(without(FilterDimension.VOLLKASKO)),
    )
