from __future__ import annotations

from rental_offers.domain.aggregation import Bucket, Facets
from rental_offers.domain.offer import (
    CarType,
    Offer,
    OfferFilters,
    OfferSearchRequest,
    OfferSummary,
    Paging,
    SortOrder,
)
from rental_offers.entrypoints.http.dtos.offers import (
    CarTypeCountsDTO,
    CreateOffersRequestDTO,
    OfferDTO,
    OffersSearchQueryDTO,
    OffersSearchResponseDTO,
    OfferSummaryDTO,
    RangeDTO,
    SeatsCountDTO,
    VollkaskoCountDTO,
)
from rental_offers.use_cases.create_offers import CreateOffersRequest
from rental_offers.use_cases.search_offers import SearchOffersResponse


class OfferMapper:
    """Maps between REST DTOs and domain models for offers."""

    @staticmethod
    def to_domain_filters(dto: OffersSearchQueryDTO) -> OfferFilters:
        """
        Converts optional query params to domain filters.

        Args:
            dto: Search query parameters

        Returns:
            OfferFilters: Domain filters (None where the param was omitted)
        """
        return OfferFilters(
            min_number_seats=dto.minNumberSeats,
            min_price=dto.minPrice,
            max_price=dto.maxPrice,
            car_type=CarType(dto.carType) if dto.carType else None,
            only_vollkasko=dto.onlyVollkasko,
            min_free_kilometer=dto.minFreeKilometer,
        )

    @staticmethod
    def to_domain_request(dto: OffersSearchQueryDTO) -> OfferSearchRequest:
        """
        Builds the complete domain search request from query params.

        Args:
            dto: Search query parameters

        Returns:
            OfferSearchRequest: Domain request with paging and filters
        """
        return OfferSearchRequest(
            region_id=dto.regionID,
            time_range_start=dto.timeRangeStart,
            time_range_end=dto.timeRangeEnd,
            number_days=dto.numberDays,
            sort_order=SortOrder(dto.sortOrder),
            paging=Paging(page=dto.page, page_size=dto.pageSize),
            price_range_width=dto.priceRangeWidth,
            min_free_kilometer_width=dto.minFreeKilometerWidth,
            filters=OfferMapper.to_domain_filters(dto),
        )

    @staticmethod
    def to_domain_offer(dto: OfferDTO) -> Offer:
        return Offer(
            id=dto.ID,
            data=dto.data,
            most_specific_region_id=dto.mostSpecificRegionID,
            start_date=dto.startDate,
            end_date=dto.endDate,
            number_seats=dto.numberSeats,
            price=dto.price,
            car_type=CarType(dto.carType),
            has_vollkasko=dto.hasVollkasko,
            free_kilometers=dto.freeKilometers,
        )

    @staticmethod
    def to_create_request(dto: CreateOffersRequestDTO) -> CreateOffersRequest:
        return CreateOffersRequest(offers=[OfferMapper.to_domain_offer(o) for o in dto.offers])

    @staticmethod
    def to_summary_response(summary: OfferSummary) -> OfferSummaryDTO:
        return OfferSummaryDTO(ID=summary.id, data=summary.data)

    @staticmethod
    def to_range_response(bucket: Bucket) -> RangeDTO:
        return RangeDTO(start=bucket.start, end=bucket.end, count=bucket.count)

    @staticmethod
    def to_response(result: SearchOffersResponse) -> OffersSearchResponseDTO:
        """
        Converts the domain search result into the wire response.

        Args:
            result: Page of offer summaries plus facets

        Returns:
            OffersSearchResponseDTO: offers and the five facet summaries
        """
        facets: Facets = result.facets
        return OffersSearchResponseDTO(
            offers=[OfferMapper.to_summary_response(s) for s in result.offers],
            priceRanges=[OfferMapper.to_range_response(b) for b in facets.price_ranges],
            carTypeCounts=CarTypeCountsDTO(
                small=facets.car_type_counts.small,
                sports=facets.car_type_counts.sports,
                luxury=facets.car_type_counts.luxury,
                family=facets.car_type_counts.family,
            ),
            seatsCount=[
                SeatsCountDTO(numberSeats=s.number_seats, count=s.count) for s in facets.seats_count
            ],
            freeKilometerRange=[
                OfferMapper.to_range_response(b) for b in facets.free_kilometer_ranges
            ],
            vollkaskoCount=VollkaskoCountDTO(
                trueCount=facets.vollkasko_count.true_count,
                falseCount=facets.vollkasko_count.false_count,
            ),
        )
