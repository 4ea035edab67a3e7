"""PostgreSQL implementation of OfferRepository."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rental_offers.domain.errors import ConflictError, InternalError
from rental_offers.domain.offer import CarType, Offer
from rental_offers.infra.db.models.offer import OfferRow
from rental_offers.ports.offer_repository import OfferRepository


class PostgresOfferRepository(OfferRepository):
    """
    PostgreSQL implementation of OfferRepository.

    - One instance per request, bound to that request's session
    - snapshot() is one SELECT, so it never sees a half-applied append or clear
    - Primary key violations surface as ConflictError
    - Rows that do not map to a valid Offer surface as InternalError
    - Converts OfferRow (infrastructure) to Offer (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def append(self, offers: Sequence[Offer]) -> None:
        """
        Insert a batch with a single executemany INSERT.

        Raises:
            ConflictError: If any offer ID already exists
        """
        if not offers:
            return

        try:
            self._session.execute(insert(OfferRow), [self._to_row_values(o) for o in offers])
            self._session.flush()
        except IntegrityError as exc:
            raise ConflictError("Offer IDs already exist") from exc

    def clear(self) -> None:
        self._session.execute(delete(OfferRow))

    def snapshot(self) -> Sequence[Offer]:
        """
        Read every offer with a single SELECT.

        Raises:
            InternalError: If a stored row holds an unknown car type
        """
        rows = self._session.execute(select(OfferRow)).scalars().all()
        return tuple(self._to_domain(row) for row in rows)

    def count(self) -> int:
        return self._session.execute(select(func.count()).select_from(OfferRow)).scalar() or 0

    def _to_row_values(self, offer: Offer) -> dict[str, object]:
        return {
            "id": offer.id,
            "data": offer.data,
            "most_specific_region_id": offer.most_specific_region_id,
            "start_date": offer.start_date,
            "end_date": offer.end_date,
            "number_seats": offer.number_seats,
            "price": offer.price,
            "car_type": offer.car_type.value,
            "has_vollkasko": offer.has_vollkasko,
            "free_kilometers": offer.free_kilometers,
        }

    def _to_domain(self, row: OfferRow) -> Offer:
        """
        Convert database model (OfferRow) to domain entity (Offer).

        Args:
            row: SQLAlchemy OfferRow model

        Returns:
            Offer domain entity

        Raises:
            InternalError: If the stored car type is not a known CarType
        """
        try:
            car_type = CarType(row.car_type)
        except ValueError:
            raise InternalError(
                "Stored offer has an unknown car type", offer_id=row.id, car_type=row.car_type
            ) from None

        return Offer(
            id=row.id,
            data=row.data,
            most_specific_region_id=row.most_specific_region_id,
            start_date=row.start_date,
            end_date=row.end_date,
            number_seats=row.number_seats,
            price=row.price,
            car_type=car_type,
            has_vollkasko=row.has_vollkasko,
            free_kilometers=row.free_kilometers,
        )
