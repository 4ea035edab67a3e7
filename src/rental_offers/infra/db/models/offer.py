from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rental_offers.infra.db.models.base import Base


class OfferRow(Base):
    __tablename__ = "offers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[str] = mapped_column(Text, nullable=False)

    most_specific_region_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[int] = mapped_column(BigInteger, nullable=False)  # ms since epoch
    end_date: Mapped[int] = mapped_column(BigInteger, nullable=False)  # ms since epoch

    number_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # minor currency unit
    car_type: Mapped[str] = mapped_column(String(10), nullable=False)
    has_vollkasko: Mapped[bool] = mapped_column(Boolean, nullable=False)
    free_kilometers: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("ix_offers_region_start_end", "most_specific_region_id", "start_date", "end_date"),
    )
