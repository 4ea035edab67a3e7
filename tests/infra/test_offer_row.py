"""Tests for the offers table mapping."""

from __future__ import annotations

from dataclasses import fields

from rental_offers.domain.offer import Offer
from rental_offers.infra.db.models import Base, OfferRow


def test_columns_mirror_offer_fields() -> None:
    """Every column maps to an Offer field; the table stores nothing else."""
    columns = set(OfferRow.__table__.columns.keys())

    assert columns == {f.name for f in fields(Offer)}


def test_table_registered_with_region_time_index() -> None:
    table = Base.metadata.tables["offers"]

    (index,) = table.indexes
    assert index.name == "ix_offers_region_start_end"
    assert [c.name for c in index.columns] == ["most_specific_region_id", "start_date", "end_date"]
