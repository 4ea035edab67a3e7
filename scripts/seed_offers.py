#!/usr/bin/env python3
"""
Seed the offers table with deterministic random offers.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: clears the table before seeding
- Realism-lite: offers start at 10:00 on random days, prices scale with car
  type and rental length, only leaf regions are used

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_offers.py
"""

from __future__ import annotations

import random
import sys
import uuid
from base64 import b64encode
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rental_offers.adapters.postgres_offer_repository import PostgresOfferRepository
from rental_offers.domain.offer import MILLISECONDS_PER_DAY, CarType, Offer
from rental_offers.infra.db.session import create_schema, get_session
from rental_offers.infra.regions import get_region_hierarchy


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_OFFERS = 500
BATCH_SIZE = 100
FIRST_DAY = datetime(2026, 11, 1, 10, 0, tzinfo=timezone.utc)
DAYS_SPAN = 60


# ==============================================================================
# Offer Shape
# ==============================================================================

# Daily base price in cents and typical seat counts per car type
CAR_TYPES = {
    CarType.SMALL: {"daily_price": (2500, 4500), "seats": [2, 4, 5]},
    CarType.SPORTS: {"daily_price": (9000, 16000), "seats": [2, 4]},
    CarType.LUXURY: {"daily_price": (12000, 25000), "seats": [4, 5]},
    CarType.FAMILY: {"daily_price": (5000, 9000), "seats": [5, 7, 8, 9]},
}

FREE_KILOMETER_CHOICES = [0, 100, 150, 200, 250, 300, 500, 1000]


def generate_offer(leaf_regions: list[int]) -> Offer:
    """Generate a single random offer in one of the given leaf regions."""
    car_type = random.choice(list(CAR_TYPES))
    shape = CAR_TYPES[car_type]

    number_days = random.choices(range(1, 15), weights=[6, 6, 5, 5, 4, 3, 8, 2, 1, 1, 1, 1, 1, 3])[0]
    start = FIRST_DAY + timedelta(days=random.randrange(DAYS_SPAN))
    start_ms = int(start.timestamp() * 1000)

    has_vollkasko = random.random() < 0.4
    daily_price = random.randint(*shape["daily_price"])
    price = daily_price * number_days + (1500 * number_days if has_vollkasko else 0)

    return Offer(
        id=str(uuid.UUID(int=random.getrandbits(128), version=4)),
        data=b64encode(random.randbytes(24)).decode("ascii"),
        most_specific_region_id=random.choice(leaf_regions),
        start_date=start_ms,
        end_date=start_ms + number_days * MILLISECONDS_PER_DAY,
        number_seats=random.choice(shape["seats"]),
        price=price,
        car_type=car_type,
        has_vollkasko=has_vollkasko,
        free_kilometers=random.choice(FREE_KILOMETER_CHOICES) * max(1, number_days // 3),
    )


def seed_offers(num_offers: int = NUM_OFFERS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random offers.

    Args:
        num_offers: Number of offers to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    regions = get_region_hierarchy()
    leaf_regions = sorted(set().union(*regions.parents.values()))
    if not leaf_regions:
        raise RuntimeError("Region tree has no leaf regions")

    print(f"Seeding database with {num_offers} offers (seed={seed})...")
    create_schema()

    with get_session() as session:
        repository = PostgresOfferRepository(session)

        print(f"Clearing {repository.count()} existing offers...")
        repository.clear()

        offers = [generate_offer(leaf_regions) for _ in range(num_offers)]
        for start in range(0, len(offers), BATCH_SIZE):
            repository.append(offers[start : start + BATCH_SIZE])

        print(f"Seeded {len(offers)} offers across {len(leaf_regions)} leaf regions")

        for offer in offers[:5]:
            print(
                f"   {offer.id} region={offer.most_specific_region_id} "
                f"{offer.car_type.value} seats={offer.number_seats} "
                f"price={offer.price / 100:.2f} vollkasko={offer.has_vollkasko}"
            )
        if len(offers) > 5:
            print(f"   ... and {len(offers) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_offers()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
