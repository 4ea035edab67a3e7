from __future__ import annotations

import logging

from rental_offers.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


class ClearOffers:
    """Remove every stored offer (test and reset path)."""

    def __init__(self, offer_repository: OfferRepository) -> None:
        self._repository = offer_repository

    def execute(self) -> None:
        self._repository.clear()
        logger.info("Offer store cleared")
