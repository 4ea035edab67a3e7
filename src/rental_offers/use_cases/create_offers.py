from __future__ import annotations

import logging
from dataclasses import dataclass

from rental_offers.domain.errors import ValidationError
from rental_offers.domain.offer import Offer, OfferValidationError
from rental_offers.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateOffersRequest:
    offers: list[Offer]


class CreateOffers:
    """
    Append a batch of offers to the store.

    The whole batch is validated before anything is written, so a rejected
    request never changes the store.
    """

    def __init__(self, offer_repository: OfferRepository) -> None:
        self._repository = offer_repository

    def execute(self, request: CreateOffersRequest) -> None:
        """
        Raises:
            ValidationError: If the batch is empty or any offer is malformed
            ConflictError: If an offer ID is already stored
        """
        if not request.offers:
            raise ValidationError("at least one offer is required")

        errors = []
        for index, offer in enumerate(request.offers):
            try:
                offer.validate()
            except OfferValidationError as exc:
                errors.append(
                    {
                        "field": f"offers.{index}",
                        "message": exc.message,
                        "code": "INVALID_OFFER",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)

        self._repository.append(request.offers)

        logger.info("Offers created", extra={"batch_size": len(request.offers)})
