from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from rental_offers.domain.errors import ConflictError
from rental_offers.domain.offer import Offer
from rental_offers.infra.locks import ReadWriteLock
from rental_offers.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


class InMemoryOfferRepository(OfferRepository):
    """
    Process-local offer store.

    - Stores offers in insertion order as an immutable tuple
    - Writers replace the tuple under the write lock
    - snapshot() takes the read lock and hands out the current tuple, which no
      later write can modify
    - Rejects duplicate IDs; a rejected batch leaves the store unchanged
    """

    def __init__(self, offers: Iterable[Offer] = ()) -> None:
        self._lock = ReadWriteLock()
        self._offers: tuple[Offer, ...] = ()
        self._ids: frozenset[str] = frozenset()

        initial = tuple(offers)
        if initial:
            self.append(initial)

    def append(self, offers: Sequence[Offer]) -> None:
        # Trust that UseCase has validated inputs (contract programming)
        batch_ids = [offer.id for offer in offers]

        with self._lock.write_locked():
            duplicates = sorted(
                {offer_id for offer_id in batch_ids if offer_id in self._ids}
                | _repeated(batch_ids)
            )
            if duplicates:
                raise ConflictError(
                    "Offer IDs already exist", offer_ids=duplicates[:10]
                )

            self._offers = self._offers + tuple(offers)
            self._ids = self._ids | frozenset(batch_ids)
            size = len(self._offers)

        logger.debug("Offers appended", extra={"batch_size": len(batch_ids), "store_size": size})

    def clear(self) -> None:
        with self._lock.write_locked():
            self._offers = ()
            self._ids = frozenset()

    def snapshot(self) -> Sequence[Offer]:
        with self._lock.read_locked():
            return self._offers

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._offers)


def _repeated(ids: Sequence[str]) -> set[str]:
    seen: set[str] = set()
    repeated: set[str] = set()
    for offer_id in ids:
        if offer_id in seen:
            repeated.add(offer_id)
        seen.add(offer_id)
    return repeated
