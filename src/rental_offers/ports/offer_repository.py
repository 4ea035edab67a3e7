from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from rental_offers.domain.offer import Offer


class OfferRepository(ABC):
    """
    Port for offer storage.

    The store is append-only with a wholesale clear; there is no per-record
    update or delete.

    Contract:
        - offers passed to append() are pre-validated by caller (UseCase)
        - append() and clear() exclude each other and exclude readers
        - snapshot() never observes a half-applied append() or clear()
    """

    @abstractmethod
    def append(self, offers: Sequence[Offer]) -> None:
        """
        Add a batch of offers.

        Precondition: offers are validated by caller (UseCase).

        Raises:
            ConflictError: If an offer ID is already stored or repeated in the batch
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored offer."""
        ...

    @abstractmethod
    def snapshot(self) -> Sequence[Offer]:
        """
        Return a read-only view of all offers.

        The view reflects the store either fully before or fully after any
        concurrent write.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of stored offers."""
        ...
