from rental_offers.infra.db.models.base import Base
from rental_offers.infra.db.models.offer import OfferRow

__all__ = ["Base", "OfferRow"]
