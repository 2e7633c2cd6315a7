from __future__ import annotations

from abc import ABC, abstractmethod

from car_market.domain.seller import Seller


class SellerDirectory(ABC):
    """Port for resolving an authenticated identity to a Seller. Read-only, uncached."""

    @abstractmethod
    def resolve(self, seller_id: str) -> Seller | None: ...
