from __future__ import annotations

from car_market.domain.seller import Seller
from car_market.ports.seller_directory import SellerDirectory


class InMemorySellerDirectory(SellerDirectory):
    """Canonical contract implementation for tests."""

    def __init__(self, sellers: list[Seller]) -> None:
        self._sellers = {seller.id: seller for seller in sellers}

    def resolve(self, seller_id: str) -> Seller | None:
        return self._sellers.get(seller_id)
