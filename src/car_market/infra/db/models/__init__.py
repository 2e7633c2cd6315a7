from car_market.infra.db.models.base import Base
from car_market.infra.db.models.car_listing import CarListingRow
from car_market.infra.db.models.counter import CounterRow
from car_market.infra.db.models.seller import SellerRow

__all__ = ["Base", "CarListingRow", "CounterRow", "SellerRow"]
