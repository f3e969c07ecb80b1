from .delivery_zone import DeliveryZone
from .location import StoreLocation

__all__ = [
    "DeliveryZone",
    "StoreLocation",
]
