"""Domain value objects."""
from kraken_rest.domain.value_objects.asset import Asset
from kraken_rest.domain.value_objects.order import Order, OrderType

__all__ = [
    "Asset",
    "Order",
    "OrderType",
]
