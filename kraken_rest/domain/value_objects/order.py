"""
Order side and order type values accepted by the AddOrder API.
"""
from enum import Enum


class Order(str, Enum):
    """Order to buy or sell the asset."""
    BUY = "buy"
    SELL = "sell"

    def __str__(self) -> str:
        return self.value


class OrderType(str, Enum):
    """Order types."""
    # Buy/Sell asset at the best market price
    MARKET = "market"
    # Buy/Sell at a fixed price per asset
    LIMIT = "limit"
    # Settle position(s) at the original order price
    SETTLE_POSITION = "settle-position"
    # Buy at market once last price is >= stop price,
    # sell at market once last price is <= stop price
    STOP_LOSS = "stop-loss"
    # Same triggers as STOP_LOSS, filled at a fixed price
    STOP_LOSS_LIMIT = "stop-loss-limit"
    # Buy at market once last price <= take profit price,
    # sell at market once last price >= take profit price
    TAKE_PROFIT = "take-profit"
    # Same triggers as TAKE_PROFIT, filled at a fixed price
    TAKE_PROFIT_LIMIT = "take-profit-limit"

    def __str__(self) -> str:
        return self.value
