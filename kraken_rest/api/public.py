"""
Public market data APIs.
"""
from enum import Enum

from kraken_rest.api.builder import ApiBuilder


class PublicMethod(Enum):
    """List of public methods."""
    ASSET_PAIRS = "AssetPairs"
    ASSETS = "Assets"
    DEPTH = "Depth"
    OHLC = "OHLC"
    SPREAD = "Spread"
    SYSTEM_STATUS = "SystemStatus"
    TICKER = "Ticker"
    TIME = "Time"
    TRADES = "Trades"

    def __str__(self) -> str:
        return self.value


def time() -> ApiBuilder:
    """Get server time."""
    return ApiBuilder.public(PublicMethod.TIME)


def assets() -> ApiBuilder:
    """Get asset info."""
    return ApiBuilder.public(PublicMethod.ASSETS)


def asset_pairs() -> ApiBuilder:
    """Get tradable asset pairs."""
    return ApiBuilder.public(PublicMethod.ASSET_PAIRS)


def ticker() -> ApiBuilder:
    """Get ticker info."""
    return ApiBuilder.public(PublicMethod.TICKER)


def ohlc() -> ApiBuilder:
    """Get OHLC data."""
    return ApiBuilder.public(PublicMethod.OHLC)


def depth() -> ApiBuilder:
    """Get order book."""
    return ApiBuilder.public(PublicMethod.DEPTH)


def trades() -> ApiBuilder:
    """Get recent trades."""
    return ApiBuilder.public(PublicMethod.TRADES)


def spread() -> ApiBuilder:
    """Get recent spread data."""
    return ApiBuilder.public(PublicMethod.SPREAD)


def system_status() -> ApiBuilder:
    """Get system status."""
    return ApiBuilder.public(PublicMethod.SYSTEM_STATUS)
