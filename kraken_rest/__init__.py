"""
Kraken REST API client

    from kraken_rest import BlockingClient, public

    with BlockingClient.new("my-app/1.0") as client:
        response = client.send(public.time())
        print(response.get("unixtime"))
"""
from kraken_rest.api import Api, ApiBuilder, Response, ResponseValue, private, public
from kraken_rest.auth import Credentials
from kraken_rest.client import AsyncClient, BlockingClient, ClientBuilder, with_user_agent
from kraken_rest.config.settings import VERSION
from kraken_rest.domain.value_objects import Asset, Order, OrderType
from kraken_rest.exceptions import (
    KrakenError, InvalidKeyError, InvalidUserAgentError, InternalError,
    RequestError, UnauthorizedError, ConfigurationError
)

__version__ = VERSION

__all__ = [
    'Api',
    'ApiBuilder',
    'Response',
    'ResponseValue',
    'public',
    'private',
    'Credentials',
    'AsyncClient',
    'BlockingClient',
    'ClientBuilder',
    'with_user_agent',
    'Asset',
    'Order',
    'OrderType',
    'KrakenError',
    'InvalidKeyError',
    'InvalidUserAgentError',
    'InternalError',
    'RequestError',
    'UnauthorizedError',
    'ConfigurationError',
]
