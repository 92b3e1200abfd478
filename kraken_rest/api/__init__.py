"""
Kraken REST APIs

    from kraken_rest.api import public, private

    api = public.ticker().with_param("pair", "XXBTZEUR").build()
"""
from kraken_rest.api import private, public
from kraken_rest.api.body import Body
from kraken_rest.api.builder import Api, ApiBuilder, ApiKind
from kraken_rest.api.response import Response, ResponseValue, parse_response

__all__ = [
    'public',
    'private',
    'Body',
    'Api',
    'ApiBuilder',
    'ApiKind',
    'Response',
    'ResponseValue',
    'parse_response',
]
