"""
Kraken HTTP clients
"""
from kraken_rest.client.async_client import AsyncClient
from kraken_rest.client.base import default_user_agent
from kraken_rest.client.blocking import BlockingClient
from kraken_rest.client.builder import ClientBuilder, with_user_agent
from kraken_rest.client.interfaces import IAsyncKrakenClient, IKrakenClient

__all__ = [
    'AsyncClient',
    'BlockingClient',
    'ClientBuilder',
    'IAsyncKrakenClient',
    'IKrakenClient',
    'default_user_agent',
    'with_user_agent',
]
