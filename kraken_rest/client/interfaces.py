"""
Client interfaces
Abstract interfaces so callers can depend on either client (or a fake)
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Type, Union

from kraken_rest.api.builder import Api, ApiBuilder
from kraken_rest.api.response import Response


class IKrakenClient(ABC):
    """Blocking Kraken client interface"""

    @abstractmethod
    def send(self, api: Union[Api, ApiBuilder], result_type: Optional[Type[Any]] = None) -> Response:
        """Send the API request and parse the response envelope"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying HTTP session"""
        pass


class IAsyncKrakenClient(ABC):
    """Asynchronous Kraken client interface"""

    @abstractmethod
    async def send(self, api: Union[Api, ApiBuilder], result_type: Optional[Type[Any]] = None) -> Response:
        """Send the API request and parse the response envelope"""
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release the underlying HTTP client"""
        pass
