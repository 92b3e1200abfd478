"""
Nonce providers

Every private request carries a nonce that must be greater than the one
of the previous request made with the same key.

Implementations:
- SystemNonceProvider: wall-clock milliseconds (live requests)
- FixedNonceProvider: fixed value (tests)
"""
import threading
import time
from abc import ABC, abstractmethod

from kraken_rest.exceptions import InternalError


class NonceProvider(ABC):
    """Nonce provider interface"""

    @abstractmethod
    def next_nonce(self) -> int:
        """Return the nonce for the next private request"""
        pass


class SystemNonceProvider(NonceProvider):
    """
    Wall-clock nonce provider

    Returns milliseconds since the epoch, bumped past the last value handed
    out so two calls within the same millisecond, or a clock stepping back,
    never repeat or regress.
    """

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def next_nonce(self) -> int:
        try:
            now = time.time_ns() // 1_000_000
        except OSError as e:
            raise InternalError(f"system clock unavailable: {e}") from e
        if now <= 0:
            raise InternalError("system clock is before the epoch")

        with self._lock:
            nonce = max(now, self._last + 1)
            self._last = nonce
        return nonce


class FixedNonceProvider(NonceProvider):
    """
    Fixed nonce provider (tests)

    Returns a predictable value so signatures can be checked.
    """

    def __init__(self, nonce: int):
        self._nonce = nonce

    def set_nonce(self, nonce: int) -> None:
        """Change the returned nonce"""
        self._nonce = nonce

    def next_nonce(self) -> int:
        return self._nonce
