"""
Credentials - Kraken API key pair.

The public API key is sent as the API-Key header, while the private key
(Base64 encoded at rest) is only used to sign private requests.
"""
from __future__ import annotations
import base64
import binascii
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from kraken_rest.exceptions import InvalidKeyError
from kraken_rest.utils.helpers import header_value_error


@dataclass(frozen=True)
class Credentials:
    """
    Immutable public/private key pair.

    Attributes:
        api_key: The public API key
        private_key: The Base64 encoded private key (hidden from repr)
    """
    api_key: str
    private_key: str = field(repr=False)

    def __post_init__(self) -> None:
        """Reject keys that cannot travel as header values."""
        for name, value in (("API key", self.api_key), ("private key", self.private_key)):
            if not value.strip():
                raise InvalidKeyError(f"{name} is empty")
            reason = header_value_error(value)
            if reason:
                raise InvalidKeyError(f"{name}: {reason}")

    # --- Factory Methods ---

    @classmethod
    def read(cls, path: Union[str, os.PathLike]) -> Credentials:
        """
        Read the key pair from a file.

        The second to last line holds the public API key and the last line
        holds the private key, so a plain two line file is the usual layout.
        Trailing blank lines are ignored.

        Args:
            path: Path of the keys file

        Raises:
            InvalidKeyError: If the file cannot be read or lacks a key
        """
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidKeyError(str(e)) from e

        lines = content.rstrip("\r\n").splitlines()
        if len(lines) < 2:
            raise InvalidKeyError("key not found")

        api_key, private_key = lines[-2], lines[-1]
        return cls(api_key=api_key, private_key=private_key)

    @classmethod
    def from_env(cls, api_key_var: str = "KRAKEN_API_KEY", private_key_var: str = "KRAKEN_PRIVATE_KEY") -> Credentials:
        """
        Build the key pair from environment variables.

        Raises:
            InvalidKeyError: If either variable is missing
        """
        api_key = os.getenv(api_key_var)
        private_key = os.getenv(private_key_var)
        if not api_key or not private_key:
            raise InvalidKeyError(f"{api_key_var} and {private_key_var} must both be set")
        return cls(api_key=api_key, private_key=private_key)

    # --- Key Access ---

    def private_key_bytes(self) -> bytes:
        """
        Decode the private key.

        Raises:
            InvalidKeyError: If the key is not valid Base64
        """
        try:
            return base64.b64decode(self.private_key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidKeyError(str(e)) from e
