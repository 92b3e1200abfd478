"""
Asset Value Object

Crypto and fiat currency codes as named by Kraken, with the X/Z prefix
classification used in asset and asset pair names.
"""
from __future__ import annotations
from enum import Enum


FIAT_PREFIX = "Z"
CRYPTO_PREFIX = "X"


class Asset(Enum):
    """Supported crypto and fiat currencies."""
    # Crypto currencies
    ADA = "ADA"
    ALGO = "ALGO"
    ATOM = "ATOM"
    BAL = "BAL"
    BAT = "BAT"
    BCH = "BCH"
    COMP = "COMP"
    CRV = "CRV"
    DAI = "DAI"
    DASH = "DASH"
    DOT = "DOT"
    EOS = "EOS"
    ETC = "ETC"
    ETH = "ETH"
    FIL = "FIL"
    GNO = "GNO"
    ICX = "ICX"
    KAVA = "KAVA"
    KNC = "KNC"
    KSM = "KSM"
    LINK = "LINK"
    LSK = "LSK"
    LTC = "LTC"
    MLN = "MLN"
    NANO = "NANO"
    OMG = "OMG"
    OXT = "OXT"
    PAXG = "PAXG"
    QTUM = "QTUM"
    REP = "REP"
    REPV2 = "REPV2"
    SC = "SC"
    SNX = "SNX"
    STORJ = "STORJ"
    TRX = "TRX"
    UNI = "UNI"
    USDC = "USDC"
    USDT = "USDT"
    WAVES = "WAVES"
    XBT = "XBT"
    XDG = "XDG"
    XLM = "XLM"
    XMR = "XMR"
    XRP = "XRP"
    XTZ = "XTZ"
    YFI = "YFI"
    ZEC = "ZEC"
    # Fiat currencies
    AUD = "AUD"
    EUR = "EUR"
    GBP = "GBP"
    USD = "USD"

    def __str__(self) -> str:
        return self.value

    # --- Factory Methods ---

    @classmethod
    def parse(cls, code: str) -> Asset:
        """
        Resolve an asset from its code.

        Lookup is case insensitive and also accepts the prefixed form
        (e.g. "XXBT", "ZEUR").

        Raises:
            ValueError: If the code does not name a known asset
        """
        normalized = code.strip().upper()
        if normalized in cls.__members__:
            return cls[normalized]

        if len(normalized) >= 4 and normalized[0] in (CRYPTO_PREFIX, FIAT_PREFIX):
            bare = normalized[1:]
            if bare in cls.__members__:
                asset = cls[bare]
                if asset.prefix == normalized[0]:
                    return asset

        raise ValueError(f"Unknown asset: {code}")

    # --- Classification ---

    def is_fiat(self) -> bool:
        """Return True only if this asset is a fiat currency."""
        return self in _FIAT

    def is_crypto(self) -> bool:
        """Return True only if this asset is a crypto currency."""
        return not self.is_fiat()

    @property
    def prefix(self) -> str:
        """Kraken classification prefix: Z for fiat, X for crypto."""
        return FIAT_PREFIX if self.is_fiat() else CRYPTO_PREFIX

    # --- Naming ---

    def with_prefix(self) -> str:
        """Asset name with the crypto/fiat prefix (e.g. "XXBT", "ZEUR")."""
        return f"{self.prefix}{self.value}"

    def pair(self, other: Asset) -> str:
        """
        Asset pair name of this asset against another.

        A crypto/fiat pair (in either order) prefixes both sides, while
        crypto/crypto and fiat/fiat pairs join the bare codes.
        """
        if self.is_fiat() != other.is_fiat():
            return f"{self.with_prefix()}{other.with_prefix()}"
        return f"{self.value}{other.value}"


_FIAT = frozenset({Asset.AUD, Asset.EUR, Asset.GBP, Asset.USD})
