"""
API builder.

An ApiBuilder collects the endpoint and its parameters; build() freezes it
into an Api that the clients can send.
"""
from __future__ import annotations
import copy
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

from kraken_rest.config.settings import KrakenConfig
from kraken_rest.utils.helpers import to_param


class ApiKind(Enum):
    """Public (GET, unauthenticated) or private (POST, signed) API."""
    PUBLIC = "public"
    PRIVATE = "private"

    def __str__(self) -> str:
        return self.value


class ApiBuilder:
    """
    Builder of a single Kraken API request.

    Parameters are a plain string map: values are stringified and passed
    through without any validation.
    """

    def __init__(
        self,
        kind: ApiKind,
        method: Any,
        domain: Optional[str] = None,
        version: Optional[str] = None,
    ):
        """
        Args:
            kind: public or private API
            method: API method, e.g. "Ticker"
            domain: API domain (defaults to KrakenConfig.DOMAIN)
            version: API version (defaults to KrakenConfig.API_VERSION)
        """
        self.kind = kind
        self.domain = domain or KrakenConfig.DOMAIN
        self.version = version or KrakenConfig.API_VERSION
        self.path = str(kind)
        self.method = str(method)
        self.params: Dict[str, str] = {}
        self.headers: Dict[str, str] = {}
        self.otp: Optional[str] = None

    def __repr__(self) -> str:
        return f"ApiBuilder({self.kind.name}, {self.method!r}, params={self.params!r})"

    def __str__(self) -> str:
        return _render(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiBuilder):
            return NotImplemented
        return vars(self) == vars(other)

    # --- Factory Methods ---

    @classmethod
    def public(cls, method: Any) -> ApiBuilder:
        """Builder for a public method."""
        return cls(ApiKind.PUBLIC, method)

    @classmethod
    def private(cls, method: Any) -> ApiBuilder:
        """Builder for a private method."""
        return cls(ApiKind.PRIVATE, method)

    # --- Chaining ---

    def with_param(self, key: Any, value: Any) -> ApiBuilder:
        """Add (or replace) a parameter."""
        key = to_param(key)
        if key == "otp":
            return self.with_otp(value)
        self.params[key] = to_param(value)
        return self

    def with_params(self, params: Mapping[Any, Any]) -> ApiBuilder:
        """Add every parameter of the mapping."""
        for key, value in params.items():
            self.with_param(key, value)
        return self

    def with_otp(self, otp: Any) -> ApiBuilder:
        """
        Set the one-time password.

        Private requests send it after the nonce in the signed body; public
        requests have no body, so it becomes an ordinary query parameter.
        """
        if self.kind is ApiKind.PUBLIC:
            self.params["otp"] = to_param(otp)
        else:
            self.otp = to_param(otp)
        return self

    def with_header(self, name: str, value: Any) -> ApiBuilder:
        """Add an extra request header."""
        self.headers[name] = to_param(value)
        return self

    def with_domain(self, domain: str) -> ApiBuilder:
        """Send this request to another domain (e.g. a mock server)."""
        self.domain = domain.rstrip("/")
        return self

    def build(self) -> Api:
        """Freeze this builder into an Api."""
        return Api(self)

    # --- Derived Values ---

    @property
    def uri_path(self) -> str:
        """API URI path, the one covered by the API-Sign header."""
        return f"/{self.version}/{self.path}/{self.method}"

    @property
    def url(self) -> str:
        """API URL; public parameters travel in the query string."""
        url = f"{self.domain}{self.uri_path}"
        if self.kind is ApiKind.PUBLIC and self.params:
            url += f"?{self.query}"
        return url

    @property
    def query(self) -> str:
        """URL encoded parameters."""
        return urlencode(self.params)


class Api:
    """
    A single Kraken API ready to be sent.

    Holds a private copy of the builder, so later changes to the builder
    do not leak into an Api already handed to a client.
    """

    def __init__(self, builder: ApiBuilder):
        self.inner = copy.deepcopy(builder)

    def __repr__(self) -> str:
        return f"Api({self.inner!r})"

    def __str__(self) -> str:
        return _render(self.inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Api):
            return NotImplemented
        return self.inner == other.inner

    @classmethod
    def of(cls, api: Any) -> Api:
        """Accept either an Api or an ApiBuilder."""
        if isinstance(api, Api):
            return api
        if isinstance(api, ApiBuilder):
            return api.build()
        raise TypeError(f"expected Api or ApiBuilder, got {type(api).__name__}")

    def is_public(self) -> bool:
        """Return True only if this is a public API."""
        return self.inner.kind is ApiKind.PUBLIC

    def is_private(self) -> bool:
        """Return True only if this is a private API."""
        return self.inner.kind is ApiKind.PRIVATE

    @property
    def kind(self) -> ApiKind:
        return self.inner.kind

    @property
    def method(self) -> str:
        return self.inner.method

    @property
    def url(self) -> str:
        return self.inner.url

    @property
    def uri_path(self) -> str:
        return self.inner.uri_path

    @property
    def params(self) -> Dict[str, str]:
        return dict(self.inner.params)

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.inner.headers)

    @property
    def otp(self) -> Optional[str]:
        return self.inner.otp


def _render(builder: ApiBuilder) -> str:
    # public parameters are already part of the URL
    text = builder.url
    if builder.kind is ApiKind.PRIVATE and builder.params:
        text += f"?{builder.query}"
    return text
