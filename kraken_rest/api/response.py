"""
Kraken API response envelope.

Every response body has the shape:

    error = array of error messages
    result = result of the API call (may be missing if errors occur)

The HTTP status code is not part of the body; the clients fill it in.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError

from kraken_rest.exceptions import RequestError

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """Kraken API response with a typed result."""
    error: List[str] = Field(..., description="List of error messages")
    result: Optional[T] = Field(default=None, description="Result of the API call")
    status_code: int = Field(default=0, exclude=True, description="HTTP status code")

    def is_success(self) -> bool:
        """
        Return True only if the response has no error and the HTTP status
        code is within [200, 299].
        """
        return not self.error and 200 <= self.status_code <= 299


class ResponseValue(Response[Any]):
    """Response whose result is left as decoded JSON."""

    def get(self, key: Any, default: Any = None) -> Any:
        """
        Index into the result.

        Works for object keys and list positions; returns the default when
        there is no result or the key is missing.
        """
        if self.result is None:
            return default
        try:
            return self.result[key]
        except (KeyError, IndexError, TypeError):
            return default


def parse_response(payload: Any, status_code: int, result_type: Optional[Type[Any]] = None) -> Response:
    """
    Validate a decoded response body against the envelope.

    Args:
        payload: decoded JSON body
        status_code: HTTP status code of the response
        result_type: type of the result (None keeps the raw JSON)

    Raises:
        RequestError: If the body does not fit the envelope
    """
    if not isinstance(payload, dict):
        raise RequestError(f"unexpected response body: {type(payload).__name__}", status_code)

    model = ResponseValue if result_type is None else Response[result_type]
    try:
        return model.model_validate({**payload, "status_code": status_code})
    except ValidationError as e:
        raise RequestError(f"unexpected response body: {e}", status_code) from e
