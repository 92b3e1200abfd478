"""
Kraken client exception classes
"""
from typing import Optional


class KrakenError(Exception):
    """Base exception for every error raised by the client"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: error message
            error_code: machine readable error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidKeyError(KrakenError):
    """Invalid or missing key material"""

    def __init__(self, reason: str):
        """
        Args:
            reason: why the key was rejected
        """
        super().__init__(f"invalid key: {reason}", error_code="INVALID_KEY")
        self.reason = reason


class InvalidUserAgentError(KrakenError):
    """User-Agent string that cannot be sent as a header value"""

    def __init__(self, user_agent: str, reason: str):
        """
        Args:
            user_agent: the rejected user agent
            reason: why it was rejected
        """
        super().__init__(
            f"invalid user agent: {reason}", error_code="INVALID_USER_AGENT"
        )
        self.user_agent = user_agent
        self.reason = reason


class InternalError(KrakenError):
    """Signing or clock failure inside the client"""

    def __init__(self, reason: str):
        """
        Args:
            reason: failure description
        """
        super().__init__(f"internal error: {reason}", error_code="INTERNAL_ERROR")
        self.reason = reason


class RequestError(KrakenError):
    """Transport failure or undecodable response"""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        """
        Args:
            reason: failure description
            status_code: HTTP status code, when a response was received
        """
        if status_code:
            message = f"request failed: HTTP {status_code} - {reason}"
        else:
            message = f"request failed: {reason}"
        super().__init__(message, error_code="REQUEST_FAILED")
        self.reason = reason
        self.status_code = status_code


class UnauthorizedError(KrakenError):
    """Private API called by a client without credentials"""

    def __init__(self, reason: str = "not authorized"):
        """
        Args:
            reason: failure description
        """
        super().__init__(reason, error_code="UNAUTHORIZED")
        self.reason = reason


class ConfigurationError(KrakenError):
    """Invalid configuration value"""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: configuration key
            reason: why the value is invalid
        """
        message = f"configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key
        self.reason = reason
