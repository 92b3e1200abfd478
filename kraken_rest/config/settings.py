"""
Kraken client settings
Environment variables take precedence, values are validated on read
"""
import os
from typing import Optional
from dotenv import load_dotenv
from kraken_rest.exceptions import ConfigurationError

load_dotenv()

VERSION = "0.5.0"


def parse_optional_float(key: str, value: Optional[str], min_value: Optional[float] = None, max_value: Optional[float] = None) -> Optional[float]:
    """Parse an optional float setting; None or blank means None"""
    if value is None or value.strip() == "":
        return None

    try:
        float_value = float(value)
    except ValueError:
        raise ConfigurationError(key, f"not a number: {value}")
    if min_value is not None and float_value <= min_value:
        raise ConfigurationError(key, f"value must be greater than {min_value}: {float_value}")
    if max_value is not None and float_value > max_value:
        raise ConfigurationError(key, f"value is above the maximum ({max_value}): {float_value}")
    return float_value


def get_env_optional_float(key: str, min_value: Optional[float] = None, max_value: Optional[float] = None) -> Optional[float]:
    """Read an optional float from the environment; unset or empty means None"""
    return parse_optional_float(key, os.getenv(key), min_value, max_value)


def get_env_str(key: str, default: str) -> str:
    """Read a string from the environment"""
    return os.getenv(key, default)


class KrakenConfig:
    """Kraken REST API settings"""
    DOMAIN = get_env_str("KRAKEN_API_DOMAIN", "https://api.kraken.com")
    API_VERSION = get_env_str("KRAKEN_API_VERSION", "0")
    USER_AGENT = get_env_str("KRAKEN_USER_AGENT", f"kraken-rest/{VERSION}")
    # raw string; parsed and range checked by timeout()
    TIMEOUT = get_env_str("KRAKEN_TIMEOUT", "")

    @classmethod
    def timeout(cls) -> Optional[float]:
        """Request timeout in seconds, None for the transport default"""
        return parse_optional_float("KRAKEN_TIMEOUT", cls.TIMEOUT, min_value=0.0, max_value=300.0)

    @classmethod
    def validate(cls):
        """Validate the API settings"""
        if not cls.DOMAIN.startswith(("https://", "http://")):
            raise ConfigurationError("KRAKEN_API_DOMAIN", f"domain must include the scheme: {cls.DOMAIN}")
        if cls.DOMAIN.endswith("/"):
            raise ConfigurationError("KRAKEN_API_DOMAIN", "domain must not end with '/'")
        if not cls.API_VERSION.isdigit():
            raise ConfigurationError("KRAKEN_API_VERSION", f"version must be numeric: {cls.API_VERSION}")
        cls.timeout()


class CredentialsConfig:
    """Where the CLI looks for the key pair"""
    KEY_PATH = os.getenv("KRAKEN_KEY_PATH")
    API_KEY_VAR = "KRAKEN_API_KEY"
    PRIVATE_KEY_VAR = "KRAKEN_PRIVATE_KEY"

    @classmethod
    def env_keys_present(cls) -> bool:
        """True when either key variable is set"""
        return bool(os.getenv(cls.API_KEY_VAR)) or bool(os.getenv(cls.PRIVATE_KEY_VAR))


class LoggingConfig:
    """CLI logging settings"""
    LEVEL = get_env_str("KRAKEN_LOG_LEVEL", "WARNING").upper()

    @classmethod
    def validate(cls, level: Optional[str] = None):
        """Validate the log level (the configured one unless given)"""
        level = (level or cls.LEVEL).upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if level not in valid_levels:
            raise ConfigurationError(
                "KRAKEN_LOG_LEVEL",
                f"unsupported level: {level}. supported: {', '.join(valid_levels)}"
            )


def validate_all_configs(log_level: Optional[str] = None):
    """Validate every settings group"""
    KrakenConfig.validate()
    LoggingConfig.validate(log_level)
