"""Settings module"""
from .settings import KrakenConfig, CredentialsConfig, LoggingConfig, VERSION, validate_all_configs

__all__ = ['KrakenConfig', 'CredentialsConfig', 'LoggingConfig', 'VERSION', 'validate_all_configs']
