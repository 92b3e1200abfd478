"""Utility module"""
from .logger import Logger, configure_logging
from .helpers import header_value_error, to_param, safe_json_dumps

__all__ = ['Logger', 'configure_logging', 'header_value_error', 'to_param', 'safe_json_dumps']
