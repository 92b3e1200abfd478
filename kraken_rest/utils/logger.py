"""
Console output and logging setup for the command line tool
"""
import logging
import sys
from typing import Any, List

from .helpers import safe_json_dumps

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "WARNING") -> None:
    """Send library logs to stderr at the given level"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


class Logger:
    """Console output helper"""

    @staticmethod
    def print_result(result: Any):
        """Print an API result as indented JSON"""
        print(safe_json_dumps(result))

    @staticmethod
    def print_api_errors(method: str, status_code: int, errors: List[str]):
        """Print the errors returned by an API call"""
        print(f"❌ {method} failed (HTTP {status_code})", file=sys.stderr)
        for error in errors:
            print(f"   {error}", file=sys.stderr)

    @staticmethod
    def print_error(message: str):
        """Print an error message"""
        print(f"❌ {message}", file=sys.stderr)

