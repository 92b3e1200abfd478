"""
kraken-rest command line tool

Call any Kraken REST API from a shell:

    kraken-rest time
    kraken-rest ticker pair=XXBTZEUR
    kraken-rest --keys kraken.key balance
    kraken-rest pair XBT EUR
"""
import argparse
import sys
from typing import Dict, List, Optional, Tuple

from kraken_rest.api.builder import ApiBuilder, ApiKind
from kraken_rest.api.private import PrivateMethod
from kraken_rest.api.public import PublicMethod
from kraken_rest.auth.credentials import Credentials
from kraken_rest.client.builder import ClientBuilder
from kraken_rest.config.settings import CredentialsConfig, KrakenConfig, LoggingConfig, validate_all_configs
from kraken_rest.domain.value_objects.asset import Asset
from kraken_rest.exceptions import ConfigurationError, InvalidKeyError, InvalidUserAgentError, KrakenError, UnauthorizedError
from kraken_rest.utils.logger import Logger, configure_logging

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE = 2


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


METHODS: Dict[str, Tuple[ApiKind, str]] = {
    **{_normalize(m.value): (ApiKind.PUBLIC, m.value) for m in PublicMethod},
    **{_normalize(m.value): (ApiKind.PRIVATE, m.value) for m in PrivateMethod},
}


def resolve_method(name: str) -> Tuple[ApiKind, str]:
    """
    Find the API for a method name given on the command line.

    "Ticker", "ticker" and "asset_pairs" style names are all accepted.

    Raises:
        ValueError: If no API has that name
    """
    try:
        return METHODS[_normalize(name)]
    except KeyError:
        raise ValueError(f"unknown API method: {name}")


def parse_params(pairs: List[str]) -> Dict[str, str]:
    """Turn key=value arguments into a parameter map"""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"parameter must look like key=value: {pair}")
        params[key] = value
    return params


def load_credentials(keys_path: Optional[str]) -> Optional[Credentials]:
    """Credentials from --keys, KRAKEN_KEY_PATH or the environment, if any"""
    path = keys_path or CredentialsConfig.KEY_PATH
    if path:
        return Credentials.read(path)
    if CredentialsConfig.env_keys_present():
        return Credentials.from_env(CredentialsConfig.API_KEY_VAR, CredentialsConfig.PRIVATE_KEY_VAR)
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kraken-rest", description="Kraken REST API client")
    parser.add_argument('--user-agent', default=KrakenConfig.USER_AGENT,
                        help='User-Agent header (default: %(default)s)')
    parser.add_argument('--keys', default=None,
                        help='keys file: API key on the first line, private key on the second')
    parser.add_argument('--otp', default=None,
                        help='one-time password for keys protected by two-factor authentication')
    parser.add_argument('--log-level', default=LoggingConfig.LEVEL,
                        help='logging level (default: %(default)s)')
    parser.add_argument('method',
                        help='API method (e.g. time, ticker, balance) or "pair"')
    parser.add_argument('params', nargs='*',
                        help='key=value API parameters, or two assets for "pair"')
    return parser


def run_pair(args: List[str]) -> int:
    """Print the asset pair name of two assets"""
    if len(args) != 2:
        Logger.print_error("pair takes exactly two assets, e.g. pair XBT EUR")
        return EXIT_USAGE
    try:
        base, quote = (Asset.parse(code) for code in args)
    except ValueError as e:
        Logger.print_error(str(e))
        return EXIT_USAGE
    print(base.pair(quote))
    return EXIT_OK


def run_api(args: argparse.Namespace) -> int:
    """Send one API request and print its result"""
    try:
        kind, method = resolve_method(args.method)
        params = parse_params(args.params)
    except ValueError as e:
        Logger.print_error(str(e))
        return EXIT_USAGE

    builder = ApiBuilder(kind, method).with_params(params)
    if args.otp:
        builder.with_otp(args.otp)

    try:
        credentials = load_credentials(args.keys) if kind is ApiKind.PRIVATE else None
        client_builder = ClientBuilder(args.user_agent)
        if credentials is not None:
            client_builder.with_credentials(credentials)
        with client_builder.build_blocking() as client:
            response = client.send(builder)
    except (InvalidKeyError, InvalidUserAgentError, UnauthorizedError) as e:
        Logger.print_error(str(e))
        return EXIT_USAGE
    except KrakenError as e:
        Logger.print_error(str(e))
        return EXIT_API_ERROR

    if not response.is_success():
        Logger.print_api_errors(method, response.status_code, response.error)
        return EXIT_API_ERROR

    Logger.print_result(response.result)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = args.log_level.upper()
    try:
        validate_all_configs(log_level)
    except ConfigurationError as e:
        Logger.print_error(str(e))
        return EXIT_USAGE
    configure_logging(log_level)

    if args.method.lower() == "pair":
        return run_pair(args.params)
    return run_api(args)


if __name__ == "__main__":
    sys.exit(main())
