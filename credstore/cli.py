"""Command line entry points for registering and authenticating users.

Each command reads one line of whitespace-separated tokens from standard
input, does one unit of work and returns a process exit code.
"""

import argparse
import logging
import sys

from credstore.auth import authenticate_user, register_user
from credstore.config import AppConfig, configure_logging, load_config_from_env
from credstore.store import StoreError, StoreRepository

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def read_tokens(count: int) -> list[str]:
    """Read one line from stdin and split it into ``count`` tokens.

    Missing tokens come back as empty strings, extra ones are dropped. Bytes
    that are not valid UTF-8 are kept as surrogates rather than rejected.
    """
    line = sys.stdin.buffer.readline().decode("utf-8", errors="surrogateescape")
    tokens = line.split()
    return (tokens + [""] * count)[:count]


def write_line(text: str) -> None:
    """Write a line to stdout, restoring any undecodable input bytes."""
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8", errors="surrogateescape") + b"\n")
    sys.stdout.flush()


def add_common_arguments(
    parser: argparse.ArgumentParser, suppress_defaults: bool = False
) -> None:
    # Subcommands suppress defaults so they do not clobber top-level values
    parser.add_argument(
        "--store-path",
        type=str,
        default=argparse.SUPPRESS if suppress_defaults else None,
        help="Path to the JSON user store (overrides STORE_PATH).",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=argparse.SUPPRESS if suppress_defaults else ".env",
        help="Path to the environment configuration file.",
    )


def load_config(args: argparse.Namespace) -> AppConfig:
    config = load_config_from_env(args.env_file)
    if args.store_path:
        config.store_path = args.store_path
    configure_logging(config)
    LOGGER.debug("Using store at: %s", config.store_path)
    return config


def run_register(config: AppConfig) -> int:
    """Register the user read from stdin as ``<username> <password> <role>``."""
    username, password, role = read_tokens(3)
    try:
        register_user(StoreRepository(config.store_path), username, password, role)
    except StoreError as e:
        LOGGER.error("Registration failed: %s", e)
        return EXIT_FAILURE
    return EXIT_OK


def run_authenticate(config: AppConfig) -> int:
    """Authenticate the credentials read from stdin as ``<username> <password>``."""
    username, password = read_tokens(2)
    try:
        result = authenticate_user(StoreRepository(config.store_path), username, password)
    except StoreError as e:
        LOGGER.error("Authentication failed: %s", e)
        return EXIT_FAILURE
    write_line(result.message)
    return EXIT_OK if result.success else EXIT_FAILURE


def register_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Register a user read from stdin as '<username> <password> <role>'.",
    )
    add_common_arguments(parser)
    args = parser.parse_args(argv)
    return run_register(load_config(args))


def authenticate_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Authenticate a user read from stdin as '<username> <password>'.",
    )
    add_common_arguments(parser)
    args = parser.parse_args(argv)
    return run_authenticate(load_config(args))


def main(argv: list[str] | None = None) -> int:
    """Dispatch to the register or authenticate command."""
    parser = argparse.ArgumentParser(
        description="Manage a JSON-backed credential store.",
    )
    add_common_arguments(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_common_arguments(
        subparsers.add_parser("register", help="Register a user read from stdin."),
        suppress_defaults=True,
    )
    add_common_arguments(
        subparsers.add_parser("authenticate", help="Check credentials read from stdin."),
        suppress_defaults=True,
    )
    args = parser.parse_args(argv)

    config = load_config(args)
    if args.command == "register":
        return run_register(config)
    return run_authenticate(config)
