"""Command-line driver for the factory method lessons."""

from __future__ import annotations

import argparse
import asyncio
import sys
import tomllib
from typing import Callable, Sequence

from ..errors import ConfigError
from ..settings import AppConfig, load_config
from ..utils.logging import configure_logging, get_logger
from .demos import run_datasources, run_fetchers, run_notifications

LOGGER = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    handler: Callable[[argparse.Namespace, AppConfig], int] | None = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stderr)
        return 1

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ConfigError, tomllib.TOMLDecodeError) as exc:
        print(f"factory-demo: cannot load config: {exc}", file=sys.stderr)
        return 2

    structured = config.logging.structured
    if args.log_plain:
        structured = False
    elif args.log_json:
        structured = True
    configure_logging(level=args.log_level or config.logging.level, structured=structured)

    LOGGER.info(
        "Running lesson",
        extra={"event": "cli.command", "command": args.command, "config": str(config.source or "<defaults>")},
    )
    return handler(args, config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="factory-demo", description="Factory Method lessons")
    parser.add_argument("--config", help="Path to a TOML configuration file", default=None)
    log_format = parser.add_mutually_exclusive_group()
    log_format.add_argument("--log-plain", action="store_true", help="Use plain-text logs")
    log_format.add_argument("--log-json", action="store_true", help="Use JSON logs")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="command")

    notifications = subparsers.add_parser("notifications", help="Send through every notification channel")
    notifications.add_argument("--message", default="Welcome to our app!", help="Message to send")
    notifications.set_defaults(handler=_handle_notifications)

    fetchers = subparsers.add_parser("fetchers", help="Fetch, cache and clear with every fetcher")
    fetchers.set_defaults(handler=_handle_fetchers)

    datasources = subparsers.add_parser("datasources", help="Run CRUD against every data source")
    datasources.set_defaults(handler=_handle_datasources)

    everything = subparsers.add_parser("all", help="Run every lesson in order")
    everything.add_argument("--message", default="Welcome to our app!", help="Message to send")
    everything.set_defaults(handler=_handle_all)

    return parser


def _handle_notifications(args: argparse.Namespace, config: AppConfig) -> int:
    run_notifications(config.notifications, message=args.message)
    return 0


def _handle_fetchers(args: argparse.Namespace, config: AppConfig) -> int:
    asyncio.run(run_fetchers(config.fetchers))
    return 0


def _handle_datasources(args: argparse.Namespace, config: AppConfig) -> int:
    asyncio.run(run_datasources(config.datasources))
    return 0


def _handle_all(args: argparse.Namespace, config: AppConfig) -> int:
    _handle_notifications(args, config)
    print()
    _handle_fetchers(args, config)
    print()
    _handle_datasources(args, config)
    print("\nFactory Method works with all implementations!")
    return 0

