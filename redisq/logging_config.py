"""
Command line logging setup.

Each `-v` lowers the threshold one step: warning, info, debug.
"""
import argparse
import logging

import structlog


_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_parser(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="increase log verbosity (repeatable, e.g. -vv)"
    )
    return parser


def log_level(cli_args: argparse.Namespace) -> int:
    return _LEVELS[min(cli_args.verbose, len(_LEVELS) - 1)]


def configure_logging(cli_args: argparse.Namespace) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level(cli_args)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
