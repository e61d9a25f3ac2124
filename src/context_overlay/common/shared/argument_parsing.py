"""Shared argument parsing utilities for CLI scripts."""

import argparse

from ...constants import CONTEXT_ENV_VAR


def add_context_argument(parser: argparse.ArgumentParser) -> None:
    """Add --context argument to parser."""
    parser.add_argument(
        "--context",
        type=str,
        default=None,
        help=f"Application context, e.g. 'Production/Live' (default: ${CONTEXT_ENV_VAR})",
    )


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add --log-level argument to parser."""
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )


def parse_key_value(raw: str) -> tuple:
    """
    Split a ``KEY=VALUE`` override into its parts.

    Raises:
        argparse.ArgumentTypeError: If no ``=`` is present or the key is empty.
    """
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got: {raw!r}")
    return key.strip(), value
