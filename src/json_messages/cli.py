"""Command line helper that prints a single message."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence, TextIO

from .config import load_config
from .exceptions import ConfigurationError
from .logging_config import configure_logging
from .message import JsonMessage


def build_parser() -> argparse.ArgumentParser:
    """Create an argument parser for the message builder."""

    parser = argparse.ArgumentParser(description="Print a JSON response message")
    parser.add_argument(
        "--api-version",
        type=str,
        default=None,
        help="apiVersion of the message (default: JSON_MESSAGES_API_VERSION)",
    )
    parser.add_argument("--id", type=str, default=None, help="Message id (default: random UUID)")
    parser.add_argument("--method", type=str, default=None, help="Method name")
    parser.add_argument("--data", type=str, default=None, help="Success payload as JSON text")
    parser.add_argument("--error-code", type=str, default=None, help="Error code")
    parser.add_argument("--error-message", type=str, default=None, help="Error message")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _coerce_code(value: str) -> str | int:
    try:
        return int(value)
    except ValueError:
        return value


def run(args: argparse.Namespace, *, stdout: TextIO | None = None) -> JsonMessage:
    """Build the message described by ``args`` and write its JSON to ``stdout``."""

    # Configured before load_config so its failures are logged as JSON too
    logger = configure_logging("DEBUG" if args.debug else "WARNING", stream=sys.stderr)

    if args.api_version is not None:
        message = JsonMessage(
            {"apiVersion": args.api_version, "id": args.id, "method": args.method}
        )
    else:
        config = load_config()
        if not args.debug:
            logger.setLevel(config.log_level)
        message = JsonMessage.from_config(config, id=args.id, method=args.method)

    if args.data is not None:
        message.set_data(json.loads(args.data))
    if args.error_code is not None:
        message.set_error(_coerce_code(args.error_code), args.error_message)

    logger.debug("Message built", extra={"message_id": message.id})
    (stdout or sys.stdout).write(message.to_json() + "\n")
    return message


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.error_message is not None and args.error_code is None:
        parser.error("--error-message requires --error-code")
    try:
        run(args)
    except ConfigurationError as exc:
        logging.getLogger("json_messages.cli").error("%s", exc)
        return 2
    except json.JSONDecodeError as exc:
        logging.getLogger("json_messages.cli").error("--data is not valid JSON: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
