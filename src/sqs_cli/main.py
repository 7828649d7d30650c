"""
Module: main.py
Description: Command-line entry point for the SQS CLI.

Parses flags, resolves configuration, builds one SQS client and runs
send -> receive -> delete against it. Message lines go to stdout; usage,
errors and log records go to stderr.

Usage:
    sqs-cli -queue-url <queue-url> [-region <region>] [-delete] [messages...]

Exit codes:
    0 on success, 1 on a missing queue URL, invalid settings or a failed
    queue call, 2 on unrecognized flags.
"""

import argparse
import sys
from typing import Callable, List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from sqs_cli.config.settings import Settings, get_settings
from sqs_cli.handlers.messages import run
from sqs_cli.models.message import Invocation
from sqs_cli.sqs_queue.base import MessageQueue
from sqs_cli.sqs_queue.sqs import SQSClient
from sqs_cli.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

USAGE = "%(prog)s -queue-url <queue-url> [-region <region>] [-delete] [messages...]"


class _StderrArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints help to stderr like its error output."""

    def print_help(self, file=None):
        super().print_help(file if file is not None else sys.stderr)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Flags follow the single-dash style (-queue-url, -region, -delete).
    Everything after the first positional argument is a message body,
    even when it starts with a dash.

    Args:
        settings: Source of the -region and -queue-url defaults
    """
    parser = _StderrArgumentParser(
        prog="sqs-cli",
        usage=USAGE,
        description="Send, receive and optionally delete SQS messages.",
        add_help=False,
        allow_abbrev=False
    )
    parser.add_argument(
        "-h", "-help",
        action="help",
        help="show this help message and exit"
    )
    parser.add_argument(
        "-region",
        default=settings.aws_region,
        help=f"AWS region (default: {settings.aws_region})"
    )
    parser.add_argument(
        "-queue-url",
        dest="queue_url",
        default=settings.queue_url,
        help="SQS URL. Required"
    )
    parser.add_argument(
        "-delete",
        action="store_true",
        help="delete received messages"
    )
    parser.add_argument(
        "messages",
        nargs=argparse.REMAINDER,
        help="message bodies to send, one message each"
    )
    return parser


def parse_invocation(
    parser: argparse.ArgumentParser,
    argv: Optional[List[str]] = None
) -> Optional[Invocation]:
    """
    Parse argv into an Invocation.

    Returns:
        The invocation, or None when the queue URL is missing
    """
    args = parser.parse_args(argv)

    messages = list(args.messages)
    if messages and messages[0] == "--":
        messages = messages[1:]

    if not args.queue_url or not args.queue_url.strip():
        return None

    return Invocation(
        region=args.region,
        queue_url=args.queue_url,
        delete=args.delete,
        messages=messages
    )


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
    queue_factory: Callable[[str, str], MessageQueue] = SQSClient
) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (sys.argv[1:] when None)
        settings: Preloaded settings (loaded from the environment when None)
        queue_factory: Builds the queue client from (queue_url, region)

    Returns:
        Process exit status
    """
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"invalid configuration: {e}", file=sys.stderr)
            return 1

    configure_logging(settings.log_level)

    parser = build_parser(settings)
    invocation = parse_invocation(parser, argv)
    if invocation is None:
        parser.print_help()
        print("-queue-url is required", file=sys.stderr)
        return 1

    logger.debug(
        "Invocation resolved",
        region=invocation.region,
        queue_url=invocation.queue_url,
        delete=invocation.delete,
        message_count=len(invocation.messages)
    )

    try:
        queue = queue_factory(invocation.queue_url, invocation.region)
        run(queue, invocation)

    except (ClientError, BotoCoreError) as e:
        logger.error(
            "Queue operation failed",
            queue_url=invocation.queue_url,
            error=str(e),
            error_type=type(e).__name__
        )
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
