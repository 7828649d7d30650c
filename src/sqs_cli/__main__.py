"""Allow running the CLI with `python -m sqs_cli`."""

from sqs_cli.main import cli

cli()
