"""
Package: sqs_cli
Description: Command-line client for Amazon SQS queues.

Sends messages, receives a batch of pending messages and optionally
deletes what was received.
"""

__version__ = "0.1.0"
