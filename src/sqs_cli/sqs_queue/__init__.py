"""
Package: sqs_queue
Description: SQS message queue operations.

Provides the MessageQueue capability used by the CLI and the
boto3-backed SQSClient that implements it.
"""

from .base import MessageQueue
from .sqs import SQSClient

__all__ = [
    "MessageQueue",
    "SQSClient",
]
