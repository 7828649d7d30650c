"""
Package: handlers
Description: Queue operation handlers for the SQS CLI.
"""

from .messages import (
    RECEIVE_BATCH_SIZE,
    send_messages,
    receive_messages,
    delete_messages,
    run,
)

__all__ = [
    "RECEIVE_BATCH_SIZE",
    "send_messages",
    "receive_messages",
    "delete_messages",
    "run",
]
