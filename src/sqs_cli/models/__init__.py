"""
Module: models
Description: Package initialization for Pydantic data models.

- Invocation: Resolved command-line configuration
- OutboundMessage: Message body about to be sent
- InboundMessage: Message received from the queue

All models are exported here for convenient importing.
"""

from .message import Invocation, OutboundMessage, InboundMessage

__all__ = [
    "Invocation",
    "OutboundMessage",
    "InboundMessage",
]
