"""
Module: base.py
Description: Capability interface for queue operations.

The CLI only needs send, receive and delete against one queue. Keeping
them behind this protocol lets the sequencing be exercised with an
in-memory fake.
"""

from typing import List, Optional, Protocol

from sqs_cli.models.message import InboundMessage, OutboundMessage


class MessageQueue(Protocol):
    """The three queue operations the CLI depends on."""

    def send(self, message: OutboundMessage) -> Optional[str]:
        ...

    def receive(self, max_count: int) -> List[InboundMessage]:
        ...

    def delete(self, message: InboundMessage) -> None:
        ...
