"""
Module: message.py
Description: Data models for the SQS CLI.

Defines the resolved invocation and the two message shapes that cross
the queue boundary.

Key Components:
- Invocation: Region, queue URL, delete flag and bodies to send
- OutboundMessage: Body of a message to send
- InboundMessage: Body and receipt handle of a received message

Dependencies: pydantic, typing
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Invocation(BaseModel):
    """
    Configuration for a single CLI run.

    Attributes:
        region: AWS region the client is bound to
        queue_url: URL of the target SQS queue
        delete: Delete received messages after printing them
        messages: Message bodies to send, in order
    """

    model_config = ConfigDict(frozen=True)

    region: str = Field(default="us-east-1", description="AWS region")
    queue_url: str = Field(..., description="SQS queue URL")
    delete: bool = Field(default=False, description="Delete received messages")
    messages: List[str] = Field(
        default_factory=list,
        description="Message bodies to send"
    )

    @field_validator('queue_url')
    @classmethod
    def validate_queue_url(cls, v: str) -> str:
        """Validate queue URL is non-empty."""
        if not v or not v.strip():
            raise ValueError("queue_url must be a non-empty string")
        return v.strip()


class OutboundMessage(BaseModel):
    """Message body to be sent to the queue."""

    body: str = Field(..., description="Message body")


class InboundMessage(BaseModel):
    """
    Message received from the queue.

    The receipt handle is only valid for the queue the message came
    from and only until its visibility timeout lapses.
    """

    body: str = Field(..., description="Message body")
    receipt_handle: str = Field(
        ...,
        min_length=1,
        description="Token required to delete this message"
    )
    message_id: Optional[str] = Field(default=None, description="SQS message ID")

    @classmethod
    def from_sqs(cls, message: Dict[str, Any]) -> "InboundMessage":
        """Build from an entry of a ReceiveMessage response."""
        return cls(
            body=message.get('Body', ''),
            receipt_handle=message['ReceiptHandle'],
            message_id=message.get('MessageId')
        )
