"""
Module: messages.py
Description: Send, receive and delete sequencing for the SQS CLI.

Each step runs to completion before the next one starts. The first
failing queue call stops the step it belongs to and is propagated
unchanged, so later steps never run. Nothing already sent or deleted is
undone.

Key Components:
- send_messages(): Send bodies one at a time, in order
- receive_messages(): Receive one batch of up to RECEIVE_BATCH_SIZE
- delete_messages(): Delete received messages one at a time, in order
- run(): send -> receive -> delete for one Invocation

Dependencies: typing, models, sqs_queue, utils
"""

from typing import List, Optional, Sequence, TextIO

from sqs_cli.models.message import InboundMessage, Invocation, OutboundMessage
from sqs_cli.sqs_queue.base import MessageQueue
from sqs_cli.utils.logger import get_logger

logger = get_logger(__name__)

# Fixed regardless of how many messages were sent in the same run
RECEIVE_BATCH_SIZE = 10


def send_messages(
    queue: MessageQueue,
    bodies: Sequence[str],
    out: Optional[TextIO] = None
) -> None:
    """
    Send each body as its own message.

    Args:
        queue: Queue to send to
        bodies: Message bodies, sent in this order
        out: Stream for confirmation lines (stdout when None)

    Raises:
        Whatever the queue raises; remaining bodies are not sent
    """
    for index, body in enumerate(bodies):
        queue.send(OutboundMessage(body=body))
        print(f"message sent {index}: {body}", file=out)


def receive_messages(
    queue: MessageQueue,
    count: int = RECEIVE_BATCH_SIZE,
    out: Optional[TextIO] = None
) -> List[InboundMessage]:
    """
    Receive up to count messages in one call and print them.

    Args:
        queue: Queue to receive from
        count: Maximum number of messages to request
        out: Stream for received lines (stdout when None)

    Returns:
        Received messages in order, possibly empty
    """
    messages = queue.receive(count)
    for index, message in enumerate(messages):
        print(f"message received {index}: {message.body}", file=out)
    return messages


def delete_messages(
    queue: MessageQueue,
    messages: Sequence[InboundMessage],
    out: Optional[TextIO] = None
) -> None:
    """
    Delete each received message by its receipt handle.

    Args:
        queue: Queue the messages were received from
        messages: Messages returned by receive_messages()
        out: Stream for confirmation lines (stdout when None)

    Raises:
        Whatever the queue raises; remaining messages are not deleted
    """
    for index, message in enumerate(messages):
        queue.delete(message)
        print(f"message deleted {index}: {message.body}", file=out)


def run(
    queue: MessageQueue,
    invocation: Invocation,
    out: Optional[TextIO] = None
) -> List[InboundMessage]:
    """
    Run one CLI invocation against an established queue.

    Args:
        queue: Queue bound to invocation.queue_url
        invocation: Resolved configuration
        out: Stream for message lines (stdout when None)

    Returns:
        Messages received during this run
    """
    if invocation.messages:
        send_messages(queue, invocation.messages, out=out)
        logger.info("Messages sent", count=len(invocation.messages))

    received = receive_messages(queue, RECEIVE_BATCH_SIZE, out=out)

    if invocation.delete:
        delete_messages(queue, received, out=out)
        logger.info("Messages deleted", count=len(received))

    return received
