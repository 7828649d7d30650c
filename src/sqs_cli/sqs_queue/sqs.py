"""
Module: sqs.py
Description: SQS client for queue operations.

Sends message bodies to a queue, receives a batch of pending messages
and deletes received messages by receipt handle. Every call is a single
blocking request made with the boto3 defaults; failures are logged and
re-raised to the caller.
"""

from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sqs_cli.models.message import InboundMessage, OutboundMessage
from sqs_cli.utils.logger import get_logger

logger = get_logger(__name__)

# SQS rejects ReceiveMessage with MaxNumberOfMessages outside 1..10
MAX_RECEIVE_COUNT = 10


class SQSClient:
    """
    SQS client bound to one region and one queue.

    Attributes:
        queue_url: URL of the SQS queue
        region: AWS region of the client
        client: boto3 SQS client

    Example:
        >>> client = SQSClient(queue_url=url, region="us-west-2")
        >>> client.send(OutboundMessage(body="hello"))
        >>> messages = client.receive(10)
    """

    def __init__(self, queue_url: str, region: Optional[str] = None):
        """
        Initialize SQS client.

        Args:
            queue_url: URL of the SQS queue
            region: AWS region; falls back to the boto3 default chain when None

        Raises:
            ValueError: If queue_url is empty or invalid
        """
        if not queue_url or not isinstance(queue_url, str):
            raise ValueError("queue_url must be a non-empty string")

        self.queue_url = queue_url
        self.region = region
        self.client = boto3.client('sqs', region_name=region)

        logger.info(
            "SQS client initialized",
            queue_url=queue_url,
            region=region
        )

    def send(self, message: OutboundMessage) -> str:
        """
        Send one message to the queue.

        Args:
            message: Message to send

        Returns:
            Message ID assigned by SQS

        Raises:
            ClientError: If SQS rejects the request
            BotoCoreError: If the request could not be made
        """
        try:
            response = self.client.send_message(
                QueueUrl=self.queue_url,
                MessageBody=message.body
            )

        except ClientError as e:
            logger.error(
                "Failed to send message to SQS",
                queue_url=self.queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except BotoCoreError as e:
            logger.error(
                "Unexpected error sending message to SQS",
                queue_url=self.queue_url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        message_id = response.get('MessageId')
        logger.info(
            "Message sent to SQS",
            message_id=message_id,
            queue_url=self.queue_url
        )
        return message_id

    def receive(self, max_count: int) -> List[InboundMessage]:
        """
        Receive up to max_count messages in a single call.

        An empty queue yields an empty list rather than an error.

        Args:
            max_count: Maximum number of messages to request (1-10)

        Returns:
            Received messages in the order SQS returned them

        Raises:
            ValueError: If max_count is outside 1-10
            ClientError: If SQS rejects the request
            BotoCoreError: If the request could not be made
        """
        if not 1 <= max_count <= MAX_RECEIVE_COUNT:
            raise ValueError(f"max_count must be between 1 and {MAX_RECEIVE_COUNT}")

        try:
            response = self.client.receive_message(
                QueueUrl=self.queue_url,
                MaxNumberOfMessages=max_count
            )

        except ClientError as e:
            logger.error(
                "Failed to receive messages from SQS",
                queue_url=self.queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except BotoCoreError as e:
            logger.error(
                "Unexpected error receiving messages from SQS",
                queue_url=self.queue_url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        messages = [
            InboundMessage.from_sqs(item)
            for item in response.get('Messages', [])
        ]

        logger.info(
            "Messages received from SQS",
            count=len(messages),
            requested=max_count,
            queue_url=self.queue_url
        )
        return messages

    def delete(self, message: InboundMessage) -> None:
        """
        Delete a received message by its receipt handle.

        Args:
            message: Message returned by receive() on this queue

        Raises:
            ClientError: If SQS rejects the request
            BotoCoreError: If the request could not be made
        """
        try:
            self.client.delete_message(
                QueueUrl=self.queue_url,
                ReceiptHandle=message.receipt_handle
            )

        except ClientError as e:
            logger.error(
                "Failed to delete message from SQS",
                message_id=message.message_id,
                queue_url=self.queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except BotoCoreError as e:
            logger.error(
                "Unexpected error deleting message from SQS",
                message_id=message.message_id,
                queue_url=self.queue_url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        logger.info(
            "Message deleted from SQS",
            message_id=message.message_id,
            queue_url=self.queue_url
        )
