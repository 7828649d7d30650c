"""
Module: conftest.py
Description: Shared pytest fixtures for SQS CLI tests.

Provides test settings, an in-memory queue fake with failure
injection, and a moto-backed SQS queue for tests that exercise the
real boto3 client.
"""

import pytest
import boto3
from botocore.exceptions import ClientError
from moto import mock_aws

from sqs_cli.config.settings import Settings
from sqs_cli.models.message import InboundMessage
from sqs_cli.utils.logger import configure_logging


TEST_REGION = "us-east-1"
TEST_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/test-queue"


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError(
        error_response={'Error': {'Code': code, 'Message': f'{operation} failed'}},
        operation_name=operation
    )


class FakeQueue:
    """
    In-memory MessageQueue that records every call.

    Attributes:
        sent: Bodies accepted by send(), in order
        receive_calls: max_count of every receive() call
        deleted: Receipt handles accepted by delete(), in order
        pending: Messages the next receive() returns
        fail_send_at: Index of the send() call that raises, if any
        fail_delete_at: Index of the delete() call that raises, if any
        fail_receive: Raise on receive() when True
    """

    def __init__(self, pending=None, fail_send_at=None, fail_delete_at=None, fail_receive=False):
        self.sent = []
        self.send_attempts = 0
        self.receive_calls = []
        self.deleted = []
        self.delete_attempts = 0
        self.pending = list(pending or [])
        self.fail_send_at = fail_send_at
        self.fail_delete_at = fail_delete_at
        self.fail_receive = fail_receive

    def send(self, message):
        index = self.send_attempts
        self.send_attempts += 1
        if index == self.fail_send_at:
            raise _client_error('AccessDenied', 'SendMessage')
        self.sent.append(message.body)
        return f"msg-{index}"

    def receive(self, max_count):
        self.receive_calls.append(max_count)
        if self.fail_receive:
            raise _client_error('AWS.SimpleQueueService.NonExistentQueue', 'ReceiveMessage')
        return self.pending[:max_count]

    def delete(self, message):
        index = self.delete_attempts
        self.delete_attempts += 1
        if index == self.fail_delete_at:
            raise _client_error('ReceiptHandleIsInvalid', 'DeleteMessage')
        self.deleted.append(message.receipt_handle)


@pytest.fixture(autouse=True)
def debug_logging():
    """Emit every log record so logging paths run in each test."""
    configure_logging("DEBUG")


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Ignores .env and fixes every field so the surrounding environment
    cannot leak into tests.
    """
    return Settings(
        _env_file=None,
        aws_region=TEST_REGION,
        queue_url="",
        log_level="DEBUG"
    )


@pytest.fixture
def client_error():
    """Factory for botocore ClientError instances."""
    return _client_error


@pytest.fixture
def inbound_messages():
    """Two received messages, as the scenarios in the README use."""
    return [
        InboundMessage(body="a", receipt_handle="rh-a", message_id="id-a"),
        InboundMessage(body="b", receipt_handle="rh-b", message_id="id-b"),
    ]


@pytest.fixture
def make_fake_queue():
    """Factory for FakeQueue instances."""
    return FakeQueue


@pytest.fixture
def fake_queue():
    """Empty FakeQueue that never fails."""
    return FakeQueue()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def sqs_queue_url(aws_credentials):
    """
    Create a mock SQS queue and yield its URL.

    The moto mock stays active for the whole test, so clients built
    inside the test talk to the same in-memory queue.
    """
    with mock_aws():
        sqs = boto3.client('sqs', region_name=TEST_REGION)
        response = sqs.create_queue(QueueName='test-queue')
        yield response['QueueUrl']


@pytest.fixture
def sqs(sqs_queue_url):
    """Raw boto3 SQS client for inspecting the mock queue."""
    return boto3.client('sqs', region_name=TEST_REGION)


@pytest.fixture
def queue_url():
    """Queue URL for tests that never reach SQS."""
    return TEST_QUEUE_URL
