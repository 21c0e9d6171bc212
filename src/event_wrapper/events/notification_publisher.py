"""
Success notifications over Amazon SNS.

After a successful invocation the wrapper may publish the JSON encoded result
to a topic. Publishing is best-effort: failures are annotated with the topic,
logged and swallowed so they can never change the response.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit

from event_wrapper.handlers.utils.observability import logger as default_logger
from event_wrapper.handlers.utils.observability import metrics, tracer
from event_wrapper.models.outcome import ExecutionOutcome, Success


class NotificationPublishError(Exception):
    """Exception raised when a success notification cannot be published."""

    def __init__(self, message: str, destination: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(message)
        self.destination = destination
        self.original_error = original_error


class SnsNotificationPublisher:
    """
    Publishes notification messages to SNS topics.

    The boto3 client is created lazily so that wrappers without a topic never
    touch AWS, and the blocking call runs in a worker thread to keep the event
    loop free.
    """

    def __init__(self, region_name: str = "us-east-1", client: Any = None):
        """
        Initialize SNS publisher.

        Args:
            region_name: AWS region of the topics
            client: Preconfigured SNS client, mainly for tests
        """
        self.region_name = region_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client('sns', region_name=self.region_name)
        return self._client

    async def publish(self, destination: str, message: str) -> Dict[str, Any]:
        """Publish ``message`` to the topic ``destination`` and return the SNS acknowledgement."""
        return await asyncio.to_thread(self.client.publish, TopicArn=destination, Message=message)


def serialize_message(value: Any) -> str:
    return json.dumps(value, default=str)


@tracer.capture_method(capture_response=False)
async def notify(destination: Optional[str], outcome: ExecutionOutcome, publisher: Any,
                 logger=default_logger) -> Optional[Dict[str, Any]]:
    """
    Publish a successful outcome to ``destination``.

    Args:
        destination: SNS topic ARN, None disables notifications
        outcome: Result of the invocation, failures are never published
        publisher: Object exposing ``async publish(destination, message)``
        logger: Receives the acknowledgement and publish failures

    Returns:
        The transport acknowledgement, or None when nothing was published
    """
    if not destination or not isinstance(outcome, Success):
        return None

    try:
        ack = await publisher.publish(destination, serialize_message(outcome.value))
    except Exception as exc:
        error = NotificationPublishError(
            f"Failed to publish notification to {destination}: {exc}",
            destination=destination,
            original_error=exc,
        )
        logger.error({
            'message': str(error),
            'destination': error.destination,
            'error_type': type(exc).__name__,
        })
        metrics.add_metric(name="NotificationFailure", unit=MetricUnit.Count, value=1)
        return None

    logger.debug(ack)
    return ack
