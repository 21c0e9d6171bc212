"""
Pytest configuration and shared fixtures for the Lambda Event Wrapper.

This module provides trigger events, contexts and collaborator doubles used
across unit and integration tests.
"""

import json
import os
from typing import Any, Dict, List
from unittest.mock import Mock

import pytest

from event_wrapper.handlers.models.env_vars import WrapperEnvVars

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:lambda-event-wrapper-test"


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "POWERTOOLS_SERVICE_NAME": "test-lambda-event-wrapper",
        "POWERTOOLS_METRICS_NAMESPACE": "TestLambdaEventWrapper",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
        "LOG_LEVEL": "DEBUG",
    })


class LogRecorder:
    """Logger double recording every entry it receives."""

    def __init__(self):
        self.errors: List[Any] = []
        self.debugs: List[Any] = []
        self.last: Any = None

    def error(self, entry):
        self.errors.append(entry)
        self.last = entry

    def debug(self, entry):
        self.debugs.append(entry)
        self.last = entry


class RecordingPublisher:
    """Notification transport double."""

    def __init__(self, error: Exception = None):
        self.error = error
        self.published: List[Dict[str, str]] = []

    async def publish(self, destination: str, message: str) -> Dict[str, Any]:
        self.published.append({"destination": destination, "message": message})
        if self.error is not None:
            raise self.error
        return {"MessageId": "msg-1", "ResponseMetadata": {"HTTPStatusCode": 200}}


@pytest.fixture
def log_recorder() -> LogRecorder:
    return LogRecorder()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def env_vars() -> WrapperEnvVars:
    """Configuration without notifications or CORS origins."""
    return WrapperEnvVars()


@pytest.fixture
def notifying_env_vars() -> WrapperEnvVars:
    return WrapperEnvVars(NOTIFICATION_TOPIC_ARN=TOPIC_ARN)


@pytest.fixture
def echo_fn():
    """Business function answering with a ``{code, body}`` result."""
    async def fn(data):
        return {"code": 200, "body": data}
    return fn


@pytest.fixture
def http_get_event() -> Dict[str, Any]:
    """API Gateway GET /users/1234?token=5678 event."""
    return {
        "resource": "/users/{id}",
        "path": "/users/1234",
        "httpMethod": "GET",
        "headers": {
            "Accept": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "multiValueHeaders": {
            "Accept": ["application/json"],
            "User-Agent": ["test-agent/1.0"],
        },
        "queryStringParameters": {"token": "5678"},
        "multiValueQueryStringParameters": {"token": ["5678"]},
        "pathParameters": {"id": "1234"},
        "stageVariables": None,
        "requestContext": {
            "requestId": "test-request-id-123",
            "stage": "test",
            "httpMethod": "GET",
        },
        "body": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def http_post_event() -> Dict[str, Any]:
    """API Gateway POST /mail event with a JSON body."""
    return {
        "resource": "/mail",
        "path": "/mail",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json"},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "requestContext": {"requestId": "test-request-id-456", "stage": "test"},
        "body": json.dumps({
            "to": "jane@example.com",
            "from": "john@example.com",
            "subject": "test",
            "message": "test, test, test",
        }),
        "isBase64Encoded": False,
    }


@pytest.fixture
def scheduled_event() -> Dict[str, Any]:
    """EventBridge scheduled rule event."""
    return {
        "version": "0",
        "id": "53dc4d37-cffa-4f76-80c9-8b7d4a4d2eaa",
        "detail-type": "Scheduled Event",
        "source": "aws.events",
        "account": "123456789012",
        "time": "2024-01-01T12:00:00Z",
        "region": "us-east-1",
        "resources": ["arn:aws:events:us-east-1:123456789012:rule/nightly"],
        "detail": {},
    }


@pytest.fixture
def workflow_event() -> Dict[str, Any]:
    """Step Functions step event using the ``@input.`` key convention."""
    return {
        "@input.a": 1,
        "@input.b": 2,
        "@state": {
            "Name": "testFn",
            "EnteredTime": "2019-09-29T15:13:54.296Z",
            "RetryCount": 0,
        },
        "@output": {
            "HelloWorld1": {"value": None},
        },
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = "512"
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
