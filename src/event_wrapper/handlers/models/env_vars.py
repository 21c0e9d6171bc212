"""
Environment variable models for type-safe wrapper configuration.

The wrapper never reads the environment implicitly once it has been handed a
``WrapperEnvVars`` instance, so several differently configured wrappers can
live in the same process.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class WrapperEnvVars(BaseModel):
    """Environment variables consumed by the event wrapper."""

    # SNS topic receiving success notifications, unset disables notifications
    NOTIFICATION_TOPIC_ARN: Annotated[Optional[str], Field(
        description='SNS topic ARN notified with every successful result'
    )] = None

    # Semicolon separated origin patterns, e.g. "https://*.example.com;http://localhost:3000"
    CORS_ALLOWED_ORIGINS: Annotated[str, Field(
        description='Semicolon delimited list of allowed CORS origin patterns'
    )] = ''

    AWS_REGION: Annotated[str, Field(
        description='AWS region of the notification topic'
    )] = 'us-east-1'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'lambda-event-wrapper'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def notifications_enabled(self) -> bool:
        """Check if a notification topic is configured."""
        return bool(self.NOTIFICATION_TOPIC_ARN)


def get_wrapper_env_vars() -> WrapperEnvVars:
    """
    Get typed environment variables for the wrapper.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=WrapperEnvVars)
