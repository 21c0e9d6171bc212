"""
Lambda Event Wrapper.

Adapts a plain business function to API Gateway, EventBridge schedule,
Step Functions and direct Lambda invocations:

- handlers: pipeline entry point, configuration and observability
- logic: classification, normalization, invocation and response mapping
- events: best-effort SNS notifications
- security: CORS origin matching
- models: event source tags and execution outcomes
"""

__version__ = "1.0.0"

from event_wrapper.handlers.wrapper import EventWrapper, wrap
from event_wrapper.handlers.models.env_vars import WrapperEnvVars
from event_wrapper.models.event_source import EventSource
from event_wrapper.models.outcome import ExecutionOutcome, Failure, Success

__all__ = [
    "__version__",
    "wrap",
    "EventWrapper",
    "WrapperEnvVars",
    "EventSource",
    "ExecutionOutcome",
    "Success",
    "Failure",
]
