"""
Data models shared by the pipeline stages.

- EventSource: tag produced by the classifier
- Success / Failure: the execution outcome of one invocation
"""

from event_wrapper.models.event_source import EventSource
from event_wrapper.models.outcome import ExecutionOutcome, Failure, Success

__all__ = [
    "EventSource",
    "ExecutionOutcome",
    "Failure",
    "Success",
]
