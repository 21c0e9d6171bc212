"""
Lambda handler layer of the event wrapper.

The handler layer owns the pipeline (``EventWrapper``), its configuration
(``handlers.models.env_vars``) and the shared Powertools observability
instances (``handlers.utils.observability``).
"""

from event_wrapper.handlers.utils.observability import logger, metrics, tracer
from event_wrapper.handlers.wrapper import WARMUP_RESPONSE, EventWrapper, wrap

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "EventWrapper",
    "wrap",
    "WARMUP_RESPONSE",
]
