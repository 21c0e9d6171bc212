"""
Event classifier.

Classification is structural and checked in a fixed order, first match wins:

1. HTTP           - the event carries a truthy ``httpMethod``
2. CRON           - the event's ``detail-type`` is ``Scheduled Event``
3. WORKFLOW_STEP  - the invocation context carries a truthy ``functionName``
4. BASIC          - anything else
"""

from typing import Any, Mapping

from event_wrapper.logic.context import context_fields
from event_wrapper.models.event_source import EventSource

HTTP_METHOD_FIELD = 'httpMethod'
DETAIL_TYPE_FIELD = 'detail-type'
SCHEDULED_EVENT_DETAIL_TYPE = 'Scheduled Event'
FUNCTION_NAME_FIELD = 'functionName'


def is_http_event(event: Any) -> bool:
    return isinstance(event, Mapping) and bool(event.get(HTTP_METHOD_FIELD))


def is_scheduled_event(event: Any) -> bool:
    return isinstance(event, Mapping) and event.get(DETAIL_TYPE_FIELD) == SCHEDULED_EVENT_DETAIL_TYPE


def is_workflow_context(context: Any) -> bool:
    return bool(context_fields(context).get(FUNCTION_NAME_FIELD))


def classify(event: Any, context: Any = None) -> EventSource:
    """Tag the trigger that produced ``event``. Never raises."""
    if is_http_event(event):
        return EventSource.HTTP
    if is_scheduled_event(event):
        return EventSource.CRON
    if is_workflow_context(context):
        return EventSource.WORKFLOW_STEP
    return EventSource.BASIC
