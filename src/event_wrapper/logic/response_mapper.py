"""
Response mapper.

Encodes an execution outcome in the shape the trigger source expects.

HTTP callers always get an API Gateway proxy response, failures included.
Workflow steps, scheduled and basic invocations have no error envelope of
their own, so a failure is re-raised to the Lambda runtime.
"""

import json
from typing import Any, Dict, Mapping, MutableMapping, Optional

from event_wrapper.handlers.utils.observability import logger as default_logger
from event_wrapper.models.event_source import EventSource
from event_wrapper.models.outcome import ExecutionOutcome, Failure

STATUS_CODE_FIELD = 'statusCode'
CODE_FIELD = 'code'
BODY_FIELD = 'body'
HEADERS_FIELD = 'headers'
STEP_STATE_FIELD = '@state'
STEP_NAME_FIELD = 'Name'
STEP_OUTPUT_FIELD = '@output'


class StepDescriptorError(KeyError):
    """Raised when a workflow step event does not name its step."""


def to_json(value: Any) -> str:
    return json.dumps(value, default=str)


def body_of(value: Any) -> Any:
    """Return the ``body`` field of a ``{code, body}`` result, else the value itself."""
    if isinstance(value, Mapping) and BODY_FIELD in value:
        return value[BODY_FIELD]
    return value


def _status_code(value: Any) -> Optional[int]:
    if not isinstance(value, Mapping):
        return None
    code = value.get(CODE_FIELD)
    if isinstance(code, bool) or not isinstance(code, int) or not code:
        return None
    return code


def _with_headers(response: Mapping[str, Any], headers: Optional[Dict[str, str]]) -> Dict[str, Any]:
    if not headers:
        return response
    return {**response, HEADERS_FIELD: {**(response.get(HEADERS_FIELD) or {}), **headers}}


def map_http_response(outcome: ExecutionOutcome, cors_headers: Optional[Dict[str, str]] = None,
                      logger=default_logger) -> Dict[str, Any]:
    """
    Build the API Gateway proxy response.

    Precedence on success: proxy passthrough (value has ``statusCode``), plain
    200 (value has no ``code``), then ``code``/``body`` wrapping.
    """
    if isinstance(outcome, Failure):
        logger.error({'message': 'Returning HTTP error response', 'error': str(outcome.error)})
        return _with_headers(
            {STATUS_CODE_FIELD: 500, BODY_FIELD: to_json({'message': str(outcome.error)})},
            cors_headers,
        )

    value = outcome.value
    if isinstance(value, Mapping) and STATUS_CODE_FIELD in value:
        return _with_headers(value, cors_headers)

    code = _status_code(value)
    try:
        if code is None:
            response = {STATUS_CODE_FIELD: 200, BODY_FIELD: to_json(value)}
        else:
            response = {STATUS_CODE_FIELD: code, BODY_FIELD: to_json(value.get(BODY_FIELD))}
    except ValueError as exc:
        # circular references
        return map_http_response(Failure(exc), cors_headers, logger=logger)
    return _with_headers(response, cors_headers)


def map_workflow_step_response(event: MutableMapping[str, Any], outcome: ExecutionOutcome) -> MutableMapping[str, Any]:
    """Record the result under ``@output.<step name>`` and hand the event back to the state machine."""
    if isinstance(outcome, Failure):
        raise outcome.error

    state = event.get(STEP_STATE_FIELD) if isinstance(event, Mapping) else None
    if not isinstance(state, Mapping) or not state.get(STEP_NAME_FIELD):
        raise StepDescriptorError(f"Workflow event has no '{STEP_STATE_FIELD}.{STEP_NAME_FIELD}' step descriptor")

    output = event.get(STEP_OUTPUT_FIELD)
    if not isinstance(output, MutableMapping):
        output = event[STEP_OUTPUT_FIELD] = {}
    output[state[STEP_NAME_FIELD]] = body_of(outcome.value)
    return event


def map_basic_response(outcome: ExecutionOutcome) -> Any:
    if isinstance(outcome, Failure):
        raise outcome.error
    return body_of(outcome.value)


def map_response(source: EventSource, event: Any, outcome: ExecutionOutcome,
                 cors_headers: Optional[Dict[str, str]] = None, logger=default_logger) -> Any:
    """
    Encode ``outcome`` for the trigger tagged ``source``.

    Args:
        source: Tag produced by the classifier
        event: Original trigger event, mutated for workflow steps
        outcome: Result of the invocation
        cors_headers: Headers merged into HTTP responses, if any
        logger: Receives HTTP error responses

    Returns:
        The response value for the Lambda runtime

    Raises:
        The business error for non-HTTP sources, StepDescriptorError for a
        workflow event without a step name
    """
    if source == EventSource.HTTP:
        return map_http_response(outcome, cors_headers, logger=logger)
    if source == EventSource.WORKFLOW_STEP:
        return map_workflow_step_response(event, outcome)
    return map_basic_response(outcome)
