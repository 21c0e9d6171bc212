"""
Event normalizer.

Turns any classified trigger into the single flat dict handed to the business
function. Later layers overwrite earlier ones on key collisions:

    source specific fields < path parameters < parsed body < context fields

Normalization never raises. An unparseable body or a query string value that
is not a map becomes ``{}``, and a workflow event whose ``@input.*`` keys cannot
be expanded is merged like a basic event. Every such fallback is logged.
"""

import base64
import binascii
import json
from typing import Any, Dict, Mapping, Optional

from event_wrapper.handlers.utils.observability import logger as default_logger
from event_wrapper.logic.context import context_fields
from event_wrapper.logic.path_utils import PathAssignmentError, set_path
from event_wrapper.models.event_source import EventSource

INPUT_PREFIX = '@input.'
BODY_FIELD = 'body'


def _event_fields(event: Any) -> Dict[str, Any]:
    return dict(event) if isinstance(event, Mapping) else {}


def normalize_basic(event: Any, context: Any) -> Dict[str, Any]:
    """Shallow merge of event and context fields, context wins."""
    return {**_event_fields(event), **context_fields(context)}


def expand_workflow_input(event: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild the nested structure described by the ``@input.<path>`` keys."""
    data: Dict[str, Any] = {}
    for key, value in event.items():
        if isinstance(key, str) and key.startswith(INPUT_PREFIX):
            set_path(data, key[len(INPUT_PREFIX):], value)
    return data


def normalize_workflow_step(event: Any, context: Any, logger=default_logger) -> Dict[str, Any]:
    try:
        data = expand_workflow_input(event)
    except (PathAssignmentError, AttributeError, TypeError) as exc:
        logger.error({
            'message': 'Could not expand workflow input, falling back to basic merge',
            'error': str(exc),
        })
        return normalize_basic(event, context)
    return {**data, **context_fields(context)}


def parse_multi_value_query_string_parameters(params: Optional[Mapping[str, Any]], logger=default_logger) -> Dict[str, Any]:
    """Collapse single-element value lists to their element, keep longer lists."""
    if not params:
        return {}
    if not isinstance(params, Mapping):
        logger.error({
            'message': 'Ignoring query string parameters that are not a map',
            'parameters_type': type(params).__name__,
        })
        return {}

    parsed = {}
    for name, values in params.items():
        if isinstance(values, (list, tuple)) and len(values) <= 1:
            parsed[name] = values[0] if values else None
        else:
            parsed[name] = values
    return parsed


def parse_body(body: Optional[str], is_base64_encoded: bool = False, logger=default_logger) -> Dict[str, Any]:
    """
    Parse a JSON request body.

    Args:
        body: Raw body text of the request, possibly base64 encoded
        is_base64_encoded: API Gateway flag for binary payloads
        logger: Receives the parse failure

    Returns:
        The parsed object, ``{}`` for an absent or unparseable body. A JSON
        value that is not an object is returned under the ``body`` key.
    """
    if not body:
        return {}

    try:
        if is_base64_encoded:
            body = base64.b64decode(body).decode('utf-8')
        parsed = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, ValueError, TypeError) as exc:
        logger.error({'message': 'Could not parse request body', 'error': str(exc)})
        return {}

    if isinstance(parsed, dict):
        return parsed
    return {BODY_FIELD: parsed}


def normalize_http(event: Mapping[str, Any], context: Any, logger=default_logger) -> Dict[str, Any]:
    return {
        **parse_multi_value_query_string_parameters(event.get('multiValueQueryStringParameters'), logger=logger),
        **_event_fields(event.get('pathParameters')),
        **parse_body(event.get('body'), bool(event.get('isBase64Encoded')), logger=logger),
        **context_fields(context),
    }


def normalize(source: EventSource, event: Any, context: Any = None, logger=default_logger) -> Dict[str, Any]:
    """Build the business function input for a trigger tagged ``source``."""
    if source == EventSource.HTTP:
        return normalize_http(event, context, logger=logger)
    if source == EventSource.WORKFLOW_STEP:
        return normalize_workflow_step(event, context, logger=logger)
    return normalize_basic(event, context)
