"""
Invocation context projection.

Direct callers and tests hand in plain mappings, while the Lambda runtime hands
in a context object. Both are reduced to a plain dict so they can be merged
into the normalized input.
"""

from typing import Any, Dict, Mapping

# Lambda context attribute -> key exposed to the business function
CONTEXT_ATTRIBUTES = {
    'function_name': 'functionName',
    'function_version': 'functionVersion',
    'invoked_function_arn': 'invokedFunctionArn',
    'memory_limit_in_mb': 'memoryLimitInMB',
    'aws_request_id': 'awsRequestId',
    'log_group_name': 'logGroupName',
    'log_stream_name': 'logStreamName',
}


def context_fields(context: Any) -> Dict[str, Any]:
    """Return the invocation context as a flat dict."""
    if context is None:
        return {}
    if isinstance(context, Mapping):
        return dict(context)

    fields = {}
    for attribute, key in CONTEXT_ATTRIBUTES.items():
        value = getattr(context, attribute, None)
        if value is not None:
            fields[key] = value
    return fields
