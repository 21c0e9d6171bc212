"""
Echo Lambda Function - example entry point built on the event wrapper.

The business function only sees the normalized input and answers with a
``{code, body}`` result; the wrapper takes care of API Gateway, schedule,
Step Functions and direct invocations.
"""

import os
import sys
from typing import Any, Dict

# Add the event_wrapper package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from event_wrapper import wrap
from event_wrapper.handlers.utils.observability import logger, metrics


def echo(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return the normalized input unchanged."""
    logger.info("Echoing request", extra={"keys": sorted(data)})
    return {'code': 200, 'body': data}


wrapped_echo = wrap(echo)


@metrics.log_metrics
def lambda_handler(event: Dict[str, Any], context: Any) -> Any:
    """
    Lambda function entry point for the echo function.

    Args:
        event: Lambda event payload (any supported trigger source)
        context: Lambda context object

    Returns:
        Response shaped for the trigger source
    """
    return wrapped_echo(event, context)
