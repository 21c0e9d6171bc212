"""
Event wrapper - adapts a business function to every Lambda trigger source.

    handler = wrap(my_function)

``handler(event, context)`` is a regular Lambda entry point. Per invocation it
runs, strictly in order:

1. warm-up check (``serverless-plugin-warmup`` pings return immediately)
2. classify the trigger
3. normalize the event into a flat input dict
4. invoke the business function (value returning or callback style)
5. publish the successful result to SNS, when a topic is configured
6. map the outcome to the response shape of the trigger source

Configuration, logger and notification transport are instance state, so
several independently configured wrappers may live in the same process.
"""

import asyncio
from typing import Any, Callable, Mapping, Optional

from aws_lambda_powertools.metrics import MetricUnit

from event_wrapper.events.notification_publisher import SnsNotificationPublisher, notify
from event_wrapper.handlers.models.env_vars import WrapperEnvVars, get_wrapper_env_vars
from event_wrapper.handlers.utils.observability import logger as default_logger
from event_wrapper.handlers.utils.observability import metrics
from event_wrapper.logic.classifier import classify
from event_wrapper.logic.invoker import invoke
from event_wrapper.logic.normalizer import normalize
from event_wrapper.logic.response_mapper import map_response
from event_wrapper.models.event_source import EventSource
from event_wrapper.models.outcome import Success
from event_wrapper.security.cors import cors_headers, get_request_origin

WARMUP_SOURCE = 'serverless-plugin-warmup'
WARMUP_RESPONSE = 'Lambda is warm'


def is_warmup_event(event: Any) -> bool:
    return isinstance(event, Mapping) and event.get('source') == WARMUP_SOURCE


class EventWrapper:
    """Invocation pipeline around a single business function."""

    def __init__(
        self,
        fn: Callable[..., Any],
        env_vars: Optional[WrapperEnvVars] = None,
        logger: Any = None,
        publisher: Any = None,
    ):
        """
        Initialize the wrapper.

        Args:
            fn: Business function, ``fn(data)`` or ``fn(data, callback)``, sync or async
            env_vars: Explicit configuration, read from the environment when omitted
            logger: Object exposing ``error(entry)`` and ``debug(entry)``
            publisher: Notification transport exposing ``async publish(destination, message)``
        """
        self.fn = fn
        self.env_vars = env_vars if env_vars is not None else get_wrapper_env_vars()
        self.logger = logger or default_logger
        self.publisher = publisher or SnsNotificationPublisher(region_name=self.env_vars.AWS_REGION)

    @property
    def topic_arn(self) -> Optional[str]:
        return self.env_vars.NOTIFICATION_TOPIC_ARN

    def cors_headers_for(self, source: EventSource, event: Any):
        if source != EventSource.HTTP:
            return None
        return cors_headers(get_request_origin(event), self.env_vars.CORS_ALLOWED_ORIGINS)

    async def handle(self, event: Any, context: Any = None) -> Any:
        """Run the whole pipeline for one trigger and return its response."""
        if is_warmup_event(event):
            self.logger.debug({'message': 'Warm-up ping, skipping invocation'})
            metrics.add_metric(name="WarmupPing", unit=MetricUnit.Count, value=1)
            return WARMUP_RESPONSE

        source = classify(event, context)
        self.logger.debug({'message': 'Event received', 'event_source': source.value, 'event': event})

        data = normalize(source, event, context, logger=self.logger)
        self.logger.debug({'message': 'Event normalized', 'event_source': source.value, 'input': data})

        outcome = await invoke(self.fn, data, logger=self.logger)
        if isinstance(outcome, Success):
            metrics.add_metric(name="InvocationSuccess", unit=MetricUnit.Count, value=1)
        else:
            metrics.add_metric(name="InvocationFailure", unit=MetricUnit.Count, value=1)

        await notify(self.topic_arn, outcome, self.publisher, logger=self.logger)

        response = map_response(source, event, outcome, self.cors_headers_for(source, event), logger=self.logger)
        self.logger.debug({'message': 'Response mapped', 'event_source': source.value, 'response': response})
        return response

    def __call__(self, event: Any, context: Any = None) -> Any:
        return asyncio.run(self.handle(event, context))


def wrap(
    fn: Callable[..., Any],
    env_vars: Optional[WrapperEnvVars] = None,
    logger: Any = None,
    publisher: Any = None,
) -> EventWrapper:
    """
    Wrap ``fn`` into a Lambda handler.

    Example:
        def send_mail(data):
            return {'code': 202, 'body': mailer.send(**data)}

        lambda_handler = wrap(send_mail)
    """
    return EventWrapper(fn, env_vars=env_vars, logger=logger, publisher=publisher)
