"""
Centralized observability utilities for the event wrapper.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection shared by every pipeline stage.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Metrics namespace for wrapper KPIs
METRICS_NAMESPACE = 'LambdaEventWrapper'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger(service='lambda-event-wrapper')

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "True"
tracer: Tracer = Tracer(service='lambda-event-wrapper')

# Namespace and service name can be overridden by environment variables:
# - POWERTOOLS_METRICS_NAMESPACE
# - POWERTOOLS_SERVICE_NAME
metrics = Metrics(namespace=METRICS_NAMESPACE)
