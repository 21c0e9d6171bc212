"""
Trigger source tags.

Each Lambda trigger is tagged with exactly one ``EventSource``; the tag selects
both the normalization strategy and the response encoding.
"""

from enum import Enum


class EventSource(str, Enum):
    """Origin system that produced the invocation."""

    HTTP = "http"
    CRON = "cron"
    WORKFLOW_STEP = "stepFunctions"
    BASIC = "basic"
