"""
Outbound events emitted by the wrapper.

- notification_publisher: best-effort SNS notification of successful results
"""

from event_wrapper.events.notification_publisher import (
    NotificationPublishError,
    SnsNotificationPublisher,
    notify,
)

__all__ = [
    "NotificationPublishError",
    "SnsNotificationPublisher",
    "notify",
]
