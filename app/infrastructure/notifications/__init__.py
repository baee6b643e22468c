"""Notification helpers for the infrastructure layer."""

from .buffer import NotificationBuffer
from .publisher import (
    NotificationListener,
    NotificationPublisher,
    NotificationSink,
    notification_publisher,
)

__all__ = [
    "NotificationBuffer",
    "NotificationListener",
    "NotificationPublisher",
    "NotificationSink",
    "notification_publisher",
]
