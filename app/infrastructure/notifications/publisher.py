"""Deliver user-facing notifications to logging and registered listeners."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from app.domain.entities import NOTIFICATION_SEVERITIES, Notification, NotificationSeverity

logger = logging.getLogger(__name__)

NotificationListener = Callable[[Notification], None]

_LOG_LEVELS: dict[str, int] = {
    "success": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class NotificationSink(Protocol):
    """Anything able to show a message to the agent."""

    def notify(self, message: str, severity: NotificationSeverity) -> object: ...


class NotificationPublisher:
    """Log notifications and hand them to every subscribed listener."""

    def __init__(self) -> None:
        self._listeners: list[NotificationListener] = []

    def subscribe(self, listener: NotificationListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: NotificationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, message: str, severity: NotificationSeverity = "info") -> Notification:
        """Publish ``message`` with ``severity``.

        Raises:
            ValueError: If ``severity`` is not a known notification severity.
        """

        if severity not in NOTIFICATION_SEVERITIES:
            raise ValueError(f"Unknown notification severity: {severity}")

        notification = Notification(message=message, severity=severity)
        logger.log(_LOG_LEVELS[severity], "[%s] %s", severity, message)
        for listener in list(self._listeners):
            listener(notification)
        return notification


notification_publisher = NotificationPublisher()


__all__ = [
    "NotificationListener",
    "NotificationPublisher",
    "NotificationSink",
    "notification_publisher",
]
