"""Collect the notifications produced while handling a single action."""

from __future__ import annotations

from app.domain.entities import Notification, NotificationSeverity

from .publisher import NotificationPublisher


class NotificationBuffer:
    """Notification sink that forwards to a publisher and keeps a copy."""

    def __init__(self, publisher: NotificationPublisher | None = None) -> None:
        self._publisher = publisher or NotificationPublisher()
        self.notifications: list[Notification] = []

    def notify(self, message: str, severity: NotificationSeverity = "info") -> None:
        self.notifications.append(self._publisher.notify(message, severity))

    @property
    def messages(self) -> list[str]:
        return [notification.message for notification in self.notifications]


__all__ = ["NotificationBuffer"]
