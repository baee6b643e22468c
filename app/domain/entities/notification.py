"""Domain entity representing a user-facing notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, get_args

NotificationSeverity = Literal["success", "error", "warning", "info"]
NOTIFICATION_SEVERITIES: tuple[str, ...] = get_args(NotificationSeverity)


@dataclass(frozen=True)
class Notification:
    """Feedback message shown to the agent after an action."""

    message: str
    severity: NotificationSeverity
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = ["Notification", "NotificationSeverity", "NOTIFICATION_SEVERITIES"]
