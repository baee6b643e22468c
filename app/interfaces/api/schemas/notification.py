"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import NOTIFICATION_SEVERITIES


class NotificationRead(BaseModel):
    """Notification raised while the request was handled."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    message: str
    severity: str = Field(..., description="success, error, warning o info")
    created_at: datetime = Field(..., alias="createdAt")

    @field_validator("severity")
    @classmethod
    def _known_severity(cls, value: str) -> str:
        if value not in NOTIFICATION_SEVERITIES:
            raise ValueError(f"Unknown notification severity: {value}")
        return value


__all__ = ["NotificationRead"]
