"""FastAPI dependency utilities."""

from collections.abc import Iterator

from app.infrastructure.inquiry_template_api import InquiryTemplateApi, InquiryTemplateApiClient
from app.infrastructure.notifications import NotificationBuffer, notification_publisher


def get_inquiry_template_api() -> Iterator[InquiryTemplateApi]:
    """Yield a template API client bound to the configured backend."""

    with InquiryTemplateApiClient() as client:
        yield client


def get_notifier() -> NotificationBuffer:
    """Return a sink collecting the notifications of the current request."""

    return NotificationBuffer(publisher=notification_publisher)


__all__ = ["get_inquiry_template_api", "get_notifier"]
