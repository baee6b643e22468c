import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import logging

import pytest

import app.infrastructure.notifications as notifications
from app.infrastructure.notifications import NotificationBuffer, NotificationPublisher
from app.interfaces.api.schemas import NotificationRead


def test_publisher_fans_out_to_listeners():
    publisher = NotificationPublisher()
    received = []
    publisher.subscribe(received.append)
    publisher.subscribe(received.append)

    notification = publisher.notify("저장되었습니다.", "success")

    assert received == [notification]
    publisher.unsubscribe(received.append)
    publisher.notify("무시", "info")
    assert received == [notification]


def test_unknown_severity_is_rejected():
    with pytest.raises(ValueError):
        NotificationPublisher().notify("?", "critical")


def test_notifications_are_logged_with_mapped_level(caplog):
    publisher = NotificationPublisher()

    with caplog.at_level(logging.INFO, logger="app.infrastructure.notifications.publisher"):
        publisher.notify("실패했습니다.", "error")
        publisher.notify("주의", "warning")

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.ERROR, logging.WARNING]


def test_buffer_keeps_notifications_of_one_action():
    buffer = NotificationBuffer(publisher=NotificationPublisher())

    buffer.notify("하나", "info")
    buffer.notify("둘", "success")

    assert buffer.messages == ["하나", "둘"]
    serialized = NotificationRead.model_validate(buffer.notifications[1]).model_dump(by_alias=True)
    assert serialized["severity"] == "success"
    assert "createdAt" in serialized


def test_package_exports_only_live_helpers():
    assert sorted(notifications.__all__) == [
        "NotificationBuffer",
        "NotificationListener",
        "NotificationPublisher",
        "NotificationSink",
        "notification_publisher",
    ]
    for name in notifications.__all__:
        assert hasattr(notifications, name)
