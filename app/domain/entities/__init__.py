"""Domain entities exposed by the application."""

from .inquiry_template import InquiryTemplate, build_template_type, split_template_type
from .notification import NOTIFICATION_SEVERITIES, Notification, NotificationSeverity
from .question import TYPE_MARKER_LABEL, Question, QuestionVariant

__all__ = [
    "InquiryTemplate",
    "Notification",
    "NotificationSeverity",
    "NOTIFICATION_SEVERITIES",
    "Question",
    "QuestionVariant",
    "TYPE_MARKER_LABEL",
    "build_template_type",
    "split_template_type",
]
