"""Use case for listing inquiry templates."""

from __future__ import annotations

from app.domain.exceptions import InquiryTemplateApiError
from app.infrastructure.inquiry_template_api import (
    InquiryTemplateApi,
    TemplateListFilter,
    TemplatePage,
)
from app.infrastructure.notifications import NotificationSink

LIST_FAILED_MESSAGE = "문의 템플릿 목록을 불러오는데 실패했습니다."


def list_templates(
    api: InquiryTemplateApi,
    notifier: NotificationSink,
    *,
    keyword: str | None = None,
    is_active: bool | None = None,
    page: int = 1,
) -> TemplatePage:
    """Return one page of templates matching the filter."""

    response = api.list(TemplateListFilter(page=page, keyword=keyword, is_active=is_active))
    if not response.success or response.data is None:
        message = response.error or LIST_FAILED_MESSAGE
        notifier.notify(message, "error")
        raise InquiryTemplateApiError(message, code=response.code)
    return response.data


__all__ = ["LIST_FAILED_MESSAGE", "list_templates"]
