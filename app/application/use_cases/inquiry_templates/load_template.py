"""Use case for loading a template into the editor."""

from __future__ import annotations

from app.domain.entities import InquiryTemplate
from app.domain.exceptions import InquiryTemplateApiError, TemplateNotFoundError
from app.infrastructure.inquiry_template_api import InquiryTemplateApi
from app.infrastructure.notifications import NotificationSink

LOAD_FAILED_MESSAGE = "템플릿을 불러오는데 실패했습니다."
NOT_FOUND_MESSAGE = "문의 템플릿을 찾을 수 없습니다."
NOT_FOUND_CODES = frozenset({"NOT_FOUND", "TEMPLATE_NOT_FOUND", "INQUIRY_TEMPLATE_NOT_FOUND"})


def load_template(
    api: InquiryTemplateApi, notifier: NotificationSink, *, template_id: str
) -> InquiryTemplate:
    """Fetch ``template_id`` with its questions sorted and renumbered.

    Raises:
        TemplateNotFoundError: If the server reports that the template is missing.
        InquiryTemplateApiError: If the template cannot be fetched.
    """

    response = api.get_by_id(template_id)
    if response.success and response.data is not None:
        return response.data

    if response.code in NOT_FOUND_CODES or (response.success and response.data is None):
        message = response.error or NOT_FOUND_MESSAGE
        notifier.notify(message, "error")
        raise TemplateNotFoundError(message, code=response.code)

    message = response.error or LOAD_FAILED_MESSAGE
    notifier.notify(message, "error")
    raise InquiryTemplateApiError(message, code=response.code)


__all__ = ["LOAD_FAILED_MESSAGE", "NOT_FOUND_CODES", "NOT_FOUND_MESSAGE", "load_template"]
