"""Use case for deleting inquiry templates."""

from __future__ import annotations

from app.domain.exceptions import InquiryTemplateApiError
from app.infrastructure.inquiry_template_api import InquiryTemplateApi
from app.infrastructure.notifications import NotificationSink

DELETED_MESSAGE = "문의 템플릿이 성공적으로 삭제되었습니다."
DELETE_FAILED_MESSAGE = "문의 템플릿 삭제에 실패했습니다."


def delete_template(
    api: InquiryTemplateApi, notifier: NotificationSink, *, template_id: str
) -> None:
    """Delete ``template_id``; there is no way to restore it afterwards."""

    response = api.delete(template_id)
    if not response.success:
        message = response.error or DELETE_FAILED_MESSAGE
        notifier.notify(message, "error")
        raise InquiryTemplateApiError(message, code=response.code)
    notifier.notify(DELETED_MESSAGE, "success")


__all__ = ["DELETED_MESSAGE", "DELETE_FAILED_MESSAGE", "delete_template"]
