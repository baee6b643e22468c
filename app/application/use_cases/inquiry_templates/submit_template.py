"""Use case for saving a new or edited inquiry template."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.application.use_cases.questions import ensure_question_structure
from app.domain.entities import InquiryTemplate
from app.domain.exceptions import InquiryTemplateApiError
from app.infrastructure.inquiry_template_api import InquiryTemplateApi
from app.infrastructure.inquiry_template_wire import patch_to_request, template_to_request
from app.infrastructure.notifications import NotificationSink

from .diff import diff_templates, is_noop_patch
from .validators import ensure_valid_template

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "템플릿이 성공적으로 생성되었습니다."
UPDATED_MESSAGE = "템플릿이 성공적으로 수정되었습니다."
NO_CHANGES_MESSAGE = "변경된 내용이 없습니다."
SAVE_FAILED_MESSAGE = "템플릿 저장에 실패했습니다."


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submit action."""

    template: InquiryTemplate
    changed: bool
    patch: dict[str, Any] | None = None


def submit_template(
    api: InquiryTemplateApi,
    notifier: NotificationSink,
    *,
    draft: InquiryTemplate,
    original: InquiryTemplate | None = None,
) -> SubmissionResult:
    """Validate ``draft`` and send it to the template API.

    With an ``original`` the draft is compared against it and only the
    changed fields are sent; an empty change set skips the network call.

    Raises:
        TemplateValidationError: If the draft does not pass the validation gate.
        StructuralInconsistencyError: If the question list is malformed.
        InquiryTemplateApiError: If the API call fails or is rejected.
    """

    ensure_valid_template(draft)
    ensure_question_structure(draft.questions)

    template_id = draft.id or (original.id if original else None)
    patch: dict[str, Any] | None = None

    if template_id is None:
        response = api.create(template_to_request(draft))
        success_message = CREATED_MESSAGE
    else:
        if original is not None:
            patch = diff_templates(original, draft)
            if is_noop_patch(patch):
                notifier.notify(NO_CHANGES_MESSAGE, "info")
                return SubmissionResult(template=original, changed=False, patch=patch)
            payload = patch_to_request(patch)
        else:
            payload = template_to_request(draft)
        logger.debug("Updating template %s with fields %s", template_id, sorted(payload))
        response = api.update(template_id, payload)
        success_message = UPDATED_MESSAGE

    if not response.success:
        message = response.error or SAVE_FAILED_MESSAGE
        notifier.notify(message, "error")
        raise InquiryTemplateApiError(message, code=response.code)

    notifier.notify(success_message, "success")
    saved = response.data if response.data is not None else draft
    return SubmissionResult(template=saved, changed=True, patch=patch)


__all__ = [
    "CREATED_MESSAGE",
    "NO_CHANGES_MESSAGE",
    "SAVE_FAILED_MESSAGE",
    "SubmissionResult",
    "UPDATED_MESSAGE",
    "submit_template",
]
