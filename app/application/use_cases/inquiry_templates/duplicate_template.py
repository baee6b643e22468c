"""Use case to duplicate an existing inquiry template."""

from __future__ import annotations

from dataclasses import replace

from app.application.use_cases.questions import copy_questions
from app.domain.entities import InquiryTemplate
from app.infrastructure.inquiry_template_api import InquiryTemplateApi
from app.infrastructure.notifications import NotificationSink

from .load_template import load_template
from .submit_template import SubmissionResult, submit_template

COPY_SUFFIX = " (복사본)"


def build_template_copy(source: InquiryTemplate, *, name: str | None = None) -> InquiryTemplate:
    """Return an unsaved copy of ``source`` whose questions have new identities."""

    return replace(
        source,
        id=None,
        name=name if name is not None else f"{source.name}{COPY_SUFFIX}",
        questions=copy_questions(source.questions),
        share_token=None,
        created_at=None,
        updated_at=None,
    )


def duplicate_template(
    api: InquiryTemplateApi,
    notifier: NotificationSink,
    *,
    template_id: str,
    name: str | None = None,
) -> SubmissionResult:
    """Duplicate ``template_id`` and save the copy as a new template."""

    source = load_template(api, notifier, template_id=template_id)
    return submit_template(api, notifier, draft=build_template_copy(source, name=name))


__all__ = ["COPY_SUFFIX", "build_template_copy", "duplicate_template"]
