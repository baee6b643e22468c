"""Editing session owning one template draft."""

from __future__ import annotations

import logging
from dataclasses import replace

from app.application.use_cases.questions import (
    add_question,
    move_question,
    move_question_by_id,
    remove_question,
    update_question,
)
from app.domain.entities import InquiryTemplate, Question
from app.domain.exceptions import SubmissionInProgressError
from app.infrastructure.inquiry_template_api import InquiryTemplateApi
from app.infrastructure.notifications import NotificationSink

from .descriptions import DescriptionProposal, apply_description, propose_description
from .generate_questions import add_required_questions, apply_type_selection
from .submit_template import SubmissionResult, submit_template

logger = logging.getLogger(__name__)


class TemplateEditSession:
    """Hold the draft being edited and the snapshot it was loaded from.

    ``original`` is ``None`` while creating a template. Every edit replaces
    ``draft`` with a new value; a failed submit leaves it untouched so the
    agent can fix the problem and try again.
    """

    def __init__(
        self,
        api: InquiryTemplateApi,
        notifier: NotificationSink,
        *,
        draft: InquiryTemplate,
        original: InquiryTemplate | None = None,
    ) -> None:
        self._api = api
        self._notifier = notifier
        self.draft = draft
        self.original = original
        self.pending_description: str | None = None
        self._submitting = False

    @classmethod
    def for_new_template(
        cls, api: InquiryTemplateApi, notifier: NotificationSink
    ) -> "TemplateEditSession":
        return cls(api, notifier, draft=InquiryTemplate(id=None, name="", description=""))

    @classmethod
    def for_existing(
        cls, api: InquiryTemplateApi, notifier: NotificationSink, template: InquiryTemplate
    ) -> "TemplateEditSession":
        draft = replace(template, questions=list(template.questions))
        return cls(api, notifier, draft=draft, original=template)

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def select_type(self, property_type: str, transaction_purpose: str) -> DescriptionProposal:
        """Regenerate the questions for a selection and propose a description.

        An automatically applicable default is written to the draft right
        away; one that would overwrite agent text is kept in
        ``pending_description`` until :meth:`accept_description` or
        :meth:`keep_description` is called.
        """

        self.draft = apply_type_selection(self.draft, property_type, transaction_purpose)
        proposal = propose_description(self.draft.description, property_type, transaction_purpose)
        self.pending_description = None
        if proposal.outcome == "auto_applied":
            self.draft = apply_description(self.draft, proposal.description)
        elif proposal.needs_confirmation:
            self.pending_description = proposal.candidate
        return proposal

    def accept_description(self) -> None:
        if self.pending_description is None:
            return
        self.draft = apply_description(self.draft, self.pending_description)
        self.pending_description = None

    def keep_description(self) -> None:
        self.pending_description = None

    def add_question(self, question: Question) -> None:
        self.draft = add_question(self.draft, question)

    def remove_question(self, question_id: str) -> None:
        self.draft = remove_question(self.draft, question_id)

    def update_question(self, question_id: str, patch: dict[str, object]) -> None:
        self.draft = update_question(self.draft, question_id, patch)

    def move_question(self, from_index: int, to_index: int) -> None:
        self.draft = replace(
            self.draft, questions=move_question(self.draft.questions, from_index, to_index)
        )

    def move_question_by_id(self, question_id: str, target_id: str) -> None:
        self.draft = replace(
            self.draft, questions=move_question_by_id(self.draft.questions, question_id, target_id)
        )

    def add_required_questions(self) -> None:
        self.draft = add_required_questions(self.draft)

    def submit(self) -> SubmissionResult:
        """Submit the draft, refusing to start while another submit is running.

        Raises:
            SubmissionInProgressError: If a submit is already in flight.
        """

        if self._submitting:
            raise SubmissionInProgressError("이미 저장 중입니다. 잠시 후 다시 시도해주세요.")
        self._submitting = True
        try:
            result = submit_template(
                self._api, self._notifier, draft=self.draft, original=self.original
            )
        finally:
            self._submitting = False

        if result.changed:
            logger.info("Template %s saved", result.template.id or "<new>")
            self.original = result.template
            self.draft = replace(result.template, questions=list(result.template.questions))
        return result


__all__ = ["TemplateEditSession"]
