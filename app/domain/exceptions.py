"""Errors raised by the inquiry template engine."""

from __future__ import annotations

from collections.abc import Mapping


class TemplateValidationError(ValueError):
    """Raised when a template draft cannot be submitted."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()) or "템플릿이 유효하지 않습니다.")


class QuestionNotFoundError(ValueError):
    """Raised when a question id does not exist in the template."""

    def __init__(self, question_id: str) -> None:
        self.question_id = question_id
        super().__init__(f"질문을 찾을 수 없습니다: {question_id}")


class StructuralInconsistencyError(RuntimeError):
    """Raised when the question list breaks an invariant it must never break."""


class DuplicateQuestionError(StructuralInconsistencyError):
    """Raised when two questions share the same identifier."""

    def __init__(self, question_id: str) -> None:
        self.question_id = question_id
        super().__init__(f"이미 존재하는 질문 식별자입니다: {question_id}")


class InquiryTemplateApiError(RuntimeError):
    """Raised when the template CRUD API rejects or fails a request."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        self.code = code
        super().__init__(message)


class TemplateNotFoundError(InquiryTemplateApiError):
    """Raised when the requested template does not exist on the server."""


class SubmissionInProgressError(RuntimeError):
    """Raised when a template is submitted while a previous submit is pending."""


__all__ = [
    "DuplicateQuestionError",
    "InquiryTemplateApiError",
    "QuestionNotFoundError",
    "StructuralInconsistencyError",
    "SubmissionInProgressError",
    "TemplateNotFoundError",
    "TemplateValidationError",
]
