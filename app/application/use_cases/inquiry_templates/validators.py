"""Validation gate run before an inquiry template is submitted."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities import InquiryTemplate
from app.domain.exceptions import TemplateValidationError

from .descriptions import is_blank_markup
from .question_catalog import MANDATORY_LABELS

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class ValidationResult:
    """Every problem found in a template, keyed by field."""

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_template(template: InquiryTemplate) -> ValidationResult:
    """Collect all validation errors for ``template``.

    The checks never stop at the first problem so the editor can show every
    message at once.
    """

    errors: dict[str, str] = {}

    name = (template.name or "").strip()
    if not name:
        errors["name"] = "템플릿 이름을 입력해주세요."
    elif len(name) > MAX_NAME_LENGTH:
        errors["name"] = f"이름은 {MAX_NAME_LENGTH}자 이내로 입력해주세요."

    if is_blank_markup(template.description):
        errors["description"] = "템플릿 설명을 입력해주세요."

    if not template.questions:
        errors["questions"] = "최소 1개 이상의 질문을 추가해주세요."

    for index, question in enumerate(template.questions):
        if not (question.label or "").strip():
            errors[f"questions[{index}].label"] = (
                f"{index + 1}번째 질문의 레이블을 입력해주세요."
            )
        if question.variant.requires_options:
            options = question.options or ()
            if not options or any(not option.strip() for option in options):
                label = question.label.strip() or f"{index + 1}번째 질문"
                errors[f"questions[{index}].options"] = (
                    f"'{label}' 질문의 옵션을 모두 입력해주세요."
                )

    if not template.has_type_selection and template.type_marker is None:
        errors["type"] = "문의 유형과 거래 목적을 선택해주세요."

    labels = {question.label.strip() for question in template.questions}
    missing = [label for label in MANDATORY_LABELS if label not in labels]
    if missing:
        errors["required_questions"] = "필수 질문이 누락되었습니다: " + ", ".join(missing)

    return ValidationResult(errors=errors)


def ensure_valid_template(template: InquiryTemplate) -> None:
    """Raise :class:`TemplateValidationError` when ``template`` is not valid."""

    result = validate_template(template)
    if not result.ok:
        raise TemplateValidationError(result.errors)


__all__ = [
    "MAX_NAME_LENGTH",
    "ValidationResult",
    "ensure_valid_template",
    "validate_template",
]
