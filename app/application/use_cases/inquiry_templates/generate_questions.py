"""Use cases that seed inquiry templates from a property type selection."""

from __future__ import annotations

import logging
from dataclasses import replace

from app.application.use_cases.questions import (
    ensure_question_structure,
    generate_question_id,
    renumber,
)
from app.domain.entities import TYPE_MARKER_LABEL, InquiryTemplate, Question, QuestionVariant
from app.domain.exceptions import StructuralInconsistencyError

from .question_catalog import (
    COMMON_QUESTIONS,
    TYPE_SPECIFIC_QUESTIONS,
    build_template_type,
)

logger = logging.getLogger(__name__)


def generate_type_field(property_type: str, transaction_purpose: str) -> Question:
    """Return the hidden question that records the template type.

    The question is placed at ``order=0``; callers renumber the full list.
    """

    return Question(
        id=generate_question_id(),
        label=TYPE_MARKER_LABEL,
        variant=QuestionVariant.SELECT,
        is_required=True,
        options=(build_template_type(property_type, transaction_purpose),),
        order=0,
    )


def generate_default_questions(
    property_type: str, transaction_purpose: str
) -> list[Question]:
    """Return the common questions followed by the type specific ones.

    Unknown combinations are valid and simply receive the common questions.
    """

    template_type = build_template_type(property_type, transaction_purpose)
    specialized = TYPE_SPECIFIC_QUESTIONS.get(template_type, ())
    blueprints = (*COMMON_QUESTIONS, *specialized)
    return [blueprint.build(order=index + 1) for index, blueprint in enumerate(blueprints)]


def generate_template_questions(
    property_type: str, transaction_purpose: str
) -> list[Question]:
    """Return the full seeded list: type marker first, then the defaults."""

    questions = [
        generate_type_field(property_type, transaction_purpose),
        *generate_default_questions(property_type, transaction_purpose),
    ]
    return renumber(questions)


def apply_type_selection(
    template: InquiryTemplate, property_type: str, transaction_purpose: str
) -> InquiryTemplate:
    """Replace every question of ``template`` with the generated set.

    This discards manual edits to the question list; asking the agent for
    confirmation is up to the caller.

    Raises:
        ValueError: If either selection value is blank.
        StructuralInconsistencyError: If the generated list has no type marker.
    """

    property_type = (property_type or "").strip()
    transaction_purpose = (transaction_purpose or "").strip()
    if not property_type or not transaction_purpose:
        raise ValueError("문의 유형과 거래 목적을 모두 선택해주세요.")

    questions = generate_template_questions(property_type, transaction_purpose)
    ensure_question_structure(questions)
    template_type = build_template_type(property_type, transaction_purpose)
    marker = next((question for question in questions if question.is_type_marker), None)
    if marker is None or marker.options != (template_type,):
        raise StructuralInconsistencyError("생성된 질문 목록에 유형 질문이 없습니다.")

    if template.questions:
        logger.info(
            "Replacing %d questions of template %s with the %s defaults",
            len(template.questions),
            template.id or "<new>",
            template_type,
        )

    return replace(
        template,
        questions=questions,
        property_type=property_type,
        transaction_purpose=transaction_purpose,
        type=template_type,
        type_seeded=True,
    )


def add_required_questions(template: InquiryTemplate) -> InquiryTemplate:
    """Append the common questions that ``template`` does not contain yet."""

    present = {question.label for question in template.questions}
    missing = [blueprint.build() for blueprint in COMMON_QUESTIONS if blueprint.label not in present]
    if not missing:
        return template
    return replace(template, questions=renumber([*template.questions, *missing]))


__all__ = [
    "add_required_questions",
    "apply_type_selection",
    "generate_default_questions",
    "generate_template_questions",
    "generate_type_field",
]
