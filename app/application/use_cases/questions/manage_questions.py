"""Use cases for adding, removing and editing template questions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from typing import Any
from uuid import uuid4

from app.domain.entities import TYPE_MARKER_LABEL, InquiryTemplate, Question, QuestionVariant
from app.domain.exceptions import (
    DuplicateQuestionError,
    QuestionNotFoundError,
    StructuralInconsistencyError,
)

from .ordering import renumber

_PATCHABLE_FIELDS = frozenset({"label", "variant", "is_required", "options"})
_SECOND_MARKER_MESSAGE = "유형 질문은 하나만 존재할 수 있습니다."


def generate_question_id() -> str:
    """Return a fresh identifier for a client-side question."""

    return str(uuid4())


def normalize_options(
    variant: QuestionVariant, options: Iterable[str] | None
) -> tuple[str, ...] | None:
    """Return ``options`` shaped for ``variant``.

    Variants without options always get ``None``; the others keep the values
    as given (blank entries are reported by the validation gate).
    """

    if not variant.keeps_options:
        return None
    if options is None:
        return ()
    return tuple(options)


def new_question(
    label: str,
    variant: QuestionVariant | str,
    *,
    is_required: bool = False,
    options: Iterable[str] | None = None,
) -> Question:
    """Build a question with a fresh identifier and a temporary order."""

    resolved = QuestionVariant(variant)
    return Question(
        id=generate_question_id(),
        label=label,
        variant=resolved,
        is_required=is_required,
        options=normalize_options(resolved, options),
        order=0,
    )


def copy_questions(questions: Sequence[Question]) -> list[Question]:
    """Return copies of ``questions`` carrying new identities."""

    return renumber(replace(question, id=generate_question_id()) for question in questions)


def add_question(template: InquiryTemplate, question: Question) -> InquiryTemplate:
    """Append ``question`` at the end of ``template``.

    A repeated id is a structural fault, so it raises a
    :class:`StructuralInconsistencyError` subclass rather than a validation error.

    Raises:
        DuplicateQuestionError: If a question with the same id already exists.
        StructuralInconsistencyError: If ``question`` is a second type marker.
    """

    if any(existing.id == question.id for existing in template.questions):
        raise DuplicateQuestionError(question.id)
    if question.is_type_marker and template.type_marker is not None:
        raise StructuralInconsistencyError(_SECOND_MARKER_MESSAGE)

    appended = question.with_order(len(template.questions) + 1)
    return replace(template, questions=[*template.questions, appended])


def remove_question(template: InquiryTemplate, question_id: str) -> InquiryTemplate:
    """Remove ``question_id`` and renumber the remaining questions.

    Removing the type marker also clears the derived template type, so the
    caller knows the generator has to be run again.

    Raises:
        QuestionNotFoundError: If the template has no such question.
    """

    removed: Question | None = None
    remaining: list[Question] = []
    for question in template.questions:
        if removed is None and question.id == question_id:
            removed = question
            continue
        remaining.append(question)

    if removed is None:
        raise QuestionNotFoundError(question_id)

    updated = replace(template, questions=renumber(remaining))
    if removed.is_type_marker:
        updated.type = None
        updated.type_seeded = False
    return updated


def update_question(
    template: InquiryTemplate, question_id: str, patch: Mapping[str, Any]
) -> InquiryTemplate:
    """Merge ``patch`` into the question identified by ``question_id``.

    Only ``label``, ``variant``, ``is_required`` and ``options`` can change;
    the position of the question is preserved.

    Raises:
        QuestionNotFoundError: If the template has no such question.
        ValueError: If ``patch`` contains fields that cannot be edited.
        StructuralInconsistencyError: If the new label would add a second
            type marker.
    """

    unknown = set(patch) - _PATCHABLE_FIELDS
    if unknown:
        raise ValueError(
            "수정할 수 없는 질문 필드입니다: " + ", ".join(sorted(unknown))
        )

    updated_questions: list[Question] = []
    found = False
    for question in template.questions:
        if question.id != question_id:
            updated_questions.append(question)
            continue
        found = True
        if (
            patch.get("label") == TYPE_MARKER_LABEL
            and not question.is_type_marker
            and template.type_marker is not None
        ):
            raise StructuralInconsistencyError(_SECOND_MARKER_MESSAGE)
        variant = QuestionVariant(patch.get("variant", question.variant))
        options = patch["options"] if "options" in patch else question.options
        updated_questions.append(
            replace(
                question,
                label=patch.get("label", question.label),
                variant=variant,
                is_required=bool(patch.get("is_required", question.is_required)),
                options=normalize_options(variant, options),
            )
        )

    if not found:
        raise QuestionNotFoundError(question_id)

    return replace(template, questions=updated_questions)


__all__ = [
    "add_question",
    "copy_questions",
    "generate_question_id",
    "new_question",
    "normalize_options",
    "remove_question",
    "update_question",
]
