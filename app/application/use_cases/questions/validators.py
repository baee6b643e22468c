"""Structural checks for question sequences."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import Question
from app.domain.exceptions import DuplicateQuestionError, StructuralInconsistencyError


def ensure_question_structure(questions: Sequence[Question]) -> None:
    """Raise :class:`StructuralInconsistencyError` when ``questions`` is malformed.

    The checks cover duplicated identifiers, more than one type marker, a
    marker that does not carry exactly one option and ``order`` values that do
    not form ``1..N`` in display order.
    """

    seen: set[str] = set()
    for question in questions:
        if question.id in seen:
            raise DuplicateQuestionError(question.id)
        seen.add(question.id)

    markers = [question for question in questions if question.is_type_marker]
    if len(markers) > 1:
        raise StructuralInconsistencyError("유형 질문이 두 개 이상 존재합니다.")
    if markers and len(markers[0].options or ()) != 1:
        raise StructuralInconsistencyError("유형 질문에는 정확히 하나의 옵션이 필요합니다.")

    orders = [question.order for question in questions]
    if orders != list(range(1, len(questions) + 1)):
        raise StructuralInconsistencyError(
            f"질문 순서가 올바르지 않습니다: {orders}"
        )


__all__ = ["ensure_question_structure"]
