"""Compute the partial update sent when an edited template is saved."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from app.domain.entities import InquiryTemplate, Question

SCALAR_FIELDS: tuple[str, ...] = ("name", "description", "is_active", "type")
_IDENTIFYING_KEYS = frozenset({"id"})


def _question_signature(question: Question) -> tuple[object, ...]:
    # Option order is ignored; repeated entries still count.
    return (
        question.label,
        question.variant,
        question.is_required,
        question.order,
        tuple(sorted(question.options or ())),
    )


def questions_changed(original: Sequence[Question], draft: Sequence[Question]) -> bool:
    """Return ``True`` when the two ordered question lists differ."""

    if len(original) != len(draft):
        return True
    return any(
        _question_signature(before) != _question_signature(after)
        for before, after in zip(original, draft)
    )


def diff_templates(original: InquiryTemplate, draft: InquiryTemplate) -> dict[str, Any]:
    """Return only the fields of ``draft`` that differ from ``original``.

    A changed question list is returned whole; the update API replaces the
    questions of a template rather than patching them one by one.
    """

    patch: dict[str, Any] = {}
    for field_name in SCALAR_FIELDS:
        value = getattr(draft, field_name)
        if value != getattr(original, field_name):
            patch[field_name] = value

    if questions_changed(original.questions, draft.questions):
        patch["questions"] = list(draft.questions)

    return patch


def is_noop_patch(patch: Mapping[str, Any]) -> bool:
    """Return ``True`` when ``patch`` carries nothing besides identifying keys."""

    return not (set(patch) - _IDENTIFYING_KEYS)


__all__ = ["SCALAR_FIELDS", "diff_templates", "is_noop_patch", "questions_changed"]
