"""Wire format exchanged with the remote inquiry template API."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.application.use_cases.questions import generate_question_id, sort_by_order
from app.domain.entities import InquiryTemplate, Question, QuestionVariant, split_template_type

_PATCH_ALIASES: dict[str, str] = {
    "name": "name",
    "description": "description",
    "is_active": "isActive",
    "type": "type",
    "questions": "questions",
}


class QuestionRequest(BaseModel):
    """Question as sent to the server; identifiers are never transmitted."""

    model_config = ConfigDict(populate_by_name=True)

    label: str
    variant: QuestionVariant = Field(alias="type")
    is_required: bool = Field(default=False, alias="isRequired")
    options: list[str] | None = None
    question_order: int = Field(default=0, alias="questionOrder")


class QuestionPayload(QuestionRequest):
    """Question as returned by the server."""

    id: str | None = None


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(default=1, alias="currentPage")
    total_pages: int = Field(default=0, alias="totalPages")
    total_elements: int = Field(default=0, alias="totalElements")
    size: int = 10


class InquiryTemplatePayload(BaseModel):
    """Template as returned by the server."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    type: str | None = None
    name: str = ""
    description: str = ""
    is_active: bool = Field(default=True, alias="isActive")
    share_token: str | None = Field(default=None, alias="shareToken")
    questions: list[QuestionPayload] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class InquiryTemplatePagePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    content: list[InquiryTemplatePayload] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


def question_from_payload(payload: QuestionPayload) -> Question:
    """Convert a server question into the domain entity."""

    return Question(
        id=payload.id or generate_question_id(),
        label=payload.label,
        variant=payload.variant,
        is_required=payload.is_required,
        options=tuple(payload.options) if payload.options is not None else None,
        order=payload.question_order,
    )


def template_from_payload(data: Mapping[str, Any] | InquiryTemplatePayload) -> InquiryTemplate:
    """Convert a server template into the domain entity.

    Questions are sorted by their server order and renumbered ``1..N``; the
    property type selection is recovered from the template type.
    """

    payload = (
        data
        if isinstance(data, InquiryTemplatePayload)
        else InquiryTemplatePayload.model_validate(data)
    )
    questions = sort_by_order([question_from_payload(item) for item in payload.questions])
    selection = split_template_type(payload.type)
    property_type, purpose = selection if selection else (None, None)
    return InquiryTemplate(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        is_active=payload.is_active,
        questions=questions,
        property_type=property_type,
        transaction_purpose=purpose,
        type=payload.type,
        type_seeded=any(question.is_type_marker for question in questions),
        share_token=payload.share_token,
        created_at=payload.created_at,
        updated_at=payload.updated_at,
    )


def questions_to_request(questions: Sequence[Question]) -> list[dict[str, Any]]:
    """Serialize questions for the API, dropping their identifiers."""

    serialized: list[dict[str, Any]] = []
    for question in questions:
        request = QuestionRequest(
            label=question.label,
            variant=question.variant,
            is_required=question.is_required,
            options=list(question.options) if question.options is not None else None,
            question_order=question.order,
        )
        serialized.append(request.model_dump(mode="json", by_alias=True, exclude_none=True))
    return serialized


def template_to_request(template: InquiryTemplate) -> dict[str, Any]:
    """Return the full creation payload for ``template``."""

    payload: dict[str, Any] = {
        "name": template.name,
        "description": template.description,
        "isActive": template.is_active,
        "questions": questions_to_request(template.questions),
    }
    if template.type is not None:
        payload = {"type": template.type, **payload}
    return payload


def patch_to_request(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a diff produced by the diff engine into the wire shape."""

    payload: dict[str, Any] = {}
    for key, value in patch.items():
        alias = _PATCH_ALIASES.get(key)
        if alias is None:
            continue
        if key == "questions":
            value = questions_to_request(value)
        payload[alias] = value
    return payload


__all__ = [
    "InquiryTemplatePagePayload",
    "InquiryTemplatePayload",
    "Pagination",
    "QuestionPayload",
    "QuestionRequest",
    "patch_to_request",
    "question_from_payload",
    "questions_to_request",
    "template_from_payload",
    "template_to_request",
]
