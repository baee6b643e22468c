"""Schemas for the inquiry template endpoints.

Field names follow the camelCase shape the editor already uses for the
remote template API; every model also accepts the snake_case names.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import QuestionVariant

from .notification import NotificationRead


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class QuestionSchema(_CamelModel):
    id: str | None = None
    label: str = ""
    variant: QuestionVariant = Field(default=QuestionVariant.TEXT, alias="type")
    is_required: bool = Field(default=False, alias="isRequired")
    options: list[str] | None = None
    question_order: int | None = Field(default=None, alias="questionOrder")


class QuestionList(_CamelModel):
    questions: list[QuestionSchema] = Field(default_factory=list)


class TemplateDraft(_CamelModel):
    """Template as edited in the browser."""

    id: str | None = None
    name: str = ""
    description: str = ""
    is_active: bool = Field(default=True, alias="isActive")
    type: str | None = None
    property_type: str | None = Field(default=None, alias="propertyType")
    transaction_purpose: str | None = Field(default=None, alias="transactionPurpose")
    share_token: str | None = Field(default=None, alias="shareToken")
    questions: list[QuestionSchema] = Field(default_factory=list)


class TemplateRead(TemplateDraft):
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class CatalogRead(_CamelModel):
    property_types: list[str] = Field(alias="propertyTypes")
    transaction_purposes: list[str] = Field(alias="transactionPurposes")
    template_types: list[str] = Field(alias="templateTypes")


class TypeSelection(_CamelModel):
    property_type: str = Field(..., min_length=1, alias="propertyType")
    transaction_purpose: str = Field(..., min_length=1, alias="transactionPurpose")


class DescriptionProposalRequest(TypeSelection):
    current_description: str | None = Field(default=None, alias="currentDescription")


class DescriptionProposalRead(_CamelModel):
    outcome: Literal["no_default", "auto_applied", "needs_confirmation"]
    description: str
    candidate: str | None = None
    needs_confirmation: bool = Field(alias="needsConfirmation")


class QuestionMoveRequest(QuestionList):
    from_index: int = Field(..., alias="fromIndex")
    to_index: int = Field(..., alias="toIndex")


class ValidationRead(_CamelModel):
    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)


class DiffRequest(_CamelModel):
    original: TemplateDraft
    draft: TemplateDraft


class DiffRead(_CamelModel):
    patch: dict[str, Any] = Field(default_factory=dict)
    no_changes: bool = Field(alias="noChanges")


class Pagination(_CamelModel):
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_elements: int = Field(alias="totalElements")
    size: int


class TemplatePageRead(_CamelModel):
    content: list[TemplateRead] = Field(default_factory=list)
    pagination: Pagination


class TemplateDuplicate(_CamelModel):
    name: str | None = Field(default=None, max_length=100)


class SubmissionRead(_CamelModel):
    template: TemplateRead
    changed: bool
    notifications: list[NotificationRead] = Field(default_factory=list)


class ShareLinkRead(_CamelModel):
    share_token: str = Field(alias="shareToken")
    url: str


__all__ = [
    "CatalogRead",
    "DescriptionProposalRead",
    "DescriptionProposalRequest",
    "DiffRead",
    "DiffRequest",
    "Pagination",
    "QuestionList",
    "QuestionMoveRequest",
    "QuestionSchema",
    "ShareLinkRead",
    "SubmissionRead",
    "TemplateDraft",
    "TemplateDuplicate",
    "TemplatePageRead",
    "TemplateRead",
    "TypeSelection",
    "ValidationRead",
]
