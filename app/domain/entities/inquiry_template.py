"""Domain entity representing an inquiry template."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .question import Question


@dataclass
class InquiryTemplate:
    """Questionnaire definition an agent shares with prospective customers."""

    id: str | None
    name: str
    description: str
    is_active: bool = True
    questions: list[Question] = field(default_factory=list)
    property_type: str | None = None
    transaction_purpose: str | None = None
    type: str | None = None
    type_seeded: bool = False
    share_token: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def type_marker(self) -> Question | None:
        """Return the hidden question encoding the template type, if any."""

        for question in self.questions:
            if question.is_type_marker:
                return question
        return None

    @property
    def has_type_selection(self) -> bool:
        return bool(self.property_type) and bool(self.transaction_purpose)


def build_template_type(property_type: str, transaction_purpose: str) -> str:
    """Return the composite template type for the given selection."""

    return f"{property_type}_{transaction_purpose}"


def split_template_type(template_type: str | None) -> tuple[str, str] | None:
    """Return ``(property type, purpose)`` encoded in ``template_type``."""

    if not template_type or "_" not in template_type:
        return None
    property_type, _, purpose = template_type.partition("_")
    if not property_type or not purpose:
        return None
    return property_type, purpose


__all__ = ["InquiryTemplate", "build_template_type", "split_template_type"]
