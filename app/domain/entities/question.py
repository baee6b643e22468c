"""Domain entity representing a question inside an inquiry template."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

TYPE_MARKER_LABEL = "유형"


class QuestionVariant(str, Enum):
    """Closed set of input kinds a question can be rendered with."""

    TEXT = "TEXT"
    TEXTAREA = "TEXTAREA"
    SELECT = "SELECT"
    RADIO = "RADIO"
    CHECKBOX = "CHECKBOX"
    DATE = "DATE"
    FILE = "FILE"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    NUMBER = "NUMBER"
    REGION = "REGION"

    @property
    def requires_options(self) -> bool:
        """Return ``True`` when the variant needs a non-empty option list."""

        match self:
            case QuestionVariant.SELECT | QuestionVariant.RADIO | QuestionVariant.CHECKBOX:
                return True
            case (
                QuestionVariant.TEXT
                | QuestionVariant.TEXTAREA
                | QuestionVariant.DATE
                | QuestionVariant.FILE
                | QuestionVariant.EMAIL
                | QuestionVariant.PHONE
                | QuestionVariant.NUMBER
                | QuestionVariant.REGION
            ):
                return False

    @property
    def keeps_options(self) -> bool:
        """Return ``True`` when the variant carries options at all.

        ``REGION`` keeps an (possibly empty) option list as a placeholder for
        the region selector.
        """

        return self.requires_options or self is QuestionVariant.REGION


@dataclass(frozen=True)
class Question:
    """Core attributes describing a single template question."""

    id: str
    label: str
    variant: QuestionVariant
    is_required: bool = False
    options: tuple[str, ...] | None = None
    order: int = 0

    @property
    def is_type_marker(self) -> bool:
        return self.label == TYPE_MARKER_LABEL

    def with_order(self, order: int) -> "Question":
        """Return a copy of the question placed at ``order``."""

        if order == self.order:
            return self
        return replace(self, order=order)


__all__ = ["Question", "QuestionVariant", "TYPE_MARKER_LABEL"]
