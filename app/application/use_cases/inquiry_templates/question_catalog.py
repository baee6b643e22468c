"""Static question sets used to seed inquiry templates.

The tables are keyed by the template type, ``"<property type>_<purpose>"``,
and are read-only once the module is imported.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from app.application.use_cases.questions.manage_questions import generate_question_id
from app.domain.entities import (
    Question,
    QuestionVariant,
    build_template_type,
    split_template_type,
)

PROPERTY_TYPES: Final[tuple[str, ...]] = ("아파트", "오피스텔", "상가", "사무실", "원룸")
TRANSACTION_PURPOSES: Final[tuple[str, ...]] = ("매수", "매도", "임대", "임차")

CONTACT_LABEL: Final[str] = "연락처"
MARKETING_CONSENT_LABEL: Final[str] = "마케팅 수신 동의 여부"
CONTACT_TIME_LABEL: Final[str] = "연락 가능 시간"
MANDATORY_LABELS: Final[tuple[str, ...]] = (
    CONTACT_LABEL,
    MARKETING_CONSENT_LABEL,
    CONTACT_TIME_LABEL,
)


@dataclass(frozen=True)
class QuestionBlueprint:
    """Immutable description of a question produced by the generator."""

    label: str
    variant: QuestionVariant
    is_required: bool = True
    options: tuple[str, ...] | None = None

    def build(self, order: int = 0) -> Question:
        """Return a new :class:`Question` with a fresh identifier."""

        return Question(
            id=generate_question_id(),
            label=self.label,
            variant=self.variant,
            is_required=self.is_required,
            options=self.options,
            order=order,
        )


TEMPLATE_TYPES: Final[tuple[str, ...]] = tuple(
    build_template_type(property_type, purpose)
    for property_type in PROPERTY_TYPES
    for purpose in TRANSACTION_PURPOSES
)


def _text(label: str) -> QuestionBlueprint:
    return QuestionBlueprint(label=label, variant=QuestionVariant.TEXT)


def _select(label: str, *options: str) -> QuestionBlueprint:
    return QuestionBlueprint(label=label, variant=QuestionVariant.SELECT, options=options)


def _radio(label: str, *options: str) -> QuestionBlueprint:
    return QuestionBlueprint(label=label, variant=QuestionVariant.RADIO, options=options)


COMMON_QUESTIONS: Final[tuple[QuestionBlueprint, ...]] = (
    QuestionBlueprint(label=CONTACT_LABEL, variant=QuestionVariant.PHONE),
    QuestionBlueprint(
        label=MARKETING_CONSENT_LABEL,
        variant=QuestionVariant.CHECKBOX,
        options=("동의합니다",),
    ),
    _select(
        CONTACT_TIME_LABEL,
        "오전 9시-12시",
        "오후 12시-3시",
        "오후 3시-6시",
        "저녁 6시-9시",
    ),
)

_LEASE_KINDS = ("전세", "월세")
_LARGE_BUDGETS = ("1억 이하", "1억-3억", "3억-5억", "5억-10억", "10억 이상")
_MEDIUM_BUDGETS = ("5천만원 이하", "5천만원-1억", "1억-2억", "2억-3억", "3억 이상")

# Listings offered for sale share the same three questions.
_SELLER_QUESTIONS = (_text("매물 주소"), _text("매물 평수"), _text("희망 매도가"))
_LESSOR_QUESTIONS = (
    _text("매물 주소"),
    _select("임대 유형", *_LEASE_KINDS),
    _text("희망 임대료"),
)

_TYPE_SPECIFIC_QUESTIONS: dict[str, tuple[QuestionBlueprint, ...]] = {
    "아파트_매수": (
        _text("희망 지역"),
        _select("예산", *_LARGE_BUDGETS),
        _select("희망 평수", "10평 이하", "10평-20평", "20평-30평", "30평-40평", "40평 이상"),
    ),
    "아파트_매도": _SELLER_QUESTIONS,
    "아파트_임대": _LESSOR_QUESTIONS,
    "아파트_임차": (
        _text("희망 지역"),
        _select("임차 유형", *_LEASE_KINDS),
        _select("예산", *_MEDIUM_BUDGETS),
    ),
    "오피스텔_매수": (
        _text("희망 지역"),
        _select("예산", *_MEDIUM_BUDGETS),
        _select("용도", "주거용", "사업용", "투자용"),
    ),
    "오피스텔_매도": _SELLER_QUESTIONS,
    "오피스텔_임대": _LESSOR_QUESTIONS,
    "오피스텔_임차": (
        _text("희망 지역"),
        _select("임차 유형", *_LEASE_KINDS),
        _select("예산", "3천만원 이하", "3천만원-5천만원", "5천만원-1억", "1억 이상"),
    ),
    "상가_매수": (
        _text("희망 지역"),
        _select("예산", *_LARGE_BUDGETS),
        _text("희망 업종"),
    ),
    "상가_매도": (_text("매물 주소"), _text("매물 평수"), _text("현재 업종")),
    "상가_임대": (
        _text("매물 주소"),
        _select("임대 유형", *_LEASE_KINDS),
        _radio("권리금 유무", "있음", "없음"),
    ),
    "상가_임차": (
        _text("희망 지역"),
        _text("예상 업종"),
        _select(
            "권리금 예산",
            "없음",
            "1천만원 이하",
            "1천만원-3천만원",
            "3천만원-5천만원",
            "5천만원 이상",
        ),
    ),
    "사무실_매수": (
        _text("희망 지역"),
        _select("예산", *_LARGE_BUDGETS),
        _select("희망 평수", "10평 이하", "10평-20평", "20평-30평", "30평-50평", "50평 이상"),
    ),
    "사무실_매도": _SELLER_QUESTIONS,
    "사무실_임대": _LESSOR_QUESTIONS,
    "사무실_임차": (
        _text("희망 지역"),
        _select("임차 유형", *_LEASE_KINDS),
        _select("예산", *_MEDIUM_BUDGETS),
    ),
    "원룸_매수": (
        _text("희망 지역"),
        _select("예산", "5천만원 이하", "5천만원-1억", "1억-2억", "2억 이상"),
        _radio("투자 목적", "직접 거주", "임대 수익"),
    ),
    "원룸_매도": _SELLER_QUESTIONS,
    "원룸_임대": _LESSOR_QUESTIONS,
    "원룸_임차": (
        _text("희망 지역"),
        _select("임차 유형", *_LEASE_KINDS),
        _select("예산", "500만원 이하", "500만원-1천만원", "1천만원-2천만원", "2천만원 이상"),
    ),
}

TYPE_SPECIFIC_QUESTIONS: Final[Mapping[str, tuple[QuestionBlueprint, ...]]] = MappingProxyType(
    _TYPE_SPECIFIC_QUESTIONS
)


__all__ = [
    "COMMON_QUESTIONS",
    "CONTACT_LABEL",
    "CONTACT_TIME_LABEL",
    "MANDATORY_LABELS",
    "MARKETING_CONSENT_LABEL",
    "PROPERTY_TYPES",
    "QuestionBlueprint",
    "TEMPLATE_TYPES",
    "TRANSACTION_PURPOSES",
    "TYPE_SPECIFIC_QUESTIONS",
    "build_template_type",
    "split_template_type",
]
