"""Default template descriptions and the rules for applying them.

Choosing a property type fills in a boilerplate description, but text the
agent wrote is never replaced without an explicit decision. The exchange is
two steps: :func:`propose_description` reports what should happen and the
caller finishes with :func:`apply_description` or :func:`keep_current`.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Final, Literal, Mapping

from app.domain.entities import InquiryTemplate

from .question_catalog import PROPERTY_TYPES, TRANSACTION_PURPOSES, build_template_type

DescriptionOutcome = Literal["auto_applied", "needs_confirmation", "no_default"]

_TAG_PATTERN = re.compile(r"<[^>]+>")

_PURPOSE_SENTENCES: Final[Mapping[str, tuple[str, str]]] = MappingProxyType(
    {
        "매수": (
            "{property} 매수 문의",
            "찾고 계신 {property}의 희망 지역과 예산을 알려주시면 조건에 맞는 매물을 추천해 드립니다.",
        ),
        "매도": (
            "{property} 매도 문의",
            "보유하신 {property}의 정보를 남겨주시면 시세 분석과 함께 빠른 매도를 도와드립니다.",
        ),
        "임대": (
            "{property} 임대 문의",
            "임대하실 {property}의 정보를 남겨주시면 조건에 맞는 임차인을 찾아 드립니다.",
        ),
        "임차": (
            "{property} 임차 문의",
            "원하시는 {property}의 지역과 예산을 알려주시면 조건에 맞는 매물을 안내해 드립니다.",
        ),
    }
)

_CLOSING_SENTENCE = "작성해 주신 연락처로 담당 중개사가 연락드리겠습니다."


def _render_default(property_type: str, purpose: str) -> str:
    title, body = _PURPOSE_SENTENCES[purpose]
    return (
        f"<h2>{title.format(property=property_type)}</h2>"
        f"<p>{body.format(property=property_type)}</p>"
        f"<p>{_CLOSING_SENTENCE}</p>"
    )


DEFAULT_DESCRIPTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        build_template_type(property_type, purpose): _render_default(property_type, purpose)
        for property_type in PROPERTY_TYPES
        for purpose in TRANSACTION_PURPOSES
    }
)
_DEFAULT_VALUES: Final[frozenset[str]] = frozenset(
    value.strip() for value in DEFAULT_DESCRIPTIONS.values()
)


@dataclass(frozen=True)
class DescriptionProposal:
    """Result of comparing the current description with a type default."""

    outcome: DescriptionOutcome
    description: str
    candidate: str | None = None

    @property
    def needs_confirmation(self) -> bool:
        return self.outcome == "needs_confirmation"


def is_blank_markup(text: str | None) -> bool:
    """Return ``True`` when ``text`` has no visible content once tags are removed."""

    if not text:
        return True
    visible = html.unescape(_TAG_PATTERN.sub("", text))
    return not visible.replace("\xa0", " ").strip()


def resolve_default_description(property_type: str, transaction_purpose: str) -> str | None:
    """Return the boilerplate description for the selection, if one exists."""

    return DEFAULT_DESCRIPTIONS.get(build_template_type(property_type, transaction_purpose))


def propose_description(
    current: str | None, property_type: str, transaction_purpose: str
) -> DescriptionProposal:
    """Decide whether the default description can replace ``current``.

    Blank text and text that is itself one of the defaults (left over from a
    previous selection) are replaced silently. Anything else was written by
    the agent and requires confirmation.
    """

    current_text = current or ""
    candidate = resolve_default_description(property_type, transaction_purpose)
    if candidate is None:
        return DescriptionProposal(outcome="no_default", description=current_text)

    if is_blank_markup(current_text) or current_text.strip() in _DEFAULT_VALUES:
        return DescriptionProposal(
            outcome="auto_applied", description=candidate, candidate=candidate
        )

    return DescriptionProposal(
        outcome="needs_confirmation", description=current_text, candidate=candidate
    )


def apply_description(template: InquiryTemplate, text: str) -> InquiryTemplate:
    """Return ``template`` with ``text`` as its description."""

    return replace(template, description=text)


def keep_current(template: InquiryTemplate) -> InquiryTemplate:
    """Return ``template`` unchanged, declining the proposed default."""

    return template


__all__ = [
    "DEFAULT_DESCRIPTIONS",
    "DescriptionOutcome",
    "DescriptionProposal",
    "apply_description",
    "is_blank_markup",
    "keep_current",
    "propose_description",
    "resolve_default_description",
]
