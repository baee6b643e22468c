"""Helpers for sharing a template with prospective customers."""

from __future__ import annotations

from urllib.parse import quote

from app.config import get_settings
from app.domain.entities import InquiryTemplate


def build_share_url(template: InquiryTemplate, *, base_url: str | None = None) -> str:
    """Return the public form URL for ``template``.

    Raises:
        ValueError: If the template has not been given a share token yet.
    """

    if not template.share_token:
        raise ValueError("공유 토큰이 없는 템플릿입니다.")
    root = (base_url or get_settings().share_base_url).rstrip("/")
    return f"{root}/inquiry/share/{quote(template.share_token, safe='')}"


__all__ = ["build_share_url"]
