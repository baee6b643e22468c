"""HTTP client for the remote inquiry template API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Protocol, TypeVar

import httpx
from pydantic import ValidationError

from app.config import get_settings
from app.domain.entities import InquiryTemplate

from .inquiry_template_wire import (
    InquiryTemplatePagePayload,
    Pagination,
    template_from_payload,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RESOURCE_PATH = "/inquiry-templates"

LIST_ERROR = "문의 템플릿 목록을 불러오는 중 오류가 발생했습니다."
READ_ERROR = "문의 템플릿 정보를 불러오는 중 오류가 발생했습니다."
CREATE_ERROR = "문의 템플릿 생성 중 오류가 발생했습니다."
UPDATE_ERROR = "문의 템플릿 수정 중 오류가 발생했습니다."
DELETE_ERROR = "문의 템플릿 삭제 중 오류가 발생했습니다."


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Uniform ``{success, data?, error?}`` envelope returned by every call."""

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
    code: str | None = None
    errors: tuple[FieldError, ...] = ()


@dataclass(frozen=True)
class TemplateListFilter:
    """Search parameters accepted by the list endpoint."""

    page: int = 1
    keyword: str | None = None
    is_active: bool | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.is_active is not None:
            params["isActive"] = "true" if self.is_active else "false"
        if self.keyword is not None:
            params["keyword"] = self.keyword
        params["page"] = str(self.page)
        return params


@dataclass(frozen=True)
class TemplatePage:
    """One page of templates together with its pagination metadata."""

    templates: list[InquiryTemplate] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total_elements: int = 0
    size: int = 10


class InquiryTemplateApi(Protocol):
    """Operations the engine needs from the template CRUD API."""

    def list(self, filter: TemplateListFilter) -> ApiResponse[TemplatePage]: ...

    def get_by_id(self, template_id: str) -> ApiResponse[InquiryTemplate]: ...

    def create(self, payload: dict[str, Any]) -> ApiResponse[InquiryTemplate]: ...

    def update(
        self, template_id: str, patch: dict[str, Any]
    ) -> ApiResponse[InquiryTemplate]: ...

    def delete(self, template_id: str) -> ApiResponse[None]: ...


def _parse_template(data: Any) -> InquiryTemplate:
    return template_from_payload(data)


def _parse_page(data: Any) -> TemplatePage:
    payload = InquiryTemplatePagePayload.model_validate(data)
    pagination: Pagination = payload.pagination
    return TemplatePage(
        templates=[template_from_payload(item) for item in payload.content],
        current_page=pagination.current_page,
        total_pages=pagination.total_pages,
        total_elements=pagination.total_elements,
        size=pagination.size,
    )


def _parse_field_errors(raw: Any) -> tuple[FieldError, ...]:
    if not isinstance(raw, list):
        return ()
    errors: list[FieldError] = []
    for item in raw:
        if isinstance(item, dict) and item.get("message"):
            errors.append(FieldError(field=str(item.get("field", "")), message=str(item["message"])))
    return tuple(errors)


class InquiryTemplateApiClient:
    """Talk to ``/inquiry-templates`` on the configured backend.

    Transport errors and malformed bodies never escape: they are logged and
    turned into an unsuccessful :class:`ApiResponse` carrying a fallback
    message, the same envelope the server uses for its own failures.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        self._client = client or httpx.Client(
            base_url=(base_url or settings.inquiry_api_base_url).rstrip("/"),
            timeout=timeout if timeout is not None else settings.inquiry_api_timeout,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "InquiryTemplateApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list(self, filter: TemplateListFilter) -> ApiResponse[TemplatePage]:
        return self._request(
            "GET",
            _RESOURCE_PATH,
            params=filter.to_params(),
            parse=_parse_page,
            fallback=LIST_ERROR,
        )

    def get_by_id(self, template_id: str) -> ApiResponse[InquiryTemplate]:
        return self._request(
            "GET",
            f"{_RESOURCE_PATH}/{template_id}/preview",
            parse=_parse_template,
            fallback=READ_ERROR,
        )

    def create(self, payload: dict[str, Any]) -> ApiResponse[InquiryTemplate]:
        return self._request(
            "POST",
            _RESOURCE_PATH,
            json=payload,
            parse=_parse_template,
            fallback=CREATE_ERROR,
        )

    def update(self, template_id: str, patch: dict[str, Any]) -> ApiResponse[InquiryTemplate]:
        return self._request(
            "PUT",
            f"{_RESOURCE_PATH}/{template_id}",
            json=patch,
            parse=_parse_template,
            fallback=UPDATE_ERROR,
        )

    def delete(self, template_id: str) -> ApiResponse[None]:
        return self._request(
            "DELETE",
            f"{_RESOURCE_PATH}/{template_id}",
            parse=None,
            fallback=DELETE_ERROR,
        )

    def _request(
        self,
        method: str,
        path: str,
        *,
        parse: Callable[[Any], T] | None,
        fallback: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> ApiResponse[T]:
        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return ApiResponse(success=False, error=fallback)

        if response.status_code == httpx.codes.NO_CONTENT:
            return ApiResponse(success=True)

        try:
            body = response.json()
        except ValueError:
            logger.warning(
                "%s %s returned a non JSON body (status %s)", method, path, response.status_code
            )
            return ApiResponse(success=False, error=fallback)

        if not isinstance(body, dict):
            logger.warning("%s %s returned an unexpected body: %r", method, path, body)
            return ApiResponse(success=False, error=fallback)

        success = bool(body.get("success")) and response.is_success
        envelope: dict[str, Any] = {
            "message": body.get("message"),
            "code": body.get("code")
            or ("NOT_FOUND" if response.status_code == httpx.codes.NOT_FOUND else None),
            "errors": _parse_field_errors(body.get("errors")),
        }
        if not success:
            error = body.get("error") or body.get("message") or fallback
            logger.info("%s %s rejected (status %s): %s", method, path, response.status_code, error)
            return ApiResponse(success=False, error=str(error), **envelope)

        data = body.get("data")
        if parse is None or data is None:
            return ApiResponse(success=True, **envelope)
        try:
            parsed = parse(data)
        except ValidationError as exc:
            logger.warning("%s %s returned malformed data: %s", method, path, exc)
            return ApiResponse(success=False, error=fallback)
        return ApiResponse(success=True, data=parsed, **envelope)


__all__ = [
    "ApiResponse",
    "FieldError",
    "InquiryTemplateApi",
    "InquiryTemplateApiClient",
    "TemplateListFilter",
    "TemplatePage",
]
