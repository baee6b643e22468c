import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dataclasses import replace

import pytest

from app.application.use_cases.inquiry_templates import (
    build_share_url,
    delete_template,
    duplicate_template,
    generate_template_questions,
    list_templates,
    load_template,
    submit_template,
)
from app.application.use_cases.inquiry_templates.submit_template import (
    CREATED_MESSAGE,
    NO_CHANGES_MESSAGE,
    UPDATED_MESSAGE,
)
from app.application.use_cases.questions import new_question, renumber
from app.domain.entities import InquiryTemplate, QuestionVariant
from app.domain.exceptions import (
    InquiryTemplateApiError,
    TemplateNotFoundError,
    TemplateValidationError,
)
from app.infrastructure.inquiry_template_api import (
    ApiResponse,
    TemplateListFilter,
    TemplatePage,
)
from app.infrastructure.notifications import NotificationBuffer


class _StubInquiryTemplateApi:
    def __init__(self, templates=None, *, fail_with=None):
        self.templates = {template.id: template for template in templates or []}
        self.fail_with = fail_with
        self.calls = []

    def list(self, filter: TemplateListFilter):
        self.calls.append(("list", filter))
        if self.fail_with:
            return ApiResponse(success=False, error=self.fail_with)
        return ApiResponse(success=True, data=TemplatePage(templates=list(self.templates.values())))

    def get_by_id(self, template_id):
        self.calls.append(("get_by_id", template_id))
        template = self.templates.get(template_id)
        if template is None:
            return ApiResponse(success=False, error="존재하지 않는 템플릿", code="NOT_FOUND")
        return ApiResponse(success=True, data=template)

    def create(self, payload):
        self.calls.append(("create", payload))
        if self.fail_with:
            return ApiResponse(success=False, error=self.fail_with, code="SERVER_ERROR")
        created = InquiryTemplate(
            id=f"tpl-{len(self.templates) + 1}",
            name=payload["name"],
            description=payload["description"],
            is_active=payload["isActive"],
            type=payload.get("type"),
        )
        self.templates[created.id] = created
        return ApiResponse(success=True, data=created)

    def update(self, template_id, patch):
        self.calls.append(("update", template_id, patch))
        if self.fail_with:
            return ApiResponse(success=False, error=self.fail_with)
        return ApiResponse(success=True)

    def delete(self, template_id):
        self.calls.append(("delete", template_id))
        if self.fail_with:
            return ApiResponse(success=False, error=self.fail_with)
        self.templates.pop(template_id, None)
        return ApiResponse(success=True)


def _template(template_id=None) -> InquiryTemplate:
    return InquiryTemplate(
        id=template_id,
        name="아파트 매수 문의",
        description="<p>안내</p>",
        questions=generate_template_questions("아파트", "매수"),
        property_type="아파트",
        transaction_purpose="매수",
        type="아파트_매수",
        type_seeded=True,
        share_token="abc123",
    )


def test_new_template_is_created_with_full_payload():
    api = _StubInquiryTemplateApi()
    notifier = NotificationBuffer()

    result = submit_template(api, notifier, draft=_template())

    assert result.changed is True
    assert result.template.id == "tpl-1"
    (call,) = api.calls
    assert call[0] == "create"
    payload = call[1]
    assert list(payload)[0] == "type"
    assert payload["questions"][0]["type"] == "SELECT"
    assert all("id" not in question for question in payload["questions"])
    assert notifier.messages == [CREATED_MESSAGE]


def test_unchanged_template_skips_the_network():
    original = _template("tpl-9")
    api = _StubInquiryTemplateApi([original])
    notifier = NotificationBuffer()
    draft = replace(original, questions=list(original.questions))

    result = submit_template(api, notifier, draft=draft, original=original)

    assert result.changed is False
    assert result.template is original
    assert api.calls == []
    assert notifier.notifications[0].severity == "info"
    assert notifier.messages == [NO_CHANGES_MESSAGE]


def test_update_sends_only_changed_fields():
    original = _template("tpl-9")
    api = _StubInquiryTemplateApi([original])
    notifier = NotificationBuffer()

    result = submit_template(
        api, notifier, draft=replace(original, is_active=False), original=original
    )

    assert result.changed is True
    assert api.calls == [("update", "tpl-9", {"isActive": False})]
    assert result.template.is_active is False
    assert notifier.messages == [UPDATED_MESSAGE]


def test_invalid_draft_is_blocked_before_the_network():
    api = _StubInquiryTemplateApi()
    notifier = NotificationBuffer()
    template = _template()
    questions = renumber(
        [*template.questions, new_question("희망 층수", QuestionVariant.SELECT, options=[])]
    )

    with pytest.raises(TemplateValidationError):
        submit_template(api, notifier, draft=replace(template, questions=questions))

    assert api.calls == []


def test_api_failure_notifies_and_raises():
    api = _StubInquiryTemplateApi(fail_with="서버 오류")
    notifier = NotificationBuffer()

    with pytest.raises(InquiryTemplateApiError) as exc_info:
        submit_template(api, notifier, draft=_template())

    assert str(exc_info.value) == "서버 오류"
    assert exc_info.value.code == "SERVER_ERROR"
    assert notifier.notifications[-1].severity == "error"


def test_load_template_reports_missing_template():
    notifier = NotificationBuffer()

    with pytest.raises(TemplateNotFoundError):
        load_template(_StubInquiryTemplateApi(), notifier, template_id="missing")

    assert notifier.notifications[0].severity == "error"


def test_list_templates_passes_filter():
    api = _StubInquiryTemplateApi([_template("tpl-1")])

    page = list_templates(api, NotificationBuffer(), keyword="아파트", is_active=True, page=2)

    assert [template.id for template in page.templates] == ["tpl-1"]
    _, filter = api.calls[0]
    assert filter.to_params() == {"isActive": "true", "keyword": "아파트", "page": "2"}


def test_delete_template_notifies_success():
    api = _StubInquiryTemplateApi([_template("tpl-1")])
    notifier = NotificationBuffer()

    delete_template(api, notifier, template_id="tpl-1")

    assert "tpl-1" not in api.templates
    assert notifier.notifications[0].severity == "success"


def test_duplicate_template_creates_copy_with_new_question_ids():
    source = _template("tpl-1")
    api = _StubInquiryTemplateApi([source])
    notifier = NotificationBuffer()

    result = duplicate_template(api, notifier, template_id="tpl-1")

    assert result.changed is True
    _, payload = api.calls[-1]
    assert payload["name"] == "아파트 매수 문의 (복사본)"
    assert len(payload["questions"]) == len(source.questions)
    assert "shareToken" not in payload


def test_share_url_uses_the_token():
    url = build_share_url(_template("tpl-1"), base_url="https://agent.example.com/")

    assert url == "https://agent.example.com/inquiry/share/abc123"


def test_share_url_requires_a_token():
    with pytest.raises(ValueError):
        build_share_url(replace(_template("tpl-1"), share_token=None), base_url="https://x.example")
