import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dataclasses import replace

import pytest

from app.application.use_cases.inquiry_templates import (
    ensure_valid_template,
    generate_template_questions,
    validate_template,
)
from app.application.use_cases.questions import new_question, renumber
from app.domain.entities import InquiryTemplate, QuestionVariant
from app.domain.exceptions import TemplateValidationError


def _valid_template() -> InquiryTemplate:
    return InquiryTemplate(
        id=None,
        name="아파트 매수 문의",
        description="<p>안내</p>",
        questions=generate_template_questions("아파트", "매수"),
        property_type="아파트",
        transaction_purpose="매수",
        type="아파트_매수",
        type_seeded=True,
    )


def test_seeded_template_is_valid():
    result = validate_template(_valid_template())

    assert result.ok
    ensure_valid_template(_valid_template())


def test_select_question_without_options_is_reported():
    template = _valid_template()
    questions = renumber(
        [*template.questions, new_question("희망 층수", QuestionVariant.SELECT, options=[])]
    )
    index = len(questions) - 1

    result = validate_template(replace(template, questions=questions))

    assert not result.ok
    assert "희망 층수" in result.errors[f"questions[{index}].options"]
    with pytest.raises(TemplateValidationError) as exc_info:
        ensure_valid_template(replace(template, questions=questions))
    assert f"questions[{index}].options" in exc_info.value.errors


def test_blank_option_is_reported():
    template = _valid_template()
    questions = renumber(
        [*template.questions, new_question("선호 방향", QuestionVariant.RADIO, options=["남향", " "])]
    )

    result = validate_template(replace(template, questions=questions))

    assert f"questions[{len(questions) - 1}].options" in result.errors


def test_all_missing_mandatory_labels_are_listed():
    template = _valid_template()
    questions = renumber(
        [question for question in template.questions if question.label not in {"연락처", "연락 가능 시간"}]
    )

    result = validate_template(replace(template, questions=questions))

    message = result.errors["required_questions"]
    assert "연락처" in message
    assert "연락 가능 시간" in message
    assert "마케팅 수신 동의 여부" not in message


def test_errors_are_accumulated():
    template = InquiryTemplate(id=None, name="  ", description="<p><br></p>")

    errors = validate_template(template).errors

    assert set(errors) == {"name", "description", "questions", "type", "required_questions"}


def test_name_length_limit():
    template = replace(_valid_template(), name="가" * 101)

    assert "name" in validate_template(template).errors


def test_blank_question_label_is_reported():
    template = _valid_template()
    questions = renumber([*template.questions, new_question("  ", QuestionVariant.TEXT)])

    errors = validate_template(replace(template, questions=questions)).errors

    assert f"questions[{len(questions) - 1}].label" in errors


def test_type_marker_satisfies_type_requirement():
    template = replace(_valid_template(), property_type=None, transaction_purpose=None)

    assert "type" not in validate_template(template).errors
