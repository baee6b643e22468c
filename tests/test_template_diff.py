import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dataclasses import replace

from app.application.use_cases.inquiry_templates import (
    diff_templates,
    generate_template_questions,
    is_noop_patch,
)
from app.application.use_cases.questions import copy_questions, move_question
from app.domain.entities import InquiryTemplate
from app.infrastructure.inquiry_template_wire import patch_to_request


def _original() -> InquiryTemplate:
    return InquiryTemplate(
        id="tpl-1",
        name="아파트 매수 문의",
        description="<p>안내</p>",
        is_active=True,
        questions=generate_template_questions("아파트", "매수"),
        property_type="아파트",
        transaction_purpose="매수",
        type="아파트_매수",
        type_seeded=True,
    )


def test_diff_of_identical_templates_is_empty():
    original = _original()

    patch = diff_templates(original, original)

    assert patch == {}
    assert is_noop_patch(patch)


def test_only_is_active_change_is_reported():
    original = _original()
    draft = replace(original, is_active=False, questions=list(original.questions))

    patch = diff_templates(original, draft)

    assert patch == {"is_active": False}
    assert patch_to_request(patch) == {"isActive": False}


def test_question_ids_are_not_compared():
    original = _original()
    draft = replace(original, questions=copy_questions(original.questions))

    assert diff_templates(original, draft) == {}


def test_option_reordering_is_not_a_change():
    original = _original()
    budget_index = next(
        index for index, question in enumerate(original.questions) if question.label == "예산"
    )
    budget = original.questions[budget_index]
    questions = list(original.questions)
    questions[budget_index] = replace(budget, options=tuple(reversed(budget.options)))

    assert diff_templates(original, replace(original, questions=questions)) == {}


def test_dropping_a_repeated_option_is_a_change():
    original = _original()
    budget_index = next(
        index for index, question in enumerate(original.questions) if question.label == "예산"
    )
    budget = original.questions[budget_index]
    seeded = list(original.questions)
    seeded[budget_index] = replace(budget, options=("1억 이하", "1억 이하"))
    original = replace(original, questions=seeded)
    edited = list(seeded)
    edited[budget_index] = replace(budget, options=("1억 이하",))

    patch = diff_templates(original, replace(original, questions=edited))

    assert set(patch) == {"questions"}


def test_moved_question_sends_the_whole_list():
    original = _original()
    draft = replace(original, questions=move_question(original.questions, 1, 4))

    patch = diff_templates(original, draft)

    assert set(patch) == {"questions"}
    assert len(patch["questions"]) == len(original.questions)
    wire = patch_to_request(patch)["questions"]
    assert [item["questionOrder"] for item in wire] == list(range(1, len(wire) + 1))
    assert all("id" not in item for item in wire)


def test_removed_question_is_detected():
    original = _original()
    draft = replace(original, questions=original.questions[:-1])

    assert "questions" in diff_templates(original, draft)


def test_patch_with_only_identifier_is_a_noop():
    assert is_noop_patch({"id": "tpl-1"})
    assert not is_noop_patch({"id": "tpl-1", "name": "새 이름"})
