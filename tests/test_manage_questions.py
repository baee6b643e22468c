import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from app.application.use_cases.inquiry_templates import generate_template_questions
from app.application.use_cases.questions import (
    add_question,
    copy_questions,
    ensure_question_structure,
    new_question,
    remove_question,
    update_question,
)
from app.domain.entities import InquiryTemplate, Question, QuestionVariant
from app.domain.exceptions import (
    DuplicateQuestionError,
    QuestionNotFoundError,
    StructuralInconsistencyError,
)


def _template(questions=None) -> InquiryTemplate:
    return InquiryTemplate(
        id="tpl-1",
        name="아파트 매수 문의",
        description="<p>설명</p>",
        questions=list(questions or []),
        property_type="아파트",
        transaction_purpose="매수",
        type="아파트_매수",
        type_seeded=True,
    )


def test_new_question_normalizes_options_for_variant():
    text = new_question("이름", "TEXT", options=["무시됨"])
    select = new_question("예산", QuestionVariant.SELECT)
    region = new_question("지역", QuestionVariant.REGION)

    assert text.options is None
    assert select.options == ()
    assert region.options == ()
    assert text.id != select.id


def test_add_question_appends_with_next_order():
    template = _template()
    template = add_question(template, new_question("이름", QuestionVariant.TEXT))
    template = add_question(template, new_question("이메일", QuestionVariant.EMAIL))

    assert [question.order for question in template.questions] == [1, 2]
    assert template.questions[1].label == "이메일"


def test_add_question_rejects_duplicate_ids():
    question = new_question("이름", QuestionVariant.TEXT)
    template = add_question(_template(), question)

    with pytest.raises(DuplicateQuestionError):
        add_question(template, question)
    with pytest.raises(StructuralInconsistencyError):
        add_question(template, question)


def test_add_question_rejects_second_type_marker():
    template = _template(generate_template_questions("아파트", "매수"))
    second_marker = new_question("유형", QuestionVariant.SELECT, options=["상가_매도"])

    with pytest.raises(StructuralInconsistencyError):
        add_question(template, second_marker)
    assert len([question for question in template.questions if question.is_type_marker]) == 1


def test_remove_question_renumbers_the_rest():
    template = _template()
    for label in ("하나", "둘", "셋"):
        template = add_question(template, new_question(label, QuestionVariant.TEXT))

    updated = remove_question(template, template.questions[1].id)

    assert [question.label for question in updated.questions] == ["하나", "셋"]
    assert [question.order for question in updated.questions] == [1, 2]
    assert len(template.questions) == 3


def test_remove_type_marker_clears_template_type():
    template = _template(generate_template_questions("아파트", "매수"))
    marker = template.type_marker

    updated = remove_question(template, marker.id)

    assert updated.type is None
    assert updated.type_seeded is False
    assert updated.type_marker is None


def test_remove_unknown_question_raises():
    with pytest.raises(QuestionNotFoundError):
        remove_question(_template(), "missing")


def test_update_question_merges_patch_and_keeps_position():
    template = _template()
    for label in ("하나", "둘"):
        template = add_question(template, new_question(label, QuestionVariant.TEXT))
    target = template.questions[0]

    updated = update_question(
        template,
        target.id,
        {"label": "희망 지역", "variant": "SELECT", "options": ["서울", "경기"]},
    )

    question = updated.questions[0]
    assert question.id == target.id
    assert question.order == 1
    assert question.variant is QuestionVariant.SELECT
    assert question.options == ("서울", "경기")


def test_update_question_rejects_relabel_to_type_marker():
    template = _template(generate_template_questions("아파트", "매수"))
    other = next(question for question in template.questions if not question.is_type_marker)

    with pytest.raises(StructuralInconsistencyError):
        update_question(template, other.id, {"label": "유형"})

    marker = template.type_marker
    updated = update_question(template, marker.id, {"label": "유형", "is_required": False})
    assert updated.type_marker.is_required is False


def test_update_question_rejects_order_changes():
    template = add_question(_template(), new_question("하나", QuestionVariant.TEXT))

    with pytest.raises(ValueError, match="order"):
        update_question(template, template.questions[0].id, {"order": 5})


def test_copy_questions_assigns_new_ids():
    questions = generate_template_questions("상가", "임대")

    copies = copy_questions(questions)

    assert {question.id for question in copies}.isdisjoint({q.id for q in questions})
    assert [question.label for question in copies] == [q.label for q in questions]
    assert [question.order for question in copies] == list(range(1, len(questions) + 1))


def test_ensure_question_structure_detects_duplicate_ids():
    question = Question(id="same", label="A", variant=QuestionVariant.TEXT, order=1)

    with pytest.raises(DuplicateQuestionError):
        ensure_question_structure([question, question.with_order(2)])


def test_ensure_question_structure_detects_gaps_in_order():
    questions = [
        Question(id="a", label="A", variant=QuestionVariant.TEXT, order=1),
        Question(id="b", label="B", variant=QuestionVariant.TEXT, order=3),
    ]

    with pytest.raises(StructuralInconsistencyError):
        ensure_question_structure(questions)


def test_ensure_question_structure_rejects_two_markers():
    first = generate_template_questions("아파트", "매수")[0]
    second = generate_template_questions("원룸", "임차")[0].with_order(2)

    with pytest.raises(StructuralInconsistencyError):
        ensure_question_structure([first, second])
