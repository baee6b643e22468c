"""Positional operations over an ordered question sequence.

Every function returns a new list whose ``order`` values are exactly
``1..N`` in display order, whatever the order values of the input were.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import Question


def renumber(questions: Sequence[Question]) -> list[Question]:
    """Return ``questions`` with ``order`` set to each position plus one."""

    return [question.with_order(index + 1) for index, question in enumerate(questions)]


def move_question(
    questions: Sequence[Question], from_index: int, to_index: int
) -> list[Question]:
    """Move the element at ``from_index`` so that it ends up at ``to_index``.

    An out of range ``from_index`` leaves the sequence untouched and
    ``to_index`` is clamped into ``0..N-1``, so moving past either end never
    raises.
    """

    reordered = list(questions)
    if not 0 <= from_index < len(reordered):
        return renumber(reordered)

    target = min(max(to_index, 0), len(reordered) - 1)
    if target != from_index:
        moved = reordered.pop(from_index)
        reordered.insert(target, moved)
    return renumber(reordered)


def move_up(questions: Sequence[Question], index: int) -> list[Question]:
    """Swap the question at ``index`` with its predecessor."""

    if index <= 0:
        return renumber(questions)
    return move_question(questions, index, index - 1)


def move_down(questions: Sequence[Question], index: int) -> list[Question]:
    """Swap the question at ``index`` with its successor."""

    if index >= len(questions) - 1:
        return renumber(questions)
    return move_question(questions, index, index + 1)


def move_question_by_id(
    questions: Sequence[Question], question_id: str, target_id: str
) -> list[Question]:
    """Drag-and-drop helper: place ``question_id`` where ``target_id`` sits."""

    ids = [question.id for question in questions]
    if question_id not in ids or target_id not in ids or question_id == target_id:
        return renumber(questions)
    return move_question(questions, ids.index(question_id), ids.index(target_id))


def sort_by_order(questions: Sequence[Question]) -> list[Question]:
    """Sort questions loaded from the server by ``order`` and renumber them."""

    return renumber(sorted(questions, key=lambda question: question.order))


__all__ = [
    "move_down",
    "move_question",
    "move_question_by_id",
    "move_up",
    "renumber",
    "sort_by_order",
]
