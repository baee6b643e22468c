"""Question related use cases."""

from .manage_questions import (
    add_question,
    copy_questions,
    generate_question_id,
    new_question,
    normalize_options,
    remove_question,
    update_question,
)
from .ordering import (
    move_down,
    move_question,
    move_question_by_id,
    move_up,
    renumber,
    sort_by_order,
)
from .validators import ensure_question_structure

__all__ = [
    "add_question",
    "copy_questions",
    "ensure_question_structure",
    "generate_question_id",
    "move_down",
    "move_question",
    "move_question_by_id",
    "move_up",
    "new_question",
    "normalize_options",
    "remove_question",
    "renumber",
    "sort_by_order",
    "update_question",
]
