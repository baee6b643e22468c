"""Inquiry template use cases."""

from .delete_template import delete_template
from .descriptions import (
    DescriptionProposal,
    apply_description,
    is_blank_markup,
    keep_current,
    propose_description,
    resolve_default_description,
)
from .diff import diff_templates, is_noop_patch, questions_changed
from .duplicate_template import build_template_copy, duplicate_template
from .edit_session import TemplateEditSession
from .generate_questions import (
    add_required_questions,
    apply_type_selection,
    generate_default_questions,
    generate_template_questions,
    generate_type_field,
)
from .list_templates import list_templates
from .load_template import load_template
from .share import build_share_url
from .submit_template import SubmissionResult, submit_template
from .validators import ValidationResult, ensure_valid_template, validate_template

__all__ = [
    "DescriptionProposal",
    "SubmissionResult",
    "TemplateEditSession",
    "ValidationResult",
    "add_required_questions",
    "apply_description",
    "apply_type_selection",
    "build_share_url",
    "build_template_copy",
    "delete_template",
    "diff_templates",
    "duplicate_template",
    "ensure_valid_template",
    "generate_default_questions",
    "generate_template_questions",
    "generate_type_field",
    "is_blank_markup",
    "is_noop_patch",
    "keep_current",
    "list_templates",
    "load_template",
    "propose_description",
    "questions_changed",
    "resolve_default_description",
    "submit_template",
    "validate_template",
]
