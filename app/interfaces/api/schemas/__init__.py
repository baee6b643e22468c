from .inquiry_template import (
    CatalogRead,
    DescriptionProposalRead,
    DescriptionProposalRequest,
    DiffRead,
    DiffRequest,
    Pagination,
    QuestionList,
    QuestionMoveRequest,
    QuestionSchema,
    ShareLinkRead,
    SubmissionRead,
    TemplateDraft,
    TemplateDuplicate,
    TemplatePageRead,
    TemplateRead,
    TypeSelection,
    ValidationRead,
)
from .notification import NotificationRead

__all__ = [
    "CatalogRead",
    "DescriptionProposalRead",
    "DescriptionProposalRequest",
    "DiffRead",
    "DiffRequest",
    "NotificationRead",
    "Pagination",
    "QuestionList",
    "QuestionMoveRequest",
    "QuestionSchema",
    "ShareLinkRead",
    "SubmissionRead",
    "TemplateDraft",
    "TemplateDuplicate",
    "TemplatePageRead",
    "TemplateRead",
    "TypeSelection",
    "ValidationRead",
]
