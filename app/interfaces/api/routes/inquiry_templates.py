"""Routes to build, check and save inquiry templates."""

from dataclasses import replace
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.application.use_cases.inquiry_templates import (
    SubmissionResult,
    add_required_questions,
    build_share_url,
    delete_template as delete_template_uc,
    diff_templates,
    duplicate_template as duplicate_template_uc,
    generate_template_questions,
    is_noop_patch,
    list_templates as list_templates_uc,
    load_template as load_template_uc,
    propose_description,
    submit_template as submit_template_uc,
    validate_template,
)
from app.application.use_cases.inquiry_templates.question_catalog import (
    PROPERTY_TYPES,
    TEMPLATE_TYPES,
    TRANSACTION_PURPOSES,
)
from app.application.use_cases.questions import (
    generate_question_id,
    move_question,
    normalize_options,
    renumber,
)
from app.domain.entities import (
    InquiryTemplate,
    Question,
    build_template_type,
    split_template_type,
)
from app.domain.exceptions import (
    InquiryTemplateApiError,
    StructuralInconsistencyError,
    TemplateNotFoundError,
    TemplateValidationError,
)
from app.infrastructure.inquiry_template_api import InquiryTemplateApi
from app.infrastructure.inquiry_template_wire import patch_to_request
from app.infrastructure.notifications import NotificationBuffer
from app.interfaces.api.dependencies import get_inquiry_template_api, get_notifier
from app.interfaces.api.schemas import (
    CatalogRead,
    DescriptionProposalRead,
    DescriptionProposalRequest,
    DiffRead,
    DiffRequest,
    NotificationRead,
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

router = APIRouter(prefix="/inquiry-templates", tags=["inquiry-templates"])


def _question_from_schema(schema: QuestionSchema) -> Question:
    return Question(
        id=schema.id or generate_question_id(),
        label=schema.label,
        variant=schema.variant,
        is_required=schema.is_required,
        options=normalize_options(schema.variant, schema.options),
    )


def _questions_from_schema(schemas: list[QuestionSchema]) -> list[Question]:
    # The list order sent by the editor is the display order.
    return renumber([_question_from_schema(schema) for schema in schemas])


def _question_to_schema(question: Question) -> QuestionSchema:
    return QuestionSchema(
        id=question.id,
        label=question.label,
        variant=question.variant,
        is_required=question.is_required,
        options=list(question.options) if question.options is not None else None,
        question_order=question.order,
    )


def _draft_to_entity(draft: TemplateDraft) -> InquiryTemplate:
    questions = _questions_from_schema(draft.questions)
    marker = next((question for question in questions if question.is_type_marker), None)
    if draft.type is None and marker is not None and len(marker.options or ()) == 1:
        draft = draft.model_copy(update={"type": marker.options[0]})

    property_type = draft.property_type
    purpose = draft.transaction_purpose
    if not (property_type and purpose):
        property_type, purpose = split_template_type(draft.type) or (property_type, purpose)

    template_type = draft.type
    if template_type is None and property_type and purpose:
        template_type = build_template_type(property_type, purpose)

    return InquiryTemplate(
        id=draft.id,
        name=draft.name,
        description=draft.description,
        is_active=draft.is_active,
        questions=questions,
        property_type=property_type,
        transaction_purpose=purpose,
        type=template_type,
        type_seeded=any(question.is_type_marker for question in questions),
        share_token=draft.share_token,
    )


def _template_to_read_model(template: InquiryTemplate) -> TemplateRead:
    return TemplateRead(
        id=template.id,
        name=template.name,
        description=template.description,
        is_active=template.is_active,
        type=template.type,
        property_type=template.property_type,
        transaction_purpose=template.transaction_purpose,
        share_token=template.share_token,
        questions=[_question_to_schema(question) for question in template.questions],
        created_at=template.created_at,
        updated_at=template.updated_at,
    )


def _submission_to_read_model(
    result: SubmissionResult, notifier: NotificationBuffer
) -> SubmissionRead:
    return SubmissionRead(
        template=_template_to_read_model(result.template),
        changed=result.changed,
        notifications=[
            NotificationRead.model_validate(notification)
            for notification in notifier.notifications
        ],
    )


def _raise_api_error(exc: InquiryTemplateApiError) -> NoReturn:
    if isinstance(exc, TemplateNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc


def _raise_invalid_draft(exc: TemplateValidationError | StructuralInconsistencyError) -> NoReturn:
    errors = exc.errors if isinstance(exc, TemplateValidationError) else {}
    raise HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": str(exc), "errors": errors},
    ) from exc


@router.get("/catalog", response_model=CatalogRead)
def read_catalog() -> CatalogRead:
    """Return the property types, purposes and template types on offer."""

    return CatalogRead(
        property_types=list(PROPERTY_TYPES),
        transaction_purposes=list(TRANSACTION_PURPOSES),
        template_types=list(TEMPLATE_TYPES),
    )


@router.post("/generate", response_model=QuestionList)
def generate_questions(selection: TypeSelection) -> QuestionList:
    """Generate the question set for a property type and purpose."""

    questions = generate_template_questions(
        selection.property_type.strip(), selection.transaction_purpose.strip()
    )
    return QuestionList(questions=[_question_to_schema(question) for question in questions])


@router.post("/required-questions", response_model=QuestionList)
def append_required_questions(payload: QuestionList) -> QuestionList:
    """Append the mandatory common questions that are missing."""

    template = InquiryTemplate(
        id=None, name="", description="", questions=_questions_from_schema(payload.questions)
    )
    updated = add_required_questions(template)
    return QuestionList(questions=[_question_to_schema(question) for question in updated.questions])


@router.post("/descriptions/propose", response_model=DescriptionProposalRead)
def propose_template_description(
    payload: DescriptionProposalRequest,
) -> DescriptionProposalRead:
    """Propose the default description for the selected type."""

    proposal = propose_description(
        payload.current_description, payload.property_type, payload.transaction_purpose
    )
    return DescriptionProposalRead(
        outcome=proposal.outcome,
        description=proposal.description,
        candidate=proposal.candidate,
        needs_confirmation=proposal.needs_confirmation,
    )


@router.post("/questions/move", response_model=QuestionList)
def move_template_question(payload: QuestionMoveRequest) -> QuestionList:
    """Move a question and renumber the whole list."""

    questions = move_question(
        _questions_from_schema(payload.questions), payload.from_index, payload.to_index
    )
    return QuestionList(questions=[_question_to_schema(question) for question in questions])


@router.post("/validate", response_model=ValidationRead)
def validate_template_draft(draft: TemplateDraft) -> ValidationRead:
    """Validate a draft without submitting it."""

    result = validate_template(_draft_to_entity(draft))
    return ValidationRead(valid=result.ok, errors=result.errors)


@router.post("/diff", response_model=DiffRead)
def diff_template_drafts(payload: DiffRequest) -> DiffRead:
    """Return the fields that differ between two versions of a template."""

    patch = diff_templates(_draft_to_entity(payload.original), _draft_to_entity(payload.draft))
    return DiffRead(patch=patch_to_request(patch), no_changes=is_noop_patch(patch))


@router.get("/", response_model=TemplatePageRead)
def list_templates(
    keyword: str | None = Query(None, description="Text searched in the template name"),
    is_active: bool | None = Query(None, alias="isActive"),
    page: int = Query(1, ge=1),
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> TemplatePageRead:
    """List the templates stored on the server."""

    try:
        result = list_templates_uc(
            api, notifier, keyword=keyword, is_active=is_active, page=page
        )
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)

    return TemplatePageRead(
        content=[_template_to_read_model(template) for template in result.templates],
        pagination=Pagination(
            current_page=result.current_page,
            total_pages=result.total_pages,
            total_elements=result.total_elements,
            size=result.size,
        ),
    )


@router.get("/{template_id}", response_model=TemplateRead)
def read_template(
    template_id: str,
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> TemplateRead:
    """Fetch a template with its questions in display order."""

    try:
        template = load_template_uc(api, notifier, template_id=template_id)
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)
    return _template_to_read_model(template)


@router.post("/", response_model=SubmissionRead, status_code=status.HTTP_201_CREATED)
def create_template(
    draft: TemplateDraft,
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> SubmissionRead:
    """Create a new inquiry template."""

    entity = replace(_draft_to_entity(draft), id=None)
    try:
        result = submit_template_uc(api, notifier, draft=entity)
    except (TemplateValidationError, StructuralInconsistencyError) as exc:
        _raise_invalid_draft(exc)
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)
    return _submission_to_read_model(result, notifier)


@router.put("/{template_id}", response_model=SubmissionRead)
def update_template(
    template_id: str,
    draft: TemplateDraft,
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> SubmissionRead:
    """Send only the changed fields of an existing template."""

    try:
        original = load_template_uc(api, notifier, template_id=template_id)
        entity = replace(_draft_to_entity(draft), id=template_id)
        result = submit_template_uc(api, notifier, draft=entity, original=original)
    except (TemplateValidationError, StructuralInconsistencyError) as exc:
        _raise_invalid_draft(exc)
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)
    return _submission_to_read_model(result, notifier)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: str,
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> Response:
    """Delete a template permanently."""

    try:
        delete_template_uc(api, notifier, template_id=template_id)
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{template_id}/duplicate",
    response_model=SubmissionRead,
    status_code=status.HTTP_201_CREATED,
)
def duplicate_template(
    template_id: str,
    payload: TemplateDuplicate,
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> SubmissionRead:
    """Duplicate a template, giving every question a new identifier."""

    try:
        result = duplicate_template_uc(api, notifier, template_id=template_id, name=payload.name)
    except (TemplateValidationError, StructuralInconsistencyError) as exc:
        _raise_invalid_draft(exc)
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)
    return _submission_to_read_model(result, notifier)


@router.get("/{template_id}/share", response_model=ShareLinkRead)
def read_share_link(
    template_id: str,
    api: InquiryTemplateApi = Depends(get_inquiry_template_api),
    notifier: NotificationBuffer = Depends(get_notifier),
) -> ShareLinkRead:
    """Return the public link customers use to fill in the template."""

    try:
        template = load_template_uc(api, notifier, template_id=template_id)
    except InquiryTemplateApiError as exc:
        _raise_api_error(exc)

    try:
        url = build_share_url(template)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ShareLinkRead(share_token=template.share_token, url=url)
