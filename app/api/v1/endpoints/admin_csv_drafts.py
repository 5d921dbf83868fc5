"""Admin endpoints for the create-exam-from-CSV form."""

from uuid import UUID

from fastapi import APIRouter, File, Response, UploadFile, status

from app.api.v1.endpoints.admin_exam_import import csv_parse_error, read_import_file
from app.core.dependencies import Drafts
from app.schemas.exam_draft import CSVDraftOut, CSVDraftTitleUpdate, CSVUploadOut, ExamSavedOut
from app.services.exam_drafts import CSVExamDraft
from app.services.importer import CSVParseError

router = APIRouter(prefix="/admin/exams/drafts/csv", tags=["Admin - Exam Drafts"])


@router.post("", response_model=CSVDraftOut, status_code=status.HTTP_201_CREATED)
async def create_csv_draft(drafts: Drafts) -> CSVDraftOut:
    """Open a new CSV authoring session."""
    return CSVDraftOut.from_draft(drafts.create_csv())


@router.get("/{draft_id}", response_model=CSVDraftOut)
async def get_csv_draft(draft_id: UUID, drafts: Drafts) -> CSVDraftOut:
    return CSVDraftOut.from_draft(drafts.get(draft_id, CSVExamDraft))


@router.delete("/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_csv_draft(draft_id: UUID, drafts: Drafts) -> Response:
    """Discard the session (navigating away from the form)."""
    drafts.discard(draft_id, CSVExamDraft)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{draft_id}/title", response_model=CSVDraftOut)
async def set_csv_draft_title(draft_id: UUID, body: CSVDraftTitleUpdate, drafts: Drafts) -> CSVDraftOut:
    draft = drafts.get(draft_id, CSVExamDraft)
    draft.title = body.title
    return CSVDraftOut.from_draft(draft)


@router.post("/{draft_id}/upload", response_model=CSVUploadOut)
async def upload_csv(draft_id: UUID, drafts: Drafts, file: UploadFile = File(...)) -> CSVUploadOut:
    """Load a CSV into the draft, replacing any earlier upload."""
    draft = drafts.get(draft_id, CSVExamDraft)
    content = await read_import_file(file)
    try:
        outcome = draft.load_file(file.filename or "", file.content_type, content)
    except CSVParseError as e:
        raise csv_parse_error(e) from e

    return CSVUploadOut(
        valid=outcome.valid,
        message=draft.upload_message(),
        draft=CSVDraftOut.from_draft(draft),
    )


@router.delete("/{draft_id}/questions/{index}", response_model=CSVDraftOut)
async def remove_csv_question(draft_id: UUID, index: int, drafts: Drafts) -> CSVDraftOut:
    draft = drafts.get(draft_id, CSVExamDraft)
    draft.remove_question(index)
    return CSVDraftOut.from_draft(draft)


@router.post("/{draft_id}/save", response_model=ExamSavedOut)
async def save_csv_draft(draft_id: UUID, drafts: Drafts) -> ExamSavedOut:
    """Confirm the exam and reset the form. Nothing is persisted."""
    summary = drafts.get(draft_id, CSVExamDraft).save()
    return ExamSavedOut(title=summary.title, question_count=summary.question_count, message=summary.message)
