"""Admin endpoints for the manual exam editor."""

from uuid import UUID

from fastapi import APIRouter, Response, status

from app.core.dependencies import Drafts
from app.models.exam import QuestionKind
from app.schemas.exam_draft import (
    ExamSavedOut,
    ManualDraftDetailsUpdate,
    ManualDraftOut,
    ManualQuestionIn,
    ManualQuestionOut,
    QuestionAddedOut,
)
from app.services.exam_drafts import ManualExamDraft, blank_question

router = APIRouter(prefix="/admin/exams/drafts/manual", tags=["Admin - Exam Drafts"])


@router.post("", response_model=ManualDraftOut, status_code=status.HTTP_201_CREATED)
async def create_manual_draft(drafts: Drafts) -> ManualDraftOut:
    """Open a new manual authoring session."""
    return ManualDraftOut.from_draft(drafts.create_manual())


@router.get("/{draft_id}", response_model=ManualDraftOut)
async def get_manual_draft(draft_id: UUID, drafts: Drafts) -> ManualDraftOut:
    return ManualDraftOut.from_draft(drafts.get(draft_id, ManualExamDraft))


@router.delete("/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_manual_draft(draft_id: UUID, drafts: Drafts) -> Response:
    drafts.discard(draft_id, ManualExamDraft)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{draft_id}/details", response_model=ManualDraftOut)
async def update_manual_details(
    draft_id: UUID, body: ManualDraftDetailsUpdate, drafts: Drafts
) -> ManualDraftOut:
    draft = drafts.get(draft_id, ManualExamDraft)
    draft.update_details(title=body.title, description=body.description, duration=body.duration)
    return ManualDraftOut.from_draft(draft)


@router.get("/{draft_id}/blank-question", response_model=ManualQuestionIn)
async def get_blank_question(
    draft_id: UUID, drafts: Drafts, type: QuestionKind = QuestionKind.SINGLE
) -> ManualQuestionIn:
    """Editor defaults after switching question type."""
    drafts.get(draft_id, ManualExamDraft)
    return blank_question(type)


@router.post(
    "/{draft_id}/questions",
    response_model=QuestionAddedOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_manual_question(draft_id: UUID, body: ManualQuestionIn, drafts: Drafts) -> QuestionAddedOut:
    draft = drafts.get(draft_id, ManualExamDraft)
    question, message = draft.add_question(body)
    return QuestionAddedOut(
        question=ManualQuestionOut.from_question(question),
        message=message,
        question_count=len(draft.questions),
    )


@router.delete("/{draft_id}/questions/{question_id}", response_model=ManualDraftOut)
async def remove_manual_question(draft_id: UUID, question_id: str, drafts: Drafts) -> ManualDraftOut:
    draft = drafts.get(draft_id, ManualExamDraft)
    draft.remove_question(question_id)
    return ManualDraftOut.from_draft(draft)


@router.post("/{draft_id}/save", response_model=ExamSavedOut)
async def save_manual_draft(draft_id: UUID, drafts: Drafts) -> ExamSavedOut:
    summary = drafts.get(draft_id, ManualExamDraft).save()
    return ExamSavedOut(title=summary.title, question_count=summary.question_count, message=summary.message)
